"""
Filters Package - Search Filter Implementations.

Filters:
    - UserSearchFilter: Case-insensitive name OR email search

Design Principles:
    - Independently testable
    - Configuration injected via constructor
    - Stateless filtering
"""

from member_searcher.filters.user_search import (
    UserSearchFilter,
    filter_user_memberships,
    matches_ignore_case,
)

__all__ = [
    "UserSearchFilter",
    "filter_user_memberships",
    "matches_ignore_case",
]
