"""
Domain Layer - Core Records and Value Objects.

This package contains the record types the pipeline operates on.
All records are immutable pydantic models.

Entities:
    - Membership: Links a user identifier to a role
    - User: A person (name, email)
    - UserMembership: Inner-join result of a Membership and its User

Value Objects:
    - MembershipList, UserList, UserMembershipList: Collection wrappers
      that never expose an absent collection
    - SearchQuery: Name/email search terms
    - FilterResult: Outcome of the user search filter
"""

from member_searcher.domain.entities import (
    Identifier,
    Membership,
    User,
    UserMembership,
)
from member_searcher.domain.value_objects import (
    FilterResult,
    MembershipList,
    SearchQuery,
    UserIndex,
    UserList,
    UserMembershipList,
    is_blank,
)

__all__ = [
    "Identifier",
    "Membership",
    "User",
    "UserMembership",
    "FilterResult",
    "MembershipList",
    "SearchQuery",
    "UserIndex",
    "UserList",
    "UserMembershipList",
    "is_blank",
]
