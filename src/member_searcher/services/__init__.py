"""
Services Package - Caller-Facing Operations.

    - MembershipService: fetch_all_memberships_with_users,
      fetch_memberships_with_users
    - create_membership_service: Wiring from MemberSearchConfig
    - create_membership_service_from_file: Wiring from a YAML config file,
      with the logging section applied
"""

from member_searcher.services.membership_service import (
    MembershipService,
    create_membership_service,
    create_membership_service_from_file,
)

__all__ = [
    "MembershipService",
    "create_membership_service",
    "create_membership_service_from_file",
]
