"""
User Search Filter Implementation.

Keeps enriched memberships whose user matches a name OR an email query:
    - Case-insensitive substring match
    - A blank query never matches (it does not act as a wildcard)
    - A blank user field never matches
    - Both queries blank: nothing is kept
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Sequence

from member_searcher.config.models import SearchConfig
from member_searcher.domain.entities import UserMembership
from member_searcher.domain.value_objects import FilterResult, SearchQuery, is_blank

if TYPE_CHECKING:
    from member_searcher.interfaces.audit_logger import AuditLogger


def matches_ignore_case(value: Optional[str], query: Optional[str]) -> bool:
    """True if ``query`` is a case-insensitive substring of ``value``."""
    if is_blank(value) or is_blank(query):
        return False
    return query.lower() in value.lower()


class UserSearchFilter:
    """Filter enriched memberships by user name or email."""

    def __init__(
        self,
        config: Optional[SearchConfig] = None,
        audit_logger: Optional["AuditLogger"] = None,
    ) -> None:
        """
        Initialize with configuration.

        Args:
            config: Search filter configuration
            audit_logger: Receives each comparison when
                ``config.log_comparisons`` is set
        """
        self.config = config or SearchConfig()
        self.audit_logger = audit_logger

    @property
    def name(self) -> str:
        """Unique name of this filter stage."""
        return "user_search_filter"

    def apply(
        self,
        memberships: Sequence[UserMembership],
        query: SearchQuery,
    ) -> FilterResult:
        """
        Apply the name/email search.

        Args:
            memberships: Enriched memberships to filter
            query: Name and email terms

        Returns:
            FilterResult with retained/rejected memberships, input order kept
        """
        retained: List[UserMembership] = []
        rejected: List[UserMembership] = []

        for membership in memberships:
            if self._matches(membership, query):
                retained.append(membership)
            else:
                rejected.append(membership)

        return FilterResult(retained=retained, rejected=rejected)

    def _matches(self, membership: UserMembership, query: SearchQuery) -> bool:
        # email is not compared once the name has matched
        return self._compare("name", query.name, membership.user.name) or self._compare(
            "email", query.email, membership.user.email
        )

    def _compare(self, field: str, query: Optional[str], value: Optional[str]) -> bool:
        matched = matches_ignore_case(value, query)
        if self.config.log_comparisons and self.audit_logger is not None:
            self.audit_logger.log_comparison(field, query, value, matched)
        return matched


def filter_user_memberships(
    memberships: Sequence[UserMembership],
    name: Optional[str],
    email: Optional[str],
) -> List[UserMembership]:
    """
    Keep memberships whose user name or email contains the query.

    Args:
        memberships: Enriched memberships
        name: Name query, blank never matches
        email: Email query, blank never matches

    Returns:
        Matching memberships in input order
    """
    result = UserSearchFilter().apply(memberships, SearchQuery(name=name, email=email))
    return list(result.retained)
