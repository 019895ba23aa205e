"""
Search Filter Protocol.

Defines the interface for the stage that narrows enriched memberships
by a user search query.

Design Notes:
    - Uses typing.Protocol for structural subtyping
    - Filters are stateless between calls
    - Configuration injected via constructor
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:
    from member_searcher.domain.entities import UserMembership
    from member_searcher.domain.value_objects import FilterResult, SearchQuery


@runtime_checkable
class SearchFilter(Protocol):
    """Abstract interface for the search filter stage."""

    @property
    def name(self) -> str:
        """Unique name of this filter stage."""
        ...

    def apply(
        self,
        memberships: Sequence[UserMembership],
        query: SearchQuery,
    ) -> FilterResult:
        """
        Apply the search to enriched memberships.

        Args:
            memberships: Enriched memberships in join order
            query: Name and email terms

        Returns:
            FilterResult with retained/rejected memberships, order kept
        """
        ...
