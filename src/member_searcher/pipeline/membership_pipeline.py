"""
Membership Pipeline - Fetch Orchestration.

The MembershipPipeline fetches memberships, then users, joins them and
optionally applies the user search filter.

The user fetch is skipped when there are no memberships. Backend
failures are not caught here; they reach the caller unchanged.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, List, Optional

from member_searcher.config.models import JoinConfig
from member_searcher.domain.entities import Membership, UserMembership
from member_searcher.domain.value_objects import (
    MembershipList,
    SearchQuery,
    UserList,
    UserMembershipList,
)
from member_searcher.filters.user_search import UserSearchFilter
from member_searcher.interfaces.audit_logger import AuditLogger
from member_searcher.interfaces.membership_backend import MembershipBackend
from member_searcher.interfaces.metrics_collector import MetricsCollector
from member_searcher.interfaces.search_filter import SearchFilter
from member_searcher.pipeline.membership_join import join_memberships

logger = logging.getLogger(__name__)


class MembershipPipeline:
    """Orchestrates fetch, join and filter for one request at a time."""

    def __init__(
        self,
        backend: MembershipBackend,
        search_filter: Optional[SearchFilter] = None,
        join_config: Optional[JoinConfig] = None,
        audit_logger: Optional[AuditLogger] = None,
        metrics_collector: Optional[MetricsCollector] = None,
    ) -> None:
        """
        Initialize pipeline with all dependencies.

        Args:
            backend: Remote source of memberships and users
            search_filter: Filter used by fetch_filtered
                (default: UserSearchFilter with default config)
            join_config: Join settings
            audit_logger: Receives fetch and join events (optional)
            metrics_collector: Receives timings and counts (optional)
        """
        self.backend = backend
        self.search_filter = search_filter or UserSearchFilter()
        self.join_config = join_config or JoinConfig()
        self.audit_logger = audit_logger
        self.metrics_collector = metrics_collector

    async def fetch_all_enriched(self) -> UserMembershipList:
        """
        Fetch memberships and users and join them.

        Returns:
            UserMembershipList, empty when either collection is empty

        Raises:
            Whatever the backend raises, unchanged
        """
        # 1. Memberships
        memberships = await self._fetch_memberships()

        # 2. Nothing to enrich: skip the user fetch
        if memberships.is_empty:
            logger.info("No memberships found")
            return UserMembershipList()

        # 3. Users
        users = await self._fetch_users()

        # 4. Nothing to join against
        if users.is_empty:
            logger.warning("No users returned")
            if self.audit_logger:
                self.audit_logger.log_anomaly(
                    "No users returned",
                    severity="WARNING",
                    context={"memberships": len(memberships)},
                )
            return UserMembershipList()

        # 5. Join
        return UserMembershipList(memberships=self._join(memberships, users))

    async def fetch_filtered(
        self,
        name: Optional[str],
        email: Optional[str],
    ) -> UserMembershipList:
        """
        Fetch, join and keep memberships whose user matches name OR email.

        Args:
            name: Name query; blank never matches
            email: Email query; blank never matches

        Returns:
            Filtered UserMembershipList in join order
        """
        enriched = await self.fetch_all_enriched()
        query = SearchQuery(name=name, email=email)

        filter_result = self.search_filter.apply(enriched.memberships, query)

        self._record_count(
            "memberships_filtered_total",
            filter_result.rejected_count,
            {"stage": self.search_filter.name},
        )
        logger.debug(
            f"{self.search_filter.name}: kept {filter_result.retained_count} "
            f"of {len(enriched)} memberships"
        )

        return UserMembershipList(memberships=filter_result.retained)

    async def _fetch_memberships(self) -> MembershipList:
        start = time.perf_counter()
        memberships = await self.backend.fetch_memberships()
        duration = time.perf_counter() - start

        if memberships is None:
            memberships = MembershipList()

        self._record_fetch("memberships", len(memberships), duration)
        return memberships

    async def _fetch_users(self) -> UserList:
        start = time.perf_counter()
        users = await self.backend.fetch_users()
        duration = time.perf_counter() - start

        if users is None:
            users = UserList()

        self._record_fetch("users", len(users), duration)
        return users

    def _join(self, memberships: MembershipList, users: UserList) -> List[UserMembership]:
        joined = join_memberships(
            memberships.memberships,
            users.users,
            on_unmatched=self._on_unmatched,
            warn_on_duplicates=self.join_config.warn_on_duplicate_user_ids,
        )

        unmatched = len(memberships) - len(joined)
        self._record_count("memberships_unmatched_total", unmatched)
        if unmatched:
            logger.debug(f"{unmatched} memberships had no matching user")

        return joined

    def _on_unmatched(self, membership: Membership) -> None:
        if self.audit_logger:
            self.audit_logger.log_membership_dropped(
                membership, f"no user with id={membership.user_id!r}"
            )

    def _record_fetch(self, collection: str, count: int, duration: float) -> None:
        logger.debug(f"Fetched {count} {collection} in {duration:.3f}s")
        if self.audit_logger:
            self.audit_logger.log_fetch(collection, count, duration)
        if self.metrics_collector:
            self.metrics_collector.record_timing(f"fetch_{collection}_seconds", duration)
            self.metrics_collector.record_count(f"{collection}_fetched_total", count)

    def _record_count(
        self, name: str, value: int, tags: Optional[Dict[str, str]] = None
    ) -> None:
        if self.metrics_collector:
            self.metrics_collector.record_count(name, value, tags)
