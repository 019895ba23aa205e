"""
Membership Service - Caller-Facing Surface.

Wraps the MembershipPipeline with per-request correlation IDs and
request timing. This is what a web layer or CLI would call.

Each request runs inside its own correlation scope; the caller's
correlation ID is restored when the request returns or raises.
"""

from __future__ import annotations

import logging
import time
import uuid
from pathlib import Path
from typing import Awaitable, Callable, Optional, Union

from member_searcher import configure_logging
from member_searcher.config.loader import load_config
from member_searcher.config.models import MemberSearchConfig
from member_searcher.domain.value_objects import UserMembershipList
from member_searcher.filters.user_search import UserSearchFilter
from member_searcher.interfaces.audit_logger import AuditLogger
from member_searcher.interfaces.membership_backend import MembershipBackend
from member_searcher.interfaces.metrics_collector import MetricsCollector
from member_searcher.observability.observability_manager import (
    ObservabilityManager,
    correlation_scope,
)
from member_searcher.pipeline.membership_pipeline import MembershipPipeline

logger = logging.getLogger(__name__)


class MembershipService:
    """Fetches memberships enriched with their users."""

    def __init__(
        self,
        pipeline: MembershipPipeline,
        audit_logger: Optional[AuditLogger] = None,
        metrics_collector: Optional[MetricsCollector] = None,
    ) -> None:
        self.pipeline = pipeline
        self.audit_logger = audit_logger
        self.metrics_collector = metrics_collector

    async def fetch_all_memberships_with_users(self) -> UserMembershipList:
        """
        Fetch all memberships with their user details included.

        Returns:
            UserMembershipList of every membership that has a user
        """
        return await self._run(
            "fetch_all_memberships_with_users",
            self.pipeline.fetch_all_enriched,
        )

    async def fetch_memberships_with_users(
        self,
        name: Optional[str],
        email: Optional[str],
    ) -> UserMembershipList:
        """
        Fetch memberships whose user name or email contains the query.

        Matching is case-insensitive. A blank name or email matches
        nothing, so two blank queries return an empty list.

        Args:
            name: Name query
            email: Email query

        Returns:
            Filtered UserMembershipList
        """
        return await self._run(
            "fetch_memberships_with_users",
            lambda: self.pipeline.fetch_filtered(name, email),
        )

    async def _run(
        self,
        operation: str,
        call: Callable[[], Awaitable[UserMembershipList]],
    ) -> UserMembershipList:
        correlation_id = str(uuid.uuid4())
        with correlation_scope(correlation_id):
            if self.audit_logger:
                self.audit_logger.set_correlation_id(correlation_id)

            start = time.perf_counter()
            result = await call()
            duration = time.perf_counter() - start

            if self.metrics_collector:
                self.metrics_collector.record_timing(
                    "request_total_seconds", duration, {"operation": operation}
                )
            logger.info(
                f"{operation} returned {len(result)} memberships "
                f"({duration:.3f}s, correlation_id={correlation_id})"
            )
        return result


def create_membership_service(
    backend: MembershipBackend,
    config: Optional[MemberSearchConfig] = None,
    audit_logger: Optional[AuditLogger] = None,
    metrics_collector: Optional[MetricsCollector] = None,
) -> MembershipService:
    """
    Wire a MembershipService from configuration.

    Args:
        backend: Remote membership/user source
        config: Configuration (defaults apply when omitted)
        audit_logger: Optional instrumentation hook
        metrics_collector: Optional metrics sink

    Returns:
        Ready-to-use MembershipService
    """
    config = config or MemberSearchConfig()
    pipeline = MembershipPipeline(
        backend=backend,
        search_filter=UserSearchFilter(config.search, audit_logger=audit_logger),
        join_config=config.join,
        audit_logger=audit_logger,
        metrics_collector=metrics_collector,
    )
    return MembershipService(
        pipeline,
        audit_logger=audit_logger,
        metrics_collector=metrics_collector,
    )


def create_membership_service_from_file(
    backend: MembershipBackend,
    config_path: Union[str, Path],
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
    audit_logger: Optional[AuditLogger] = None,
    metrics_collector: Optional[MetricsCollector] = None,
) -> MembershipService:
    """
    Wire a MembershipService from a YAML config file.

    Applies the ``logging`` section to the package loggers. When no audit
    logger is given, an ObservabilityManager built from the same section
    serves as audit logger and, unless one is given, as metrics collector.

    Args:
        backend: Remote membership/user source
        config_path: YAML config file, e.g. ``config/default.yaml``
        profile: Optional profile merged over the file (e.g. ``debug``)
        base_path: Directory relative paths are resolved against
        audit_logger: Optional instrumentation hook
        metrics_collector: Optional metrics sink

    Returns:
        Ready-to-use MembershipService

    Raises:
        FileNotFoundError: If the config file or profile doesn't exist
        ValidationError: If the config is invalid
    """
    config = load_config(config_path, profile=profile, base_path=base_path)
    configure_logging(config.logging.level_number)

    if audit_logger is None:
        observability = ObservabilityManager.from_config(config.logging)
        audit_logger = observability
        if metrics_collector is None:
            metrics_collector = observability

    logger.debug(
        f"Service configured from {config_path} (profile={profile}, "
        f"level={config.logging.level})"
    )
    return create_membership_service(
        backend,
        config=config,
        audit_logger=audit_logger,
        metrics_collector=metrics_collector,
    )
