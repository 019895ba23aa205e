"""
Audit Logger Protocol.

Instrumentation hook for the pipeline. Implementations decide where
events go (console, structured logs, nowhere).
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, runtime_checkable

from member_searcher.domain.entities import Membership


@runtime_checkable
class AuditLogger(Protocol):
    """Receives pipeline events for a single request."""

    def set_correlation_id(self, correlation_id: str) -> None:
        ...

    def log_fetch(
        self,
        collection: str,
        count: int,
        duration_seconds: float,
    ) -> None:
        ...

    def log_membership_dropped(self, membership: Membership, reason: str) -> None:
        ...

    def log_comparison(
        self,
        field: str,
        query: Optional[str],
        value: Optional[str],
        matched: bool,
    ) -> None:
        ...

    def log_anomaly(
        self, message: str, severity: str, context: Optional[Dict[str, Any]] = None
    ) -> None:
        ...
