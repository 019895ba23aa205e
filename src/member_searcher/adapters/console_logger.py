"""
Console Audit Logger.

A simple audit logger that prints pipeline events to the console.
The correlation ID is read from the current context, so concurrent
requests each print their own.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from member_searcher.domain.entities import Membership
from member_searcher.observability.observability_manager import (
    get_correlation_id,
    set_correlation_id,
)


class ConsoleAuditLogger:
    """Simple console-based audit logger."""

    def __init__(self, verbose: bool = True) -> None:
        """
        Initialize console logger.

        Args:
            verbose: If True, print every event. If False, only fetches
                and anomalies.
        """
        self._verbose = verbose

    def set_correlation_id(self, correlation_id: str) -> None:
        """Set correlation ID for subsequent log entries in this context."""
        set_correlation_id(correlation_id)

    def log_fetch(
        self,
        collection: str,
        count: int,
        duration_seconds: float,
    ) -> None:
        """Log a completed backend fetch."""
        self._log("INFO", f"Fetched {count} {collection} ({duration_seconds:.3f}s)")

    def log_membership_dropped(self, membership: Membership, reason: str) -> None:
        """Log a membership left out of the join."""
        if self._verbose:
            self._log("DEBUG", f"membership {membership.id!r} dropped: {reason}")

    def log_comparison(
        self,
        field: str,
        query: Optional[str],
        value: Optional[str],
        matched: bool,
    ) -> None:
        """Log a single name/email comparison."""
        if self._verbose:
            outcome = "match" if matched else "no match"
            self._log("DEBUG", f"Compare {field} input={query!r} with {value!r}: {outcome}")

    def log_anomaly(
        self,
        message: str,
        severity: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log an anomaly or warning."""
        self._log(severity, f"ANOMALY: {message}")

    def _log(self, level: str, message: str) -> None:
        timestamp = datetime.now().strftime("%H:%M:%S")
        correlation_id = get_correlation_id()
        corr_id = correlation_id[:8] if correlation_id else "--------"
        print(f"[{timestamp}] [{corr_id}] [{level:5}] {message}")
