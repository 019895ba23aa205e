"""
Observability Manager - Structured Logging, Metrics, and Tracing.

Provides:
    - Structured JSON logging via structlog
    - Correlation ID propagation (per asyncio task via contextvars)
    - Metrics recording

Design Notes:
    - Implements both the AuditLogger and MetricsCollector protocols,
      so one instance can be passed for both
    - Events and metrics are also kept in memory for inspection
"""

from __future__ import annotations

import logging
import threading
import uuid
from contextlib import contextmanager
from contextvars import ContextVar, Token
from datetime import datetime
from typing import Any, Dict, Iterator, List, Optional

import structlog

from member_searcher.config.models import LoggingConfig
from member_searcher.domain.entities import Membership

_correlation_id: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


def get_correlation_id() -> Optional[str]:
    """Get current correlation ID from context."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> Token:
    """Set correlation ID in context. Returns the token for reset."""
    return _correlation_id.set(correlation_id)


def reset_correlation_id(token: Token) -> None:
    """Restore the correlation ID that was current before ``token``."""
    _correlation_id.reset(token)


@contextmanager
def correlation_scope(correlation_id: str) -> Iterator[str]:
    """
    Bind a correlation ID for the duration of a block.

    The ID is visible to get_correlation_id() and to structlog within the
    block, and the previous values are restored on exit. Each asyncio task
    runs in its own context, so concurrent scopes do not see each other.
    """
    token = _correlation_id.set(correlation_id)
    try:
        with structlog.contextvars.bound_contextvars(correlation_id=correlation_id):
            yield correlation_id
    finally:
        _correlation_id.reset(token)


class ObservabilityManager:
    """
    Unified observability: structured logging and metrics.

    Every event is rendered through structlog with the current
    correlation ID bound, and stored for later retrieval.
    """

    def __init__(
        self,
        service_name: str = "member_searcher",
        use_json: bool = True,
        log_level: int = logging.INFO,
    ) -> None:
        """
        Initialize observability manager.

        Args:
            service_name: Service name for log entries
            use_json: JSON output if True, console rendering otherwise
            log_level: Minimum level passed to the renderer
        """
        self.service_name = service_name
        self.use_json = use_json
        self.log_level = log_level
        self._metrics: Dict[str, List[Dict[str, Any]]] = {}
        self._events: List[Dict[str, Any]] = []
        self._lock = threading.Lock()

        self._configure_structlog()
        self._logger = structlog.get_logger(service_name)

    @classmethod
    def from_config(cls, config: LoggingConfig) -> "ObservabilityManager":
        """Build from the logging section of MemberSearchConfig."""
        return cls(
            service_name=config.service_name,
            use_json=config.use_json,
            log_level=config.level_number,
        )

    def _configure_structlog(self) -> None:
        processors = [
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]

        if self.use_json:
            processors.append(structlog.processors.JSONRenderer())
        else:
            processors.append(structlog.dev.ConsoleRenderer())

        structlog.configure(
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(self.log_level),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(),
            cache_logger_on_first_use=False,
        )

    def set_correlation_id(self, correlation_id: str) -> None:
        """
        Set correlation ID for the current context.

        Args:
            correlation_id: Unique ID for request tracing
        """
        set_correlation_id(correlation_id)
        structlog.contextvars.bind_contextvars(correlation_id=correlation_id)

    def generate_correlation_id(self) -> str:
        """Generate and set a new correlation ID."""
        correlation_id = str(uuid.uuid4())
        self.set_correlation_id(correlation_id)
        return correlation_id

    def log_event(
        self,
        event_type: str,
        data: Optional[Dict[str, Any]] = None,
        level: str = "info",
    ) -> None:
        """
        Log a structured event.

        Args:
            event_type: Type of event (e.g., "fetch", "comparison")
            data: Additional event data
            level: Log level (debug, info, warning, error)
        """
        event_data = {
            "event_type": event_type,
            "timestamp": datetime.now().isoformat(),
            "correlation_id": get_correlation_id(),
            "service": self.service_name,
            **(data or {}),
        }

        with self._lock:
            self._events.append(event_data)

        log_method = getattr(self._logger, level.lower(), self._logger.info)
        # correlation_id and timestamp come from the processors
        log_method(
            event_type,
            **{k: v for k, v in event_data.items() if k not in ("correlation_id", "timestamp")},
        )

    def record_metric(
        self,
        name: str,
        value: float,
        tags: Optional[Dict[str, str]] = None,
        metric_type: str = "gauge",
    ) -> None:
        """
        Record a metric value.

        Args:
            name: Metric name
            value: Metric value
            tags: Additional tags/labels
            metric_type: Type (gauge, counter, histogram)
        """
        metric_entry = {
            "timestamp": datetime.now().isoformat(),
            "value": value,
            "tags": tags or {},
            "type": metric_type,
            "correlation_id": get_correlation_id(),
        }

        with self._lock:
            self._metrics.setdefault(name, []).append(metric_entry)

    def get_trace_context(self) -> Dict[str, Any]:
        """Correlation ID and service info for the current context."""
        return {
            "correlation_id": get_correlation_id(),
            "service_name": self.service_name,
            "timestamp": datetime.now().isoformat(),
        }

    def get_metrics(self) -> Dict[str, List[Dict[str, Any]]]:
        """Get all recorded metrics."""
        with self._lock:
            return {name: list(entries) for name, entries in self._metrics.items()}

    def get_events(self, event_type: Optional[str] = None) -> List[Dict[str, Any]]:
        """Get recorded events, optionally only one type."""
        with self._lock:
            return [
                e for e in self._events if event_type is None or e["event_type"] == event_type
            ]

    def clear(self) -> None:
        """Clear all recorded metrics and events."""
        with self._lock:
            self._metrics.clear()
            self._events.clear()

    # =========================================================================
    # AuditLogger Protocol
    # =========================================================================

    def log_fetch(
        self,
        collection: str,
        count: int,
        duration_seconds: float,
    ) -> None:
        self.log_event(
            "fetch",
            {
                "collection": collection,
                "count": count,
                "duration_seconds": duration_seconds,
            },
        )

    def log_membership_dropped(self, membership: Membership, reason: str) -> None:
        self.log_event(
            "membership_dropped",
            {
                "membership_id": membership.id,
                "user_id": membership.user_id,
                "reason": reason,
            },
            level="debug",
        )

    def log_comparison(
        self,
        field: str,
        query: Optional[str],
        value: Optional[str],
        matched: bool,
    ) -> None:
        self.log_event(
            "comparison",
            {"field": field, "query": query, "value": value, "matched": matched},
            level="debug",
        )

    def log_anomaly(
        self,
        message: str,
        severity: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        level = "warning" if severity.upper() == "WARNING" else "error"
        self.log_event(
            "anomaly",
            {"message": message, "severity": severity, **(context or {})},
            level=level,
        )

    # =========================================================================
    # MetricsCollector Protocol
    # =========================================================================

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        self.record_metric(name, duration_seconds, tags, metric_type="histogram")

    def record_count(
        self,
        name: str,
        value: int,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        self.record_metric(name, float(value), tags, metric_type="counter")

    def record_gauge(
        self,
        name: str,
        value: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        self.record_metric(name, value, tags, metric_type="gauge")
