"""
Observability Package - Structured Logging, Metrics, Tracing.

    - ObservabilityManager: structlog events with correlation IDs,
      usable as both AuditLogger and MetricsCollector
    - correlation_scope: Per-request correlation ID binding

Design Principles:
    - Optional: the pipeline runs without it
    - Correlation ID propagation for end-to-end tracing
"""

from member_searcher.observability.observability_manager import (
    ObservabilityManager,
    correlation_scope,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)

__all__ = [
    "ObservabilityManager",
    "correlation_scope",
    "get_correlation_id",
    "reset_correlation_id",
    "set_correlation_id",
]
