"""
Interfaces Layer - Abstract Protocols for Dependencies.

This package defines the abstract interfaces (using typing.Protocol) for all
external dependencies. High-level modules depend on these abstractions,
not on concrete implementations.

Protocols:
    - MembershipBackend: Remote membership/user source
    - AuditLogger: Instrumentation hook for pipeline events
    - MetricsCollector: Performance metrics abstraction
    - SearchFilter: Stage that narrows enriched memberships by a query
"""

from member_searcher.interfaces.audit_logger import AuditLogger
from member_searcher.interfaces.membership_backend import BackendError, MembershipBackend
from member_searcher.interfaces.metrics_collector import MetricsCollector
from member_searcher.interfaces.search_filter import SearchFilter

__all__ = [
    "AuditLogger",
    "BackendError",
    "MembershipBackend",
    "MetricsCollector",
    "SearchFilter",
]
