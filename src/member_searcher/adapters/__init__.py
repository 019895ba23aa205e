"""
Adapters Package - Infrastructure Implementations.

Concrete implementations of the protocols in the interfaces package,
following the Ports & Adapters pattern.

Backends:
    - InMemoryMembershipBackend: Fixed or sample data for development/testing

Loggers:
    - ConsoleAuditLogger: Simple console output

Metrics:
    - InMemoryMetricsCollector: Simple in-memory collection

Design Principles:
    - All adapters implement their respective protocols
    - Easily swappable via Dependency Injection
    - No business logic in adapters
"""

from member_searcher.adapters.console_logger import ConsoleAuditLogger
from member_searcher.adapters.in_memory_backend import InMemoryMembershipBackend
from member_searcher.adapters.metrics_collector import InMemoryMetricsCollector

__all__ = [
    "ConsoleAuditLogger",
    "InMemoryMembershipBackend",
    "InMemoryMetricsCollector",
]
