"""
Member Searcher - Membership Enrichment and Search Pipeline.

Fetches memberships and users from a remote backend, joins every
membership to the user it references, and optionally narrows the
result by a case-insensitive name or email search.

Architecture:
    - Hexagonal Architecture (Ports & Adapters)
    - Dependency Injection for testability
    - asyncio for the remote fetches
    - Configuration-driven behavior via YAML

Main Components:
    - domain: Core entities (Membership, User, UserMembership) and list wrappers
    - interfaces: Abstract protocols for the backend and instrumentation
    - filters: User search filter (name/email)
    - pipeline: Fetch orchestration and the membership/user join
    - services: Caller-facing membership service
    - adapters: Infrastructure implementations (backend, loggers, metrics)
    - observability: structlog-based event logging with correlation IDs
    - config: Configuration models and loaders

Example:
    >>> from member_searcher.adapters import InMemoryMembershipBackend
    >>> from member_searcher.services import create_membership_service
    >>> service = create_membership_service(InMemoryMembershipBackend.with_sample_data())
    >>> result = await service.fetch_memberships_with_users(name="ann", email="")
    >>> print(f"Found {len(result)} memberships")

"""

import logging

__version__ = "0.1.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Member Searcher.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import member_searcher
        >>> member_searcher.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("member_searcher").setLevel(level)
