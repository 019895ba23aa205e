"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List
from unittest.mock import AsyncMock

import pytest

from member_searcher.adapters.console_logger import ConsoleAuditLogger
from member_searcher.adapters.in_memory_backend import InMemoryMembershipBackend
from member_searcher.adapters.metrics_collector import InMemoryMetricsCollector
from member_searcher.config.models import MemberSearchConfig
from member_searcher.domain.entities import Membership, User, UserMembership
from member_searcher.domain.value_objects import MembershipList, UserList


@pytest.fixture
def project_root() -> Path:
    """Repository root (holds config/)."""
    return Path(__file__).resolve().parents[1]


@pytest.fixture
def default_config() -> MemberSearchConfig:
    """Create default configuration."""
    return MemberSearchConfig()


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    """The member_searcher logger, with its level restored after the test."""
    package_logger = logging.getLogger("member_searcher")
    level = package_logger.level
    yield package_logger
    package_logger.setLevel(level)


@pytest.fixture
def console_logger() -> ConsoleAuditLogger:
    """Create console logger for testing."""
    return ConsoleAuditLogger(verbose=False)


@pytest.fixture
def metrics_collector() -> InMemoryMetricsCollector:
    """Create metrics collector for testing."""
    return InMemoryMetricsCollector()


@pytest.fixture
def ann() -> User:
    return User(id="u1", name="Ann", email="ann@x.com")


@pytest.fixture
def sample_users() -> List[User]:
    """Users with distinct names and emails."""
    return [
        User(id="u1", name="Ann", email="ann@x.com"),
        User(id="u2", name="Bob Stone", email="bob@stone.io"),
        User(id="u3", name="Carla Bond", email="CARLA@Example.com"),
    ]


@pytest.fixture
def sample_memberships() -> List[Membership]:
    """Memberships for every sample user plus one dangling reference."""
    return [
        Membership(id=1, user_id="u1", role="admin"),
        Membership(id=2, user_id="u2", role="student"),
        Membership(id=3, user_id="u9", role="student"),
        Membership(id=4, user_id="u3", role="instructor"),
    ]


@pytest.fixture
def ann_membership(ann: User) -> UserMembership:
    return UserMembership(id=1, user_id="u1", role="admin", user=ann)


@pytest.fixture
def backend(
    sample_memberships: List[Membership],
    sample_users: List[User],
) -> InMemoryMembershipBackend:
    """In-memory backend serving the sample data."""
    return InMemoryMembershipBackend(sample_memberships, sample_users)


@pytest.fixture
def mock_backend(
    sample_memberships: List[Membership],
    sample_users: List[User],
) -> AsyncMock:
    """AsyncMock backend for call assertions."""
    mock = AsyncMock()
    mock.fetch_memberships.return_value = MembershipList(memberships=sample_memberships)
    mock.fetch_users.return_value = UserList(users=sample_users)
    return mock
