"""
In-Memory Membership Backend.

A fake backend for development and testing. Serves fixed collections,
counts calls per operation, and can simulate latency and failures.
"""

from __future__ import annotations

import asyncio
import random
from typing import Any, Dict, Iterable, List, Mapping, Optional

from member_searcher.domain.entities import Membership, User
from member_searcher.domain.value_objects import MembershipList, UserList
from member_searcher.interfaces.membership_backend import BackendError


class InMemoryMembershipBackend:
    """Fake membership backend for development and testing."""

    # (id, name, email)
    SAMPLE_USERS = [
        ("u1", "Ann Archer", "ann@example.com"),
        ("u2", "Ben Brooks", "ben.brooks@example.com"),
        ("u3", "Cara Diaz", "cara@diaz.example.org"),
        ("u4", "Dmitri Ivanov", "dmitri@example.com"),
        ("u5", "Eve Nakamura", "eve@example.org"),
        ("u6", "Farah Khan", "FKHAN@EXAMPLE.COM"),
        # No name on record
        ("u7", None, "anon@example.com"),
        # No email on record
        ("u8", "Gus Grant", None),
    ]

    SAMPLE_ROLES = ["instructor", "student", "admin", "teaching_assistant"]

    def __init__(
        self,
        memberships: Optional[Iterable[Membership]] = None,
        users: Optional[Iterable[User]] = None,
        *,
        latency_seconds: float = 0.0,
        fail_memberships: Optional[Exception] = None,
        fail_users: Optional[Exception] = None,
    ) -> None:
        """
        Initialize backend with fixed data.

        Args:
            memberships: Memberships to serve
            users: Users to serve
            latency_seconds: Simulated delay per call
            fail_memberships: Raised by fetch_memberships if set
            fail_users: Raised by fetch_users if set
        """
        self._memberships = MembershipList(memberships=list(memberships or []))
        self._users = UserList(users=list(users or []))
        self._latency_seconds = latency_seconds
        self._fail_memberships = fail_memberships
        self._fail_users = fail_users
        self.call_counts: Dict[str, int] = {"fetch_memberships": 0, "fetch_users": 0}

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any], **kwargs: Any) -> "InMemoryMembershipBackend":
        """
        Build from a backend-style payload.

        Expects ``{"memberships": [{"id", "userId", "role"}], "users": [{"id", "name", "email"}]}``;
        either key may be missing or null.
        """
        memberships = MembershipList.model_validate({"memberships": payload.get("memberships")})
        users = UserList.model_validate({"users": payload.get("users")})
        return cls(memberships.memberships, users.users, **kwargs)

    @classmethod
    def with_sample_data(
        cls,
        seed: int = 42,
        unmatched: int = 2,
        **kwargs: Any,
    ) -> "InMemoryMembershipBackend":
        """
        Generate deterministic sample data.

        Every sample user gets one membership with a seeded role, and
        ``unmatched`` extra memberships reference users that don't exist.
        """
        rng = random.Random(seed)
        users = [User(id=uid, name=name, email=email) for uid, name, email in cls.SAMPLE_USERS]

        memberships: List[Membership] = []
        for i, user in enumerate(users, start=1):
            memberships.append(Membership(id=i, user_id=user.id, role=rng.choice(cls.SAMPLE_ROLES)))
        for j in range(unmatched):
            memberships.append(
                Membership(
                    id=len(users) + j + 1,
                    user_id=f"missing-{j + 1}",
                    role=rng.choice(cls.SAMPLE_ROLES),
                )
            )

        rng.shuffle(memberships)
        return cls(memberships, users, **kwargs)

    async def fetch_memberships(self) -> MembershipList:
        """Serve the configured memberships."""
        self.call_counts["fetch_memberships"] += 1
        await self._simulate_latency()
        if self._fail_memberships is not None:
            raise self._fail_memberships
        return self._memberships

    async def fetch_users(self) -> UserList:
        """Serve the configured users."""
        self.call_counts["fetch_users"] += 1
        await self._simulate_latency()
        if self._fail_users is not None:
            raise self._fail_users
        return self._users

    def fail_on(self, operation: str, error: Optional[Exception] = None) -> None:
        """Make ``operation`` raise on every following call."""
        error = error or BackendError(f"{operation} unavailable", operation=operation)
        if operation == "fetch_memberships":
            self._fail_memberships = error
        elif operation == "fetch_users":
            self._fail_users = error
        else:
            raise ValueError(f"Unknown operation: {operation}")

    def reset_call_counts(self) -> None:
        for key in self.call_counts:
            self.call_counts[key] = 0

    async def _simulate_latency(self) -> None:
        if self._latency_seconds > 0:
            await asyncio.sleep(self._latency_seconds)
