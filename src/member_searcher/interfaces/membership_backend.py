"""
Membership Backend Protocol.

Defines the abstract interface for the remote service that owns
memberships and users. The transport (HTTP client, RPC stub, ...) is
an adapter concern; the pipeline only awaits these two calls.

The backend is responsible for:
    - Fetching the full membership collection
    - Fetching the full user collection

Design Notes:
    - Uses typing.Protocol for structural subtyping
    - Both calls are coroutines
    - Either call may return an empty collection
    - Failures are raised, never encoded in the result
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from member_searcher.domain.value_objects import MembershipList, UserList


class BackendError(Exception):
    """Raised by backend adapters when a fetch fails."""

    def __init__(self, message: str, operation: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.operation = operation


@runtime_checkable
class MembershipBackend(Protocol):
    """Abstract interface for the membership/user backend."""

    async def fetch_memberships(self) -> MembershipList:
        """
        Fetch all memberships.

        Returns:
            MembershipList, possibly empty

        Raises:
            BackendError: If the backend call fails
        """
        ...

    async def fetch_users(self) -> UserList:
        """
        Fetch all users.

        Returns:
            UserList, possibly empty

        Raises:
            BackendError: If the backend call fails
        """
        ...
