"""
Value Objects for Domain Layer.

Collection wrappers normalize an absent collection to an empty tuple,
so readers never see None.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from member_searcher.domain.entities import Identifier, Membership, User, UserMembership


# =============================================================================
# Type Aliases for improved readability
# =============================================================================

# Users indexed by their identifier
UserIndex = Dict[Identifier, User]


class MembershipList(BaseModel):
    """Memberships as returned by the backend."""

    memberships: Tuple[Membership, ...] = Field(default_factory=tuple)

    model_config = {"frozen": True}

    @field_validator("memberships", mode="before")
    @classmethod
    def absent_as_empty(cls, value: Any) -> Any:
        return () if value is None else value

    @property
    def is_empty(self) -> bool:
        return len(self.memberships) == 0

    def __len__(self) -> int:
        return len(self.memberships)


class UserList(BaseModel):
    """Users as returned by the backend."""

    users: Tuple[User, ...] = Field(default_factory=tuple)

    model_config = {"frozen": True}

    @field_validator("users", mode="before")
    @classmethod
    def absent_as_empty(cls, value: Any) -> Any:
        return () if value is None else value

    @property
    def is_empty(self) -> bool:
        return len(self.users) == 0

    def __len__(self) -> int:
        return len(self.users)


class UserMembershipList(BaseModel):
    """Enriched memberships handed back to callers."""

    memberships: Tuple[UserMembership, ...] = Field(default_factory=tuple)

    model_config = {"frozen": True}

    @field_validator("memberships", mode="before")
    @classmethod
    def absent_as_empty(cls, value: Any) -> Any:
        return () if value is None else value

    @property
    def is_empty(self) -> bool:
        return len(self.memberships) == 0

    def __len__(self) -> int:
        return len(self.memberships)


class SearchQuery(BaseModel):
    """Name and email search terms; either may be blank."""

    name: Optional[str] = None
    email: Optional[str] = None

    model_config = {"frozen": True}

    @property
    def has_name(self) -> bool:
        return not is_blank(self.name)

    @property
    def has_email(self) -> bool:
        return not is_blank(self.email)

    @property
    def matches_nothing(self) -> bool:
        """True when neither term can match anything."""
        return not (self.has_name or self.has_email)


class FilterResult(BaseModel):
    """Result of applying the user search filter."""

    retained: Tuple[UserMembership, ...] = Field(default_factory=tuple)
    rejected: Tuple[UserMembership, ...] = Field(default_factory=tuple)

    model_config = {"frozen": True}

    @property
    def retained_count(self) -> int:
        return len(self.retained)

    @property
    def rejected_count(self) -> int:
        return len(self.rejected)


def is_blank(value: Optional[str]) -> bool:
    """None, empty, or whitespace only."""
    return value is None or not value.strip()
