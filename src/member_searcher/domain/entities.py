"""
Core Domain Entities.

Memberships and users arrive from the backend as independent records.
A UserMembership only exists as the output of the join.
"""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, Field, model_validator

# Backend identifiers are opaque; compared by value only
Identifier = Union[int, str]


class User(BaseModel):
    """A person known to the backend."""

    id: Identifier = Field(..., description="Backend user identifier")
    name: Optional[str] = Field(default=None, description="Display name")
    email: Optional[str] = Field(default=None, description="Contact email")

    model_config = {"frozen": True}


class Membership(BaseModel):
    """Links a user identifier to a role."""

    id: Identifier = Field(..., description="Backend membership identifier")
    user_id: Identifier = Field(..., alias="userId", description="Referenced user")
    role: str = Field(..., description="Role granted by the membership")

    model_config = {"frozen": True, "populate_by_name": True}


class UserMembership(BaseModel):
    """A membership together with the user it references."""

    id: Identifier
    user_id: Identifier = Field(..., alias="userId")
    role: str
    user: User

    model_config = {"frozen": True, "populate_by_name": True}

    @model_validator(mode="after")
    def user_matches_user_id(self) -> "UserMembership":
        if self.user.id != self.user_id:
            raise ValueError(
                f"user.id={self.user.id!r} does not match user_id={self.user_id!r}"
            )
        return self

    @classmethod
    def from_membership(cls, membership: Membership, user: User) -> "UserMembership":
        """Combine a membership with its matching user."""
        return cls(
            id=membership.id,
            user_id=membership.user_id,
            role=membership.role,
            user=user,
        )
