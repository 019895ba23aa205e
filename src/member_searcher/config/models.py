"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field, field_validator


class LoggingConfig(BaseModel):
    """Logging and structured event settings."""

    level: str = Field(default="INFO")
    use_json: bool = False
    service_name: str = Field(default="member_searcher", min_length=1)

    @field_validator("level")
    @classmethod
    def known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.level)


class JoinConfig(BaseModel):
    """Configuration for the membership/user join."""

    warn_on_duplicate_user_ids: bool = True


class SearchConfig(BaseModel):
    """Configuration for the user search filter."""

    log_comparisons: bool = False


class MemberSearchConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    join: JoinConfig = Field(default_factory=JoinConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)

    model_config = {"populate_by_name": True}
