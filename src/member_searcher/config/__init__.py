"""
Configuration Package - Models and Loaders.

Configuration Structure:
    - MemberSearchConfig: Root configuration object
    - LoggingConfig: Log level, JSON output, service name
    - JoinConfig: Join diagnostics
    - SearchConfig: Search filter instrumentation

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
    - Profiles in a profiles/ directory beside the config file
"""

from member_searcher.config.loader import ConfigLoader, deep_merge, load_config
from member_searcher.config.models import (
    JoinConfig,
    LoggingConfig,
    MemberSearchConfig,
    SearchConfig,
)

__all__ = [
    "ConfigLoader",
    "deep_merge",
    "load_config",
    "JoinConfig",
    "LoggingConfig",
    "MemberSearchConfig",
    "SearchConfig",
]
