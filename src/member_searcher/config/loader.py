"""
Configuration Loader - YAML Loading with Validation.

A config file may be paired with named profiles kept in a ``profiles/``
directory beside it:

    config/
        default.yaml
        profiles/
            debug.yaml

Loading ``config/default.yaml`` with profile ``debug`` deep-merges
``config/profiles/debug.yaml`` over the base file before validation.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from member_searcher.config.models import MemberSearchConfig

PROFILES_DIR = "profiles"


def deep_merge(base: Mapping[str, Any], overlay: Mapping[str, Any]) -> Dict[str, Any]:
    """Merge ``overlay`` into a copy of ``base``; nested sections merge key by key."""
    result = dict(base)
    for key, value in overlay.items():
        if isinstance(result.get(key), Mapping) and isinstance(value, Mapping):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


class ConfigLoader:
    """Loads and validates MemberSearchConfig from YAML files."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Directory that relative config paths are resolved against
        """
        self._base_path = base_path or Path(".")

    def load(
        self,
        config_path: Union[str, Path],
        profile: Optional[str] = None,
    ) -> MemberSearchConfig:
        """
        Load configuration from a YAML file.

        Args:
            config_path: Path to YAML config file
            profile: Optional profile name, looked up in the ``profiles/``
                directory next to ``config_path``

        Returns:
            Validated MemberSearchConfig object

        Raises:
            FileNotFoundError: If config file or profile doesn't exist
            ValidationError: If config is invalid
        """
        path = self._resolve_path(config_path)
        config_dict = self._read(path)

        if profile:
            config_dict = deep_merge(config_dict, self._read_profile(path, profile))

        return MemberSearchConfig.model_validate(config_dict)

    def load_from_dict(self, config_dict: Dict[str, Any]) -> MemberSearchConfig:
        """Validate a configuration given as a dictionary."""
        return MemberSearchConfig.model_validate(config_dict)

    def profile_path(self, config_path: Union[str, Path], profile: str) -> Path:
        """Where ``profile`` is expected for the given config file."""
        return self._resolve_path(config_path).parent / PROFILES_DIR / f"{profile}.yaml"

    def _resolve_path(self, path: Union[str, Path]) -> Path:
        p = Path(path)
        return p if p.is_absolute() else self._base_path / p

    def _read_profile(self, config_path: Path, profile: str) -> Dict[str, Any]:
        path = self.profile_path(config_path, profile)
        if not path.exists():
            raise FileNotFoundError(f"Profile not found: {profile} (looked in {path.parent})")
        return self._read(path)

    @staticmethod
    def _read(path: Path) -> Dict[str, Any]:
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f) or {}


def load_config(
    config_path: Union[str, Path],
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
) -> MemberSearchConfig:
    """Load and validate a config file, with an optional profile merged over it."""
    return ConfigLoader(base_path=base_path).load(config_path, profile)
