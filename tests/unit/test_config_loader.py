"""
Unit Tests for ConfigLoader.

Test Aspects Covered:
    ✅ Business Logic: Config loading, profile merging
    ✅ Error Handling: Invalid values, missing files and profiles
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from member_searcher.config.loader import ConfigLoader, deep_merge, load_config
from member_searcher.config.models import MemberSearchConfig


class TestConfigLoader:
    """Test cases for ConfigLoader."""

    def test_loads_valid_yaml(self, tmp_path: Path) -> None:
        """
        SCENARIO: Valid YAML configuration file
        EXPECTED: MemberSearchConfig object created
        """
        # Arrange
        config_content = """
version: "1.0"
logging:
  level: debug
  use_json: true
search:
  log_comparisons: true
"""
        (tmp_path / "config.yaml").write_text(config_content)
        loader = ConfigLoader(base_path=tmp_path)

        # Act
        config = loader.load("config.yaml")

        # Assert
        assert isinstance(config, MemberSearchConfig)
        assert config.logging.level == "DEBUG"
        assert config.logging.use_json is True
        assert config.search.log_comparisons is True
        assert config.join.warn_on_duplicate_user_ids is True  # Default

    def test_applies_defaults(self) -> None:
        """
        SCENARIO: Minimal config
        EXPECTED: Defaults applied for missing sections
        """
        config = ConfigLoader().load_from_dict({"version": "1.0"})

        assert config.logging.level == "INFO"
        assert config.logging.service_name == "member_searcher"
        assert config.search.log_comparisons is False

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "empty.yaml").write_text("")

        config = ConfigLoader(base_path=tmp_path).load("empty.yaml")

        assert config == MemberSearchConfig()

    def test_rejects_unknown_log_level(self) -> None:
        """
        SCENARIO: logging.level is not a logging level
        EXPECTED: ValidationError raised
        """
        with pytest.raises(ValidationError):
            ConfigLoader().load_from_dict({"logging": {"level": "LOUD"}})

    def test_level_number(self) -> None:
        config = ConfigLoader().load_from_dict({"logging": {"level": "warning"}})

        assert config.logging.level_number == 30

    def test_file_not_found(self, tmp_path: Path) -> None:
        loader = ConfigLoader(base_path=tmp_path)

        with pytest.raises(FileNotFoundError):
            loader.load("nonexistent.yaml")

    def test_profile_not_found(self, tmp_path: Path) -> None:
        (tmp_path / "config.yaml").write_text("version: '1.0'\n")
        loader = ConfigLoader(base_path=tmp_path)

        with pytest.raises(FileNotFoundError, match="Profile not found"):
            loader.load("config.yaml", profile="missing")

    def test_merges_configs(self) -> None:
        """
        SCENARIO: Two configs merged together
        EXPECTED: Overlay values override base values, others kept
        """
        # Arrange
        base = {"logging": {"level": "INFO", "use_json": True}}
        overlay = {"logging": {"level": "DEBUG"}, "search": {"log_comparisons": True}}

        # Act
        merged = deep_merge(base, overlay)

        # Assert
        assert merged["logging"] == {"level": "DEBUG", "use_json": True}
        assert merged["search"] == {"log_comparisons": True}
        assert base == {"logging": {"level": "INFO", "use_json": True}}

    def test_profile_resolved_next_to_config_file(self, tmp_path: Path) -> None:
        """
        SCENARIO: Config in a nested directory with its own profiles/ folder
        EXPECTED: Profile found beside the file, not under base_path/config
        """
        # Arrange
        settings = tmp_path / "settings"
        (settings / "profiles").mkdir(parents=True)
        (settings / "app.yaml").write_text("logging:\n  level: INFO\n  use_json: true\n")
        (settings / "profiles" / "quiet.yaml").write_text("logging:\n  level: ERROR\n")
        loader = ConfigLoader(base_path=tmp_path)

        # Act
        config = loader.load("settings/app.yaml", profile="quiet")

        # Assert
        assert loader.profile_path("settings/app.yaml", "quiet") == (
            settings / "profiles" / "quiet.yaml"
        )
        assert config.logging.level == "ERROR"
        assert config.logging.use_json is True


class TestShippedConfig:
    """The YAML files under config/."""

    def test_default_config(self, project_root: Path) -> None:
        config = load_config("config/default.yaml", base_path=project_root)

        assert config.logging.level == "INFO"
        assert config.search.log_comparisons is False

    def test_debug_profile(self, project_root: Path) -> None:
        """
        SCENARIO: default.yaml with the debug profile
        EXPECTED: Debug level and comparison logging on
        """
        config = load_config("config/default.yaml", profile="debug", base_path=project_root)

        assert config.logging.level == "DEBUG"
        assert config.search.log_comparisons is True
        assert config.logging.service_name == "member_searcher"
