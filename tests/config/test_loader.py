"""Tests for config/loader.py module.

Covers:
- _load_yaml() function
- _deep_merge() function
- load_config() function
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from classplane.config.loader import GLOBAL_CONFIG_PATH, _deep_merge, _load_yaml, load_config
from classplane.core.errors import ConfigError, ErrorCode


def _write_project_config(root: Path, text: str) -> None:
    config_dir = root / ".classplane"
    config_dir.mkdir()
    (config_dir / "config.yaml").write_text(text)


class TestLoadYaml:
    """Tests for _load_yaml function."""

    def test_returns_empty_dict_for_missing_file(self, tmp_path: Path) -> None:
        """Returns empty dict when file doesn't exist."""
        assert _load_yaml(tmp_path / "nonexistent.yaml") == {}

    def test_loads_valid_yaml(self, tmp_path: Path) -> None:
        """Loads valid YAML content."""
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("runtime:\n  accessors: false\n")

        assert _load_yaml(yaml_file) == {"runtime": {"accessors": False}}

    def test_returns_empty_for_empty_file(self, tmp_path: Path) -> None:
        """Returns empty dict for empty file."""
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")

        assert _load_yaml(yaml_file) == {}

    def test_raises_config_error_for_invalid_yaml(self, tmp_path: Path) -> None:
        """Raises ConfigError for invalid YAML syntax."""
        yaml_file = tmp_path / "invalid.yaml"
        yaml_file.write_text("logging:\n  level:\n    - invalid: [unclosed")

        with pytest.raises(ConfigError) as exc_info:
            _load_yaml(yaml_file)
        assert exc_info.value.code == ErrorCode.CONFIG_PARSE_ERROR

    def test_raises_config_error_for_non_mapping(self, tmp_path: Path) -> None:
        """Top-level lists are rejected."""
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- one\n- two\n")

        with pytest.raises(ConfigError, match="mapping"):
            _load_yaml(yaml_file)


class TestDeepMerge:
    """Tests for _deep_merge function."""

    def test_override_wins(self) -> None:
        """Override values replace base values."""
        assert _deep_merge({"a": 1, "b": 2}, {"b": 3}) == {"a": 1, "b": 3}

    def test_nested_merge(self) -> None:
        """Nested dicts are merged key by key."""
        base = {"logging": {"level": "INFO", "outputs": []}}
        override = {"logging": {"level": "DEBUG"}}

        assert _deep_merge(base, override) == {"logging": {"level": "DEBUG", "outputs": []}}

    def test_does_not_mutate_base(self) -> None:
        """Base dict is left untouched."""
        base = {"runtime": {"accessors": True}}
        _deep_merge(base, {"runtime": {"accessors": False}})

        assert base == {"runtime": {"accessors": True}}


class TestLoadConfig:
    """Tests for load_config function."""

    def test_returns_default_config_when_no_files(self, tmp_path: Path) -> None:
        """Returns default config when no config files exist."""
        with patch("classplane.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "none.yaml"):
            config = load_config(tmp_path)

        assert config.logging.level == "INFO"
        assert config.runtime.accessors is True

    def test_loads_project_config(self, tmp_path: Path) -> None:
        """Loads config from the project .classplane directory."""
        _write_project_config(tmp_path, "runtime:\n  accessors: false\n")

        with patch("classplane.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "none.yaml"):
            config = load_config(tmp_path)

        assert config.runtime.accessors is False

    def test_project_config_overrides_global(self, tmp_path: Path) -> None:
        """Project YAML wins over global YAML, key by key."""
        global_file = tmp_path / "global.yaml"
        global_file.write_text("logging:\n  level: ERROR\nruntime:\n  accessors: false\n")
        _write_project_config(tmp_path, "logging:\n  level: DEBUG\n")

        with patch("classplane.config.loader.GLOBAL_CONFIG_PATH", global_file):
            config = load_config(tmp_path)

        assert config.logging.level == "DEBUG"
        assert config.runtime.accessors is False

    def test_env_vars_override_yaml(self, tmp_path: Path) -> None:
        """Environment variables override YAML config."""
        _write_project_config(tmp_path, "runtime:\n  accessors: true\n")

        with (
            patch("classplane.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "none.yaml"),
            patch.dict(os.environ, {"CLASSPLANE__RUNTIME__ACCESSORS": "false"}),
        ):
            config = load_config(tmp_path)

        assert config.runtime.accessors is False

    def test_kwargs_override_all(self, tmp_path: Path) -> None:
        """Keyword arguments override everything."""
        from classplane.config.models import LoggingConfig

        _write_project_config(tmp_path, "logging:\n  level: DEBUG\n")

        with patch("classplane.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "none.yaml"):
            config = load_config(tmp_path, logging=LoggingConfig(level="ERROR"))

        assert config.logging.level == "ERROR"

    def test_raises_config_error_for_invalid_value(self, tmp_path: Path) -> None:
        """Raises ConfigError for invalid config values."""
        _write_project_config(tmp_path, "logging:\n  level: TRACE\n")

        with (
            patch("classplane.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "none.yaml"),
            pytest.raises(ConfigError) as exc_info,
        ):
            load_config(tmp_path)

        assert exc_info.value.code == ErrorCode.CONFIG_INVALID_VALUE
        assert exc_info.value.details["field"] == "logging.level"


class TestGlobalConfigPath:
    """Tests for GLOBAL_CONFIG_PATH constant."""

    def test_is_in_user_config(self) -> None:
        """Global config lives under the user's config directory."""
        assert GLOBAL_CONFIG_PATH.parts[-3:] == (".config", "classplane", "config.yaml")
