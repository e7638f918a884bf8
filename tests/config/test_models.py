"""Tests for config/models.py module.

Covers:
- LogOutputConfig model
- LoggingConfig model
- RuntimeConfig model
- ClassplaneConfig root model
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from classplane.config.models import (
    ClassplaneConfig,
    LoggingConfig,
    LogOutputConfig,
    RuntimeConfig,
)


class TestLogOutputConfig:
    """Tests for LogOutputConfig model."""

    def test_defaults(self) -> None:
        """Default values."""
        config = LogOutputConfig()
        assert config.format == "console"
        assert config.destination == "stderr"
        assert config.level is None

    @pytest.mark.parametrize("destination", ["stderr", "stdout", "/var/log/classplane.log"])
    def test_valid_destinations(self, destination: str) -> None:
        """Streams and absolute paths are accepted."""
        assert LogOutputConfig(destination=destination).destination == destination

    def test_relative_path_fails(self) -> None:
        """Relative path is rejected."""
        with pytest.raises(ValidationError, match="absolute path"):
            LogOutputConfig(destination="logs/app.log")


class TestLoggingConfig:
    """Tests for LoggingConfig model."""

    def test_defaults(self) -> None:
        """Default values."""
        config = LoggingConfig()
        assert config.level == "INFO"
        assert len(config.outputs) == 1

    def test_invalid_level(self) -> None:
        """Invalid level is rejected."""
        with pytest.raises(ValidationError):
            LoggingConfig(level="TRACE")  # type: ignore[arg-type]


class TestRuntimeConfig:
    """Tests for RuntimeConfig model."""

    def test_accessors_enabled_by_default(self) -> None:
        assert RuntimeConfig().accessors is True

    def test_accessors_coerced_from_string(self) -> None:
        """Boolean strings from env or YAML are coerced."""
        assert RuntimeConfig(accessors="false").accessors is False  # type: ignore[arg-type]


class TestClassplaneConfig:
    """Tests for the root model."""

    def test_sections_have_defaults(self) -> None:
        config = ClassplaneConfig()
        assert config.logging == LoggingConfig()
        assert config.runtime == RuntimeConfig()

    def test_validates_nested_dicts(self) -> None:
        config = ClassplaneConfig.model_validate(
            {"logging": {"level": "DEBUG"}, "runtime": {"accessors": False}}
        )
        assert config.logging.level == "DEBUG"
        assert config.runtime.accessors is False
