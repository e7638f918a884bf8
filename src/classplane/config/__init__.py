"""Config module exports."""

from classplane.config.loader import ClassplaneSettings, load_config
from classplane.config.models import (
    ClassplaneConfig,
    LoggingConfig,
    LogOutputConfig,
    RuntimeConfig,
)

__all__ = [
    "load_config",
    "ClassplaneConfig",
    "ClassplaneSettings",
    "LoggingConfig",
    "LogOutputConfig",
    "RuntimeConfig",
]
