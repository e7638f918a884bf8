"""Core module exports."""

from classplane.core.errors import (
    ClassplaneError,
    ConfigError,
    ErrorCode,
)
from classplane.core.logging import (
    clear_definition_context,
    configure_logging,
    get_definition_context,
    get_logger,
    set_definition_context,
)

__all__ = [
    # Errors
    "ClassplaneError",
    "ConfigError",
    "ErrorCode",
    # Logging
    "clear_definition_context",
    "configure_logging",
    "get_definition_context",
    "get_logger",
    "set_definition_context",
]
