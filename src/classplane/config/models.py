"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (CLASSPLANE__SECTION__KEY)
3. Project YAML (.classplane/config.yaml)
4. Global YAML (~/.config/classplane/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    CLASSPLANE__<SECTION>__<KEY>=<VALUE>

Examples:
    CLASSPLANE__LOGGING__LEVEL=DEBUG
    CLASSPLANE__RUNTIME__ACCESSORS=false
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        CLASSPLANE__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG reports every member build and layout.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class RuntimeConfig(BaseModel):
    """Runtime capability configuration.

    Env vars:
        CLASSPLANE__RUNTIME__ACCESSORS: Enable getter/setter members
    """

    accessors: bool = Field(
        default=True,
        description="Build getter/setter (accessor) members. When false the fallback "
        "member builder is selected and every accessor declaration is rejected.",
    )


class ClassplaneConfig(BaseModel):
    """Root configuration for Classplane.

    All settings can be configured via:
    1. Environment variables: CLASSPLANE__SECTION__KEY
    2. YAML config files (project or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    runtime: RuntimeConfig = Field(default_factory=RuntimeConfig)
