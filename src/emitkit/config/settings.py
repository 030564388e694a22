"""Runtime configuration for emitters and their diagnostics.

Configuration is static: it is read once from a YAML file (or defaults) and
used to build emitters and logging handlers. Nothing reloads it at runtime.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_REPORTER_LOGGER = "emitkit.core.reporting"

_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


def log_level() -> str:
    return os.environ.get("EMITKIT_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


class EmitterConfig(BaseModel):
    """Diagnostics settings shared by emitters built from configuration."""

    log_level: str = Field(
        default_factory=log_level,
        description="Root log level applied by configure_logging",
    )
    json_logs: bool = Field(
        True,
        description="Emit one JSON object per log line instead of plain text",
    )
    include_traceback: bool = Field(
        True,
        description="Attach the listener's traceback to failure reports",
    )
    logger_name: str = Field(
        DEFAULT_REPORTER_LOGGER,
        description="Logger that receives listener failure reports",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = str(v).upper()
        if level not in _LEVEL_NAMES:
            raise ValueError(f"log_level must be one of {', '.join(_LEVEL_NAMES)}")
        return level

    @classmethod
    def load(cls, path: str | Path) -> "EmitterConfig":
        """Load configuration from a YAML file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the YAML is empty, not a mapping, or fails validation
        """
        config_path = Path(path)

        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if not data or not isinstance(data, dict):
            raise ValueError(f"Empty or invalid YAML in {config_path}")

        return cls(**data)

    def save(self, path: str | Path) -> None:
        config_path = Path(path)
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w", encoding="utf-8") as f:
            yaml.safe_dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()


def load_config_from_env(env_var: str = "EMITKIT_CONFIG") -> EmitterConfig:
    """Load configuration from the YAML path named by ``env_var``.

    Defaults are returned when the variable is unset or empty; a path that
    does not exist is an error.
    """
    config_path = os.getenv(env_var)
    if not config_path:
        return EmitterConfig()
    return EmitterConfig.load(config_path)
