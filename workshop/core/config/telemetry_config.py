"""
Telemetry Manifest.

Declarative schema for logging policy.

Attributes:
    log_level: Logging verbosity (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    log_dir: Optional directory for rotating log files (None = console only).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .types import LogLevel, ValidatedPath


# TELEMETRY CONFIGURATION
class TelemetryConfig(BaseModel):
    """
    Declarative manifest for logging behavior. Frozen after creation.

    The default level is WARNING: a plain run emits nothing, while DEBUG
    exposes each fulfilled order.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    log_level: LogLevel = Field(default="WARNING")
    log_dir: ValidatedPath | None = Field(default=None)

    @model_validator(mode="before")
    @classmethod
    def handle_empty_config(cls, data: Any) -> Any:
        """
        Handle empty YAML section by returning default dict.

        When YAML contains 'telemetry:' with no values, Pydantic receives None.
        """
        if data is None:
            return {}
        return data

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.upper()
        return v
