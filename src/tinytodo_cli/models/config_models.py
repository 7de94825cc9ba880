"""Configuration models.

Only display preferences live here; task data is never written to disk.
"""

from __future__ import annotations

import logging
from enum import StrEnum

from pydantic import BaseModel, Field, field_validator

from .strategy import ViewMode

class OutputFormat(StrEnum):
    """Formats accepted by --output and output.format."""

    PRETTY = "pretty"
    TABLE = "table"
    JSON = "json"
    YAML = "yaml"


class ViewConfig(BaseModel):
    """View configuration."""

    default_mode: ViewMode = Field(default=ViewMode.NORMAL)


class OutputConfig(BaseModel):
    """Output configuration."""

    format: OutputFormat = Field(default=OutputFormat.PRETTY)
    color: bool = Field(default=True)


class LogConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level


class AppConfig(BaseModel):
    """Main configuration."""

    view: ViewConfig = Field(default_factory=ViewConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    log: LogConfig = Field(default_factory=LogConfig)
