"""
Logging Configuration.

Every field can be set through a ``TIERLOG_``-prefixed environment variable or
a ``.env`` file, e.g. ``TIERLOG_LEVEL=DEBUG`` or ``TIERLOG_SINKS=console,file``.
"""

from enum import Enum
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .levels import LogLevel, parse_level


class LogFormat(str, Enum):
    PLAIN = "plain"
    CONSOLE = "console"
    JSON = "json"


class LoggingSettings(BaseSettings):
    """Logging infrastructure configuration."""

    model_config = SettingsConfigDict(
        env_prefix="TIERLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    level: LogLevel = Field(default=LogLevel.INFO, description="Severity threshold of the default logger")
    sinks: str = Field(default="console", description="Comma-separated sink names (console, file, structlog)")
    format: LogFormat = Field(default=LogFormat.CONSOLE, description="Console output format")
    color: Optional[bool] = Field(default=None, description="Force ANSI colors on/off; unset detects a TTY")
    file_path: str = Field(default="logs/tierlog.log", description="Path for file sink")
    structlog_name: str = Field(default="tierlog", description="Logger name for the structlog sink")
    console_timestamp_format: str = Field(
        default="%Y-%m-%d %H:%M:%S",
        description="Console timestamp format",
    )
    console_level_width: int = Field(default=7, description="Console level column width")
    console_category_width: int = Field(default=24, description="Console category column width")
    console_separator: str = Field(default=" | ", description="Console column separator")

    @field_validator("level", mode="before")
    @classmethod
    def coerce_level(cls, value: object) -> LogLevel:
        return parse_level(value)  # type: ignore[arg-type]

    @property
    def sink_names(self) -> list[str]:
        return [name.strip().lower() for name in self.sinks.split(",") if name.strip()]
