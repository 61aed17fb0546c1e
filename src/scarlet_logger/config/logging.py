"""
Logging Configuration.
"""

from enum import Enum

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    CONSOLE = "console"
    JSON = "json"


class LoggingSettings(BaseSettings):
    """Diagnostic logging and system printer configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SCARLET_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    level: LogLevel = Field(default=LogLevel.WARNING, description="Level of the library's own diagnostics")
    format: LogFormat = Field(default=LogFormat.CONSOLE, description="Diagnostic output format")
    console_timestamp_format: str = Field(
        default="%Y-%m-%d %H:%M:%S",
        description="Console timestamp format",
    )
    console_level_width: int = Field(default=8, description="Console level column width")
    console_logger_width: int = Field(default=32, description="Console logger column width")
    console_separator: str = Field(default=" | ", description="Console column separator")
    system_timestamp_format: str = Field(
        default="%Y-%m-%d %H:%M:%S.%f",
        description="Timestamp format of the system logger; %f is cut to milliseconds",
    )

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, value: Any) -> Any:
        # Accept any case and the facade's own WARN name.
        if isinstance(value, str) and not isinstance(value, LogLevel):
            name = value.strip().upper()
            return LogLevel.WARNING if name == "WARN" else name
        return value
