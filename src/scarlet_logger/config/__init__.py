"""
scarlet_logger Configuration Module.

Each sub-module represents an independent concern with its own environment
variable prefix.

Usage:
    from scarlet_logger.config import settings

    settings.logging.level
    settings.logging.system_timestamp_format
"""

from functools import cached_property

from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging import LogFormat, LoggingSettings, LogLevel


class Settings(BaseSettings):
    """Composite settings aggregating the configuration domains."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @cached_property
    def logging(self) -> LoggingSettings:
        return LoggingSettings()


# Singleton instance
settings = Settings()

__all__ = [
    "Settings",
    "settings",
    "LoggingSettings",
    "LogLevel",
    "LogFormat",
]
