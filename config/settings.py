"""
Configuration settings for the live scoreboard.

Loads settings from environment variables and .env file.
"""

import logging
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class StressSettings(BaseSettings):
    """Defaults for the concurrent load command."""

    matches: int = Field(default=1000, ge=1, alias="STRESS_MATCHES")
    workers: int = Field(default=32, ge=1, alias="STRESS_WORKERS")

    class Config:
        env_prefix = "STRESS_"


class Settings(BaseSettings):
    """Main application settings."""

    # Project paths
    project_root: Path = Path(__file__).parent.parent

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Registry keys ("Mexico vs Canada")
    key_separator: str = Field(default=" vs ", min_length=1, alias="KEY_SEPARATOR")

    # Nested settings
    stress: StressSettings = StressSettings()

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @property
    def log_level_value(self) -> int:
        """Get numeric logging level (falls back to INFO)."""
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.INFO


# Global settings instance
settings = Settings()
