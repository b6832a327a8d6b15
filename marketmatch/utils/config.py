"""
Configuration management for MarketMatch.

Uses Pydantic Settings for type-safe configuration with environment variable support.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Base paths
ROOT_DIR = Path(__file__).parent.parent.parent
PACKAGE_DIR = ROOT_DIR / "marketmatch"
DATA_DIR = ROOT_DIR / "data"


class MatchingSettings(BaseSettings):
    """Candidate pool sizes used by the matching handlers."""

    model_config = SettingsConfigDict(env_prefix="MATCHING_")

    # Matches returned for a task when the caller gives no limit
    default_match_limit: int = Field(default=10, ge=1)

    # The agent pool fetched for a task is this many times the limit
    candidate_pool_multiplier: int = Field(default=2, ge=1)

    # Matches aggregated by the statistics endpoint
    statistics_limit: int = Field(default=50, ge=1)

    # Recommendations returned to an agent
    recommendation_limit: int = Field(default=20, ge=1)

    # Open tasks fetched before scoring recommendations
    open_task_fetch_limit: int = Field(default=100, ge=1)


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
    file_path: Path = ROOT_DIR / "logs" / "marketmatch.log"
    rotation: str = "10 MB"
    retention: str = "30 days"
    console_output: bool = True
    file_output: bool = True


class AppSettings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    name: str = "MarketMatch"
    version: str = "0.1.0"
    description: str = "Agent/task matching engine for an AI agent marketplace"
    debug: bool = False

    # Environment
    environment: Literal["development", "production", "testing"] = "development"

    # Nested settings
    matching: MatchingSettings = Field(default_factory=MatchingSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# Global settings instance (singleton pattern)
_settings: AppSettings | None = None


def get_settings() -> AppSettings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = AppSettings()
    return _settings


def reload_settings() -> AppSettings:
    """Force reload settings from environment."""
    global _settings
    _settings = AppSettings()
    return _settings
