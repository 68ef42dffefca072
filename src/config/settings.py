"""
Knock Out! - Application Settings

Loads configuration from environment variables using Pydantic Settings.
Every variable is prefixed with ``KNOCK_OUT_`` (e.g. ``KNOCK_OUT_SEED=42``).
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.engine.base import DEFAULT_NUM_PLAYERS, DEFAULT_SIDES

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Game
    num_players: int = Field(default=DEFAULT_NUM_PLAYERS, ge=1)
    dice_sides: int = Field(default=DEFAULT_SIDES, ge=1)
    seed: int | None = None

    # Application
    debug: bool = False
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="KNOCK_OUT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Log level must be one of {', '.join(LOG_LEVELS)}, got {value!r}.")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()


def configure_logging(level: str | None = None) -> None:
    """Install a root handler at ``level`` (defaults to the configured level)."""
    if level is None:
        settings = get_settings()
        level = "DEBUG" if settings.debug else settings.log_level
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, force=True)
