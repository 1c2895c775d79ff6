"""Application configuration.

Settings are read from HEALTHTRAVEL_* environment variables, or from a
.env file in the working directory.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven settings."""

    app_name: str = "Health Travel API"

    # SQLite database file
    db_path: Path = Path("data/healthtravel.db")

    # Client origins allowed by CORS
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
    ]

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="HEALTHTRAVEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for the service.

    Args:
        level: Log level name. Defaults to the configured log_level.
    """
    if level is None:
        level = get_settings().log_level

    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
