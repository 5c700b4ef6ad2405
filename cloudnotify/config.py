"""Application configuration."""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven settings."""

    app_name: str = "cloudnotify"

    slack_webhook_url: str | None = None
    slack_channel: str | None = None
    slack_username: str | None = None
    slack_icon_emoji: str | None = None
    slack_timeout_seconds: float = 5.0

    classifier_chain_path: str | None = None
    strict_input: bool = False

    log_level: str = "INFO"
    log_incoming_events: bool = True

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """Cached settings accessor."""

    return Settings()


def project_root() -> Path:
    """Return the project root."""

    return Path(__file__).resolve().parents[1]


def configure_logging(level: str | None = None) -> None:
    """Install a basic root handler for the entry adapters."""

    logging.basicConfig(
        level=(level or get_settings().log_level).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
