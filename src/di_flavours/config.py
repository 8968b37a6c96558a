"""Configuration for the demo using pydantic-settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Demo settings, loaded from ``DI_FLAVOURS_*`` environment variables and .env."""

    model_config = SettingsConfigDict(
        env_prefix="DI_FLAVOURS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = "INFO"
    log_json: bool = False

    # ------------------------------------------------------------------
    # Queue handed to DataService in the demo
    # ------------------------------------------------------------------
    queue_label: str = "com.example.data-service"
    queue_max_workers: int = Field(default=1, ge=1)


@lru_cache
def get_settings() -> Settings:
    """Return the cached Settings singleton."""
    return Settings()
