"""Configuration handling for the room bookings client."""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client configuration loaded from environment variables."""

    base_url: str = "https://uclapi.com/roombookings/"
    version_header: str = "uclapi-roombookings-version"
    api_version: str = "1"
    http_timeout_seconds: int = 30
    token: str | None = None

    model_config = SettingsConfigDict(
        env_prefix="UCLAPI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached Settings instance."""
    return Settings()
