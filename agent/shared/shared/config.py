"""Configuration management using Pydantic Settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

REQUIRED_ENV_VARS = (
    "DO_SPACES_KEY",
    "DO_SPACES_SECRET",
    "DO_SPACES_ENDPOINT",
    "DO_SPACES_BUCKET",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # DigitalOcean Spaces (S3-compatible)
    do_spaces_key: str = ""
    do_spaces_secret: str = ""
    do_spaces_endpoint: str = ""  # e.g. "https://nyc3.digitaloceanspaces.com"
    do_spaces_bucket: str = ""
    # Spaces ignores the region, but the S3 signer needs one
    do_spaces_region: str = "us-east-1"

    log_level: str = "info"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    def missing_required(self) -> list[str]:
        """Return the env var names of required settings that are unset or empty."""
        return [name for name in REQUIRED_ENV_VARS if not getattr(self, name.lower())]


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()


def load_settings() -> Settings:
    """Return settings, failing fast if any required value is missing.

    Raises:
        RuntimeError: Naming every missing variable in one message.
    """
    settings = get_settings()
    missing = settings.missing_required()
    if missing:
        raise RuntimeError(f"Missing required environment variables: {', '.join(missing)}")
    return settings
