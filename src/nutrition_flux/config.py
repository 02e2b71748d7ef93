"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    cronometer_user: str | None = None
    cronometer_pass: str | None = None
    servings_export_url: str | None = None
    servings_csv_path: str | None = None
    timezone: str | None = None
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def settings_with_overrides(**overrides: object) -> Settings:
    """Build settings where explicitly given values win over the environment."""
    provided = {key: value for key, value in overrides.items() if value is not None}
    return Settings(**provided)
