"""Application configuration."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    jwt_secret: str = Field(min_length=32)
    token_ttl_minutes: int = Field(default=120, gt=0)
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 4000
    cors_allow_origins: str = "*"
    max_upload_bytes: int = Field(default=5 * 1024 * 1024, gt=0)
    seed_welcome_photo: bool = True
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_cors_origins(raw: str | None) -> list[str]:
    """Parse allowed CORS origins from a comma-separated env value."""
    if raw is None:
        return []
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
