"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    environment: str = _ENVIRONMENT
    session_ttl_seconds: int = 3600
    max_points_per_session: str | None = None
    display_decimals: int = 2
    host: str = "127.0.0.1"
    port: int = 8000

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_point_limit(raw: str | None) -> int | None:
    """Parse the per-session point limit; unset, empty or `*` means unlimited."""
    if raw is None:
        return None
    cleaned = raw.strip()
    if cleaned in {"", "*"}:
        return None
    if not cleaned.isdigit() or int(cleaned) == 0:
        raise ValueError(f"Invalid point limit: {raw!r}")
    return int(cleaned)
