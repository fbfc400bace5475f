"""Application configuration."""

import os
from uuid import UUID

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    jwt_secret: str
    jwt_algorithm: str = "HS256"
    token_ttl_days: int = 7
    password_hash_rounds: int = 12
    half_price: int = 50
    full_price: int = 65
    planner_timezone: str = "Asia/Kolkata"
    group_member_ids: str | None = None
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_member_ids(raw: str | None) -> set[UUID] | None:
    """Parse the group roster from env; ``None`` means every registered user.

    Malformed ids raise ``ValueError``.
    """
    if raw is None:
        return None
    cleaned = raw.strip()
    if cleaned in {"", "*"}:
        return None
    ids: set[UUID] = set()
    for chunk in cleaned.split(","):
        value = chunk.strip()
        if not value:
            continue
        try:
            ids.add(UUID(value))
        except ValueError:
            raise ValueError(f"Invalid group member id: {value!r}") from None
    return ids or None
