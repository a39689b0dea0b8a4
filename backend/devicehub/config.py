"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Connection string comes from the environment (never hardcoded outside defaults)
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - get_settings doubles as a FastAPI dependency so tests can override it
    - legacy_missing_device_errors reproduces the old unhandled error on
      PUT/DELETE of a missing device (off by default, returns 404 instead)
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://devicehub:devicehub@db:5432/devicehub"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting platforms provide postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # API
    cors_origins: list[str] = ["http://localhost:5173"]
    legacy_missing_device_errors: bool = False

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
