"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - Settings are constructed once and handed to create_app(); nothing reads
      get_settings() at request time
    - get_settings() is cached (lru_cache) and only used as create_app()'s default

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
    - Pool defaults: 50 connections total, 10 min lifetime, ping on checkout
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    app_name: str = "inventory-api"

    # Database
    database_url: str = (
        "postgresql+asyncpg://inventory:inventory@db:5432/inventory"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Plain postgresql:// URLs are pinned to the asyncpg driver."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 10
    database_max_overflow: int = 40
    database_pool_recycle_seconds: int = 600
    database_pool_timeout_seconds: int = 30
    database_pool_pre_ping: bool = True
    database_connect_timeout_seconds: float = 5.0
    database_create_schema: bool = False

    # Update/delete of a missing id: silent no-op unless strict
    strict_writes: bool = False

    # API
    cors_origins: list[str] = ["http://localhost:5173"]
    host: str = "0.0.0.0"
    port: int = 8080
    shutdown_grace_seconds: int = 5

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"
    log_file: str | None = None
    log_max_bytes: int = 10 * 1024 * 1024
    log_backup_count: int = 3


@lru_cache
def get_settings() -> Settings:
    return Settings()
