"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache): single instance per process
    - cors_config() always returns a fresh, immutable CORSConfig

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Lists (CORS_ALLOWED_ORIGINS, ...) are read as JSON arrays
    - Defaults work out of the box for local development on port 3000
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.cors_policy import CORSConfig, STANDARD_METHODS


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Document store
    document_store: Literal["sql", "memory"] = "sql"
    database_url: str = "postgresql+asyncpg://tla:tla@db:5432/tla"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # CORS preflight policy
    cors_allowed_origins: list[str] = ["http://localhost:3000"]
    cors_allowed_methods: list[str] = list(STANDARD_METHODS)
    cors_allowed_headers: list[str] = ["Content-Type"]
    cors_supports_credentials: bool = False
    cors_max_age: int = 0

    # Observability
    request_logging: bool = True
    log_level: str = "INFO"
    log_format: str = "json"

    def cors_config(self) -> CORSConfig:
        return CORSConfig(
            allowed_origins=frozenset(self.cors_allowed_origins),
            allowed_methods=frozenset(self.cors_allowed_methods),
            allowed_headers=frozenset(self.cors_allowed_headers),
            supports_credentials=self.cors_supports_credentials,
            max_age=self.cors_max_age,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
