"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Credentials come from environment variables or .env (never hardcoded beyond dev defaults)
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - pydantic-settings: environment variables and .env, typed and validated
    - Every setting has a default matching the docker-compose service names
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://products:products@db:5432/products"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting platforms hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    # Create missing tables on startup (alembic remains the source of truth)
    database_create_schema: bool = True

    # API
    cors_origins: list[str] = ["http://localhost:5173"]
    static_dir: str = "public"

    # Docs
    docs_title: str = "Documentación REST API FastAPI / Python"
    docs_custom_css: str = (
        ".topbar-wrapper { width: 15%; } "
        ".swagger-ui .topbar { background-color: #3597d6; }"
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 4000

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
