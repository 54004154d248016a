"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Credentials (DB_USER, DB_PASSWORD) come from the environment only, no defaults
    - Every other setting has a documented default
    - get_settings() is cached (lru_cache): read once per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - DB_* parts assembled with sqlalchemy URL.create so passwords with '@' or '/' survive
    - DATABASE_URL, when present, wins over the DB_* parts (hosted platforms set it)
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore",
    )

    # Database
    db_driver: str = "postgresql+asyncpg"
    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str | None = None
    db_password: str | None = None
    db_name: str = "portfolio_db"
    database_url: str | None = None

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str | None) -> str | None:
        """Hosted Postgres hands out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 10
    database_max_overflow: int = 5
    database_pool_timeout: float = 30.0
    database_create_tables: bool = True

    # HTTP
    host: str = "0.0.0.0"
    port: int = 5000
    cors_origin: str = "http://localhost:3000"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    def get_database_url(self) -> str:
        """Connection URL for the async engine."""
        if self.database_url:
            return self.database_url
        url = URL.create(
            self.db_driver,
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )
        return url.render_as_string(hide_password=False)


@lru_cache
def get_settings() -> Settings:
    return Settings()
