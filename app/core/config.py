"""Application configuration from environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment (and .env file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Health Tracker API"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # API
    api_v1_prefix: str = "/api/v1"

    # Database: local SQLite file by default (aiosqlite driver)
    database_url: str = "sqlite+aiosqlite:///./health_tracker.db"

    # Pool (ignored for SQLite)
    database_pool_size: int = 5
    database_max_overflow: int = 10

    # Create missing tables at startup; there are no migrations
    create_tables_on_startup: bool = True
    # Insert two demo entries when the store is empty
    seed_sample_data: bool = False

    # Progress photos are stored inline on the entry row
    max_photo_bytes: int = 5 * 1024 * 1024

    # CORS: comma-separated list of allowed origins in production
    cors_origins: str = ""

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
