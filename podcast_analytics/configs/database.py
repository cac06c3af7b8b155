"""
Database configuration settings.

Manages the connection string and pooling parameters for SQLAlchemy.
PostgreSQL (asyncpg) in deployed environments, SQLite (aiosqlite) locally.

Dependencies: pydantic, pydantic_settings
System role: Database connection configuration for ORM
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from podcast_analytics.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """Database connection configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DATABASE_",
        case_sensitive=False,
        extra="ignore",
    )

    url: str = Field(
        default="sqlite+aiosqlite:///./podcast_analytics.db",
        description="SQLAlchemy async database URL",
    )

    pool_size: int = Field(default=10, description="Connection pool size")
    max_overflow: int = Field(default=20, description="Maximum overflow connections")
    pool_timeout: int = Field(default=30, description="Connection pool timeout in seconds")
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")

    auto_create_tables: bool = Field(
        default=True,
        description="Create missing tables on application startup",
    )

    @property
    def is_sqlite(self) -> bool:
        """
        Whether the configured URL targets SQLite.

        Returns:
            bool: True for sqlite URLs (pool options are not applicable)
        """
        return self.url.startswith("sqlite")
