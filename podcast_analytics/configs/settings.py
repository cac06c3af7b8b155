"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field, model_validator

from podcast_analytics.configs.auth import DEFAULT_DEV_SECRET, AuthSettings
from podcast_analytics.configs.base import BaseSettings
from podcast_analytics.configs.cors import CorsSettings
from podcast_analytics.configs.database import DatabaseSettings
from podcast_analytics.configs.providers import ProviderSettings
from podcast_analytics.configs.rate_limit import RateLimitSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    auth: AuthSettings = Field(default_factory=AuthSettings)
    providers: ProviderSettings = Field(default_factory=ProviderSettings)
    cors: CorsSettings = Field(default_factory=CorsSettings)
    rate_limit: RateLimitSettings = Field(default_factory=RateLimitSettings)

    @model_validator(mode="after")
    def require_production_secret(self) -> "Settings":
        if self.is_production and self.auth.secret == DEFAULT_DEV_SECRET:
            raise ValueError("JWT_SECRET must be set in production")
        return self


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from podcast_analytics.configs import get_settings
        settings = get_settings()
    """
    return Settings()
