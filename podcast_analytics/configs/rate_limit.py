"""
Rate limit configuration settings.

Dependencies: pydantic_settings
System role: Per-client request limits applied to every route
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from podcast_analytics.configs.base import BaseSettings


class RateLimitSettings(BaseSettings):
    """Request limits keyed by client address."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="RATE_LIMIT_",
        case_sensitive=False,
        extra="ignore",
    )

    enabled: bool = Field(default=True, description="Apply the default limit to every route")
    default: str = Field(
        default="100 per 10 minutes",
        description="limits-style expression, e.g. '100 per 10 minutes'",
    )
