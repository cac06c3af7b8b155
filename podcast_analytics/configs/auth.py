"""
Authentication configuration settings.

Token signing secret, algorithm, and expiry for bearer tokens and the
session cookie that mirrors them.

Dependencies: pydantic, pydantic_settings
System role: Auth token configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from podcast_analytics.configs.base import BaseSettings

DEFAULT_DEV_SECRET = "dev-insecure-secret-change-me"


class AuthSettings(BaseSettings):
    """JWT and auth cookie configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="JWT_",
        case_sensitive=False,
        extra="ignore",
    )

    secret: str = Field(
        default=DEFAULT_DEV_SECRET,
        description="HMAC secret used to sign access tokens",
    )
    algorithm: str = Field(default="HS256", description="JWT signing algorithm")
    expire_days: int = Field(default=30, description="Access token lifetime in days")
    cookie_expire_days: int = Field(default=30, description="Auth cookie lifetime in days")
    cookie_secure: bool = Field(default=False, description="Send auth cookie over HTTPS only")
