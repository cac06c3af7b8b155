"""
Shared settings base.

Every config module reads the process environment and an optional .env
file through this class, and inherits the environment name and log level.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Environment-backed settings; unknown variables are ignored."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="development",
        description="development, staging or production; production requires JWT_SECRET",
    )
    log_level: str = Field(default="INFO", description="Root log level name")

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"
