"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from podcast_analytics.configs.providers import is_configured
from podcast_analytics.configs.settings import Settings, get_settings

__all__ = ["Settings", "get_settings", "is_configured"]
