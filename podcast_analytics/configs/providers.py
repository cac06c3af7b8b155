"""
Third-party provider configuration.

Credentials and endpoints for YouTube Data API, Spotify Web API,
Google Gemini, and the Hugging Face summarization endpoint.

Dependencies: pydantic_settings
System role: External API configuration
"""

from pydantic import Field

from podcast_analytics.configs.base import BaseSettings


def is_configured(value: str | None) -> bool:
    """
    Check whether a credential is set to a real value.

    Template placeholders such as ``your_youtube_api_key_here`` count as unset.

    Args:
        value: Raw credential value

    Returns:
        bool: True if the value is non-empty and not a placeholder
    """
    if not value or not value.strip():
        return False
    return not value.strip().lower().startswith("your_")


class ProviderSettings(BaseSettings):
    """External API credentials and endpoints."""

    youtube_api_key: str | None = Field(default=None, description="YouTube Data API v3 key")

    spotify_client_id: str | None = Field(default=None, description="Spotify client ID")
    spotify_client_secret: str | None = Field(default=None, description="Spotify client secret")
    spotify_market: str = Field(
        default="US",
        description="Market used for show/episode lookups with client credentials",
    )

    gemini_api_key: str | None = Field(default=None, description="Google Gemini API key")
    gemini_model: str = Field(default="gemini-2.5-flash", description="Gemini model ID")

    summary_api_url: str = Field(
        default="https://api-inference.huggingface.co/models/facebook/bart-large-cnn",
        description="Hugging Face summarization inference endpoint",
    )
    huggingface_api_token: str | None = Field(
        default=None,
        description="Optional Hugging Face API token",
    )
    summary_timeout_seconds: float = Field(
        default=10.0,
        description="Timeout for summarization requests",
    )

    @property
    def youtube_configured(self) -> bool:
        return is_configured(self.youtube_api_key)

    @property
    def spotify_configured(self) -> bool:
        return is_configured(self.spotify_client_id) and is_configured(self.spotify_client_secret)

    @property
    def gemini_configured(self) -> bool:
        return is_configured(self.gemini_api_key)
