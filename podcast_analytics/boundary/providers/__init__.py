"""
External provider clients.

Exports:
  - YouTubeClient: YouTube Data API v3 lookups
  - SpotifyClient: Spotify Web API lookups
  - GeminiClient: Gemini text generation
  - SummarizerClient: Hugging Face summarization endpoint
"""

from podcast_analytics.boundary.providers.gemini_client import GeminiClient
from podcast_analytics.boundary.providers.spotify_client import SpotifyClient
from podcast_analytics.boundary.providers.summarizer_client import SummarizerClient
from podcast_analytics.boundary.providers.youtube_client import YouTubeClient

__all__ = [
    "YouTubeClient",
    "SpotifyClient",
    "GeminiClient",
    "SummarizerClient",
]
