"""
Spotify Web API client.

Looks up shows, episodes and tracks with app-level client credentials.
spotipy is blocking, so calls run in a worker thread. The credentials
manager caches the access token and refreshes it before expiry.

Dependencies: spotipy, asyncio
System role: Spotify metadata provider
"""

import asyncio
import logging
from typing import Any

import spotipy
from spotipy.exceptions import SpotifyException
from spotipy.oauth2 import SpotifyClientCredentials, SpotifyOauthError

from podcast_analytics.core.exceptions import NotFoundError, ProviderError
from podcast_analytics.core.url_parsing import parse_spotify_url

logger = logging.getLogger(__name__)

SHOW_EPISODE_LIMIT = 10


class SpotifyClient:
    """
    Spotify lookups for show, episode and track URLs.

    Args:
        client_id: Spotify application client ID
        client_secret: Spotify application client secret
        market: ISO country code; shows and episodes require one under client credentials
        client: Prebuilt spotipy client (injected in tests)
    """

    def __init__(
        self,
        client_id: str | None = None,
        client_secret: str | None = None,
        market: str = "US",
        client: spotipy.Spotify | None = None,
    ) -> None:
        self.market = market
        self._client = client or spotipy.Spotify(
            client_credentials_manager=SpotifyClientCredentials(
                client_id=client_id,
                client_secret=client_secret,
            )
        )

    def _fetch_sync(self, url: str) -> dict[str, Any]:
        kind, resource_id = parse_spotify_url(url)
        try:
            if kind == "show":
                show = self._client.show(resource_id, market=self.market)
                episodes = self._client.show_episodes(
                    resource_id,
                    limit=SHOW_EPISODE_LIMIT,
                    market=self.market,
                )
                return {
                    **show,
                    "type": "show",
                    "episodes": (episodes or {}).get("items", []),
                }
            if kind == "episode":
                episode = self._client.episode(resource_id, market=self.market)
                return {**episode, "type": "episode"}

            track = self._client.track(resource_id, market=self.market)
            return {**track, "type": "track"}

        except SpotifyException as e:
            if e.http_status == 404:
                raise NotFoundError(
                    f"Spotify {kind} not found.",
                    {kind: resource_id},
                ) from e
            logger.error(
                f"{__name__}:fetch - Spotify API error status={e.http_status} {kind}={resource_id}",
                exc_info=True,
            )
            raise ProviderError(
                "Failed to fetch data from Spotify.",
                provider="spotify",
                details={"status": e.http_status, kind: resource_id},
            ) from e
        except SpotifyOauthError as e:
            logger.error(f"{__name__}:fetch - Spotify authentication failed", exc_info=True)
            raise ProviderError(
                "Failed to authenticate with Spotify.",
                provider="spotify",
            ) from e

    async def fetch(self, url: str) -> dict[str, Any]:
        """
        Fetch metadata for a Spotify show, episode or track URL.

        Args:
            url: open.spotify.com URL

        Returns:
            dict: API object tagged with "type"; shows carry their first episodes

        Raises:
            ValidationError: If the URL has no recognizable ID
            NotFoundError: If Spotify returns 404
            ProviderError: On any other API or credential failure
        """
        return await asyncio.to_thread(self._fetch_sync, url)
