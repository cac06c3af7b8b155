"""
YouTube Data API v3 client.

Fetches video or playlist metadata for a pasted YouTube URL. The
discovery client is blocking, so calls run in a worker thread.

Dependencies: google-api-python-client, asyncio
System role: YouTube metadata provider
"""

import asyncio
import logging
from typing import Any

from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from podcast_analytics.core.exceptions import NotFoundError, ProviderError
from podcast_analytics.core.url_parsing import parse_youtube_url

logger = logging.getLogger(__name__)

VIDEO_PARTS = "snippet,statistics,contentDetails"
PLAYLIST_PARTS = "snippet,contentDetails"
PLAYLIST_ITEM_LIMIT = 10


class YouTubeClient:
    """
    Thin wrapper over the YouTube discovery resource.

    Args:
        api_key: YouTube Data API key
        service: Prebuilt discovery resource (injected in tests)
    """

    def __init__(self, api_key: str | None = None, service: Any = None) -> None:
        self._service = service or build(
            "youtube",
            "v3",
            developerKey=api_key,
            cache_discovery=False,
        )

    def _fetch_playlist(self, playlist_id: str) -> dict[str, Any]:
        response = self._service.playlists().list(
            part=PLAYLIST_PARTS,
            id=playlist_id,
        ).execute()
        playlists = response.get("items", [])
        if not playlists:
            raise NotFoundError(
                "YouTube playlist not found or is private.",
                {"playlist_id": playlist_id},
            )

        items_response = self._service.playlistItems().list(
            part=PLAYLIST_PARTS,
            playlistId=playlist_id,
            maxResults=PLAYLIST_ITEM_LIMIT,
        ).execute()

        return {
            **playlists[0],
            "type": "playlist",
            "items": items_response.get("items", []),
        }

    def _fetch_video(self, video_id: str) -> dict[str, Any]:
        response = self._service.videos().list(
            part=VIDEO_PARTS,
            id=video_id,
        ).execute()
        videos = response.get("items", [])
        if not videos:
            raise NotFoundError(
                "YouTube video not found or is private.",
                {"video_id": video_id},
            )
        return {**videos[0], "type": "video"}

    def _fetch_sync(self, url: str) -> dict[str, Any]:
        kind, resource_id = parse_youtube_url(url)
        try:
            if kind == "playlist":
                return self._fetch_playlist(resource_id)
            return self._fetch_video(resource_id)
        except HttpError as e:
            status = getattr(e.resp, "status", None)
            logger.error(
                f"{__name__}:fetch - YouTube API error status={status} {kind}={resource_id}",
                exc_info=True,
            )
            raise ProviderError(
                "Failed to fetch data from YouTube.",
                provider="youtube",
                details={"status": status, kind: resource_id},
            ) from e

    async def fetch(self, url: str) -> dict[str, Any]:
        """
        Fetch metadata for a YouTube video or playlist URL.

        Args:
            url: Video (watch, youtu.be, shorts, embed) or playlist URL

        Returns:
            dict: API resource tagged with "type"; playlists carry their first items

        Raises:
            ValidationError: If the URL has no video or playlist ID
            NotFoundError: If the resource is missing or private
            ProviderError: If the API call fails
        """
        return await asyncio.to_thread(self._fetch_sync, url)
