"""
Podcast details service orchestrator.

Fetches metadata for a pasted YouTube or Spotify URL and saves it to the
caller's library, reusing an existing record for the same URL or
provider ID.

Dependencies: podcast_analytics.boundary.providers, podcast_analytics.boundary.db.CRUD
System role: URL metadata fetch use case orchestration
"""

import logging
from datetime import datetime
from typing import Any
from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from podcast_analytics.application.services.podcast_documents import (
    refresh_user_downloads,
    to_columns,
    validate_record,
)
from podcast_analytics.application.services.podcast_service import parse_count
from podcast_analytics.boundary.db.CRUD.podcast_crud import podcast_crud
from podcast_analytics.boundary.db.models import UserModel
from podcast_analytics.boundary.providers.spotify_client import SpotifyClient
from podcast_analytics.boundary.providers.youtube_client import YouTubeClient
from podcast_analytics.core.exceptions import (
    PodcastAnalyticsError,
    ProviderNotConfiguredError,
    UnsupportedSourceError,
    ValidationError,
)
from podcast_analytics.core.url_parsing import detect_source
from podcast_analytics.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

SAVED_MESSAGE = "Podcast details retrieved and saved to your library"
NOT_SAVED_MESSAGE = "Podcast details retrieved (not saved to library)"
TITLE_MAX_LENGTH = 100


def _parse_release_date(value: str | None) -> datetime | None:
    """Spotify release dates come as YYYY, YYYY-MM or YYYY-MM-DD."""
    if not value:
        return None
    parts = value.split("-")
    try:
        year = int(parts[0])
        month = int(parts[1]) if len(parts) > 1 else 1
        day = int(parts[2]) if len(parts) > 2 else 1
        return datetime(year, month, day)
    except (ValueError, IndexError):
        return None


def _format_duration_ms(duration_ms: Any) -> str | None:
    if not isinstance(duration_ms, int) or duration_ms <= 0:
        return None
    seconds = duration_ms // 1000
    hours, remainder = divmod(seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours}:{minutes:02d}:{seconds:02d}"


def youtube_document_fields(data: dict[str, Any]) -> dict[str, Any]:
    """
    Map a YouTube video or playlist resource onto podcast document fields.

    Args:
        data: Resource returned by YouTubeClient.fetch

    Returns:
        dict: Document fields (without owner or URL)
    """
    snippet = data.get("snippet") or {}
    thumbnails = snippet.get("thumbnails") or {}
    thumbnail = (thumbnails.get("high") or thumbnails.get("default") or {}).get("url")
    statistics = data.get("statistics") or {}
    content_details = data.get("contentDetails") or {}
    views = parse_count(statistics.get("viewCount"))

    id_key = "playlistId" if data.get("type") == "playlist" else "videoId"
    fields: dict[str, Any] = {
        "source": "youtube",
        "source_id": data.get("id") or "",
        "title": snippet.get("title"),
        "description": snippet.get("description"),
        "published_at": snippet.get("publishedAt"),
        "duration": content_details.get("duration"),
        "statistics": statistics,
        "total_downloads": views,
        "platform_stats": {
            "youtube": {
                "downloads": views,
                "reviews": parse_count(statistics.get("commentCount")),
            }
        },
        "provider_data": {
            id_key: data.get("id"),
            "channelTitle": snippet.get("channelTitle"),
            "channelId": snippet.get("channelId"),
            "defaultLanguage": snippet.get("defaultLanguage"),
            "defaultAudioLanguage": snippet.get("defaultAudioLanguage"),
        },
    }
    if thumbnail:
        fields["cover_image"] = thumbnail
    return fields


def spotify_document_fields(data: dict[str, Any]) -> dict[str, Any]:
    """
    Map a Spotify show, episode or track onto podcast document fields.

    Args:
        data: Object returned by SpotifyClient.fetch

    Returns:
        dict: Document fields (without owner or URL)
    """
    kind = data.get("type")
    images = data.get("images") or (data.get("album") or {}).get("images") or []
    release_date = data.get("release_date") or (data.get("album") or {}).get("release_date")

    if kind == "show":
        publisher = data.get("publisher")
    elif kind == "episode":
        publisher = (data.get("show") or {}).get("publisher")
    else:
        publisher = ", ".join(a.get("name", "") for a in data.get("artists") or []) or None

    statistics: dict[str, Any] = {}
    if data.get("total_episodes") is not None:
        statistics["totalEpisodes"] = data["total_episodes"]
    if data.get("popularity") is not None:
        statistics["popularity"] = data["popularity"]

    fields: dict[str, Any] = {
        "source": "spotify",
        "source_id": data.get("id") or "",
        "title": data.get("name"),
        "description": data.get("description"),
        "published_at": _parse_release_date(release_date),
        "duration": _format_duration_ms(data.get("duration_ms")),
        "explicit": bool(data.get("explicit")),
        "statistics": statistics,
        "provider_data": {
            "spotifyId": data.get("id"),
            "kind": kind,
            "publisher": publisher,
        },
    }
    if images and images[0].get("url"):
        fields["cover_image"] = images[0]["url"]
    return fields


class PodcastDetailsService:
    """Podcast details service orchestrator."""

    def __init__(
        self,
        db: AsyncSession,
        youtube: YouTubeClient | None = None,
        spotify: SpotifyClient | None = None,
    ) -> None:
        """
        Initialize podcast details service.

        Args:
            db: Async SQLAlchemy session
            youtube: YouTube client, None when no API key is configured
            spotify: Spotify client, None when credentials are missing
        """
        self.db = db
        self.youtube = youtube
        self.spotify = spotify

    async def fetch_details(self, user: UserModel, podcast_url: Any) -> dict[str, Any]:
        """
        Fetch provider metadata for a URL and save it to the user's library.

        Args:
            user: Current user
            podcast_url: URL as received in the request body

        Returns:
            dict: data (provider payload), podcast_id (None if not saved), message

        Raises:
            ValidationError: If the URL is missing, not a string, or unparseable
            UnsupportedSourceError: For RSS feeds
            ProviderNotConfiguredError: If the provider has no credentials
            NotFoundError, ProviderError: From the provider client
        """
        if podcast_url is None or podcast_url == "":
            raise ValidationError("Please provide a podcast URL", field="podcastUrl")
        if not isinstance(podcast_url, str):
            raise ValidationError("Podcast URL must be a string", field="podcastUrl")

        url = podcast_url.strip()
        source = detect_source(url)
        logger.info(f"{__name__}:fetch_details - START source={source}")

        if source == "youtube":
            if self.youtube is None:
                raise ProviderNotConfiguredError(
                    "YouTube API key is not configured. Please add YOUTUBE_API_KEY to your environment.",
                    provider="youtube",
                )
            data = await self.youtube.fetch(url)
            fields = youtube_document_fields(data)
        elif source == "spotify":
            if self.spotify is None:
                raise ProviderNotConfiguredError(
                    "Spotify credentials are not configured. Please add SPOTIFY_CLIENT_ID "
                    "and SPOTIFY_CLIENT_SECRET to your environment.",
                    provider="spotify",
                )
            data = await self.spotify.fetch(url)
            fields = spotify_document_fields(data)
        else:
            raise UnsupportedSourceError("RSS feeds are not yet supported.", {"url": url})

        podcast_id = await self._save_to_library(user.id, url, fields)
        return {
            "data": data,
            "podcast_id": podcast_id,
            "message": SAVED_MESSAGE if podcast_id else NOT_SAVED_MESSAGE,
        }

    async def _save_to_library(
        self,
        user_id: UUID,
        url: str,
        fields: dict[str, Any],
    ) -> UUID | None:
        """
        Reuse or create the library record for a fetched URL.

        Returns:
            UUID | None: Record ID, None when saving failed
        """
        source_id = fields.get("source_id")
        try:
            existing = await podcast_crud.find_by_url(self.db, user_id, url)
            if existing is None and source_id:
                existing = await podcast_crud.find_by_source(
                    self.db, user_id, fields["source"], source_id
                )
            if existing is not None:
                logger.info(
                    "Podcast already in library",
                    extra={"podcast_id": str(existing.id), "user_id": str(user_id)},
                )
                return existing.id

            record = validate_record(
                {
                    **fields,
                    "user_id": user_id,
                    "url": url,
                    "title": (fields.get("title") or "Untitled Podcast")[:TITLE_MAX_LENGTH],
                    "description": fields.get("description") or "No description provided",
                    "category": "Other",
                }
            )

            try:
                podcast = await podcast_crud.create(self.db, user_id=user_id, **to_columns(record))
                await self.db.commit()
            except IntegrityError:
                # Same URL saved by a concurrent request
                await self.db.rollback()
                existing = await podcast_crud.find_by_url(self.db, user_id, url)
                return existing.id if existing else None

        except (SQLAlchemyError, PodcastAnalyticsError) as e:
            await self.db.rollback()
            log_exception_with_context(
                logger,
                "Failed to save fetched podcast to library",
                e,
                user_id=str(user_id),
                url=url,
            )
            return None

        logger.info(
            "Fetched podcast saved to library",
            extra={"podcast_id": str(podcast.id), "user_id": str(user_id)},
        )
        podcast_id = podcast.id
        await refresh_user_downloads(self.db, user_id)
        return podcast_id
