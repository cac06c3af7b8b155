"""
Podcast service orchestrator.

Coordinates the podcast library: listing, creation with duplicate
detection, partial updates, deletion, analytics, rankings, and the
recently analysed history.

Dependencies: podcast_analytics.boundary.db.CRUD, podcast_analytics.core
System role: Podcast use case orchestration
"""

import logging
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from podcast_analytics.application.services.podcast_documents import (
    load_owned_podcast,
    refresh_user_downloads,
    save_record,
    to_columns,
    to_record,
    validate_record,
)
from podcast_analytics.boundary.db.CRUD.podcast_crud import podcast_crud
from podcast_analytics.boundary.db.models import UserModel
from podcast_analytics.core.analytics import build_analytics, format_history_entry
from podcast_analytics.core.exceptions import ValidationError
from podcast_analytics.core.identifiers import parse_identifier
from podcast_analytics.models.analytics import HistoryEntry, PodcastAnalytics
from podcast_analytics.models.common import PageRef, Pagination
from podcast_analytics.models.podcast import (
    ChartRanking,
    CreatePodcastRequest,
    PodcastRecord,
    UpdatePodcastRequest,
)

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Untitled Podcast"
DEFAULT_DESCRIPTION = "No description provided"
DEFAULT_SOURCE = "youtube"
DEFAULT_CATEGORY = "Other"


def parse_count(value: Any) -> int:
    """
    Coerce a provider statistic to an int.

    Providers send counts as numeric strings ("1234"); anything unparseable is 0.
    """
    if value is None or isinstance(value, bool):
        return 0
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return 0


def build_create_document(user: UserModel, request: CreatePodcastRequest) -> dict[str, Any]:
    """
    Map a create request onto a podcast document.

    Provider statistics seed the headline numbers: viewCount feeds
    downloads, subscriberCount feeds subscribers, commentCount feeds reviews.

    Args:
        user: Owner of the new podcast
        request: Create request

    Returns:
        dict: Raw document data, validated by the caller
    """
    source = request.source or DEFAULT_SOURCE
    statistics = request.statistics or {}
    views = parse_count(statistics.get("viewCount"))
    subscribers = parse_count(statistics.get("subscriberCount"))
    comments = parse_count(statistics.get("commentCount"))

    platform_stats: dict[str, Any] = {}
    if source in ("youtube", "spotify"):
        platform_stats[source] = {
            "downloads": views,
            "subscribers": subscribers,
            "reviews": comments,
        }

    data: dict[str, Any] = {
        "user_id": user.id,
        "title": request.title or DEFAULT_TITLE,
        "description": request.description or DEFAULT_DESCRIPTION,
        "source": source,
        "source_id": request.source_id or "",
        "category": request.category or DEFAULT_CATEGORY,
        "explicit": bool(request.explicit),
        "rss_feed": request.rss_feed,
        "website": request.website,
        "url": request.url,
        "total_downloads": views,
        "platform_stats": platform_stats,
        "engagement_metrics": {"subscribers": {"total": subscribers}},
        "statistics": statistics,
        "published_at": request.published_at,
        "duration": request.duration,
    }
    if request.thumbnail:
        data["cover_image"] = request.thumbnail
    return data


class PodcastService:
    """Podcast service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize podcast service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def list_podcasts(
        self,
        user: UserModel,
        source: str | None = None,
        category: str | None = None,
        sort: str | None = None,
        page: int = 1,
        limit: int = 25,
        owner: str | None = None,
    ) -> dict[str, Any]:
        """
        List podcasts visible to the user.

        Regular users see their own library. Admins see every podcast,
        or one user's library when owner is given.

        Args:
            user: Current user
            source: Optional source filter
            category: Optional category filter
            sort: Sort expression ("-createdAt", "title,-totalDownloads")
            page: 1-based page number
            limit: Page size
            owner: Admin-only user ID filter

        Returns:
            dict: data (list[PodcastRecord]), count, pagination
        """
        if user.role == "admin":
            owner_id = parse_identifier(owner, "user") if owner else None
        else:
            owner_id = user.id

        offset = (page - 1) * limit
        total = await podcast_crud.count_for_user(self.db, owner_id, source, category)
        podcasts = await podcast_crud.get_for_user(
            self.db,
            owner_id,
            source=source,
            category=category,
            sort=sort,
            limit=limit,
            offset=offset,
        )

        pagination = Pagination()
        if offset + limit < total:
            pagination.next = PageRef(page=page + 1, limit=limit)
        if offset > 0:
            pagination.prev = PageRef(page=page - 1, limit=limit)

        records = [to_record(p) for p in podcasts]
        return {"data": records, "count": len(records), "pagination": pagination}

    async def create_podcast(
        self,
        user: UserModel,
        request: CreatePodcastRequest,
    ) -> tuple[PodcastRecord, bool]:
        """
        Add a podcast to the user's library.

        Args:
            user: Owner
            request: Create request

        Returns:
            tuple: (record, created). created is False when the user already
                had a podcast with the same source and source ID.

        Raises:
            ValidationError: If the resulting document is invalid
        """
        # A rollback expires loaded instances, so keep the plain ID
        user_id = user.id

        if request.source and request.source_id:
            existing = await podcast_crud.find_by_source(
                self.db, user_id, request.source, request.source_id
            )
            if existing is not None:
                logger.info(
                    "Podcast already in library",
                    extra={"podcast_id": str(existing.id), "user_id": str(user_id)},
                )
                return to_record(existing), False

        record = validate_record(build_create_document(user, request))

        try:
            podcast = await podcast_crud.create(self.db, user_id=user_id, **to_columns(record))
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            existing = (
                await podcast_crud.find_by_url(self.db, user_id, record.url)
                if record.url
                else None
            )
            if existing is None:
                raise
            return to_record(existing), False

        logger.info(
            "Podcast created",
            extra={"podcast_id": str(podcast.id), "user_id": str(user_id)},
        )
        created = to_record(podcast)
        await refresh_user_downloads(self.db, user_id)
        return created, True

    async def get_podcast(self, user: UserModel, podcast_id: str) -> PodcastRecord:
        """
        Get a podcast the user may access.

        Raises:
            InvalidIdentifierError, PodcastNotFoundError, NotAuthorizedError
        """
        podcast = await load_owned_podcast(self.db, podcast_id, user, "view this podcast")
        return to_record(podcast)

    async def update_podcast(
        self,
        user: UserModel,
        podcast_id: str,
        request: UpdatePodcastRequest,
    ) -> PodcastRecord:
        """
        Partially update a podcast.

        Every provided top-level field replaces the stored value; the merged
        document is validated as a whole before it is written.

        Args:
            user: Current user
            podcast_id: Raw podcast ID
            request: Fields to replace

        Returns:
            PodcastRecord: Updated document
        """
        podcast = await load_owned_podcast(self.db, podcast_id, user, "update this podcast")

        merged = to_record(podcast).model_dump()
        merged.update(request.model_dump(exclude_unset=True))
        record = validate_record(merged)
        podcast_key = podcast.id

        try:
            updated = await save_record(self.db, podcast, record)
        except IntegrityError as e:
            await self.db.rollback()
            logger.info(
                "Podcast update hit an existing URL",
                extra={"podcast_id": str(podcast_key)},
            )
            raise ValidationError("A podcast with that URL is already in your library") from e

        logger.info("Podcast updated", extra={"podcast_id": str(podcast.id)})
        await refresh_user_downloads(self.db, podcast.user_id)
        return updated

    async def delete_podcast(self, user: UserModel, podcast_id: str) -> None:
        """Delete a podcast the user may access."""
        podcast = await load_owned_podcast(self.db, podcast_id, user, "delete this podcast")
        owner_id = podcast.user_id

        await podcast_crud.delete(self.db, podcast)
        await self.db.commit()
        logger.info("Podcast deleted", extra={"podcast_id": str(podcast_id)})
        await refresh_user_downloads(self.db, owner_id)

    async def get_analytics(self, user: UserModel, podcast_id: str) -> PodcastAnalytics:
        """Headline analytics for a podcast."""
        podcast = await load_owned_podcast(
            self.db, podcast_id, user, "view analytics for this podcast"
        )
        return build_analytics(to_record(podcast))

    async def get_rankings(self, user: UserModel, podcast_id: str) -> list[ChartRanking]:
        """Stored chart rankings for a podcast."""
        podcast = await load_owned_podcast(
            self.db, podcast_id, user, "view rankings for this podcast"
        )
        return to_record(podcast).chart_rankings

    async def get_history(self, user: UserModel) -> list[HistoryEntry]:
        """The user's 10 most recently added podcasts."""
        podcasts = await podcast_crud.recent_for_user(self.db, user.id, limit=10)
        return [format_history_entry(to_record(p)) for p in podcasts]

    async def remove_from_history(self, user: UserModel, podcast_id: str) -> None:
        """
        Remove a podcast from the history view.

        History is the library itself, so this deletes the podcast.
        """
        await self.delete_podcast(user, podcast_id)
