"""
Podcast CRUD operations.

Library queries scoped to a user: filtered, sorted, paginated listing,
duplicate lookups by provider ID or URL, and the download aggregate.

Dependencies: sqlalchemy, podcast_analytics.boundary.db.models
System role: Podcast persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from podcast_analytics.boundary.db.CRUD.base_crud import BaseCRUD
from podcast_analytics.boundary.db.models.podcast_model import PodcastModel

# API sort keys (camelCase) to columns
SORTABLE_FIELDS = {
    "createdAt": PodcastModel.created_at,
    "updatedAt": PodcastModel.updated_at,
    "title": PodcastModel.title,
    "category": PodcastModel.category,
    "source": PodcastModel.source,
    "totalDownloads": PodcastModel.total_downloads,
    "publishedAt": PodcastModel.published_at,
}

DEFAULT_SORT = "-createdAt"


def build_order_by(sort: str | None) -> list:
    """
    Translate a sort expression into ORDER BY clauses.

    Args:
        sort: Comma-separated field names, "-" prefix for descending
            (e.g. "-totalDownloads,title"). Unknown fields are ignored.

    Returns:
        list: Column ordering clauses, newest-first when nothing usable is given
    """
    clauses = []
    for raw in (sort or DEFAULT_SORT).split(","):
        raw = raw.strip()
        descending = raw.startswith("-")
        column = SORTABLE_FIELDS.get(raw.lstrip("-"))
        if column is None:
            continue
        clauses.append(column.desc() if descending else column.asc())

    if not clauses:
        clauses.append(PodcastModel.created_at.desc())
    return clauses


class PodcastCRUD(BaseCRUD[PodcastModel]):
    """
    CRUD operations for PodcastModel.

    Extends BaseCRUD with per-user library queries.
    """

    def __init__(self) -> None:
        super().__init__(PodcastModel)

    @staticmethod
    def _filtered(
        stmt: Select,
        user_id: UUID | None,
        source: str | None,
        category: str | None,
    ) -> Select:
        if user_id is not None:
            stmt = stmt.where(PodcastModel.user_id == user_id)
        if source:
            stmt = stmt.where(PodcastModel.source == source)
        if category:
            stmt = stmt.where(PodcastModel.category == category)
        return stmt

    async def get_for_user(
        self,
        session: AsyncSession,
        user_id: UUID | None,
        source: str | None = None,
        category: str | None = None,
        sort: str | None = None,
        limit: int = 25,
        offset: int = 0,
    ) -> Sequence[PodcastModel]:
        """
        List podcasts in a library.

        Args:
            session: Async database session
            user_id: Owner to scope to, None for every user
            source: Optional source filter (rss, youtube, spotify)
            category: Optional category filter
            sort: Sort expression, see build_order_by
            limit: Page size
            offset: Rows to skip

        Returns:
            Sequence of PodcastModels for the requested page
        """
        stmt = self._filtered(select(PodcastModel), user_id, source, category)
        stmt = stmt.order_by(*build_order_by(sort)).offset(offset).limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def count_for_user(
        self,
        session: AsyncSession,
        user_id: UUID | None,
        source: str | None = None,
        category: str | None = None,
    ) -> int:
        """Count podcasts matching the same filters as get_for_user."""
        stmt = self._filtered(
            select(func.count()).select_from(PodcastModel),
            user_id,
            source,
            category,
        )
        result = await session.execute(stmt)
        return result.scalar_one()

    async def find_by_source(
        self,
        session: AsyncSession,
        user_id: UUID,
        source: str,
        source_id: str,
    ) -> PodcastModel | None:
        """Find a user's podcast by provider and provider-side ID."""
        stmt = (
            select(PodcastModel)
            .where(
                PodcastModel.user_id == user_id,
                PodcastModel.source == source,
                PodcastModel.source_id == source_id,
            )
            .limit(1)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_by_url(
        self,
        session: AsyncSession,
        user_id: UUID,
        url: str,
    ) -> PodcastModel | None:
        """Find a user's podcast by the URL it was fetched from."""
        stmt = select(PodcastModel).where(
            PodcastModel.user_id == user_id,
            PodcastModel.url == url,
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def recent_for_user(
        self,
        session: AsyncSession,
        user_id: UUID,
        limit: int = 10,
    ) -> Sequence[PodcastModel]:
        """Most recently added podcasts, newest first."""
        stmt = (
            select(PodcastModel)
            .where(PodcastModel.user_id == user_id)
            .order_by(PodcastModel.created_at.desc())
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def sum_downloads(self, session: AsyncSession, user_id: UUID) -> int:
        """Sum of total_downloads over a user's podcasts (0 when empty)."""
        stmt = select(func.coalesce(func.sum(PodcastModel.total_downloads), 0)).where(
            PodcastModel.user_id == user_id
        )
        result = await session.execute(stmt)
        return int(result.scalar_one())


podcast_crud = PodcastCRUD()
