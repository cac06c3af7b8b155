"""
Podcast ORM model.

One row per podcast in a user's library. Scalar fields are columns;
the nested analytics document (stats, episodes, audience, rankings,
engagement, monetization, insights) lives in JSON columns.

Dependencies: sqlalchemy, podcast_analytics.boundary.db.base
System role: Podcast document persistence
"""

import uuid
from datetime import datetime

from sqlalchemy import (
    JSON,
    BigInteger,
    Boolean,
    DateTime,
    ForeignKey,
    Index,
    String,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column

from podcast_analytics.boundary.db.base import Base, TimestampMixin, UUIDMixin


class PodcastModel(Base, UUIDMixin, TimestampMixin):
    """
    Podcast ORM model.

    JSON columns are replaced wholesale on update; in-place mutation of a
    loaded dict is not tracked by SQLAlchemy.

    Constraints:
        (user_id, url) is unique so concurrent metadata fetches of the same
        URL cannot create duplicates in one library. NULL urls never collide.
    """

    __tablename__ = "podcasts"
    __table_args__ = (
        UniqueConstraint("user_id", "url", name="uq_podcasts_user_url"),
        Index("ix_podcasts_user_title", "user_id", "title"),
        Index("ix_podcasts_user_source", "user_id", "source", "source_id"),
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )

    title: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    rss_feed: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    source: Mapped[str] = mapped_column(String(16), nullable=False, default="rss")
    source_id: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    url: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    website: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    cover_image: Mapped[str] = mapped_column(
        String(2048),
        nullable=False,
        default="no-photo.jpg",
    )
    category: Mapped[str] = mapped_column(String(64), nullable=False)
    explicit: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    total_downloads: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    duration: Mapped[str | None] = mapped_column(String(64), nullable=True)
    published_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    platform_stats: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    episodes: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    audience: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    chart_rankings: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    engagement_metrics: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    monetization: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    ai_insights: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    statistics: Mapped[dict] = mapped_column(
        JSON,
        nullable=False,
        default=dict,
        doc="Raw provider statistics (viewCount, likeCount, ...)",
    )
    provider_data: Mapped[dict] = mapped_column(
        JSON,
        nullable=False,
        default=dict,
        doc="Provider-specific identifiers (channelId, publisher, ...)",
    )
