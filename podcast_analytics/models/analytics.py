"""
Read-side analytics schemas.

Views derived from a stored podcast document: the analytics summary,
audience insights, and history entries.

Dependencies: pydantic
System role: Analytics API contracts
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from podcast_analytics.models.common import CamelModel
from podcast_analytics.models.podcast import (
    AgeRanges,
    Audience,
    CountryShare,
    DeviceSplit,
    GenderSplit,
    PlatformStats,
    SubscriberMetrics,
)


class EpisodeSummary(CamelModel):
    title: str | None = None
    publish_date: datetime | None = None
    downloads: int = 0
    completion_rate: float = 0
    average_listen_duration: float | None = None


class EngagementSummary(CamelModel):
    average_listen_duration: float | None = None
    completion_rate: float | None = None
    subscribers: SubscriberMetrics


class PodcastAnalytics(CamelModel):
    """Headline analytics for one podcast."""

    total_downloads: int
    platform_stats: PlatformStats
    audience: Audience
    engagement: EngagementSummary
    recent_episodes: list[EpisodeSummary]


class ListeningBehavior(CamelModel):
    average_session_duration: float | None = None
    completion_rate: float | None = None


class PlatformDistribution(CamelModel):
    spotify: int = 0
    apple: int = 0
    google: int = 0
    youtube: int = 0
    other: int = 0


class TrendSeries(CamelModel):
    labels: list[str] = Field(default_factory=list)
    data: list[int] = Field(default_factory=list)


class AudienceInsights(CamelModel):
    """Audience view of one podcast."""

    total_listeners: int
    total_subscribers: int
    new_subscribers: int
    gender: GenderSplit
    age_ranges: AgeRanges
    top_countries: list[CountryShare]
    devices: DeviceSplit
    listening_behavior: ListeningBehavior
    top_episodes: list[EpisodeSummary]
    platform_distribution: PlatformDistribution
    trends: TrendSeries


class HistoryEntry(CamelModel):
    """Compact podcast row for the recently analysed list."""

    id: UUID
    title: str
    description: str
    source: str
    thumbnail: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
    total_plays: int = 0
    duration: str
