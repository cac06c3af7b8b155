"""
Podcast document models and schemas.

The nested analytics document stored per podcast, validated as a whole
before every write, plus the request schemas for podcast CRUD.

Dependencies: pydantic
System role: Podcast API contracts and document validation layer
"""

from datetime import datetime, timezone
from typing import Any, Literal
from uuid import UUID, uuid4

from pydantic import Field, field_validator, model_validator

from podcast_analytics.core.url_parsing import is_valid_url
from podcast_analytics.models.common import CamelModel

SourceType = Literal["rss", "youtube", "spotify"]

Category = Literal[
    "Arts",
    "Business",
    "Comedy",
    "Education",
    "Fiction",
    "Government",
    "History",
    "Health & Fitness",
    "Kids & Family",
    "Leisure",
    "Music",
    "News",
    "Religion & Spirituality",
    "Science",
    "Society & Culture",
    "Sports",
    "Technology",
    "True Crime",
    "TV & Film",
    "Other",
]

InsightType = Literal["growth", "content", "audience", "monetization", "general"]
Priority = Literal["low", "medium", "high"]
SponsorStatus = Literal["active", "pending", "completed", "cancelled"]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# Platform stats

class PlatformMetrics(CamelModel):
    downloads: int = 0
    subscribers: int = 0
    rating: float = 0
    reviews: int = 0


class PlatformStats(CamelModel):
    spotify: PlatformMetrics = Field(default_factory=PlatformMetrics)
    apple: PlatformMetrics = Field(default_factory=PlatformMetrics)
    google: PlatformMetrics = Field(default_factory=PlatformMetrics)
    youtube: PlatformMetrics = Field(default_factory=PlatformMetrics)


# Episodes

class PlatformDownloads(CamelModel):
    spotify: int = 0
    apple: int = 0
    google: int = 0
    other: int = 0


class DailyCount(CamelModel):
    date: datetime | None = None
    count: int = 0


class EpisodeDownloads(CamelModel):
    total: int = 0
    by_platform: PlatformDownloads = Field(default_factory=PlatformDownloads)
    daily: list[DailyCount] = Field(default_factory=list)


class DropOffPoint(CamelModel):
    timestamp: float | None = Field(default=None, description="Seconds into the episode")
    percentage: float | None = Field(default=None, description="Share of listeners dropping off")


class EpisodeEngagement(CamelModel):
    completion_rate: float | None = None
    average_listen_duration: float | None = Field(default=None, description="Seconds")
    drop_off_points: list[DropOffPoint] = Field(default_factory=list)


class Episode(CamelModel):
    title: str | None = None
    publish_date: datetime | None = None
    duration: float | None = Field(default=None, description="Seconds")
    downloads: EpisodeDownloads = Field(default_factory=EpisodeDownloads)
    engagement: EpisodeEngagement = Field(default_factory=EpisodeEngagement)


# Audience demographics

class GenderSplit(CamelModel):
    male: float = 0
    female: float = 0
    other: float = 0


class AgeRanges(CamelModel):
    age_13_17: float = Field(default=0, alias="13-17")
    age_18_24: float = Field(default=0, alias="18-24")
    age_25_34: float = Field(default=0, alias="25-34")
    age_35_44: float = Field(default=0, alias="35-44")
    age_45_54: float = Field(default=0, alias="45-54")
    age_55_64: float = Field(default=0, alias="55-64")
    age_65_plus: float = Field(default=0, alias="65+")


class CountryShare(CamelModel):
    country: str | None = None
    percentage: float | None = None
    listeners: int | None = None


class DeviceSplit(CamelModel):
    mobile: float = 0
    desktop: float = 0
    tablet: float = 0
    other: float = 0


class Audience(CamelModel):
    gender: GenderSplit = Field(default_factory=GenderSplit)
    age_ranges: AgeRanges = Field(default_factory=AgeRanges)
    countries: list[CountryShare] = Field(default_factory=list)
    devices: DeviceSplit = Field(default_factory=DeviceSplit)


# Chart rankings

class ChartRanking(CamelModel):
    chart: str | None = Field(default=None, description='e.g. "Spotify Top Podcasts"')
    category: str | None = None
    country: str | None = None
    rank: int | None = None
    date: datetime | None = None
    peak_rank: int | None = None
    weeks_on_chart: int | None = None


# Engagement

class SubscriberMetrics(CamelModel):
    total: int = 0
    weekly_change: int = 0
    monthly_change: int = 0


class SocialFollowers(CamelModel):
    twitter: int = 0
    instagram: int = 0
    facebook: int = 0
    youtube: int = 0


class SocialEngagement(CamelModel):
    likes: int = 0
    comments: int = 0
    shares: int = 0
    saves: int = 0


class SocialMedia(CamelModel):
    followers: SocialFollowers = Field(default_factory=SocialFollowers)
    engagement: SocialEngagement = Field(default_factory=SocialEngagement)


class Review(CamelModel):
    platform: str | None = None
    rating: float | None = None
    review: str | None = None
    date: datetime | None = None
    author: str | None = None


class EngagementMetrics(CamelModel):
    average_listen_duration: float | None = None
    completion_rate: float | None = None
    subscribers: SubscriberMetrics = Field(default_factory=SubscriberMetrics)
    social_media: SocialMedia = Field(default_factory=SocialMedia)
    reviews: list[Review] = Field(default_factory=list)


# Monetization

class MonthlyRevenue(CamelModel):
    amount: float = 0
    currency: str = "USD"
    change: float = Field(default=0, description="Percent change from previous period")


class RevenueSources(CamelModel):
    ads: float = 0
    subscriptions: float = 0
    donations: float = 0
    sponsorships: float = 0
    merchandise: float = 0
    other: float = 0


class CostPerMille(CamelModel):
    rate: float = 0
    currency: str = "USD"


class Sponsor(CamelModel):
    name: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    amount: float | None = None
    currency: str = "USD"
    status: SponsorStatus = "active"


class Monetization(CamelModel):
    monthly_revenue: MonthlyRevenue = Field(default_factory=MonthlyRevenue)
    revenue_sources: RevenueSources = Field(default_factory=RevenueSources)
    cpm: CostPerMille = Field(default_factory=CostPerMille)
    sponsors: list[Sponsor] = Field(default_factory=list)


# AI insights

class InsightMetric(CamelModel):
    name: str | None = None
    value: Any = None
    change: float | None = None
    unit: str | None = None


class ActionItem(CamelModel):
    description: str | None = None
    is_completed: bool = False
    due_date: datetime | None = None


class AIInsight(CamelModel):
    """Generated text insight attached to a podcast."""

    id: str = Field(default_factory=lambda: uuid4().hex)
    type: InsightType
    title: str | None = None
    content: str | None = None
    date: datetime = Field(default_factory=_utcnow)
    metrics: list[InsightMetric] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    priority: Priority = "medium"
    is_actioned: bool = False
    action_items: list[ActionItem] = Field(default_factory=list)


# Aggregate record

class PodcastRecord(CamelModel):
    """
    Complete podcast document.

    Validated in full before every write so nested replacement updates
    cannot leave the stored document in an invalid shape.
    """

    id: UUID | None = None
    user_id: UUID = Field(alias="user")
    title: str = Field(min_length=1, max_length=100)
    description: str = Field(min_length=1)
    rss_feed: str | None = None
    source: SourceType = "rss"
    source_id: str = ""
    url: str | None = None
    website: str | None = None
    cover_image: str = "no-photo.jpg"
    category: Category
    explicit: bool = False

    total_downloads: int = 0
    platform_stats: PlatformStats = Field(default_factory=PlatformStats)
    episodes: list[Episode] = Field(default_factory=list)
    audience: Audience = Field(default_factory=Audience)
    chart_rankings: list[ChartRanking] = Field(default_factory=list)
    engagement_metrics: EngagementMetrics = Field(default_factory=EngagementMetrics)
    monetization: Monetization = Field(default_factory=Monetization)
    ai_insights: list[AIInsight] = Field(default_factory=list)

    statistics: dict[str, Any] = Field(default_factory=dict)
    provider_data: dict[str, Any] = Field(default_factory=dict)
    duration: str | None = None
    published_at: datetime | None = None

    created_at: datetime | None = None
    last_updated: datetime | None = None

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("duration", mode="before")
    @classmethod
    def coerce_duration(cls, value: Any) -> Any:
        if isinstance(value, (int, float)):
            return str(value)
        return value

    @model_validator(mode="after")
    def check_urls(self) -> "PodcastRecord":
        if self.source == "rss" and not self.rss_feed:
            raise ValueError("rssFeed is required for rss podcasts")
        if self.rss_feed and not is_valid_url(self.rss_feed):
            raise ValueError(f"{self.rss_feed} is not a valid URL!")
        if self.website and not is_valid_url(self.website):
            raise ValueError("Please use a valid URL with HTTP or HTTPS")
        return self


# Requests

class CreatePodcastRequest(CamelModel):
    """Request schema for adding a podcast to the caller's library."""

    title: str | None = None
    description: str | None = None
    source: SourceType | None = None
    source_id: str | None = None
    thumbnail: str | None = Field(default=None, description="Stored as the cover image")
    category: str | None = None
    explicit: bool | None = None
    rss_feed: str | None = None
    website: str | None = None
    url: str | None = None
    statistics: dict[str, Any] | None = Field(
        default=None,
        description="Raw provider statistics (viewCount, subscriberCount, commentCount, ...)",
    )
    published_at: datetime | None = None
    duration: str | int | None = None


class UpdatePodcastRequest(CamelModel):
    """Partial update; every provided top-level field replaces the stored one."""

    title: str | None = None
    description: str | None = None
    rss_feed: str | None = None
    source: SourceType | None = None
    source_id: str | None = None
    url: str | None = None
    website: str | None = None
    cover_image: str | None = None
    category: str | None = None
    explicit: bool | None = None
    total_downloads: int | None = None
    platform_stats: PlatformStats | None = None
    episodes: list[Episode] | None = None
    audience: Audience | None = None
    chart_rankings: list[ChartRanking] | None = None
    engagement_metrics: EngagementMetrics | None = None
    monetization: Monetization | None = None
    statistics: dict[str, Any] | None = None
    duration: str | int | None = None
    published_at: datetime | None = None
