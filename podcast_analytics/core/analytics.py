"""
Analytics views over a podcast document.

Pure functions that turn a validated PodcastRecord into the read models
served by the analytics, audience, and history endpoints.

Dependencies: podcast_analytics.models
System role: Derived analytics computation
"""

from datetime import date, datetime, timedelta, timezone

from podcast_analytics.models.analytics import (
    AudienceInsights,
    EngagementSummary,
    EpisodeSummary,
    HistoryEntry,
    ListeningBehavior,
    PlatformDistribution,
    PodcastAnalytics,
    TrendSeries,
)
from podcast_analytics.models.podcast import Episode, PodcastRecord

PLACEHOLDER_THUMBNAIL = "https://via.placeholder.com/150"
DEFAULT_HISTORY_DURATION = "1:00:00"

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def _as_utc(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _summarize_episode(episode: Episode) -> EpisodeSummary:
    return EpisodeSummary(
        title=episode.title,
        publish_date=episode.publish_date,
        downloads=episode.downloads.total,
        completion_rate=episode.engagement.completion_rate or 0,
        average_listen_duration=episode.engagement.average_listen_duration or 0,
    )


def recent_episodes(record: PodcastRecord, limit: int = 5) -> list[EpisodeSummary]:
    """Newest episodes first; undated episodes sort last."""
    ordered = sorted(
        record.episodes,
        key=lambda e: _as_utc(e.publish_date) or _EPOCH,
        reverse=True,
    )
    return [_summarize_episode(e) for e in ordered[:limit]]


def top_episodes(record: PodcastRecord, limit: int = 5) -> list[EpisodeSummary]:
    """Episodes with the most downloads first."""
    ordered = sorted(record.episodes, key=lambda e: e.downloads.total, reverse=True)
    return [_summarize_episode(e) for e in ordered[:limit]]


def build_analytics(record: PodcastRecord) -> PodcastAnalytics:
    """
    Build the headline analytics view.

    Args:
        record: Validated podcast document

    Returns:
        PodcastAnalytics: Totals, platform stats, audience, engagement, recent episodes
    """
    metrics = record.engagement_metrics
    return PodcastAnalytics(
        total_downloads=record.total_downloads,
        platform_stats=record.platform_stats,
        audience=record.audience,
        engagement=EngagementSummary(
            average_listen_duration=metrics.average_listen_duration,
            completion_rate=metrics.completion_rate,
            subscribers=metrics.subscribers,
        ),
        recent_episodes=recent_episodes(record),
    )


def daily_download_trend(
    record: PodcastRecord,
    today: date,
    days: int = 7,
) -> TrendSeries:
    """
    Sum per-episode daily download counts over a trailing window.

    Args:
        record: Validated podcast document
        today: Last day of the window (inclusive)
        days: Window length

    Returns:
        TrendSeries: Labels like "Jan 5" and one total per day, oldest first
    """
    window = [today - timedelta(days=offset) for offset in range(days - 1, -1, -1)]
    totals = {day: 0 for day in window}

    for episode in record.episodes:
        for point in episode.downloads.daily:
            point_date = _as_utc(point.date)
            if point_date is None:
                continue
            day = point_date.date()
            if day in totals:
                totals[day] += point.count

    return TrendSeries(
        labels=[f"{day:%b} {day.day}" for day in window],
        data=[totals[day] for day in window],
    )


def build_audience_insights(
    record: PodcastRecord,
    today: date | None = None,
) -> AudienceInsights:
    """
    Build the audience view.

    Args:
        record: Validated podcast document
        today: Reference day for the trend window (defaults to today, UTC)

    Returns:
        AudienceInsights: Demographics, behaviour, top episodes, platform split, trends
    """
    today = today or datetime.now(timezone.utc).date()
    audience = record.audience
    metrics = record.engagement_metrics
    stats = record.platform_stats

    named_platforms = (
        stats.spotify.downloads
        + stats.apple.downloads
        + stats.google.downloads
        + stats.youtube.downloads
    )

    top_countries = sorted(
        audience.countries,
        key=lambda c: c.percentage or 0,
        reverse=True,
    )[:5]

    return AudienceInsights(
        total_listeners=sum(c.listeners or 0 for c in audience.countries),
        total_subscribers=metrics.subscribers.total,
        new_subscribers=metrics.subscribers.weekly_change,
        gender=audience.gender,
        age_ranges=audience.age_ranges,
        top_countries=top_countries,
        devices=audience.devices,
        listening_behavior=ListeningBehavior(
            average_session_duration=metrics.average_listen_duration,
            completion_rate=metrics.completion_rate,
        ),
        top_episodes=top_episodes(record),
        platform_distribution=PlatformDistribution(
            spotify=stats.spotify.downloads,
            apple=stats.apple.downloads,
            google=stats.google.downloads,
            youtube=stats.youtube.downloads,
            other=max(record.total_downloads - named_platforms, 0),
        ),
        trends=daily_download_trend(record, today),
    )


def format_history_entry(record: PodcastRecord) -> HistoryEntry:
    """Compact row for the history list."""
    thumbnail = record.cover_image
    if not thumbnail or thumbnail == "no-photo.jpg":
        thumbnail = PLACEHOLDER_THUMBNAIL

    return HistoryEntry(
        id=record.id,
        title=record.title,
        description=record.description,
        source=record.source,
        thumbnail=thumbnail,
        created_at=record.created_at,
        updated_at=record.last_updated,
        total_plays=record.total_downloads or 0,
        duration=record.duration or DEFAULT_HISTORY_DURATION,
    )


def fallback_summary(title: str, description: str) -> str:
    """
    Cheap summary used when the summarization model is unavailable.

    Args:
        title: Video or episode title
        description: Video or episode description

    Returns:
        str: "<first 10 title words>: <first 30 description words>..."
    """
    title_part = " ".join(title.split()[:10])
    description_part = " ".join(description.split()[:30])
    return f"{title_part}: {description_part}..."
