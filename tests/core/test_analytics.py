"""
Tests for the analytics views derived from a podcast document.
"""

import uuid
from datetime import date

import pytest

from podcast_analytics.core.analytics import (
    PLACEHOLDER_THUMBNAIL,
    build_analytics,
    build_audience_insights,
    daily_download_trend,
    fallback_summary,
    format_history_entry,
)
from podcast_analytics.models.podcast import PodcastRecord


@pytest.fixture
def record(podcast_document) -> PodcastRecord:
    return PodcastRecord.model_validate(podcast_document(uuid.uuid4()))


class TestBuildAnalytics:
    def test_recent_episodes_newest_first_undated_last(self, record: PodcastRecord) -> None:
        analytics = build_analytics(record)

        titles = [e.title for e in analytics.recent_episodes]
        assert titles == ["New", "Old", "Undated"]
        assert analytics.recent_episodes[0].downloads == 500
        assert analytics.recent_episodes[2].completion_rate == 0

    def test_engagement_summary(self, record: PodcastRecord) -> None:
        analytics = build_analytics(record)

        assert analytics.total_downloads == 1000
        assert analytics.engagement.completion_rate == 65
        assert analytics.engagement.subscribers.total == 120

    def test_limits_recent_episodes_to_five(self, podcast_document) -> None:
        episodes = [{"title": f"Ep {i}", "downloads": {"total": i}} for i in range(8)]
        record = PodcastRecord.model_validate(
            podcast_document(uuid.uuid4(), episodes=episodes)
        )
        assert len(build_analytics(record).recent_episodes) == 5


class TestBuildAudienceInsights:
    def test_totals_come_from_stored_data(self, record: PodcastRecord) -> None:
        insights = build_audience_insights(record, today=date(2024, 3, 3))

        assert insights.total_listeners == 850
        assert insights.total_subscribers == 120
        assert insights.new_subscribers == 7
        assert insights.listening_behavior.average_session_duration == 900

    def test_platform_distribution_other_is_remainder(self, record: PodcastRecord) -> None:
        insights = build_audience_insights(record, today=date(2024, 3, 3))

        distribution = insights.platform_distribution
        assert distribution.youtube == 250
        assert distribution.other == 1000 - (300 + 200 + 100 + 250)

    def test_other_never_negative(self, podcast_document) -> None:
        record = PodcastRecord.model_validate(
            podcast_document(uuid.uuid4(), total_downloads=10)
        )
        insights = build_audience_insights(record, today=date(2024, 3, 3))
        assert insights.platform_distribution.other == 0

    def test_top_episodes_by_downloads(self, record: PodcastRecord) -> None:
        insights = build_audience_insights(record, today=date(2024, 3, 3))

        assert [e.title for e in insights.top_episodes] == ["New", "Old", "Undated"]
        assert insights.top_episodes[0].average_listen_duration == 1200

    def test_top_countries_sorted_by_share(self, podcast_document) -> None:
        countries = [
            {"country": c, "percentage": p, "listeners": p * 10}
            for c, p in [("FR", 5), ("US", 40), ("DE", 10), ("UK", 20), ("JP", 15), ("BR", 10)]
        ]
        record = PodcastRecord.model_validate(
            podcast_document(uuid.uuid4(), audience={"countries": countries})
        )
        insights = build_audience_insights(record, today=date(2024, 3, 3))

        assert [c.country for c in insights.top_countries][:2] == ["US", "UK"]
        assert len(insights.top_countries) == 5


class TestDailyDownloadTrend:
    def test_sums_daily_counts_across_episodes(self, podcast_document) -> None:
        episodes = [
            {"downloads": {"daily": [
                {"date": "2024-03-01T10:00:00Z", "count": 4},
                {"date": "2024-03-03T10:00:00Z", "count": 1},
            ]}},
            {"downloads": {"daily": [
                {"date": "2024-03-01T18:00:00Z", "count": 6},
                {"date": "2024-02-01T00:00:00Z", "count": 100},
            ]}},
        ]
        record = PodcastRecord.model_validate(
            podcast_document(uuid.uuid4(), episodes=episodes)
        )

        trend = daily_download_trend(record, today=date(2024, 3, 3))

        assert trend.labels == [
            "Feb 26", "Feb 27", "Feb 28", "Feb 29", "Mar 1", "Mar 2", "Mar 3",
        ]
        assert trend.data == [0, 0, 0, 0, 10, 0, 1]


class TestFormatHistoryEntry:
    def test_defaults(self, record: PodcastRecord) -> None:
        entry = format_history_entry(record)

        assert entry.thumbnail == PLACEHOLDER_THUMBNAIL
        assert entry.total_plays == 1000
        assert entry.duration == "1:00:00"
        assert entry.source == "youtube"

    def test_keeps_real_cover_and_duration(self, podcast_document) -> None:
        record = PodcastRecord.model_validate(
            podcast_document(
                uuid.uuid4(),
                cover_image="https://img.example.com/a.jpg",
                duration="PT12M",
            )
        )
        entry = format_history_entry(record)

        assert entry.thumbnail == "https://img.example.com/a.jpg"
        assert entry.duration == "PT12M"


def test_fallback_summary_truncates_words() -> None:
    title = " ".join(f"t{i}" for i in range(15))
    description = " ".join(f"d{i}" for i in range(40))

    summary = fallback_summary(title, description)

    assert summary.startswith("t0 t1")
    assert "t10" not in summary
    assert summary.endswith("d29...")
