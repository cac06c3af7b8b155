"""
Tests for the AI insight, audience, podcast details and summary routers.
"""

import uuid

import pytest

from podcast_analytics.api.deps.dependencies import (
    get_audience_service,
    get_insight_service,
    get_podcast_details_service,
    get_summary_service,
)
from podcast_analytics.core.analytics import build_audience_insights
from podcast_analytics.core.exceptions import (
    InsightGenerationError,
    InsightNotFoundError,
    ProviderNotConfiguredError,
    UnsupportedSourceError,
    ValidationError,
)
from podcast_analytics.models.podcast import AIInsight, Audience, PodcastRecord
from podcast_analytics.models.summary import SummaryResult


class TestInsightEndpoints:
    def test_generate(self, client, as_user, override_service) -> None:
        as_user()
        service = override_service(get_insight_service)
        service.generate_insight.return_value = AIInsight(
            type="growth", title="Growth Insights - 1/2/2025", content="Advice"
        )

        response = client.post(
            "/api/v1/ai-insights/generate",
            json={"podcastId": str(uuid.uuid4()), "insightType": "growth"},
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["type"] == "growth"
        assert data["isActioned"] is False
        request = service.generate_insight.await_args.args[1]
        assert request.insight_type == "growth"

    def test_generate_rejects_unknown_type(self, client, as_user, override_service) -> None:
        as_user()
        override_service(get_insight_service)

        response = client.post(
            "/api/v1/ai-insights/generate",
            json={"podcastId": str(uuid.uuid4()), "insightType": "weather"},
        )

        assert response.status_code == 400

    @pytest.mark.parametrize(
        "error",
        [
            ProviderNotConfiguredError("Gemini API key is not configured.", provider="gemini"),
            InsightGenerationError("Error generating AI insights"),
        ],
    )
    def test_generate_failures_are_500(self, client, as_user, override_service, error) -> None:
        as_user()
        service = override_service(get_insight_service)
        service.generate_insight.side_effect = error

        response = client.post(
            "/api/v1/ai-insights/generate",
            json={"podcastId": str(uuid.uuid4())},
        )

        assert response.status_code == 500
        assert response.json()["error"] == error.message

    def test_list_with_count(self, client, as_user, override_service) -> None:
        as_user()
        service = override_service(get_insight_service)
        service.list_insights.return_value = [
            AIInsight(type="growth"),
            AIInsight(type="content"),
        ]

        response = client.get(f"/api/v1/ai-insights/{uuid.uuid4()}")

        assert response.json()["count"] == 2

    def test_update_and_delete_missing(self, client, as_user, override_service) -> None:
        as_user()
        service = override_service(get_insight_service)
        service.update_insight.side_effect = InsightNotFoundError("i1")
        service.delete_insight.side_effect = InsightNotFoundError("i1")
        podcast_id = uuid.uuid4()

        updated = client.put(f"/api/v1/ai-insights/{podcast_id}/i1", json={"isActioned": True})
        deleted = client.delete(f"/api/v1/ai-insights/{podcast_id}/i1")

        assert updated.status_code == 404
        assert deleted.status_code == 404
        assert deleted.json()["error"] == "Insight not found with id of i1"


class TestAudienceEndpoints:
    def test_get_insights(self, client, as_user, override_service, podcast_document) -> None:
        as_user()
        service = override_service(get_audience_service)
        record = PodcastRecord.model_validate(podcast_document(uuid.uuid4()))
        service.get_audience_insights.return_value = build_audience_insights(record)

        response = client.get(f"/api/v1/audience/{record.id}")

        data = response.json()["data"]
        assert data["totalListeners"] == 850
        assert data["platformDistribution"]["other"] == 150
        assert "18-24" in data["ageRanges"]

    def test_update(self, client, as_user, override_service) -> None:
        as_user()
        service = override_service(get_audience_service)
        service.update_audience.return_value = Audience(devices={"mobile": 70})

        response = client.put(
            f"/api/v1/audience/{uuid.uuid4()}",
            json={"devices": {"mobile": 70}, "ageRanges": {"25-34": 40}},
        )

        assert response.status_code == 200
        assert response.json()["data"]["devices"]["mobile"] == 70
        request = service.update_audience.await_args.args[2]
        assert request.age_ranges.age_25_34 == 40


class TestPodcastDetailsEndpoint:
    def test_saved(self, client, as_user, override_service) -> None:
        as_user()
        service = override_service(get_podcast_details_service)
        podcast_id = uuid.uuid4()
        service.fetch_details.return_value = {
            "data": {"id": "abc123", "type": "video"},
            "podcast_id": podcast_id,
            "message": "Podcast details retrieved and saved to your library",
        }

        response = client.post(
            "/api/v1/podcast-details",
            json={"podcastUrl": "https://youtu.be/abc123"},
        )

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "data": {"id": "abc123", "type": "video"},
            "podcastId": str(podcast_id),
            "message": "Podcast details retrieved and saved to your library",
        }

    def test_non_string_url_reaches_service(self, client, as_user, override_service) -> None:
        as_user()
        service = override_service(get_podcast_details_service)
        service.fetch_details.side_effect = ValidationError("Podcast URL must be a string")

        response = client.post("/api/v1/podcast-details", json={"podcastUrl": 12})

        assert response.status_code == 400
        assert service.fetch_details.await_args.args[1] == 12

    def test_rss_is_501(self, client, as_user, override_service) -> None:
        as_user()
        service = override_service(get_podcast_details_service)
        service.fetch_details.side_effect = UnsupportedSourceError(
            "RSS feeds are not yet supported."
        )

        response = client.post(
            "/api/v1/podcast-details",
            json={"podcastUrl": "https://feeds.example.com/rss"},
        )

        assert response.status_code == 501


class TestSummaryEndpoint:
    def test_summarize(self, client, as_user, override_service) -> None:
        as_user()
        service = override_service(get_summary_service)
        service.summarize.return_value = SummaryResult(summary="Short.", source="model")

        response = client.post(
            "/api/v1/summaries",
            json={"title": "Episode", "description": "Long description"},
        )

        assert response.json()["data"] == {"summary": "Short.", "source": "model"}

    def test_title_required(self, client, as_user, override_service) -> None:
        as_user()
        override_service(get_summary_service)

        response = client.post("/api/v1/summaries", json={"description": "No title"})

        assert response.status_code == 400
        assert response.json()["details"]["errors"][0]["field"] == "title"


class TestUnexpectedErrors:
    def test_unexpected_error_hidden(self, client, as_user, override_service) -> None:
        as_user()
        service = override_service(get_summary_service)
        service.summarize.side_effect = RuntimeError("connection pool exhausted")

        response = client.post("/api/v1/summaries", json={"title": "Episode"})

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Server Error", "details": None}
