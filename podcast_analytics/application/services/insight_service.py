"""
AI insight service orchestrator.

Generates insights with Gemini from a podcast's stored analytics and
manages the insight list embedded in the podcast document.

Dependencies: podcast_analytics.boundary.providers, podcast_analytics.core.prompts
System role: AI insight use case orchestration
"""

import logging
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from podcast_analytics.application.services.podcast_documents import (
    load_owned_podcast,
    save_record,
    to_record,
    validate_model,
)
from podcast_analytics.boundary.db.models import UserModel
from podcast_analytics.boundary.providers.gemini_client import GeminiClient
from podcast_analytics.core.exceptions import (
    InsightGenerationError,
    InsightNotFoundError,
    ProviderError,
    ProviderNotConfiguredError,
)
from podcast_analytics.core.prompts import build_insight_prompt, insight_title
from podcast_analytics.models.insight import GenerateInsightRequest, UpdateInsightRequest
from podcast_analytics.models.podcast import AIInsight, PodcastRecord

logger = logging.getLogger(__name__)


def _insight_index(record: PodcastRecord, insight_id: str) -> int:
    for index, insight in enumerate(record.ai_insights):
        if insight.id == insight_id:
            return index
    raise InsightNotFoundError(insight_id)


def _sort_key(insight: AIInsight) -> datetime:
    if insight.date.tzinfo is None:
        return insight.date.replace(tzinfo=timezone.utc)
    return insight.date


class InsightService:
    """AI insight service orchestrator."""

    def __init__(self, db: AsyncSession, gemini: GeminiClient | None = None) -> None:
        """
        Initialize insight service.

        Args:
            db: Async SQLAlchemy session
            gemini: Gemini client, None when no API key is configured
        """
        self.db = db
        self.gemini = gemini

    async def generate_insight(
        self,
        user: UserModel,
        request: GenerateInsightRequest,
    ) -> AIInsight:
        """
        Generate an insight and prepend it to the podcast's list.

        Args:
            user: Current user
            request: Target podcast and insight type

        Returns:
            AIInsight: The saved insight

        Raises:
            InvalidIdentifierError: If podcastId is missing or malformed
            ProviderNotConfiguredError: If Gemini has no API key
            InsightGenerationError: If the model call fails
        """
        podcast = await load_owned_podcast(
            self.db,
            request.podcast_id,
            user,
            "generate insights for this podcast",
        )
        if self.gemini is None:
            raise ProviderNotConfiguredError(
                "Gemini API key is not configured. Please add GEMINI_API_KEY to your environment.",
                provider="gemini",
            )

        record = to_record(podcast)
        insight_type = request.insight_type or "general"
        prompt = build_insight_prompt(request.insight_type, record)

        logger.info(
            f"{__name__}:generate_insight - START podcast={podcast.id} type={insight_type}"
        )
        try:
            content = await self.gemini.generate(prompt)
        except ProviderError as e:
            raise InsightGenerationError(
                "Error generating AI insights",
                details=e.details,
            ) from e

        insight = AIInsight(
            type=insight_type,
            title=insight_title(request.insight_type, datetime.now(timezone.utc).date()),
            content=content,
            priority="medium",
            is_actioned=False,
        )
        record = record.model_copy(update={"ai_insights": [insight, *record.ai_insights]})
        await save_record(self.db, podcast, record)

        logger.info(f"{__name__}:generate_insight - END insight={insight.id}")
        return insight

    async def list_insights(self, user: UserModel, podcast_id: str) -> list[AIInsight]:
        """Insights for a podcast, newest first."""
        podcast = await load_owned_podcast(
            self.db, podcast_id, user, "view insights for this podcast"
        )
        insights = to_record(podcast).ai_insights
        return sorted(insights, key=_sort_key, reverse=True)

    async def update_insight(
        self,
        user: UserModel,
        podcast_id: str,
        insight_id: str,
        request: UpdateInsightRequest,
    ) -> AIInsight:
        """
        Merge fields into an insight, keeping its ID.

        Raises:
            InsightNotFoundError: If the podcast has no insight with that ID
            ValidationError: If the merged insight is invalid
        """
        podcast = await load_owned_podcast(
            self.db, podcast_id, user, "update insights for this podcast"
        )
        record = to_record(podcast)
        index = _insight_index(record, insight_id)

        merged = record.ai_insights[index].model_dump()
        merged.update(request.model_dump(exclude_unset=True))
        merged["id"] = insight_id
        updated = validate_model(AIInsight, merged)

        insights = list(record.ai_insights)
        insights[index] = updated
        await save_record(self.db, podcast, record.model_copy(update={"ai_insights": insights}))
        return updated

    async def delete_insight(self, user: UserModel, podcast_id: str, insight_id: str) -> None:
        """Remove an insight from a podcast."""
        podcast = await load_owned_podcast(
            self.db, podcast_id, user, "delete insights for this podcast"
        )
        record = to_record(podcast)
        index = _insight_index(record, insight_id)

        insights = [i for position, i in enumerate(record.ai_insights) if position != index]
        await save_record(self.db, podcast, record.model_copy(update={"ai_insights": insights}))
