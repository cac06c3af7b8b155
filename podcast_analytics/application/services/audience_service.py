"""
Audience service orchestrator.

Dependencies: podcast_analytics.core.analytics
System role: Audience insight use case orchestration
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from podcast_analytics.application.services.podcast_documents import (
    load_owned_podcast,
    save_record,
    to_record,
    validate_model,
)
from podcast_analytics.boundary.db.models import UserModel
from podcast_analytics.core.analytics import build_audience_insights
from podcast_analytics.models.analytics import AudienceInsights
from podcast_analytics.models.audience import AudienceUpdateRequest
from podcast_analytics.models.podcast import Audience

logger = logging.getLogger(__name__)


class AudienceService:
    """Audience service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_audience_insights(
        self,
        user: UserModel,
        podcast_id: str,
    ) -> AudienceInsights:
        """Audience view derived from the stored document."""
        podcast = await load_owned_podcast(
            self.db, podcast_id, user, "view audience data for this podcast"
        )
        return build_audience_insights(to_record(podcast))

    async def update_audience(
        self,
        user: UserModel,
        podcast_id: str,
        request: AudienceUpdateRequest,
    ) -> Audience:
        """
        Shallow-merge audience fields over the stored audience.

        Args:
            user: Current user
            podcast_id: Raw podcast ID
            request: Audience fields to replace

        Returns:
            Audience: Stored audience after the update
        """
        podcast = await load_owned_podcast(
            self.db, podcast_id, user, "update audience data for this podcast"
        )
        record = to_record(podcast)

        merged = record.audience.model_dump()
        merged.update(request.model_dump(exclude_unset=True))
        audience = validate_model(Audience, merged)

        saved = await save_record(self.db, podcast, record.model_copy(update={"audience": audience}))
        logger.info("Audience updated", extra={"podcast_id": str(podcast.id)})
        return saved.audience
