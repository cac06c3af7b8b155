"""
AI insight request schemas.

Dependencies: pydantic
System role: AI insight API contracts
"""

from pydantic import Field

from podcast_analytics.models.common import CamelModel
from podcast_analytics.models.podcast import (
    ActionItem,
    InsightMetric,
    InsightType,
    Priority,
)


class GenerateInsightRequest(CamelModel):
    """Request schema for generating a new insight."""

    podcast_id: str | None = Field(default=None, description="Target podcast ID")
    insight_type: InsightType | None = Field(
        default=None,
        description="Focus of the analysis; general when omitted",
    )


class UpdateInsightRequest(CamelModel):
    """Fields merged over an existing insight. The insight ID never changes."""

    type: InsightType | None = None
    title: str | None = None
    content: str | None = None
    metrics: list[InsightMetric] | None = None
    recommendations: list[str] | None = None
    priority: Priority | None = None
    is_actioned: bool | None = None
    action_items: list[ActionItem] | None = None
