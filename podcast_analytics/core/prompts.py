"""
Prompt templates for AI insight generation.

Each insight type focuses the model on a slice of the podcast document.

Dependencies: json
System role: Prompt construction for the insight generator
"""

import json
from datetime import date
from typing import Any

from podcast_analytics.models.podcast import PodcastRecord

GROWTH_PROMPT = (
    "Analyze the following podcast data and provide growth insights and recommendations. "
    "Focus on trends, opportunities for audience expansion, and strategies to increase "
    "listenership. Be specific and data-driven in your analysis.\n\nPodcast Data: {data}"
)

CONTENT_PROMPT = (
    "Analyze the following podcast data and provide content insights. Identify which topics "
    "or types of episodes perform best, suggest content improvements, and recommend new "
    "content ideas based on the audience demographics and engagement metrics.\n\n"
    "Podcast Data: {data}"
)

AUDIENCE_PROMPT = (
    "Analyze the following podcast audience data and provide detailed insights. Identify key "
    "audience segments, their preferences, and opportunities to better engage with them. "
    "Suggest specific strategies to grow and retain the audience.\n\nAudience Data: {data}"
)

MONETIZATION_PROMPT = (
    "Analyze the following podcast monetization data and provide insights. Evaluate current "
    "revenue streams, suggest additional monetization opportunities, and provide "
    "recommendations to increase revenue while maintaining audience satisfaction.\n\n"
    "Monetization Data: {data}"
)

GENERAL_PROMPT = (
    "Provide a comprehensive analysis of the following podcast data, including key "
    "performance indicators, audience insights, and actionable recommendations for "
    "improvement.\n\nPodcast Data: {data}"
)


def _to_json(value: Any) -> str:
    return json.dumps(value, indent=2, default=str)


def podcast_snapshot(record: PodcastRecord) -> dict[str, Any]:
    """Subset of the document shared with the model for broad analyses."""
    return {
        "title": record.title,
        "category": record.category,
        "totalDownloads": record.total_downloads,
        "platformStats": record.platform_stats.model_dump(mode="json", by_alias=True),
        "audience": record.audience.model_dump(mode="json", by_alias=True),
        "engagementMetrics": record.engagement_metrics.model_dump(mode="json", by_alias=True),
        "episodesCount": len(record.episodes),
        "lastUpdated": record.last_updated.isoformat() if record.last_updated else None,
    }


def build_insight_prompt(insight_type: str | None, record: PodcastRecord) -> str:
    """
    Build the prompt for an insight type.

    Args:
        insight_type: growth, content, audience, monetization; anything else is general
        record: Validated podcast document

    Returns:
        str: Prompt text with the relevant data embedded as JSON
    """
    if insight_type == "audience":
        return AUDIENCE_PROMPT.format(
            data=_to_json(record.audience.model_dump(mode="json", by_alias=True))
        )
    if insight_type == "monetization":
        return MONETIZATION_PROMPT.format(
            data=_to_json(record.monetization.model_dump(mode="json", by_alias=True))
        )

    template = {
        "growth": GROWTH_PROMPT,
        "content": CONTENT_PROMPT,
    }.get(insight_type or "", GENERAL_PROMPT)
    return template.format(data=_to_json(podcast_snapshot(record)))


def insight_title(insight_type: str | None, today: date) -> str:
    """Title such as "Growth Insights - 3/14/2025"."""
    label = insight_type.capitalize() if insight_type else "General"
    return f"{label} Insights - {today.month}/{today.day}/{today.year}"
