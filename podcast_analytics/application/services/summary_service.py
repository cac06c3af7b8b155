"""
Summary service orchestrator.

Summarizes a video or episode with the hosted model, falling back to a
word-truncation summary when the model is unavailable.

Dependencies: podcast_analytics.boundary.providers, podcast_analytics.core.analytics
System role: Summarization use case orchestration
"""

import logging

from podcast_analytics.boundary.providers.summarizer_client import SummarizerClient
from podcast_analytics.core.analytics import fallback_summary
from podcast_analytics.core.exceptions import ProviderError
from podcast_analytics.models.summary import SummaryRequest, SummaryResult

logger = logging.getLogger(__name__)

TRANSCRIPT_CHAR_LIMIT = 1000


def build_summary_input(request: SummaryRequest) -> str:
    """Title, description and the start of the transcript as one passage."""
    text = f"{request.title}. {request.description}. {request.transcript[:TRANSCRIPT_CHAR_LIMIT]}"
    return text.strip()


class SummaryService:
    """Summary service orchestrator."""

    def __init__(self, summarizer: SummarizerClient) -> None:
        self.summarizer = summarizer

    async def summarize(self, request: SummaryRequest) -> SummaryResult:
        """
        Summarize a video or episode.

        Never fails on upstream errors; the fallback summary is returned instead.

        Args:
            request: Title, description and optional transcript

        Returns:
            SummaryResult: Summary text and whether it came from the model
        """
        try:
            summary = await self.summarizer.summarize(build_summary_input(request))
        except ProviderError as e:
            logger.warning(
                "Summarization failed, using fallback",
                extra={"error": e.message},
            )
            summary = ""

        if summary:
            return SummaryResult(summary=summary, source="model")
        return SummaryResult(
            summary=fallback_summary(request.title, request.description),
            source="fallback",
        )
