"""
Test suite for SummaryService.

System role: Verification of summarization with fallback
"""

from unittest.mock import AsyncMock

import pytest

from podcast_analytics.application.services.summary_service import (
    SummaryService,
    build_summary_input,
)
from podcast_analytics.core.exceptions import ProviderError
from podcast_analytics.models.summary import SummaryRequest


@pytest.fixture
def request_body() -> SummaryRequest:
    return SummaryRequest(
        title="How charts work",
        description="We explain podcast charts in detail",
        transcript="x" * 1500,
    )


def test_input_truncates_transcript(request_body: SummaryRequest) -> None:
    text = build_summary_input(request_body)

    assert text.startswith("How charts work. We explain podcast charts in detail. ")
    assert text.count("x") == 1000


def test_input_without_transcript_has_no_trailing_space() -> None:
    text = build_summary_input(SummaryRequest(title="Pilot", description="First episode"))

    assert text == "Pilot. First episode."


class TestSummarize:
    @pytest.mark.asyncio
    async def test_model_summary(self, request_body: SummaryRequest) -> None:
        summarizer = AsyncMock()
        summarizer.summarize.return_value = "Charts, explained."

        result = await SummaryService(summarizer).summarize(request_body)

        assert result.summary == "Charts, explained."
        assert result.source == "model"

    @pytest.mark.asyncio
    async def test_falls_back_on_provider_error(self, request_body: SummaryRequest) -> None:
        summarizer = AsyncMock()
        summarizer.summarize.side_effect = ProviderError(
            "Summarization request failed", provider="huggingface"
        )

        result = await SummaryService(summarizer).summarize(request_body)

        assert result.source == "fallback"
        assert result.summary == "How charts work: We explain podcast charts in detail..."

    @pytest.mark.asyncio
    async def test_falls_back_on_empty_summary(self, request_body: SummaryRequest) -> None:
        summarizer = AsyncMock()
        summarizer.summarize.return_value = ""

        result = await SummaryService(summarizer).summarize(request_body)

        assert result.source == "fallback"
