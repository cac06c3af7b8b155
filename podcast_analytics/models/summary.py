"""
Text summary schemas.

Dependencies: pydantic
System role: Summarization API contracts
"""

from typing import Literal

from pydantic import Field

from podcast_analytics.models.common import CamelModel


class SummaryRequest(CamelModel):
    """Request schema for summarizing a video or episode."""

    title: str = Field(..., min_length=1)
    description: str = ""
    transcript: str = ""


class SummaryResult(CamelModel):
    summary: str
    source: Literal["model", "fallback"]
