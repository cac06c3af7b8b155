"""
Podcast metadata fetch schemas.

Dependencies: pydantic
System role: URL-based metadata fetch API contracts
"""

import uuid
from typing import Any

from pydantic import Field

from podcast_analytics.models.common import CamelModel


class PodcastDetailsRequest(CamelModel):
    """
    Request schema for fetching metadata from a pasted URL.

    Typed loosely so a missing or non-string URL can be reported with a
    specific message instead of a generic schema error.
    """

    podcast_url: Any = Field(default=None, description="YouTube or Spotify URL")


class PodcastDetailsResponse(CamelModel):
    """Provider payload plus the library record it was saved to, if any."""

    success: bool = True
    data: dict[str, Any]
    podcast_id: uuid.UUID | None = None
    message: str
