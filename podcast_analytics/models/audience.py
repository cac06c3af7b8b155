"""
Audience update schema.

Dependencies: pydantic
System role: Audience API contracts
"""

from podcast_analytics.models.common import CamelModel
from podcast_analytics.models.podcast import (
    AgeRanges,
    CountryShare,
    DeviceSplit,
    GenderSplit,
)


class AudienceUpdateRequest(CamelModel):
    """Top-level audience fields; each one provided replaces the stored value."""

    gender: GenderSplit | None = None
    age_ranges: AgeRanges | None = None
    countries: list[CountryShare] | None = None
    devices: DeviceSplit | None = None
