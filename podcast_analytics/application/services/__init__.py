"""
Application services.

One orchestrator per API resource. Services own the transaction
boundary and raise domain exceptions for the API layer to map.
"""

from podcast_analytics.application.services.audience_service import AudienceService
from podcast_analytics.application.services.auth_service import AuthService
from podcast_analytics.application.services.insight_service import InsightService
from podcast_analytics.application.services.podcast_details_service import (
    PodcastDetailsService,
)
from podcast_analytics.application.services.podcast_service import PodcastService
from podcast_analytics.application.services.summary_service import SummaryService

__all__ = [
    "AudienceService",
    "AuthService",
    "InsightService",
    "PodcastDetailsService",
    "PodcastService",
    "SummaryService",
]
