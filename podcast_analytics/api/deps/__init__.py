"""Dependency injection for API routes."""

from podcast_analytics.api.deps.dependencies import (
    authorize,
    get_audience_service,
    get_auth_service,
    get_current_user,
    get_insight_service,
    get_podcast_details_service,
    get_podcast_service,
    get_service_cache,
    get_summary_service,
)

__all__ = [
    "authorize",
    "get_audience_service",
    "get_auth_service",
    "get_current_user",
    "get_insight_service",
    "get_podcast_details_service",
    "get_podcast_service",
    "get_service_cache",
    "get_summary_service",
]
