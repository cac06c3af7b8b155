"""
Podcast details API endpoint.

Routes:
- POST /podcast-details - Fetch metadata for a YouTube or Spotify URL

Dependencies: podcast_analytics.application.services, podcast_analytics.models
System role: URL metadata fetch HTTP API
"""

from fastapi import APIRouter, Depends, Request

from podcast_analytics.api.deps.dependencies import (
    get_current_user,
    get_podcast_details_service,
)
from podcast_analytics.api.rate_limit import rate_limited
from podcast_analytics.api.routers.router_utils import handle_api_errors
from podcast_analytics.application.services.podcast_details_service import (
    PodcastDetailsService,
)
from podcast_analytics.boundary.db.models import UserModel
from podcast_analytics.models.podcast_details import (
    PodcastDetailsRequest,
    PodcastDetailsResponse,
)

router = APIRouter(prefix="/podcast-details", tags=["podcast-details"])


@router.post("", response_model=PodcastDetailsResponse)
@rate_limited
@handle_api_errors
async def fetch_podcast_details(
    request: Request,
    payload: PodcastDetailsRequest,
    user: UserModel = Depends(get_current_user),
    details_service: PodcastDetailsService = Depends(get_podcast_details_service),
) -> PodcastDetailsResponse:
    """
    Fetch provider metadata and save it to the caller's library.

    Raises:
        HTTPException(400): Missing, non-string, or unparseable URL
        HTTPException(404): Resource not found or private
        HTTPException(500): Provider not configured or upstream failure
        HTTPException(501): RSS feeds
    """
    result = await details_service.fetch_details(user, payload.podcast_url)
    return PodcastDetailsResponse(**result)
