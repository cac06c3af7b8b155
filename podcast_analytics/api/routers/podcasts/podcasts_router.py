"""
Podcast API endpoints.

Routes:
- GET /podcasts - List podcasts (filter, sort, paginate)
- POST /podcasts - Add podcast to library
- GET /podcasts/test/history - Recently analysed podcasts
- DELETE /podcasts/test/history/{id} - Remove podcast from history
- GET /podcasts/{id} - Get single podcast
- PUT /podcasts/{id} - Partially update podcast
- DELETE /podcasts/{id} - Delete podcast
- GET /podcasts/{id}/analytics - Headline analytics
- GET /podcasts/{id}/rankings - Chart rankings

Dependencies: podcast_analytics.application.services, podcast_analytics.models
System role: Podcast library HTTP API
"""

import logging
from typing import Literal

from fastapi import APIRouter, Depends, Query, Request, Response, status

from podcast_analytics.api.deps.dependencies import (
    authorize,
    get_current_user,
    get_podcast_service,
)
from podcast_analytics.api.rate_limit import rate_limited
from podcast_analytics.api.routers.router_utils import handle_api_errors
from podcast_analytics.application.services.podcast_service import PodcastService
from podcast_analytics.boundary.db.models import UserModel
from podcast_analytics.models.analytics import HistoryEntry, PodcastAnalytics
from podcast_analytics.models.common import SuccessResponse
from podcast_analytics.models.podcast import (
    ChartRanking,
    CreatePodcastRequest,
    PodcastRecord,
    UpdatePodcastRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/podcasts", tags=["podcasts"])

EMPTY_HISTORY_MESSAGE = "No podcasts found in your history"


@router.get("", response_model=SuccessResponse[list[PodcastRecord]])
@rate_limited
@handle_api_errors
async def list_podcasts(
    request: Request,
    source: Literal["rss", "youtube", "spotify"] | None = None,
    category: str | None = None,
    sort: str | None = Query(default=None, description='e.g. "-createdAt" or "title,-totalDownloads"'),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=25, ge=1, le=100),
    owner: str | None = Query(default=None, alias="user", description="Admin only: user ID"),
    user: UserModel = Depends(get_current_user),
    podcast_service: PodcastService = Depends(get_podcast_service),
) -> SuccessResponse[list[PodcastRecord]]:
    """List podcasts visible to the caller."""
    result = await podcast_service.list_podcasts(
        user,
        source=source,
        category=category,
        sort=sort,
        page=page,
        limit=limit,
        owner=owner,
    )
    return SuccessResponse(
        data=result["data"],
        count=result["count"],
        pagination=result["pagination"],
    )


@router.post(
    "",
    response_model=SuccessResponse[PodcastRecord],
    status_code=status.HTTP_201_CREATED,
)
@rate_limited
@handle_api_errors
async def create_podcast(
    request: Request,
    payload: CreatePodcastRequest,
    response: Response,
    user: UserModel = Depends(authorize("user", "admin")),
    podcast_service: PodcastService = Depends(get_podcast_service),
) -> SuccessResponse[PodcastRecord]:
    """
    Add a podcast to the caller's library.

    Returns 200 with the existing record when the same source and source ID
    is already in the library.

    Raises:
        HTTPException(400): Invalid podcast document
        HTTPException(403): Role not allowed
    """
    record, created = await podcast_service.create_podcast(user, payload)
    if not created:
        response.status_code = status.HTTP_200_OK
        return SuccessResponse(data=record, message="Podcast already exists in your library")
    return SuccessResponse(data=record)


@router.get("/test/history", response_model=SuccessResponse[list[HistoryEntry]])
@rate_limited
@handle_api_errors
async def get_history(
    request: Request,
    user: UserModel = Depends(get_current_user),
    podcast_service: PodcastService = Depends(get_podcast_service),
) -> SuccessResponse[list[HistoryEntry]]:
    """The caller's 10 most recently added podcasts."""
    entries = await podcast_service.get_history(user)
    return SuccessResponse(
        data=entries,
        count=len(entries),
        message=None if entries else EMPTY_HISTORY_MESSAGE,
    )


@router.delete("/test/history/{podcast_id}", response_model=SuccessResponse[dict])
@rate_limited
@handle_api_errors
async def remove_from_history(
    request: Request,
    podcast_id: str,
    user: UserModel = Depends(get_current_user),
    podcast_service: PodcastService = Depends(get_podcast_service),
) -> SuccessResponse[dict]:
    """
    Remove a podcast from the caller's history.

    Raises:
        HTTPException(400): Malformed podcast ID
        HTTPException(404): Podcast not found
    """
    await podcast_service.remove_from_history(user, podcast_id)
    return SuccessResponse(data={}, message="Podcast removed from history successfully")


@router.get("/{podcast_id}", response_model=SuccessResponse[PodcastRecord])
@rate_limited
@handle_api_errors
async def get_podcast(
    request: Request,
    podcast_id: str,
    user: UserModel = Depends(get_current_user),
    podcast_service: PodcastService = Depends(get_podcast_service),
) -> SuccessResponse[PodcastRecord]:
    """
    Get a single podcast.

    Raises:
        HTTPException(400): Malformed podcast ID
        HTTPException(401): Caller does not own the podcast
        HTTPException(404): Podcast not found
    """
    record = await podcast_service.get_podcast(user, podcast_id)
    return SuccessResponse(data=record)


@router.put("/{podcast_id}", response_model=SuccessResponse[PodcastRecord])
@rate_limited
@handle_api_errors
async def update_podcast(
    request: Request,
    podcast_id: str,
    payload: UpdatePodcastRequest,
    user: UserModel = Depends(get_current_user),
    podcast_service: PodcastService = Depends(get_podcast_service),
) -> SuccessResponse[PodcastRecord]:
    """Partially update a podcast; the merged document is re-validated."""
    record = await podcast_service.update_podcast(user, podcast_id, payload)
    return SuccessResponse(data=record)


@router.delete("/{podcast_id}", response_model=SuccessResponse[dict])
@rate_limited
@handle_api_errors
async def delete_podcast(
    request: Request,
    podcast_id: str,
    user: UserModel = Depends(get_current_user),
    podcast_service: PodcastService = Depends(get_podcast_service),
) -> SuccessResponse[dict]:
    """Delete a podcast."""
    await podcast_service.delete_podcast(user, podcast_id)
    return SuccessResponse(data={})


@router.get("/{podcast_id}/analytics", response_model=SuccessResponse[PodcastAnalytics])
@rate_limited
@handle_api_errors
async def get_podcast_analytics(
    request: Request,
    podcast_id: str,
    user: UserModel = Depends(get_current_user),
    podcast_service: PodcastService = Depends(get_podcast_service),
) -> SuccessResponse[PodcastAnalytics]:
    """Headline analytics for a podcast."""
    analytics = await podcast_service.get_analytics(user, podcast_id)
    return SuccessResponse(data=analytics)


@router.get("/{podcast_id}/rankings", response_model=SuccessResponse[list[ChartRanking]])
@rate_limited
@handle_api_errors
async def get_podcast_rankings(
    request: Request,
    podcast_id: str,
    user: UserModel = Depends(get_current_user),
    podcast_service: PodcastService = Depends(get_podcast_service),
) -> SuccessResponse[list[ChartRanking]]:
    """Chart rankings for a podcast."""
    rankings = await podcast_service.get_rankings(user, podcast_id)
    return SuccessResponse(data=rankings)
