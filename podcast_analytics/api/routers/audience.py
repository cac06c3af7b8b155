"""
Audience API endpoints.

Routes:
- GET /audience/{podcast_id} - Audience insights
- PUT /audience/{podcast_id} - Update stored audience data

Dependencies: podcast_analytics.application.services, podcast_analytics.models
System role: Audience HTTP API
"""

from fastapi import APIRouter, Depends, Request

from podcast_analytics.api.deps.dependencies import get_audience_service, get_current_user
from podcast_analytics.api.rate_limit import rate_limited
from podcast_analytics.api.routers.router_utils import handle_api_errors
from podcast_analytics.application.services.audience_service import AudienceService
from podcast_analytics.boundary.db.models import UserModel
from podcast_analytics.models.analytics import AudienceInsights
from podcast_analytics.models.audience import AudienceUpdateRequest
from podcast_analytics.models.common import SuccessResponse
from podcast_analytics.models.podcast import Audience

router = APIRouter(prefix="/audience", tags=["audience"])


@router.get("/{podcast_id}", response_model=SuccessResponse[AudienceInsights])
@rate_limited
@handle_api_errors
async def get_audience_insights(
    request: Request,
    podcast_id: str,
    user: UserModel = Depends(get_current_user),
    audience_service: AudienceService = Depends(get_audience_service),
) -> SuccessResponse[AudienceInsights]:
    """Audience demographics, behaviour, top episodes and trends."""
    insights = await audience_service.get_audience_insights(user, podcast_id)
    return SuccessResponse(data=insights)


@router.put("/{podcast_id}", response_model=SuccessResponse[Audience])
@rate_limited
@handle_api_errors
async def update_audience(
    request: Request,
    podcast_id: str,
    payload: AudienceUpdateRequest,
    user: UserModel = Depends(get_current_user),
    audience_service: AudienceService = Depends(get_audience_service),
) -> SuccessResponse[Audience]:
    """Replace the provided audience fields."""
    audience = await audience_service.update_audience(user, podcast_id, payload)
    return SuccessResponse(data=audience)
