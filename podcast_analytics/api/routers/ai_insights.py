"""
AI insight API endpoints.

Routes:
- POST /ai-insights/generate - Generate an insight with Gemini
- GET /ai-insights/{podcast_id} - List insights, newest first
- PUT /ai-insights/{podcast_id}/{insight_id} - Update insight
- DELETE /ai-insights/{podcast_id}/{insight_id} - Delete insight

Dependencies: podcast_analytics.application.services, podcast_analytics.models
System role: AI insight HTTP API
"""

from fastapi import APIRouter, Depends, Request

from podcast_analytics.api.deps.dependencies import get_current_user, get_insight_service
from podcast_analytics.api.rate_limit import rate_limited
from podcast_analytics.api.routers.router_utils import handle_api_errors
from podcast_analytics.application.services.insight_service import InsightService
from podcast_analytics.boundary.db.models import UserModel
from podcast_analytics.models.common import SuccessResponse
from podcast_analytics.models.insight import GenerateInsightRequest, UpdateInsightRequest
from podcast_analytics.models.podcast import AIInsight

router = APIRouter(prefix="/ai-insights", tags=["ai-insights"])


@router.post("/generate", response_model=SuccessResponse[AIInsight])
@rate_limited
@handle_api_errors
async def generate_insight(
    request: Request,
    payload: GenerateInsightRequest,
    user: UserModel = Depends(get_current_user),
    insight_service: InsightService = Depends(get_insight_service),
) -> SuccessResponse[AIInsight]:
    """
    Generate and save an AI insight for a podcast.

    Raises:
        HTTPException(400): Missing or malformed podcast ID
        HTTPException(404): Podcast not found
        HTTPException(500): Gemini not configured or generation failed
    """
    insight = await insight_service.generate_insight(user, payload)
    return SuccessResponse(data=insight)


@router.get("/{podcast_id}", response_model=SuccessResponse[list[AIInsight]])
@rate_limited
@handle_api_errors
async def list_insights(
    request: Request,
    podcast_id: str,
    user: UserModel = Depends(get_current_user),
    insight_service: InsightService = Depends(get_insight_service),
) -> SuccessResponse[list[AIInsight]]:
    """All insights for a podcast."""
    insights = await insight_service.list_insights(user, podcast_id)
    return SuccessResponse(data=insights, count=len(insights))


@router.put("/{podcast_id}/{insight_id}", response_model=SuccessResponse[AIInsight])
@rate_limited
@handle_api_errors
async def update_insight(
    request: Request,
    podcast_id: str,
    insight_id: str,
    payload: UpdateInsightRequest,
    user: UserModel = Depends(get_current_user),
    insight_service: InsightService = Depends(get_insight_service),
) -> SuccessResponse[AIInsight]:
    """Merge fields into an insight."""
    insight = await insight_service.update_insight(user, podcast_id, insight_id, payload)
    return SuccessResponse(data=insight)


@router.delete("/{podcast_id}/{insight_id}", response_model=SuccessResponse[dict])
@rate_limited
@handle_api_errors
async def delete_insight(
    request: Request,
    podcast_id: str,
    insight_id: str,
    user: UserModel = Depends(get_current_user),
    insight_service: InsightService = Depends(get_insight_service),
) -> SuccessResponse[dict]:
    """Delete an insight."""
    await insight_service.delete_insight(user, podcast_id, insight_id)
    return SuccessResponse(data={})
