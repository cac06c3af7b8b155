"""
Summary API endpoint.

Routes:
- POST /summaries - Summarize a video or episode

Dependencies: podcast_analytics.application.services, podcast_analytics.models
System role: Summarization HTTP API
"""

from fastapi import APIRouter, Depends, Request

from podcast_analytics.api.deps.dependencies import get_current_user, get_summary_service
from podcast_analytics.api.rate_limit import rate_limited
from podcast_analytics.api.routers.router_utils import handle_api_errors
from podcast_analytics.application.services.summary_service import SummaryService
from podcast_analytics.boundary.db.models import UserModel
from podcast_analytics.models.common import SuccessResponse
from podcast_analytics.models.summary import SummaryRequest, SummaryResult

router = APIRouter(prefix="/summaries", tags=["summaries"])


@router.post("", response_model=SuccessResponse[SummaryResult])
@rate_limited
@handle_api_errors
async def summarize(
    request: Request,
    payload: SummaryRequest,
    user: UserModel = Depends(get_current_user),
    summary_service: SummaryService = Depends(get_summary_service),
) -> SuccessResponse[SummaryResult]:
    """Summarize with the hosted model, or a truncation fallback."""
    result = await summary_service.summarize(payload)
    return SuccessResponse(data=result)
