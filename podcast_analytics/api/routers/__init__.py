"""API routers."""

from .ai_insights import router as ai_insights_router
from .audience import router as audience_router
from .auth import router as auth_router
from .health import router as health_router
from .podcast_details import router as podcast_details_router
from .podcasts import router as podcasts_router
from .summaries import router as summaries_router

__all__ = [
    "ai_insights_router",
    "audience_router",
    "auth_router",
    "health_router",
    "podcast_details_router",
    "podcasts_router",
    "summaries_router",
]
