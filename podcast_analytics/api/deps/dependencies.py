"""
Dependency injection container.

Factory functions for FastAPI dependencies: the current user, role
guards, cached provider clients, and per-request services.

Dependencies: podcast_analytics.configs, podcast_analytics.application, podcast_analytics.boundary
System role: DI container for service injection
"""

from typing import Callable

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from podcast_analytics.application.services import (
    AudienceService,
    AuthService,
    InsightService,
    PodcastDetailsService,
    PodcastService,
    SummaryService,
)
from podcast_analytics.boundary.db.connection import get_async_db
from podcast_analytics.boundary.db.models import UserModel
from podcast_analytics.boundary.providers import (
    GeminiClient,
    SpotifyClient,
    SummarizerClient,
    YouTubeClient,
)
from podcast_analytics.configs import Settings, get_settings
from podcast_analytics.core.exceptions import ForbiddenRoleError

AUTH_COOKIE = "token"


class ServiceCache:
    """
    Container for cached provider clients.

    A client property returns None when its provider has no usable
    credentials; services report that as a configuration error.
    """

    def __init__(self) -> None:
        self._youtube_client = None
        self._spotify_client = None
        self._gemini_client = None
        self._summarizer_client = None

    @property
    def youtube_client(self) -> YouTubeClient | None:
        """Get cached YouTube client."""
        providers = get_settings().providers
        if self._youtube_client is None and providers.youtube_configured:
            self._youtube_client = YouTubeClient(api_key=providers.youtube_api_key)
        return self._youtube_client

    @property
    def spotify_client(self) -> SpotifyClient | None:
        """Get cached Spotify client."""
        providers = get_settings().providers
        if self._spotify_client is None and providers.spotify_configured:
            self._spotify_client = SpotifyClient(
                client_id=providers.spotify_client_id,
                client_secret=providers.spotify_client_secret,
                market=providers.spotify_market,
            )
        return self._spotify_client

    @property
    def gemini_client(self) -> GeminiClient | None:
        """Get cached Gemini client."""
        providers = get_settings().providers
        if self._gemini_client is None and providers.gemini_configured:
            self._gemini_client = GeminiClient(
                api_key=providers.gemini_api_key,
                model=providers.gemini_model,
            )
        return self._gemini_client

    @property
    def summarizer_client(self) -> SummarizerClient:
        """Get cached summarization client (works without a token)."""
        if self._summarizer_client is None:
            providers = get_settings().providers
            self._summarizer_client = SummarizerClient(
                api_url=providers.summary_api_url,
                token=providers.huggingface_api_token,
                timeout=providers.summary_timeout_seconds,
            )
        return self._summarizer_client

    def clear(self) -> None:
        """Clear all cached instances."""
        self._youtube_client = None
        self._spotify_client = None
        self._gemini_client = None
        self._summarizer_client = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_auth_service(
    db: AsyncSession = Depends(get_async_db),
    settings: Settings = Depends(get_settings),
) -> AuthService:
    """
    Get auth service instance.

    Args:
        db: Async database session (injected via Depends)
        settings: Application settings (injected via Depends)

    Returns:
        AuthService: Auth service instance
    """
    return AuthService(db=db, settings=settings.auth)


def extract_token(request: Request) -> str | None:
    """Bearer token from the Authorization header, falling back to the auth cookie."""
    authorization = request.headers.get("Authorization", "")
    if authorization.startswith("Bearer "):
        return authorization[len("Bearer "):].strip() or None
    return request.cookies.get(AUTH_COOKIE)


async def get_current_user(
    request: Request,
    auth_service: AuthService = Depends(get_auth_service),
) -> UserModel:
    """
    Resolve the authenticated user.

    Raises:
        AuthenticationError: If no valid token is presented
    """
    return await auth_service.authenticate_token(extract_token(request))


def authorize(*roles: str) -> Callable:
    """
    Build a dependency that admits only the given roles.

    Usage:
        @router.post("", dependencies=[Depends(authorize("user", "admin"))])
    """

    async def role_guard(user: UserModel = Depends(get_current_user)) -> UserModel:
        if user.role not in roles:
            raise ForbiddenRoleError(user.role)
        return user

    return role_guard


def get_podcast_service(db: AsyncSession = Depends(get_async_db)) -> PodcastService:
    """
    Get podcast service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        PodcastService: Podcast service instance
    """
    return PodcastService(db=db)


def get_insight_service(db: AsyncSession = Depends(get_async_db)) -> InsightService:
    """
    Get AI insight service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        InsightService: Insight service with the cached Gemini client
    """
    return InsightService(db=db, gemini=get_service_cache().gemini_client)


def get_audience_service(db: AsyncSession = Depends(get_async_db)) -> AudienceService:
    """Get audience service instance."""
    return AudienceService(db=db)


def get_podcast_details_service(
    db: AsyncSession = Depends(get_async_db),
) -> PodcastDetailsService:
    """
    Get podcast details service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        PodcastDetailsService: Service with cached YouTube and Spotify clients
    """
    cache = get_service_cache()
    return PodcastDetailsService(
        db=db,
        youtube=cache.youtube_client,
        spotify=cache.spotify_client,
    )


def get_summary_service() -> SummaryService:
    """Get summary service instance."""
    return SummaryService(summarizer=get_service_cache().summarizer_client)
