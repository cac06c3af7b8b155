"""
Auth API endpoints.

Routes:
- POST /auth/register - Create account, returns token and sets cookie
- POST /auth/login - Log in, returns token and sets cookie
- GET /auth/me - Current user
- GET /auth/logout - Clear auth cookie

Dependencies: podcast_analytics.application.services, podcast_analytics.models
System role: Authentication HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Request, Response

from podcast_analytics.api.deps.dependencies import (
    AUTH_COOKIE,
    get_auth_service,
    get_current_user,
)
from podcast_analytics.api.rate_limit import rate_limited
from podcast_analytics.api.routers.router_utils import handle_api_errors
from podcast_analytics.application.services.auth_service import AuthService
from podcast_analytics.boundary.db.models import UserModel
from podcast_analytics.configs import Settings, get_settings
from podcast_analytics.models.auth import (
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    UserResponse,
)
from podcast_analytics.models.common import SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])

LOGOUT_COOKIE_SECONDS = 10


def set_token_cookie(response: Response, token: str, settings: Settings) -> None:
    """Mirror the bearer token in an httpOnly cookie."""
    response.set_cookie(
        key=AUTH_COOKIE,
        value=token,
        max_age=settings.auth.cookie_expire_days * 24 * 60 * 60,
        httponly=True,
        secure=settings.auth.cookie_secure,
        samesite="lax",
    )


@router.post("/register", response_model=TokenResponse)
@rate_limited
@handle_api_errors
async def register(
    request: Request,
    payload: RegisterRequest,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
) -> TokenResponse:
    """
    Register a new user.

    Raises:
        HTTPException(400): Email already registered or invalid input
    """
    _, token = await auth_service.register(payload)
    set_token_cookie(response, token, settings)
    return TokenResponse(token=token)


@router.post("/login", response_model=TokenResponse)
@rate_limited
@handle_api_errors
async def login(
    request: Request,
    payload: LoginRequest,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
) -> TokenResponse:
    """
    Log in with email and password.

    Raises:
        HTTPException(400): Email or password missing
        HTTPException(401): Invalid credentials
    """
    _, token = await auth_service.login(payload)
    set_token_cookie(response, token, settings)
    return TokenResponse(token=token)


@router.get("/me", response_model=SuccessResponse[UserResponse])
@rate_limited
async def get_me(
    request: Request,
    user: UserModel = Depends(get_current_user),
) -> SuccessResponse[UserResponse]:
    """Get the logged-in user."""
    return SuccessResponse(data=AuthService.to_response(user))


@router.get("/logout", response_model=SuccessResponse[dict])
@rate_limited
async def logout(
    request: Request,
    response: Response,
    user: UserModel = Depends(get_current_user),
) -> SuccessResponse[dict]:
    """Overwrite the auth cookie with a short-lived placeholder."""
    response.set_cookie(
        key=AUTH_COOKIE,
        value="none",
        max_age=LOGOUT_COOKIE_SECONDS,
        httponly=True,
    )
    logger.info("User logged out", extra={"user_id": str(user.id)})
    return SuccessResponse(data={})
