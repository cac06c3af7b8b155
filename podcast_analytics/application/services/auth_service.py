"""
Auth service orchestrator.

Registration, login, and bearer token resolution.

Dependencies: podcast_analytics.core.security, podcast_analytics.boundary.db.CRUD
System role: Account and authentication use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from podcast_analytics.boundary.db.CRUD.user_crud import user_crud
from podcast_analytics.boundary.db.models import UserModel
from podcast_analytics.configs.auth import AuthSettings
from podcast_analytics.core.exceptions import (
    AuthenticationError,
    UserAlreadyExistsError,
    ValidationError,
)
from podcast_analytics.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from podcast_analytics.models.auth import LoginRequest, RegisterRequest, UserResponse

logger = logging.getLogger(__name__)

NOT_AUTHORIZED = "Not authorized to access this route"


class AuthService:
    """Auth service orchestrator."""

    def __init__(self, db: AsyncSession, settings: AuthSettings) -> None:
        """
        Initialize auth service.

        Args:
            db: Async SQLAlchemy session
            settings: Token signing configuration
        """
        self.db = db
        self.settings = settings

    def issue_token(self, user: UserModel) -> str:
        return create_access_token(user.id, self.settings)

    async def register(self, request: RegisterRequest) -> tuple[UserModel, str]:
        """
        Create an account and sign a token for it.

        Args:
            request: Name, email, password

        Returns:
            tuple: (user, token)

        Raises:
            UserAlreadyExistsError: If the email is taken
        """
        email = request.email.strip().lower()
        if await user_crud.get_by_email(self.db, email) is not None:
            raise UserAlreadyExistsError(email)

        try:
            user = await user_crud.create(
                self.db,
                name=request.name.strip(),
                email=email,
                password_hash=hash_password(request.password),
                role=request.role,
            )
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            raise UserAlreadyExistsError(email) from e

        logger.info("User registered", extra={"user_id": str(user.id)})
        return user, self.issue_token(user)

    async def login(self, request: LoginRequest) -> tuple[UserModel, str]:
        """
        Check credentials and sign a token.

        Raises:
            ValidationError: If email or password is missing
            AuthenticationError: If the credentials do not match
        """
        if not request.email or not request.password:
            raise ValidationError("Please provide an email and password")

        user = await user_crud.get_by_email(self.db, request.email)
        if user is None or not verify_password(request.password, user.password_hash):
            logger.info("Login failed")
            raise AuthenticationError("Invalid credentials")

        logger.info("User logged in", extra={"user_id": str(user.id)})
        return user, self.issue_token(user)

    async def authenticate_token(self, token: str | None) -> UserModel:
        """
        Resolve a bearer token to its user.

        Args:
            token: Encoded JWT from the header or cookie

        Returns:
            UserModel: Token owner

        Raises:
            AuthenticationError: If the token is missing, invalid, or its user is gone
        """
        if not token or token == "none":
            raise AuthenticationError(NOT_AUTHORIZED)

        user_id = decode_access_token(token, self.settings)
        try:
            user_uuid = UUID(user_id)
        except ValueError:
            raise AuthenticationError(NOT_AUTHORIZED) from None

        user = await user_crud.get_by_id(self.db, user_uuid)
        if user is None:
            raise AuthenticationError(NOT_AUTHORIZED)
        return user

    @staticmethod
    def to_response(user: UserModel) -> UserResponse:
        """Public view of a user (no password hash)."""
        return UserResponse(
            id=user.id,
            name=user.name,
            email=user.email,
            role=user.role,
            total_downloads=user.total_downloads,
            created_at=user.created_at,
        )
