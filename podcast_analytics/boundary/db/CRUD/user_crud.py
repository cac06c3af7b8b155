"""
User CRUD operations.

Dependencies: sqlalchemy, podcast_analytics.boundary.db.models
System role: Account persistence operations
"""

from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from podcast_analytics.boundary.db.CRUD.base_crud import BaseCRUD
from podcast_analytics.boundary.db.models.user_model import UserModel


class UserCRUD(BaseCRUD[UserModel]):
    """CRUD operations for UserModel."""

    def __init__(self) -> None:
        super().__init__(UserModel)

    async def get_by_email(self, session: AsyncSession, email: str) -> UserModel | None:
        """
        Look up a user by email, case-insensitively.

        Emails are stored lower-cased, so the lookup lower-cases its input.
        """
        stmt = select(UserModel).where(UserModel.email == email.strip().lower())
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def set_total_downloads(
        self,
        session: AsyncSession,
        user_id: UUID,
        total: int,
    ) -> None:
        """
        Store a recomputed download aggregate for a user.

        Args:
            session: Async database session
            user_id: User primary key
            total: New aggregate value
        """
        stmt = (
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(total_downloads=total)
        )
        await session.execute(stmt)


user_crud = UserCRUD()
