"""
User ORM model.

Dependencies: sqlalchemy, podcast_analytics.boundary.db.base
System role: Account persistence
"""

from sqlalchemy import BigInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from podcast_analytics.boundary.db.base import Base, TimestampMixin, UUIDMixin


class UserModel(Base, UUIDMixin, TimestampMixin):
    """
    Registered user.

    Attributes:
        id: UUID primary key
        name: Display name (50 char limit)
        email: Unique, stored lower-cased
        password_hash: bcrypt hash, never serialized
        role: "user" or "admin"
        total_downloads: Sum of total_downloads across the user's podcasts
    """

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(String(50), nullable=False)

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
    )

    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    role: Mapped[str] = mapped_column(String(16), nullable=False, default="user")

    total_downloads: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
        default=0,
        doc="Aggregate refreshed after podcast writes",
    )
