"""
User and authentication schemas.

Dependencies: pydantic
System role: Auth API contracts
"""

import uuid
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from podcast_analytics.models.common import CamelModel

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[A-Za-z]{2,}$"

# bcrypt only hashes the first 72 bytes
MAX_PASSWORD_BYTES = 72


class RegisterRequest(BaseModel):
    """Request schema for creating an account."""

    name: str = Field(..., min_length=1, max_length=50, description="Display name")
    email: str = Field(..., pattern=EMAIL_PATTERN, max_length=255)
    password: str = Field(..., min_length=6, max_length=72)
    role: Literal["user"] = Field(
        default="user",
        description="Self-registration only creates regular users",
    )

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class LoginRequest(BaseModel):
    """Request schema for logging in. Missing fields are reported as 400."""

    email: str | None = None
    password: str | None = None


class UserResponse(CamelModel):
    """Public view of a user."""

    id: uuid.UUID
    name: str
    email: str
    role: str
    total_downloads: int
    created_at: datetime


class TokenResponse(BaseModel):
    """Response for register/login."""

    success: bool = True
    token: str
