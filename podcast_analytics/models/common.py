"""
Common response models and utilities.

Generic response wrappers, error schemas, and the camelCase base model
shared by every API contract.

Dependencies: pydantic
System role: Common API response structures
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_serializer
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys, accepting snake_case input too."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class PageRef(BaseModel):
    """Pointer to an adjacent page."""

    page: int
    limit: int


class Pagination(BaseModel):
    """Adjacent page pointers for list endpoints."""

    next: PageRef | None = None
    prev: PageRef | None = None

    @model_serializer(mode="wrap")
    def omit_missing_pages(self, handler) -> dict[str, Any]:
        return {key: value for key, value in handler(self).items() if value is not None}


class SuccessResponse(BaseModel, Generic[T]):
    """Generic success response wrapper."""

    success: bool = True
    data: T
    count: int | None = None
    message: str | None = None
    pagination: Pagination | None = None


class ErrorResponse(BaseModel):
    """Error response schema."""

    success: bool = False
    error: str = Field(description="Error message")
    details: dict[str, Any] | None = Field(default=None, description="Additional error context")
