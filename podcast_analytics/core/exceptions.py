"""
Exception hierarchy for the podcast analytics application.

Provides layered exception structure for domain-specific errors.
Every exception carries the HTTP status the API layer maps it to,
plus context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class PodcastAnalyticsError(Exception):
    """Base exception for all podcast analytics application errors."""

    status_code: int = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return the human-readable message."""
        return self.message


class ValidationError(PodcastAnalyticsError):
    """Raised when input validation fails."""

    status_code = 400

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class InvalidIdentifierError(ValidationError):
    """Raised when a path identifier is missing or malformed."""

    def __init__(self, raw: str | None, resource: str = "resource") -> None:
        if not raw or raw == "undefined":
            message = f"{resource.capitalize()} ID is required"
        else:
            message = f"Invalid {resource} ID format: {raw}"
        super().__init__(message, field="id", details={"value": raw})


class UserAlreadyExistsError(ValidationError):
    """Raised when registering an email that is already taken."""

    def __init__(self, email: str) -> None:
        super().__init__("A user with that email already exists", field="email")


class AuthenticationError(PodcastAnalyticsError):
    """Raised when credentials or tokens are missing or invalid."""

    status_code = 401


class NotAuthorizedError(PodcastAnalyticsError):
    """Raised when a user fails the ownership check on a record."""

    status_code = 401

    def __init__(self, user_id: str, action: str) -> None:
        """
        Initialize ownership failure.

        Args:
            user_id: Requesting user ID
            action: Phrase describing the attempted action
        """
        super().__init__(
            f"User {user_id} is not authorized to {action}",
            {"user_id": user_id},
        )


class ForbiddenRoleError(PodcastAnalyticsError):
    """Raised when the user's role is not allowed on a route."""

    status_code = 403

    def __init__(self, role: str) -> None:
        super().__init__(
            f"User role {role} is not authorized to access this route",
            {"role": role},
        )


class NotFoundError(PodcastAnalyticsError):
    """Raised when a requested resource does not exist."""

    status_code = 404


class PodcastNotFoundError(NotFoundError):
    """Raised when a podcast cannot be found."""

    def __init__(self, podcast_id: str) -> None:
        super().__init__(
            f"Podcast not found with id of {podcast_id}",
            {"podcast_id": podcast_id},
        )


class InsightNotFoundError(NotFoundError):
    """Raised when an AI insight cannot be found on a podcast."""

    def __init__(self, insight_id: str) -> None:
        super().__init__(
            f"Insight not found with id of {insight_id}",
            {"insight_id": insight_id},
        )


class UnsupportedSourceError(PodcastAnalyticsError):
    """Raised for URL sources the service cannot fetch yet."""

    status_code = 501


class ProviderNotConfiguredError(PodcastAnalyticsError):
    """Raised when an external provider has no usable credentials."""

    status_code = 500

    def __init__(self, message: str, provider: str) -> None:
        super().__init__(message, {"provider": provider})


class ProviderError(PodcastAnalyticsError):
    """Raised when an external provider call fails."""

    status_code = 500

    def __init__(
        self,
        message: str,
        provider: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        details["provider"] = provider
        super().__init__(message, details)


class InsightGenerationError(PodcastAnalyticsError):
    """Raised when generating an AI insight fails."""

    status_code = 500
