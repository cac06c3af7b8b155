"""
Identifier parsing.

Path identifiers arrive as raw strings so malformed values can be
reported as 400 instead of failing inside the database layer.

Dependencies: uuid
System role: Request identifier validation
"""

from uuid import UUID

from podcast_analytics.core.exceptions import InvalidIdentifierError


def parse_identifier(raw: str | None, resource: str = "resource") -> UUID:
    """
    Parse a path or body identifier into a UUID.

    Args:
        raw: Raw identifier string
        resource: Resource name used in the error message

    Returns:
        UUID: Parsed identifier

    Raises:
        InvalidIdentifierError: If the value is missing, "undefined", or not a UUID
    """
    if isinstance(raw, UUID):
        return raw
    if not raw or raw == "undefined":
        raise InvalidIdentifierError(raw, resource)
    try:
        return UUID(str(raw))
    except ValueError:
        raise InvalidIdentifierError(raw, resource) from None
