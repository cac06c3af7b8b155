"""
Per-client request limit.

Every decorated route draws from one bucket per client address, sized
by RATE_LIMIT_DEFAULT and read per request so settings reloads apply.

Dependencies: slowapi
System role: Request throttling for the HTTP API

Usage:
    @router.get("/things")
    @rate_limited
    @handle_api_errors
    async def list_things(request: Request, ...): ...
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from podcast_analytics.configs import get_settings

API_SCOPE = "api"

limiter = Limiter(key_func=get_remote_address)


def current_limit() -> str:
    """Configured limit expression, e.g. '100 per 10 minutes'."""
    return get_settings().rate_limit.default


rate_limited = limiter.shared_limit(current_limit, scope=API_SCOPE)
