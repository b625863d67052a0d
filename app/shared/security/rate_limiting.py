"""
Rate limiting configuration and setup.

Uses slowapi to enforce per-endpoint rate limits on the secrets API.
Limits are keyed on the client address.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

HTTP_429 = 429

limiter = Limiter(key_func=get_remote_address)


async def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a clean JSON response.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response with a clear error message.
    """
    return JSONResponse(
        status_code=HTTP_429,
        content={"error": "Rate limit exceeded", "detail": str(exc.detail)},
    )
