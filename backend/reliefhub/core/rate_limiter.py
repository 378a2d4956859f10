"""
Rate Limiting for the ReliefHub API
===================================
Implements rate limiting using slowapi.

Storage defaults to in-process memory; point RATE_LIMIT_STORAGE_URI at a
shared backend (e.g. redis://) when running several workers.

Write endpoints that contend on shared rows (pledges) carry their own
limit via PLEDGE_RATE_LIMIT.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from fastapi import Request
from fastapi.responses import JSONResponse

from reliefhub.core.config import settings
from reliefhub.core.logging_config import logger


def get_actor_identifier(request: Request) -> str:
    """
    Get rate limit key.

    Priority:
    1. Authenticated actor ID (set on request.state by the auth dependency)
    2. IP address (for anonymous callers)
    """
    actor_id = getattr(request.state, 'actor_id', None)
    if actor_id:
        return f"actor:{actor_id}"
    return f"ip:{get_remote_address(request)}"


limiter = Limiter(
    key_func=get_actor_identifier,
    default_limits=[f"{settings.RATE_LIMIT_PER_MINUTE}/minute"],
    storage_uri=settings.RATE_LIMIT_STORAGE_URI,
    strategy="fixed-window",
    enabled=settings.RATE_LIMIT_ENABLED,
)


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    """Return a JSON 429 with a Retry-After hint"""
    logger.warning(
        f"[RateLimit] Exceeded for {get_actor_identifier(request)}: {exc.detail}"
    )

    return JSONResponse(
        status_code=429,
        content={
            "success": False,
            "error": {
                "code": "RATE_LIMITED",
                "message": "Too many requests. Please slow down.",
                "details": {"limit": str(exc.detail)},
                "retryable": True,
            },
        },
        headers={"Retry-After": "60"},
    )


def pledge_rate_limit():
    """Limit applied to pledge submissions"""
    return limiter.limit(settings.PLEDGE_RATE_LIMIT, key_func=get_actor_identifier)
