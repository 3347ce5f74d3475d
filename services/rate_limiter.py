import logging

import redis
from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.middleware.base import BaseHTTPMiddleware

from core.config import Settings

logger = logging.getLogger(__name__)

RATE_LIMIT_MESSAGE = "Too many requests from this IP, please try again later."

# liveness checks never count against a client's window
RATE_LIMIT_EXEMPT_PATHS = ("/health",)


def _check_redis(url: str) -> bool:
    try:
        r = redis.from_url(url, socket_connect_timeout=2)
        r.ping()
        return True
    except Exception as e:
        logger.debug(f"Redis check failed: {e}")
        return False


def get_identifier(request: Request) -> str:
    """Client IP, taking the first hop of X-Forwarded-For when behind a proxy"""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return get_remote_address(request) or "unknown"


def create_limiter(settings: Settings) -> Limiter:
    """
    Per-app limiter with one window per client shared by all routes.
    Uses Redis when REDIS_URL is set and reachable, in-memory storage otherwise.
    The limits are checked by RateLimitMiddleware.
    """
    storage_uri = "memory://"
    if settings.redis_url:
        if _check_redis(settings.redis_url):
            storage_uri = settings.redis_url
        else:
            logger.warning("Redis unavailable for rate limiting, using in-memory storage")

    return Limiter(
        key_func=get_identifier,
        application_limits=[settings.rate_limit],
        storage_uri=storage_uri,
        strategy="fixed-window",
        headers_enabled=True,
    )


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    """429 in the standard error envelope, with X-RateLimit-* and Retry-After headers"""
    logger.warning(f"Rate limit exceeded for {get_identifier(request)} on {request.url.path}")
    response = JSONResponse(
        status_code=429,
        content={
            "error": RATE_LIMIT_MESSAGE,
            "status": "error",
            "statusCode": 429,
        },
    )
    limiter = request.app.state.limiter
    view_rate_limit = getattr(request.state, "view_rate_limit", None)
    if view_rate_limit is not None:
        response = limiter._inject_headers(response, view_rate_limit)
    return response


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    Checks the application limits of app.state.limiter on every request,
    matched or not, except RATE_LIMIT_EXEMPT_PATHS.

    Exemption goes by path rather than by resolved route handler, so
    routers mounted with include_router are limited like any other route.
    """

    async def dispatch(self, request: Request, call_next):
        limiter: Limiter = request.app.state.limiter
        if not limiter.enabled or request.url.path in RATE_LIMIT_EXEMPT_PATHS:
            return await call_next(request)

        try:
            limiter._check_request_limit(request, None, True)
        except RateLimitExceeded as exc:
            return rate_limit_exceeded_handler(request, exc)

        response = await call_next(request)
        return limiter._inject_headers(response, request.state.view_rate_limit)
