"""Per-client rate limiting for the public scoring endpoints."""

import os

from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded

DEFAULT_SCORING_RATE_LIMIT = "60/minute"


def _rate_limits_disabled() -> bool:
    return (os.getenv("DISABLE_RATE_LIMITS") or "").lower() == "true"


def _get_client_ip(request: Request) -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        parts = [ip.strip() for ip in forwarded.split(",") if ip.strip()]
        if parts:
            return parts[-1]
    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip
    return request.client.host if request.client else ""


limiter = Limiter(key_func=_get_client_ip)


def scoring_rate_limit() -> str:
    if _rate_limits_disabled():
        return "1000/second"
    return (os.getenv("SCORING_RATE_LIMIT") or "").strip() or DEFAULT_SCORING_RATE_LIMIT


async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    detail = exc.detail if isinstance(exc.detail, str) else ""
    if detail:
        message = f"rate limit exceeded: {detail}"
    else:
        message = "rate limit exceeded: please wait before submitting another request."
    return JSONResponse(
        status_code=429,
        content={
            "detail": message,
            "code": "rate_limit_exceeded",
        },
    )
