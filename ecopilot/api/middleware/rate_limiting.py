# 📄 File: ecopilot/api/middleware/rate_limiting.py
# 🧭 Purpose (Layman Explanation):
# Stops a single visitor from hammering EcoPilot with too many requests, and tells
# them politely (in French or English) when to come back.
# 🧪 Purpose (Technical Summary):
# slowapi integration: builds the per-application Limiter keyed on client IP with the
# global default limit, installs SlowAPIMiddleware and renders RateLimitExceeded
# as the bilingual error envelope with a Retry-After header.
# 🔗 Dependencies:
# slowapi, FastAPI, ecopilot.api.middleware.error_handling
# 🔄 Connected Modules / Calls From:
# ecopilot.main (middleware registration)

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from ecopilot.shared.config.settings import Settings
from ecopilot.shared.core.i18n import bilingual

from .error_handling import build_error_response

logger = logging.getLogger(__name__)


def build_limiter(settings: Settings) -> Limiter:
    """
    Create the application rate limiter.

    Each application gets its own limiter (and in-memory storage), so test
    clients never share counters.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.RATE_LIMIT],
        enabled=settings.RATE_LIMIT_ENABLED,
    )


def _retry_after_seconds(exc: RateLimitExceeded) -> Optional[int]:
    limit = getattr(exc, "limit", None)
    item = getattr(limit, "limit", None)
    if item is None:
        return None
    return int(item.get_expiry())


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Render slowapi rejections with the bilingual error envelope."""
    retry_after = _retry_after_seconds(exc)
    client = get_remote_address(request)
    logger.warning(f"🚦 Rate limit exceeded for {client} on {request.url.path}: {exc.detail}")

    details = {"limit": str(exc.detail)}
    headers = None
    if retry_after:
        details["retry_after"] = retry_after
        headers = {"Retry-After": str(retry_after)}

    return build_error_response(
        request,
        status.HTTP_429_TOO_MANY_REQUESTS,
        "RATE_LIMIT_EXCEEDED",
        bilingual("errors.rate_limit_exceeded"),
        details,
        headers,
    )


def setup_rate_limiting(app: FastAPI, settings: Settings) -> Limiter:
    limiter = build_limiter(settings)
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)
    logger.info(f"🚦 Rate limiting {'enabled' if settings.RATE_LIMIT_ENABLED else 'disabled'}: {settings.RATE_LIMIT}")
    return limiter
