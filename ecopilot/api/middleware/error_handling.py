# 📄 File: ecopilot/api/middleware/error_handling.py
# 🧭 Purpose (Layman Explanation):
# Catches anything that goes wrong and turns it into a friendly error message,
# always given in both French and English.
# 🧪 Purpose (Technical Summary):
# FastAPI exception handlers producing the bilingual error envelope
# {error: {code, message, message_fr, message_en, details, timestamp, request_id}}
# for domain exceptions, request validation errors, HTTP errors (404 routes)
# and unhandled exceptions.
# 🔗 Dependencies:
# FastAPI, starlette, ecopilot.shared.core.exceptions, ecopilot.shared.core.i18n
# 🔄 Connected Modules / Calls From:
# ecopilot.main (handler registration), rate_limiting (429 responses)

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ecopilot.shared.config.settings import get_settings
from ecopilot.shared.core.exceptions import EcoPilotException
from ecopilot.shared.core.i18n import bilingual, get_current_locale, resolve_locale

logger = logging.getLogger(__name__)

_HTTP_ERROR_KEYS = {
    status.HTTP_404_NOT_FOUND: ("ROUTE_NOT_FOUND", "errors.route_not_found"),
    status.HTTP_405_METHOD_NOT_ALLOWED: ("METHOD_NOT_ALLOWED", "errors.route_not_found"),
    status.HTTP_429_TOO_MANY_REQUESTS: ("RATE_LIMIT_EXCEEDED", "errors.rate_limit_exceeded"),
}


def _request_locale(request: Request) -> str:
    return resolve_locale(getattr(request.state, "locale", None) or get_current_locale())


def build_error_response(
    request: Request,
    status_code: int,
    code: str,
    messages: Dict[str, str],
    details: Optional[Dict[str, Any]] = None,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    """
    Render the bilingual error envelope.

    Args:
        request: Current request (locale and request id are read from its state)
        status_code: HTTP status code
        code: Machine readable error code
        messages: Message per locale ({"fr": ..., "en": ...})
        details: Extra structured information
        headers: Extra response headers
    """
    locale = _request_locale(request)
    content = {
        "error": {
            "code": code,
            "message": messages.get(locale) or messages.get("fr"),
            "message_fr": messages.get("fr"),
            "message_en": messages.get("en"),
            "details": details or {},
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "request_id": getattr(request.state, "request_id", None),
        }
    }
    return JSONResponse(status_code=status_code, content=jsonable_encoder(content), headers=headers)


async def ecopilot_exception_handler(request: Request, exc: EcoPilotException) -> JSONResponse:
    """Handle custom EcoPilot application exceptions."""
    if exc.status_code >= 500:
        logger.error(f"❌ {exc.error_code}: {exc.message}")
    else:
        logger.info(f"↩️ {exc.error_code}: {exc.message}")

    headers = None
    retry_after = exc.details.get("retry_after")
    if retry_after:
        headers = {"Retry-After": str(retry_after)}

    return build_error_response(
        request,
        exc.status_code,
        exc.error_code,
        exc.localized_messages(),
        exc.details,
        headers,
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle request body / query validation failures."""
    errors = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ()) if part != "body"),
            "message": error.get("msg"),
            "type": error.get("type"),
        }
        for error in exc.errors()
    ]
    return build_error_response(
        request,
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "VALIDATION_ERROR",
        bilingual("errors.validation_failed"),
        {"errors": errors},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle HTTP errors raised by routing (unknown routes) or endpoints."""
    code, key = _HTTP_ERROR_KEYS.get(exc.status_code, ("HTTP_ERROR", "errors.internal"))
    details: Dict[str, Any] = {"requestedPath": str(request.url.path)}
    if exc.status_code not in _HTTP_ERROR_KEYS and exc.detail:
        details["detail"] = exc.detail
    return build_error_response(
        request,
        exc.status_code,
        code,
        bilingual(key),
        details,
        getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle 500 Internal Server Error."""
    logger.error(f"💥 Internal server error: {exc}", exc_info=exc)
    settings = get_settings()
    return build_error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_SERVER_ERROR",
        bilingual("errors.internal"),
        {"error_type": type(exc).__name__} if settings.DEBUG else {},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(EcoPilotException, ecopilot_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
