# 📄 File: ecopilot/api/middleware/localization.py
# 🧭 Purpose (Layman Explanation):
# Works out whether each visitor wants French or English, so every answer,
# reminder and error message comes back in their language.
# 🧪 Purpose (Technical Summary):
# i18n middleware that detects the request locale (query parameter, X-Language
# header, Accept-Language, default French), stores it in request state and in the
# shared locale context variable, and tags responses with Content-Language.
# 🔗 Dependencies:
# FastAPI/Starlette BaseHTTPMiddleware, ecopilot.shared.core.i18n
# 🔄 Connected Modules / Calls From:
# ecopilot.main middleware registration, shared.core.dependencies.get_request_locale

import logging
from typing import Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from ecopilot.shared.core.i18n import (
    DEFAULT_LOCALE,
    SUPPORTED_LOCALES,
    current_locale,
    normalize_locale,
)

logger = logging.getLogger(__name__)


def detect_locale(
    lang_param: Optional[str],
    custom_header: Optional[str],
    accept_language: Optional[str],
    default_locale: str = DEFAULT_LOCALE,
) -> str:
    """
    Detect the preferred locale.

    Priority order:
    1. URL parameter (?lang=en)
    2. Custom header (X-Language)
    3. Accept-Language header: any English entry selects English
    4. Default locale (French)
    """
    for candidate in (lang_param, custom_header):
        locale = normalize_locale(candidate)
        if locale:
            return locale

    if accept_language and "en" in accept_language.lower():
        return "en"

    return normalize_locale(default_locale) or DEFAULT_LOCALE


class LocalizationMiddleware(BaseHTTPMiddleware):
    """
    Localization middleware for EcoPilot supporting French and English.
    Handles language detection and locale context for API responses.
    """

    def __init__(self, app: ASGIApp, default_locale: str = DEFAULT_LOCALE):
        super().__init__(app)
        self.default_locale = default_locale

    async def dispatch(self, request: Request, call_next) -> Response:
        """
        Process localization for incoming requests

        Args:
            request: Incoming HTTP request
            call_next: Next middleware in chain

        Returns:
            Response with locale headers
        """
        locale = detect_locale(
            request.query_params.get("lang"),
            request.headers.get("X-Language"),
            request.headers.get("Accept-Language"),
            self.default_locale,
        )

        token = current_locale.set(locale)
        request.state.locale = locale
        logger.debug(f"Locale detected: {locale} for {request.url.path}")

        try:
            response = await call_next(request)
        finally:
            current_locale.reset(token)

        self._add_locale_headers(response, locale)
        return response

    def _add_locale_headers(self, response: Response, locale: str) -> None:
        response.headers["Content-Language"] = locale
        response.headers["X-Supported-Locales"] = ",".join(SUPPORTED_LOCALES)
        response.headers["Vary"] = "Accept-Language, X-Language"
