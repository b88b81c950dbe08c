"""
Common FastAPI dependencies for EcoPilot.
Provides request language resolution and settings access.
"""

import logging
from typing import Optional

from fastapi import Query, Request

from ..config.settings import Settings, get_settings
from .exceptions import UnsupportedLanguageError
from .i18n import get_current_locale, normalize_locale

logger = logging.getLogger(__name__)


def get_request_locale(request: Request) -> str:
    """
    Language negotiated by LocalizationMiddleware for this request.

    Falls back to the context variable when the middleware is not installed
    (unit tests mounting a bare router).
    """
    return getattr(request.state, "locale", None) or get_current_locale()


def get_explicit_locale(
    lang: Optional[str] = Query(None, description="Response language (fr or en)"),
) -> Optional[str]:
    """
    Validate an explicit ``?lang=`` parameter.

    Raises:
        UnsupportedLanguageError: When the value is neither French nor English
    """
    if lang is None:
        return None
    locale = normalize_locale(lang)
    if locale is None:
        raise UnsupportedLanguageError(lang)
    return locale


def get_app_settings() -> Settings:
    return get_settings()
