"""
Core utilities package for EcoPilot.
Provides the exception hierarchy and the translation helpers.
"""

from .exceptions import (
    EcoPilotException,
    ValidationError,
    NotFoundError,
    BusinessRuleViolationError,
    ExternalAPIError,
    RateLimitError,
)
from .i18n import (
    SUPPORTED_LOCALES,
    DEFAULT_LOCALE,
    translate,
    bilingual,
    localized_payload,
)

__all__ = [
    # Exceptions
    "EcoPilotException",
    "ValidationError",
    "NotFoundError",
    "BusinessRuleViolationError",
    "ExternalAPIError",
    "RateLimitError",

    # i18n
    "SUPPORTED_LOCALES",
    "DEFAULT_LOCALE",
    "translate",
    "bilingual",
    "localized_payload",
]
