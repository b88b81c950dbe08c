# 📄 File: ecopilot/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# This file defines all the special error types EcoPilot uses to communicate
# what went wrong in a clear, organized way, in French and in English.
# 🧪 Purpose (Technical Summary):
# Custom exception hierarchy providing specific error types with HTTP status codes,
# error details, translation keys and serialization for bilingual API responses.
# 🔗 Dependencies:
# FastAPI status constants, typing, ecopilot.shared.core.i18n
# 🔄 Connected Modules / Calls From:
# All modules for error handling, API exception handlers, domain services, API clients

from typing import Any, Dict, Optional

from fastapi import status

from ecopilot.shared.core.i18n import bilingual


class EcoPilotException(Exception):
    """
    Base exception class for EcoPilot.
    All custom exceptions should inherit from this class.

    ``translation_key`` points at a message in the translation catalog so the
    API layer can render the error in both supported languages.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None,
        translation_key: Optional[str] = None,
        translation_params: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__.upper()
        self.translation_key = translation_key
        self.translation_params = translation_params or {}
        super().__init__(self.message)

    def localized_messages(self) -> Dict[str, str]:
        """Return the message in every supported language."""
        if not self.translation_key:
            return {"fr": self.message, "en": self.message}
        return bilingual(self.translation_key, **self.translation_params)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format."""
        messages = self.localized_messages()
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "message_fr": messages["fr"],
                "message_en": messages["en"],
                "details": self.details,
                "status_code": self.status_code,
            }
        }


# =============================================================================
# VALIDATION & DATA EXCEPTIONS
# =============================================================================

class ValidationError(EcoPilotException):
    """
    Exception raised for data validation failures.
    Used when input data doesn't meet validation requirements.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        value: Optional[Any] = None,
        constraint: Optional[str] = None,
        translation_key: str = "errors.validation_failed",
        translation_params: Optional[Dict[str, Any]] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)
        if constraint:
            details["constraint"] = constraint

        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
            error_code="VALIDATION_ERROR",
            translation_key=translation_key,
            translation_params=translation_params,
        )


class UnsupportedLanguageError(ValidationError):
    """Raised when a caller asks for a language other than French or English."""

    def __init__(self, language: str):
        super().__init__(
            message=f"Unsupported language: {language}",
            field="language",
            value=language,
            constraint="fr|en",
            translation_key="errors.unsupported_language",
            details={"supported_languages": ["fr", "en"]},
        )


class NotFoundError(EcoPilotException):
    """
    Exception raised when requested resource is not found.
    Used for missing entities, sessions, endpoints, etc.
    """

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        translation_key: str = "errors.not_found",
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if resource_id:
            details["resource_id"] = resource_id

        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details=details,
            error_code="NOT_FOUND",
            translation_key=translation_key,
        )


# =============================================================================
# BUSINESS LOGIC EXCEPTIONS
# =============================================================================

class BusinessRuleViolationError(EcoPilotException):
    """
    Exception raised when business rules are violated.
    Used for domain-specific rule enforcement.
    """

    def __init__(
        self,
        message: str = "Business rule violation",
        rule: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        translation_key: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if rule:
            details["rule"] = rule
        if context:
            details["context"] = context

        super().__init__(
            message=message,
            status_code=status.HTTP_409_CONFLICT,
            details=details,
            error_code="BUSINESS_RULE_VIOLATION",
            translation_key=translation_key,
        )


# =============================================================================
# PLANT-SPECIFIC EXCEPTIONS
# =============================================================================

class PlantNotFoundError(NotFoundError):
    """Exception raised when a plant is not found."""

    def __init__(self, plant_id: str):
        super().__init__(
            message=f"Plant {plant_id} not found",
            resource_type="plant",
            resource_id=plant_id,
            translation_key="plants.not_found",
        )


# =============================================================================
# LOCATION TRACKING EXCEPTIONS
# =============================================================================

class TrackingSessionNotFoundError(NotFoundError):
    """Exception raised when a location tracking session does not exist."""

    def __init__(self, session_id: str):
        super().__init__(
            message=f"Tracking session {session_id} not found",
            resource_type="tracking_session",
            resource_id=session_id,
            translation_key="location.session_not_found",
        )


class TrackingNotActiveError(BusinessRuleViolationError):
    """Raised when a position sample arrives while tracking is stopped."""

    def __init__(self, session_id: str):
        super().__init__(
            message=f"Location tracking is not active for session {session_id}",
            rule="tracking_must_be_active",
            context={"session_id": session_id},
            translation_key="location.tracking_not_active",
        )


class HomeNotSetError(BusinessRuleViolationError):
    """Raised when an operation needs a home reference that was never set."""

    def __init__(self, session_id: str):
        super().__init__(
            message=f"No home location set for session {session_id}",
            rule="home_required",
            context={"session_id": session_id},
            translation_key="location.home_not_set",
        )


class PositionUnknownError(BusinessRuleViolationError):
    """Raised when a distance-based answer is requested before any sample was processed."""

    def __init__(self, session_id: str):
        super().__init__(
            message=f"No position received yet for session {session_id}",
            rule="position_required",
            context={"session_id": session_id},
            translation_key="location.position_unknown",
        )


class NotificationNotFoundError(NotFoundError):
    """Raised when an in-app notification id is unknown."""

    def __init__(self, notification_id: str):
        super().__init__(
            message=f"Notification {notification_id} not found",
            resource_type="notification",
            resource_id=notification_id,
            translation_key="notifications.not_found",
        )


# =============================================================================
# EXTERNAL SERVICE EXCEPTIONS
# =============================================================================

class ExternalAPIError(EcoPilotException):
    """
    Exception raised for external API failures.
    Used when third-party services (weather, search, geocoding) fail.
    """

    def __init__(
        self,
        message: str = "External API error",
        api_name: Optional[str] = None,
        api_status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if api_name:
            details["api_name"] = api_name
        if api_status_code:
            details["api_status_code"] = api_status_code

        super().__init__(
            message=message,
            status_code=status.HTTP_502_BAD_GATEWAY,
            details=details,
            error_code="EXTERNAL_API_ERROR",
            translation_key="errors.external_service",
        )


class APITimeoutError(ExternalAPIError):
    """Exception raised when an external API call times out."""

    def __init__(self, api_name: str, timeout_seconds: int = 10):
        super().__init__(
            message=f"{api_name} API request timed out after {timeout_seconds} seconds",
            api_name=api_name,
            details={"timeout_seconds": timeout_seconds},
        )


class APIAuthenticationError(ExternalAPIError):
    """Exception raised when an external API rejects our credentials."""

    def __init__(self, api_name: str):
        super().__init__(
            message=f"Authentication failed for {api_name} API",
            api_name=api_name,
            api_status_code=401,
        )


class RateLimitError(EcoPilotException):
    """
    Exception raised when rate limits are exceeded.
    Used for API throttling and abuse prevention.
    """

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        retry_after: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}
        if retry_after:
            details["retry_after"] = retry_after

        super().__init__(
            message=message,
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            details=details,
            error_code="RATE_LIMIT_EXCEEDED",
            translation_key="errors.rate_limit_exceeded",
        )


class CircuitBreakerError(ExternalAPIError):
    """
    Exception raised when circuit breaker is open.
    Used to skip calls to an external service that keeps failing.
    """

    def __init__(self, service_name: str, reset_in_seconds: Optional[float] = None):
        details = {}
        if reset_in_seconds is not None:
            details["reset_in_seconds"] = round(reset_in_seconds, 1)
        super().__init__(
            message=f"{service_name} temporarily unavailable (circuit open)",
            api_name=service_name,
            details=details,
        )
        self.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        self.error_code = "CIRCUIT_BREAKER_OPEN"


# =============================================================================
# EXCEPTION UTILITIES
# =============================================================================

def is_client_error(exception: Exception) -> bool:
    """
    Check if exception represents a client error (4xx).

    Args:
        exception: Exception to check

    Returns:
        bool: True if client error, False otherwise
    """
    if isinstance(exception, EcoPilotException):
        return 400 <= exception.status_code < 500
    return False
