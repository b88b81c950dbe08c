# 📄 File: ecopilot/api/middleware/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the helpers that look at every request before it reaches EcoPilot:
# language detection, request diary, traffic control and error formatting.
# 🧪 Purpose (Technical Summary):
# Package initialization for API middleware components and exception handlers.
# 🔗 Dependencies:
# FastAPI / Starlette middleware, slowapi
# 🔄 Connected Modules / Calls From:
# ecopilot.main, FastAPI application setup, middleware registration

"""
EcoPilot API Middleware Package

Middleware Stack Order (outermost first):
    1. CORSMiddleware
    2. RequestLoggingMiddleware (request id, timing)
    3. LocalizationMiddleware (language detection)
    4. SlowAPIMiddleware (rate limiting)
    5. Application Routes (innermost)

Errors raised anywhere in the stack are rendered by the handlers registered
through ``register_exception_handlers``.
"""

from .error_handling import build_error_response, register_exception_handlers
from .localization import LocalizationMiddleware, detect_locale
from .logging import REQUEST_ID_HEADER, RequestLoggingMiddleware
from .rate_limiting import build_limiter, rate_limit_exceeded_handler, setup_rate_limiting

__all__ = [
    "LocalizationMiddleware",
    "REQUEST_ID_HEADER",
    "RequestLoggingMiddleware",
    "build_error_response",
    "build_limiter",
    "detect_locale",
    "rate_limit_exceeded_handler",
    "register_exception_handlers",
    "setup_rate_limiting",
]
