# 📄 File: ecopilot/api/middleware/logging.py
# 🧭 Purpose (Layman Explanation):
# Keeps a diary of every request made to EcoPilot: what was asked for, how long it
# took and how it ended, each entry tagged with a request number.
# 🧪 Purpose (Technical Summary):
# Request logging middleware assigning a correlation id (X-Request-ID), binding it
# to the logging context variables and recording method, path, status and duration.
# 🔗 Dependencies:
# Starlette BaseHTTPMiddleware, ecopilot.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# ecopilot.main (middleware registration), error_handling (request id in envelopes)

import logging
import time
import uuid

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from ecopilot.shared.utils.logging import request_id_var, session_id_var

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
SESSION_PATH_PREFIX = "/api/v1/location/"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Request logging middleware for API monitoring

    Features:
    - Request id propagation (incoming X-Request-ID is reused)
    - Request/response timing
    - Slow request warnings
    """

    def __init__(self, app: ASGIApp, slow_request_threshold: float = 2.0):
        super().__init__(app)
        self.slow_request_threshold = slow_request_threshold

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id

        request_token = request_id_var.set(request_id)
        session_token = session_id_var.set(self._session_id(request.url.path))
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.exception(f"💥 {request.method} {request.url.path} failed after {duration_ms:.1f}ms")
            raise
        else:
            duration_ms = (time.perf_counter() - start_time) * 1000
            self._log_response(request, response.status_code, duration_ms)
            response.headers[REQUEST_ID_HEADER] = request_id
            response.headers["X-Response-Time"] = f"{duration_ms / 1000:.3f}s"
            return response
        finally:
            request_id_var.reset(request_token)
            session_id_var.reset(session_token)

    @staticmethod
    def _session_id(path: str) -> str:
        if not path.startswith(SESSION_PATH_PREFIX):
            return ""
        return path[len(SESSION_PATH_PREFIX):].split("/", 1)[0]

    def _log_response(self, request: Request, status_code: int, duration_ms: float) -> None:
        extra = {
            "event_type": "http_request",
            "method": request.method,
            "path": request.url.path,
            "status_code": status_code,
            "duration_ms": round(duration_ms, 1),
        }
        message = f"{request.method} {request.url.path} -> {status_code} ({duration_ms:.1f}ms)"

        if status_code >= 500:
            logger.error(f"❌ {message}", extra=extra)
        elif duration_ms / 1000 > self.slow_request_threshold:
            logger.warning(f"🐢 Slow request: {message}", extra=extra)
        else:
            logger.info(f"➡️ {message}", extra=extra)
