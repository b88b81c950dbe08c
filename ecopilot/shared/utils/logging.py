# 📄 File: ecopilot/shared/utils/logging.py

# 🧭 Purpose (Layman Explanation):
# Sets up how EcoPilot writes its journal: readable lines while developing, JSON lines
# in production, each one stamped with the request and tracking session it belongs to.

# 🧪 Purpose (Technical Summary):
# Structured logging configuration built on python-json-logger with contextvars-based
# request/session correlation, a text formatter for development and a log_context
# helper used by middleware and the location tracker.

# 🔗 Dependencies:
# - python-json-logger: JSON log formatting
# - logging: Python standard logging
# - contextvars: Request context tracking

# 🔄 Connected Modules / Calls From:
# Used by: ecopilot.main (startup), RequestLoggingMiddleware, LocationTrackingService

import logging
import os
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, Optional
from uuid import uuid4

from pythonjsonlogger.json import JsonFormatter

# Context variables for request tracking
request_id_var: ContextVar[str] = ContextVar("request_id", default="")
session_id_var: ContextVar[str] = ContextVar("session_id", default="")

SERVICE_NAME = "ecopilot-api"
TEXT_FORMAT = "%(timestamp)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s"
JSON_FORMAT = "%(timestamp)s %(levelname)s %(name)s %(message)s"

_logging_configured = False


class ContextFilter(logging.Filter):
    """
    Adds request id, tracking session id and service metadata to every record
    so both the text and the JSON formatters can reference them.
    """

    def __init__(self, service_name: str = SERVICE_NAME):
        super().__init__()
        self.service_name = service_name
        self.hostname = os.uname().nodename if hasattr(os, "uname") else "unknown"

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get() or "-"
        record.session_id = session_id_var.get() or "-"
        record.service = self.service_name
        record.hostname = self.hostname
        record.timestamp = datetime.now(timezone.utc).isoformat()
        return True


class EcoPilotJsonFormatter(JsonFormatter):
    """JSON formatter that renames the standard fields for log aggregation."""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["level"] = log_record.pop("levelname", record.levelname)
        log_record["logger"] = log_record.pop("name", record.name)
        log_record.setdefault("request_id", getattr(record, "request_id", "-"))
        log_record.setdefault("session_id", getattr(record, "session_id", "-"))
        log_record.setdefault("service", getattr(record, "service", SERVICE_NAME))


def build_formatter(log_format: str) -> logging.Formatter:
    """
    Build the formatter for the requested output format.

    Args:
        log_format: ``json`` for aggregated environments, ``text`` otherwise

    Returns:
        Configured formatter instance
    """
    if log_format.lower() == "json":
        return EcoPilotJsonFormatter(JSON_FORMAT, json_ensure_ascii=False)
    return logging.Formatter(TEXT_FORMAT)


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    force: bool = False,
) -> logging.Logger:
    """
    Setup application logging configuration.

    Args:
        log_level: Logging level name, defaults to ``LOG_LEVEL`` from settings
        log_format: ``json`` or ``text``, defaults to ``LOG_FORMAT`` from settings
        force: Reconfigure even if logging was already set up

    Returns:
        The startup logger
    """
    global _logging_configured

    if _logging_configured and not force:
        return logging.getLogger("startup")

    from ecopilot.shared.config.settings import get_settings

    settings = get_settings()
    log_level = log_level or settings.LOG_LEVEL
    log_format = log_format or settings.LOG_FORMAT

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.addFilter(ContextFilter())
    console_handler.setFormatter(build_formatter(log_format))
    root_logger.addHandler(console_handler)

    logging.getLogger("aiohttp").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    _logging_configured = True
    return logging.getLogger("startup")


@contextmanager
def log_context(request_id: Optional[str] = None, session_id: Optional[str] = None) -> Iterator[Dict[str, str]]:
    """
    Context manager for adding contextual information to logs.

    Args:
        request_id: Request identifier; the current one (or a new one) when omitted
        session_id: Location tracking session identifier
    """
    if request_id is None:
        request_id = request_id_var.get() or str(uuid4())

    request_token = request_id_var.set(request_id)
    session_token = session_id_var.set(session_id or "")

    try:
        yield {"request_id": request_id, "session_id": session_id or ""}
    finally:
        request_id_var.reset(request_token)
        session_id_var.reset(session_token)


def log_startup_event(service_name: str, version: str, extra: Optional[Dict[str, Any]] = None) -> None:
    """Log application startup event."""
    logging.getLogger("startup").info(
        f"🚀 Service {service_name} starting up",
        extra={"event_type": "service_startup", "service_name": service_name, "version": version, **(extra or {})},
    )


def log_shutdown_event(service_name: str) -> None:
    """Log application shutdown event."""
    logging.getLogger("shutdown").info(
        f"🛑 Service {service_name} shutting down",
        extra={"event_type": "service_shutdown", "service_name": service_name},
    )
