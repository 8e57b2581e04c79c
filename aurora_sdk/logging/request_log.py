"""Structured request logging for the Aurora SDK.

The SDK only emits records; it never configures output on import. The
"aurora.sdk" logger carries a NullHandler so an unconfigured host sees
nothing. Applications that want JSON lines call setup_logging().

Each API call is wrapped in a RequestLog, which scopes a request id to the
call and emits one DEBUG record with method, url, status and latency.
"""

import json
import logging
import sys
import time
import uuid
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import TextIO

from aurora_sdk.config.settings import get_settings

LOGGER_NAME = "aurora.sdk"

# Id of the SDK request currently in flight; empty outside one
request_id_var: ContextVar[str] = ContextVar("aurora_request_id", default="")

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


class JSONFormatter(logging.Formatter):
    """One JSON object per record.

    Request records get their fields under "request"; anything passed as
    extra={"context": {...}} is merged at the top level.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        request_id = request_id_var.get()
        if request_id:
            entry["request_id"] = request_id
        request_fields = getattr(record, "aurora_request", None)
        if request_fields:
            entry["request"] = request_fields
        context = getattr(record, "context", None)
        if context:
            entry.update(context)
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def setup_logging(
    level: str | None = None,
    log_file: str | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Send SDK records to stdout (and optionally a file) as JSON lines.

    Arguments override LOG_LEVEL / LOG_FILE from settings.
    """
    settings = get_settings()
    level = level or settings.log_level
    log_file = settings.log_file if log_file is None else log_file

    logger = get_logger()
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.handlers.clear()

    formatter = JSONFormatter()
    handlers: list[logging.Handler] = [logging.StreamHandler(stream or sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    # Host applications keep their own root configuration
    logger.propagate = False
    return logger


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def generate_request_id() -> str:
    return uuid.uuid4().hex[:12]


class RequestLog:
    """Context manager around one API call.

    Sets request_id_var for the duration of the call and restores the
    caller's value on exit. The caller fills in `status` once a response
    arrives; a DEBUG record is emitted on exit, including failed calls.
    """

    def __init__(self, method: str, url: str):
        self.method = method
        self.url = url
        self.request_id = generate_request_id()
        self.status: int | None = None
        self.elapsed_ms: float = 0
        self._start: float = 0
        self._token = None

    def __enter__(self) -> "RequestLog":
        self._token = request_id_var.set(self.request_id)
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.elapsed_ms = round((time.perf_counter() - self._start) * 1000, 2)
        try:
            get_logger().debug("Aurora API request", extra={"aurora_request": self.fields(exc_type)})
        finally:
            request_id_var.reset(self._token)

    def fields(self, exc_type=None) -> dict:
        fields = {
            "method": self.method,
            "url": self.url,
            "status": self.status,
            "elapsed_ms": self.elapsed_ms,
        }
        if exc_type is not None:
            fields["error"] = exc_type.__name__
        return fields
