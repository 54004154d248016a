"""Request and Store Logging — one line per event, JSON in production.

Invariants:
    - Every line carries the record's own time (UTC), level, logger and message
    - Error extras attached by the handlers (error_code, path, resource,
      resource_id) appear only when set
    - uvicorn's server and access loggers write through the same handler, so a
      deployment sees a single log format
    - setup_logging is idempotent: calling it again swaps the handler in place

Design Decisions:
    - stdlib logging with a small formatter: the API emits few distinct events,
      all with flat string/int extras
    - LOG_FORMAT=text switches to a plain line for local development
"""

import json
import logging
from datetime import datetime, timezone

EXTRA_FIELDS = ("error_code", "path", "resource", "resource_id")
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_HANDLER_NAME = "portfolio_api"


def record_extras(record: logging.LogRecord) -> dict:
    """Error extras present on the record, in EXTRA_FIELDS order."""
    return {
        key: record.__dict__[key]
        for key in EXTRA_FIELDS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """Render a record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **record_extras(record),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def build_formatter(fmt: str) -> logging.Formatter:
    if fmt == "json":
        return JSONFormatter()
    return logging.Formatter(TEXT_FORMAT)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the app's root handler and route uvicorn's loggers through it."""
    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(build_formatter(fmt))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for name in UVICORN_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True
    return handler
