"""Request and Store Logging — JSON lines with the error extras surfaced."""

import json
import logging
from datetime import datetime, timezone

from portfolio_api.infrastructure.observability import (
    JSONFormatter, UVICORN_LOGGERS, record_extras, setup_logging,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "portfolio_api.test", logging.WARNING, __file__, 1,
        "Project not found", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_base_fields():
    record = _record()
    line = json.loads(JSONFormatter().format(record))

    assert line["level"] == "WARNING"
    assert line["logger"] == "portfolio_api.test"
    assert line["message"] == "Project not found"
    assert line["timestamp"] == datetime.fromtimestamp(
        record.created, tz=timezone.utc,
    ).isoformat()


def test_json_formatter_surfaces_error_extras():
    line = json.loads(JSONFormatter().format(
        _record(error_code="RESOURCE_NOT_FOUND", path="/api/projects/9", resource_id="9"),
    ))

    assert line["error_code"] == "RESOURCE_NOT_FOUND"
    assert line["path"] == "/api/projects/9"
    assert line["resource_id"] == "9"
    assert "resource" not in line


def test_record_extras_skips_unset_fields():
    assert record_extras(_record(path="/api/about", resource=None)) == {
        "path": "/api/about",
    }


def test_setup_logging_does_not_stack_handlers():
    setup_logging("DEBUG", "json")
    handler = setup_logging("INFO", "text")

    ours = [h for h in logging.root.handlers if h.get_name() == "portfolio_api"]
    assert ours == [handler]
    assert not isinstance(handler.formatter, JSONFormatter)
    assert logging.root.level == logging.INFO


def test_setup_logging_routes_uvicorn_through_root():
    access = logging.getLogger("uvicorn.access")
    access.addHandler(logging.NullHandler())
    access.propagate = False

    setup_logging("INFO", "json")

    for name in UVICORN_LOGGERS:
        assert logging.getLogger(name).handlers == []
        assert logging.getLogger(name).propagate is True
