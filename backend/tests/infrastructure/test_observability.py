"""Structured Logging: JSON formatter fields and setup idempotency."""

import json
import logging

from expense_api.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "expense_api.test", logging.INFO, __file__, 1, "hello %s", ("world",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_core_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "expense_api.test"
    assert payload["message"] == "hello world"
    assert "timestamp" in payload


def test_json_formatter_surfaces_known_extras_only():
    payload = json.loads(JSONFormatter().format(
        _record(error_code="USER_NOT_FOUND", user_id="u1", unrelated="x"),
    ))
    assert payload["error_code"] == "USER_NOT_FOUND"
    assert payload["user_id"] == "u1"
    assert "unrelated" not in payload


def test_setup_logging_does_not_duplicate_handlers():
    before = len(logging.root.handlers)
    level = logging.root.level
    first = setup_logging("DEBUG", "text")
    second = setup_logging("INFO", "json")
    try:
        assert first not in logging.root.handlers
        assert second in logging.root.handlers
        assert len(logging.root.handlers) <= before + 1
        assert isinstance(second.formatter, JSONFormatter)
        assert logging.root.level == logging.INFO
    finally:
        logging.root.removeHandler(second)
        logging.root.setLevel(level)
