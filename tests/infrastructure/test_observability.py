"""Structured logging tests — JSON formatter fields and idempotent setup."""

import json
import logging

from userbase.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "userbase.test", logging.WARNING, __file__, 1, "Entity not found", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "WARNING"
    assert log["logger"] == "userbase.test"
    assert log["message"] == "Entity not found"
    assert "timestamp" in log


def test_json_formatter_surfaces_extra_fields():
    log = json.loads(JSONFormatter().format(
        _record(entity_id="abc", repository="UserInMemoryRepository", unrelated="x"),
    ))
    assert log["entity_id"] == "abc"
    assert log["repository"] == "UserInMemoryRepository"
    assert "unrelated" not in log


def test_setup_logging_does_not_stack_handlers():
    before = list(logging.root.handlers)
    first = setup_logging("DEBUG", "json")
    second = setup_logging("INFO", "text")
    try:
        assert first not in logging.root.handlers
        assert second in logging.root.handlers
        assert len(logging.root.handlers) == len(before) + 1
        assert logging.root.level == logging.INFO
        assert isinstance(first.formatter, JSONFormatter)
        assert not isinstance(second.formatter, JSONFormatter)
    finally:
        logging.root.removeHandler(second)
