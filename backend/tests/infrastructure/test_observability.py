"""Structured Logging: JSON formatter fields and setup_logging wiring."""

import json
import logging
import sys

from primer.infrastructure.observability import JSONFormatter, setup_logging


def _record(msg="hello", **extra):
    record = logging.LogRecord(
        "primer.test", logging.WARNING, __file__, 1, msg, None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "WARNING"
    assert payload["logger"] == "primer.test"
    assert payload["message"] == "hello"
    assert "timestamp" in payload


def test_json_formatter_surfaces_known_extras():
    payload = json.loads(JSONFormatter().format(
        _record(error_code="INVALID_ARGUMENT", operation="add", unrelated="x"),
    ))
    assert payload["error_code"] == "INVALID_ARGUMENT"
    assert payload["operation"] == "add"
    assert "unrelated" not in payload


def test_json_formatter_includes_exception():
    try:
        raise ValueError("boom")
    except ValueError:
        record = _record()
        record.exc_info = sys.exc_info()
    payload = json.loads(JSONFormatter().format(record))
    assert "ValueError: boom" in payload["exception"]


def test_setup_logging_installs_handler_and_level():
    root = logging.getLogger()
    previous_level = root.level
    handler = setup_logging("debug", "json")
    try:
        assert handler in root.handlers
        assert isinstance(handler.formatter, JSONFormatter)
        assert root.level == logging.DEBUG
    finally:
        root.removeHandler(handler)
        root.setLevel(previous_level)


def test_setup_logging_text_format():
    root = logging.getLogger()
    previous_level = root.level
    handler = setup_logging("INFO", "text")
    try:
        assert not isinstance(handler.formatter, JSONFormatter)
    finally:
        root.removeHandler(handler)
        root.setLevel(previous_level)


def test_json_formatter_tags_service_and_error_context():
    payload = json.loads(JSONFormatter("primer-test").format(_record(
        path="/api/v1/models/x", error_code="RESOURCE_NOT_FOUND",
        severity="warning", argument="b", model_id="m-1", item_id="i-1",
    )))
    assert payload["service"] == "primer-test"
    assert payload["path"] == "/api/v1/models/x"
    assert payload["severity"] == "warning"
    assert payload["argument"] == "b"
    assert payload["model_id"] == "m-1"
    assert payload["item_id"] == "i-1"


def test_json_formatter_timestamp_comes_from_record():
    record = _record()
    record.created = 0.0
    payload = json.loads(JSONFormatter().format(record))
    assert payload["timestamp"] == "1970-01-01T00:00:00+00:00"


def test_setup_logging_twice_keeps_a_single_handler():
    root = logging.getLogger()
    previous_level = root.level
    first = setup_logging("INFO", "json", "primer-test")
    second = setup_logging("INFO", "json", "primer-test")
    try:
        assert first not in root.handlers
        assert second in root.handlers
        assert second.formatter.service == "primer-test"
    finally:
        root.removeHandler(second)
        root.setLevel(previous_level)
