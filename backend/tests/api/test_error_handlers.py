"""Error Handlers: envelope shape and log level per handler, called directly."""

import json
import logging

from starlette.requests import Request

from primer.api.error_handlers import (
    primer_error_handler,
    unhandled_error_handler,
)
from primer.core.errors import InvalidArgumentError, ResourceNotFoundError

HANDLER_LOGGER = "primer.api.error_handlers"


def _request(path="/api/v1/test"):
    return Request({
        "type": "http", "method": "POST", "path": path,
        "headers": [], "query_string": b"",
    })


def _records(caplog):
    return [r for r in caplog.records if r.name == HANDLER_LOGGER]


async def test_primer_error_uses_status_and_envelope(caplog):
    caplog.set_level(logging.INFO, logger=HANDLER_LOGGER)
    exc = InvalidArgumentError("bad", "text", operation="capitalize")
    res = await primer_error_handler(_request(), exc)

    assert res.status_code == 400
    body = json.loads(res.body)
    assert body["error"]["code"] == "INVALID_ARGUMENT"
    assert body["error"]["context"] == {"operation": "capitalize", "argument": "text"}

    [record] = _records(caplog)
    assert record.levelno == logging.ERROR
    assert record.argument == "text"
    assert record.severity == "error"
    assert record.path == "/api/v1/test"


async def test_warning_severity_logs_at_warning(caplog):
    caplog.set_level(logging.INFO, logger=HANDLER_LOGGER)
    exc = ResourceNotFoundError("Model", "m-1", model_id="m-1")
    res = await primer_error_handler(_request(), exc)

    assert res.status_code == 404
    [record] = _records(caplog)
    assert record.levelno == logging.WARNING
    assert record.model_id == "m-1"


async def test_unhandled_error_hides_message(caplog):
    caplog.set_level(logging.INFO, logger=HANDLER_LOGGER)
    res = await unhandled_error_handler(_request(), RuntimeError("secret detail"))

    assert res.status_code == 500
    body = json.loads(res.body)
    assert body["error"]["code"] == "INTERNAL_ERROR"
    assert "secret detail" not in res.body.decode()

    [record] = _records(caplog)
    assert record.levelno == logging.ERROR
    assert record.error_code == "INTERNAL_ERROR"
    assert record.exc_info is not None
