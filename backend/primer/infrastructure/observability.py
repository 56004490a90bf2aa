"""Structured Logging: one JSON object per record, tagged with the service name.

Invariants:
    - Every record carries timestamp, level, logger, service, message
    - Error context (error_code, severity, operation, argument, model_id, item_id)
      and the request path are copied from `extra` when present; other extras are dropped
    - At most one Primer handler on the root logger, however often setup_logging runs

Design Decisions:
    - Stdlib logging + json: the formatter is the only moving part
    - Handler tagged with an attribute so a restarted lifespan (tests, reloads)
      replaces it instead of duplicating every line
"""

import json
import logging
from datetime import datetime, timezone

CONTEXT_FIELDS = (
    "path", "error_code", "severity",
    "operation", "argument", "model_id", "item_id",
)
_HANDLER_TAG = "_primer_handler"


class JSONFormatter(logging.Formatter):
    def __init__(self, service: str = "primer-api"):
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "service": self.service,
            "message": record.getMessage(),
        }
        entry.update({
            key: value
            for key in CONTEXT_FIELDS
            if (value := getattr(record, key, None)) is not None
        })
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def setup_logging(
    level: str = "INFO", fmt: str = "json", service: str = "primer-api",
) -> logging.Handler:
    """Install the Primer handler on the root logger, replacing a previous one."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if getattr(h, _HANDLER_TAG, False)]:
        root.removeHandler(existing)

    handler = logging.StreamHandler()
    setattr(handler, _HANDLER_TAG, True)
    if fmt == "json":
        handler.setFormatter(JSONFormatter(service))
    else:
        handler.setFormatter(logging.Formatter(
            f"%(asctime)s %(levelname)s [{service}] %(name)s: %(message)s",
        ))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
