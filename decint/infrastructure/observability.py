"""Structured Logging — JSON records for engine operations and arithmetic errors.

Invariants:
    - Every record carries timestamp, level, logger name, and message
    - Engine extras (operation, error_code, max_digits, algorithm) appear only when set
    - setup_logging falls back to Settings.log_level / Settings.log_format for omitted arguments

Design Decisions:
    - Stdlib logging.Formatter subclass: records from the engine already carry their
      fields as `extra`, so the formatter only has to pick them up
    - The core never configures logging; the embedding program calls setup_logging once
"""

import logging
import json
from datetime import datetime, timezone

from decint.config import get_settings

_ENGINE_FIELDS = ("operation", "error_code", "max_digits", "algorithm")
_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per record, engine extras included."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update({
            key: record.__dict__[key]
            for key in _ENGINE_FIELDS
            if record.__dict__.get(key) is not None
        })
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def setup_logging(level: str | None = None, fmt: str | None = None) -> logging.Handler:
    """Attach a stream handler to the root logger and return it.

    Arguments left as None are read from the cached Settings
    (DECINT_LOG_LEVEL, DECINT_LOG_FORMAT).
    """
    settings = get_settings()
    level = level or settings.log_level
    fmt = fmt or settings.log_format

    handler = logging.StreamHandler()
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(_TEXT_FORMAT),
    )
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
