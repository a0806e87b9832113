"""Logging configuration for the service and the smoke runner.

Emits one JSON object per line on stdout, which suits CI logs and local dev.
setup_logging() is idempotent: repeated calls won't duplicate handlers.
"""
from __future__ import annotations

import json
import logging
import os
import sys
from datetime import UTC, datetime
from logging import Handler, LogRecord
from typing import Any

_DEFAULT_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Attributes every LogRecord carries; anything else came in through `extra`.
_RESERVED = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime", "taskName"}


class JsonFormatter(logging.Formatter):
    """Render a record as a single JSON line.

    Carries ts, level, logger and message, plus any structured fields passed
    via `logger.info("msg", extra={...})`. A dict message is merged verbatim.
    """

    def format(self, record: LogRecord) -> str:  # type: ignore[override]
        payload: dict[str, Any] = {
            "ts": datetime.now(UTC).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
        }

        msg = record.msg
        if isinstance(msg, dict):
            payload.update(msg)
        else:
            payload["message"] = record.getMessage()

        for key, value in record.__dict__.items():
            if key in _RESERVED or key in payload:
                continue
            payload[key] = value

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


def _make_stream_handler(level: int) -> Handler:
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(JsonFormatter())
    return handler


def _normalize_level(level: str | int) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return level


def setup_logging(level: str | int = _DEFAULT_LEVEL) -> None:
    """Configure the root and uvicorn loggers for JSON output.

    Handlers are attached once; later calls only adjust the level.
    """
    root = logging.getLogger()
    level = _normalize_level(level)

    root.setLevel(level)
    json_handlers = [h for h in root.handlers if isinstance(h.formatter, JsonFormatter)]
    for h in json_handlers:
        h.setLevel(level)

    # Route uvicorn through the root handler instead of its own.
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        lg = logging.getLogger(name)
        lg.setLevel(level)
        lg.propagate = True
        for h in list(lg.handlers):
            lg.removeHandler(h)

    if not json_handlers:
        root.addHandler(_make_stream_handler(level))


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a named logger, e.g. `get_logger("api")`."""
    return logging.getLogger(name if name else __name__)
