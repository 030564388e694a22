"""Logging configuration with JSON output for applications using emitkit."""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

from .config.settings import EmitterConfig, log_level

_RESERVED = {
    "args", "created", "exc_info", "exc_text", "filename", "funcName", "levelname", "levelno",
    "lineno", "message", "module", "msecs", "msg", "name", "pathname", "process", "processName",
    "relativeCreated", "stack_info", "thread", "threadName", "taskName",
}

PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JSONLogFormatter(logging.Formatter):
    """One JSON object per record.

    Listener failure reports carry the event name as a top-level ``event`` key
    and the exception class as ``error_type``, so they can be filtered without
    parsing the message. Any other ``extra`` fields are grouped under ``extra``.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        event = getattr(record, "event", None)
        if event is not None:
            payload["event"] = event
        if record.exc_info:
            payload["error_type"] = record.exc_info[0].__name__
            payload["exc_info"] = self.formatException(record.exc_info)

        extra = {
            key: value
            for key, value in record.__dict__.items()
            if not key.startswith("_") and key != "event" and key not in _RESERVED
        }
        if extra:
            payload["extra"] = extra
        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging(level: str | None = None, *, json_output: bool = True) -> logging.Handler:
    """Replace the root handlers with a single stream handler.

    ``level`` falls back to ``EMITKIT_LOG_LEVEL``. The installed handler is
    returned so callers can detach it again.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(JSONLogFormatter() if json_output else logging.Formatter(PLAIN_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel((level or log_level()).upper())
    return handler


def configure_from_config(config: EmitterConfig) -> logging.Handler:
    return configure_logging(config.log_level, json_output=config.json_logs)
