# src/message_translator/core/logging/formatters.py

"""
Custom logging formatters.

  - JsonFormatter: one JSON object per record, for log collectors. Extras
    passed via `extra={...}` become top-level fields; values that are not JSON
    serializable are stringified.

  - ColorFormatter: compact ANSI-coloured lines for a developer terminal.

builder.py picks between them from settings.LOG_FORMAT.
"""

import json
import logging
from typing import Any
from logging import LogRecord
from message_translator.utils.logging import get_project_version

PROJECT_VERSION = get_project_version()

# LogRecord attributes that are either already mapped into the JSON payload
# or pure noise for this library.
_RESERVED_ATTRS = frozenset({
    "args", "msg", "levelname", "levelno", "name", "pathname", "lineno", "exc_info", "exc_text",
    "stack_info", "filename", "module", "funcName", "created", "msecs", "relativeCreated",
    "thread", "threadName", "processName", "process", "taskName", "message", "asctime",
})


class JsonFormatter(logging.Formatter):
    """
    Structured JSON formatter.

    Construction:
      - env: environment name included in every record.
      - service: logical service name included in every record.
      - datefmt: passed to logging.Formatter (used by formatTime).

    format() never raises: json.dumps(..., default=str) is the last resort
    for nested non-serializable values.
    """

    def __init__(self, *, env: str | None = None, service: str = "message-translator", datefmt: str | None = None):
        super().__init__(datefmt=datefmt)
        self.env = env
        self.service = service

    def format(self, record: LogRecord) -> str:
        log_record: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "pathname": record.pathname,
            "lineno": record.lineno,
            "service": self.service,
            "env": self.env,
            "version": PROJECT_VERSION,
        }

        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)
        if record.stack_info:
            log_record["stack_info"] = self.formatStack(record.stack_info)

        extras = {
            k: v
            for k, v in record.__dict__.items()
            if k not in log_record and not k.startswith("_") and k not in _RESERVED_ATTRS
        }

        for k, v in extras.items():
            try:
                json.dumps(v)
                log_record[k] = v
            except (TypeError, ValueError):
                log_record[k] = str(v)

        # ensure_ascii=False keeps the Portuguese text readable
        return json.dumps(log_record, ensure_ascii=False, default=str)


class ColorFormatter(logging.Formatter):
    """
    Development-friendly coloured formatter: TIMESTAMP | LEVEL | LOGGER | MESSAGE,
    with the level wrapped in ANSI colour codes and tracebacks appended.
    """

    COLOR_CODES = {
        "DEBUG": "\033[1;36;47m",   # bold cyan on white
        "INFO": "\033[32m",         # green
        "WARNING": "\033[33m",      # yellow
        "ERROR": "\033[31m",        # red
        "CRITICAL": "\033[1;41m",   # bold on red
        "RESET": "\033[0m",
    }

    def __init__(self, fmt: str | None = None, datefmt: str | None = None) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)

    def format(self, record: LogRecord) -> str:
        color = self.COLOR_CODES.get(record.levelname, "")
        # only the level name is coloured
        reset = self.COLOR_CODES["RESET"]
        timestamp = self.formatTime(record, self.datefmt)

        base = (
            f"{timestamp} | {color}{record.levelname:<10}{reset} | "
            f"{record.name:<40} | "
            f"{record.getMessage()}"
        )

        if record.exc_info:
            base = base + "\n" + self.formatException(record.exc_info)

        return base


__all__ = ["JsonFormatter", "ColorFormatter", "PROJECT_VERSION"]
