# src/message_translator/core/logging/builder.py
"""
Logging builder: create and apply a dictConfig logging configuration.

    make_dict_config(settings)  -> dict for logging.config.dictConfig
    setup_logging(settings)     -> apply it (creating LOG_DIR when writing files)

Handler selection:
| LOG_TO_STDOUT | LOG_DIR set | Active handlers                  |
| ------------- | ----------- | -------------------------------- |
| true          | any         | console + error_console          |
| false         | no          | console + error_console          |
| false         | yes         | console + file + error_file      |

The library never calls setup_logging itself; applications (and the test
suite) decide when logging is configured.
"""

from __future__ import annotations

from pathlib import Path
import logging
import logging.config

from message_translator.utils.logging import get_project_name

from .formatters import JsonFormatter, ColorFormatter
from .filters import RedactFilter
from .handlers import (
    get_console_handler,
    get_file_handler,
    get_error_file_handler,
    get_error_console_handler,
)

from message_translator.config.settings import Settings

STANDARD_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _writes_files(settings: Settings) -> bool:
    return (not settings.LOG_TO_STDOUT) and bool(settings.LOG_DIR)


def make_dict_config(settings: Settings) -> dict:
    """
    Build the dictConfig mapping using the provided settings.

    The returned mapping includes:
      - formatters: "standard" (colour in text mode, plain otherwise) and "json"
      - filters: "redact"
      - handlers: console, plus file/error_file OR error_console
      - loggers: root and the library's own "message_translator" logger
    """
    formatters = {
        "standard": {
            "()": ColorFormatter if settings.LOG_FORMAT == "text" else logging.Formatter,
            "format": STANDARD_FORMAT,
        },
        "json": {
            "()": JsonFormatter,
            "env": settings.ENV,
            "service": get_project_name(),
        },
    }

    filters = {
        "redact": {"()": RedactFilter},
    }

    handlers: dict[str, dict] = {"console": get_console_handler(settings)}

    if _writes_files(settings):
        handlers["file"] = get_file_handler(settings)
        handlers["error_file"] = get_error_file_handler(settings)
    else:
        handlers["error_console"] = get_error_console_handler(settings)

    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": formatters,
        "filters": filters,
        "handlers": handlers,
        "loggers": {
            "": {
                "handlers": list(handlers.keys()),
                "level": settings.LOG_LEVEL,
                "propagate": True,
            },
            # Records propagate to root; only the level is set here.
            "message_translator": {
                "level": settings.LOG_LEVEL,
                "propagate": True,
            },
        },
    }

    return config


def setup_logging(settings: Settings) -> None:
    """
    Initialize logging from settings.

    Steps:
      1. Ensure LOG_DIR exists when writing files.
      2. Apply dictConfig(make_dict_config(settings)).
    """
    if _writes_files(settings):
        Path(settings.LOG_DIR).mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(make_dict_config(settings))
    logging.getLogger(__name__).debug(
        "logging.configured",
        extra={"log_format": settings.LOG_FORMAT, "writes_files": _writes_files(settings)},
    )


__all__ = ["make_dict_config", "setup_logging", "STANDARD_FORMAT"]
