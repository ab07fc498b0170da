# src/message_translator/core/logging/filters.py
"""
Logging filters.

RedactFilter masks sensitive attributes that callers attach to log records
through `extra={...}` before any handler formats them. Upstream auth errors
travel next to credentials and tokens, so the filter is attached to every
handler built by builder.py.

The filter returns True for every record: it annotates, it never drops.
"""

import logging
from logging import LogRecord

REDACTED = "***REDACTED***"


class RedactFilter(logging.Filter):
    SENSITIVE = {
        "password",
        "secret",
        "token",
        "access_token",
        "refresh_token",
        "apikey",
        "api_key",
        "authorization",
    }

    def filter(self, record: LogRecord) -> bool:
        for key in list(record.__dict__.keys()):
            if key.lower() in self.SENSITIVE:
                record.__dict__[key] = REDACTED
        return True


__all__ = ["RedactFilter", "REDACTED"]
