# src/qa_types/core/logging/filters.py
"""
Logging filters.

- RequestIdFilter attaches a per-request identifier (`request_id`) to every LogRecord. The id lives
  in a `contextvars.ContextVar`, so it follows a request across awaits in the login demo app, and
  any formatter referencing `%(request_id)s` never KeyErrors ("-" when no id is set).
- RedactFilter masks sensitive `extra` attributes (passwords typed into the login form, the ZAP
  API key, ...) before a handler formats them.
"""

import logging
from logging import LogRecord
import contextvars

# Default None means "no request id set".
_request_id_ctx: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id", default=None
)


def set_request_id(request_id: str | None):
    """
    Set the request id in the current context and return the token to allow reset.
    """
    return _request_id_ctx.set(request_id)


def reset_request_id(token):
    """
    Reset the contextvar to the previously saved token returned by set_request_id().
    """
    _request_id_ctx.reset(token)


def get_request_id() -> str | None:
    return _request_id_ctx.get()


class RequestIdFilter(logging.Filter):
    """
    Guarantees every LogRecord has a `request_id` attribute, in order of preference:
      * the value passed explicitly via `extra={"request_id": ...}`
      * the contextvar value set by RequestIDMiddleware
      * the sentinel "-"
    Always returns True; the filter annotates, it never drops.
    """

    def filter(self, record: LogRecord) -> bool:
        record.request_id = (
            getattr(record, "request_id", None) or get_request_id() or "-"
        )
        return True


class RedactFilter(logging.Filter):
    """Mask record attributes whose name is sensitive. Matching is case-insensitive."""

    SENSITIVE = {
        "password", "secret", "token", "access_token", "refresh_token",
        "authorization", "apikey", "api_key", "zap_api_key",
    }
    MASK = "***REDACTED***"

    def filter(self, record: LogRecord) -> bool:
        for key in list(record.__dict__.keys()):
            if key.lower() in self.SENSITIVE:
                record.__dict__[key] = self.MASK
        return True
