# src/qa_types/core/logging/formatters.py

"""
Custom logging formatters.

  - JsonFormatter: one JSON object per line, for CI artifacts and log collectors. Carries the
    observability fields (service, env, version, request_id) plus whatever was passed via `extra`
    (e.g. `duration_ms` from the performance example, `alert_count` from the security scan).

  - ColorFormatter: a compact ANSI-colored line for local terminals.

builder.py selects between them from `Settings.LOG_FORMAT`.
"""

import json
import logging
from typing import Any
from logging import LogRecord
from qa_types.utils.project import get_project_version

PROJECT_VERSION = get_project_version()

# Attributes every LogRecord carries. Anything else on the record came from `extra={...}`
# or from a filter and is emitted as a top-level JSON field.
_STANDARD_ATTRS = frozenset({
    "args", "msg", "levelname", "levelno", "name", "pathname", "filename", "module", "lineno",
    "funcName", "created", "msecs", "relativeCreated", "thread", "threadName", "processName",
    "process", "taskName", "exc_info", "exc_text", "stack_info", "message", "asctime",
})


class JsonFormatter(logging.Formatter):
    """
    Structured JSON formatter.

    Construction:
      - env: environment name (e.g., "development" | "testing"); optional.
      - service: logical service name to include in logs.
      - datefmt: optional date format passed to logging.Formatter (used by formatTime).

    Non-serializable extras are converted with `str()`; the formatter never raises.
    """

    def __init__(self, *, env: str | None = None, service: str = "qa-testing-types", datefmt: str | None = None):
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
            "request_id": getattr(record, "request_id", "-"),
            "service": self.service,
            "env": self.env,
            "version": PROJECT_VERSION,
        }

        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)
        if record.stack_info:
            log_record["stack_info"] = self.formatStack(record.stack_info)

        for k, v in record.__dict__.items():
            if k in log_record or k in _STANDARD_ATTRS or k.startswith("_"):
                continue
            try:
                json.dumps(v)
                log_record[k] = v
            except (TypeError, ValueError):
                log_record[k] = str(v)

        return json.dumps(log_record, ensure_ascii=False, default=str)


class ColorFormatter(logging.Formatter):
    """
    Development-friendly colored formatter.

    Produces: TIMESTAMP | LEVEL | LOGGER_NAME | REQUEST_ID | MESSAGE, with the level name
    colorized and the traceback appended on a new line when exc_info is set.
    """

    COLOR_CODES = {
        "DEBUG": "\033[1;36;47m",   # bold cyan on white
        "INFO": "\033[32m",         # green
        "WARNING": "\033[33m",      # yellow
        "ERROR": "\033[31m",        # red
        "CRITICAL": "\033[1;41m",   # bold on red background
        "RESET": "\033[0m",
    }

    def __init__(self, fmt: str | None = None, datefmt: str | None = None) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)

    def format(self, record: LogRecord) -> str:
        color = self.COLOR_CODES.get(record.levelname, "")
        # Only the level name is colored; reset before the rest of the line.
        reset = self.COLOR_CODES["RESET"]

        timestamp = self.formatTime(record, self.datefmt)
        base = (
            f"{timestamp} | {color}{record.levelname:<10}{reset} | "
            f"{record.name:<30} | "
            f"{getattr(record, 'request_id', '-'):<10} | "
            f"{record.getMessage()}"
        )

        if record.exc_info:
            base = base + "\n" + self.formatException(record.exc_info)

        return base
