# src/qa_types/core/logging/builder.py
"""
Logging builder: create and apply a dictConfig logging configuration from Settings.

 - make_dict_config(settings): pure function returning the dictConfig mapping
 - setup_logging(settings): creates LOG_DIR when file logging is on, applies the mapping and
   installs a root-level RequestIdFilter so `%(request_id)s` is always resolvable

Settings used: LOG_TO_STDOUT, LOG_DIR, LOG_FORMAT, LOG_LEVEL, ENABLE_SQL_LOGGING, ENV.
Any object exposing these attributes works (tests pass SimpleNamespace objects).
"""

from __future__ import annotations

from pathlib import Path
import logging
import logging.config

from qa_types.utils.project import get_project_name

from .formatters import JsonFormatter, ColorFormatter
from .filters import RequestIdFilter, RedactFilter
from .handlers import (
    get_console_handler,
    get_file_handler,
    get_error_file_handler,
    get_error_console_handler,
)

# Settings type only; calling get_settings() here would read the environment at import time.
from qa_types.config.settings import Settings  # type: ignore

# Chatty third-party loggers and the level they get unless LOG_LEVEL is DEBUG.
# selenium's remote connection logs every WebDriver command at DEBUG; urllib3 logs every
# request made to the browser driver and to the ZAP API.
THIRD_PARTY_LEVELS = {
    "selenium": "WARNING",
    "urllib3": "WARNING",
    "faker": "WARNING",
    "httpx": "WARNING",
    "asyncio": "WARNING",
}


def _file_logging_enabled(settings: Settings) -> bool:
    return (not settings.LOG_TO_STDOUT) and bool(settings.LOG_DIR)


def make_dict_config(settings: Settings) -> dict:
    """
    Build the dictConfig mapping using the provided settings.

    The returned mapping includes:
      - formatters: "standard" (color text or plain) and "json"
      - filters: "request_id", "redact"
      - handlers: console, plus (file, error_file) OR error_console depending on LOG_TO_STDOUT
      - loggers: root, uvicorn.error, uvicorn.access, sqlalchemy.engine and the third-party
        libraries the examples drive (selenium, urllib3, ...)
    """
    formatters = {
        "standard": {
            "()": ColorFormatter if settings.LOG_FORMAT == "text" else logging.Formatter,
            "format": "%(asctime)s | %(levelname)s | %(name)s | %(request_id)s | %(message)s",
        },
        "json": {
            "()": JsonFormatter,
            "env": settings.ENV,
            "service": get_project_name(),
        },
    }

    filters = {
        "request_id": {"()": RequestIdFilter},
        "redact": {"()": RedactFilter},
    }

    handlers: dict[str, dict] = {"console": get_console_handler(settings)}

    if _file_logging_enabled(settings):
        handlers["file"] = get_file_handler(settings)
        handlers["error_file"] = get_error_file_handler(settings)
    else:
        handlers["error_console"] = get_error_console_handler(settings)

    all_handlers = list(handlers.keys())

    loggers: dict[str, dict] = {
        "": {
            "handlers": all_handlers,
            "level": settings.LOG_LEVEL,
            "propagate": True,
        },
        "uvicorn.error": {
            "level": settings.LOG_LEVEL,
            "handlers": all_handlers,
            "propagate": False,
        },
        "uvicorn.access": {
            "level": "INFO",
            "handlers": ["console"],
            "propagate": False,
        },
        # SQL statements may contain row values
        "sqlalchemy.engine": {
            "level": "DEBUG" if getattr(settings, "ENABLE_SQL_LOGGING", False) else "WARNING",
            "handlers": ["console"],
            "propagate": False,
        },
    }

    for name, level in THIRD_PARTY_LEVELS.items():
        loggers[name] = {
            "level": "DEBUG" if settings.LOG_LEVEL == "DEBUG" else level,
            "propagate": True,
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": formatters,
        "filters": filters,
        "handlers": handlers,
        "loggers": loggers,
    }


def setup_logging(settings: Settings) -> None:
    """
    Initialize logging using settings.

    Steps:
      1. Ensure LOG_DIR exists when writing files.
      2. Apply dictConfig(make_dict_config(settings)).
      3. Register a RequestIdFilter on the root logger as a safety net for records
         that reach root-level handlers added later (e.g. pytest's caplog handler).
    """
    if _file_logging_enabled(settings):
        Path(settings.LOG_DIR).mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(make_dict_config(settings))

    root = logging.getLogger()
    if not any(isinstance(f, RequestIdFilter) for f in root.filters):
        root.addFilter(RequestIdFilter())

    logging.getLogger(__name__).debug(
        "logging.configured",
        extra={"log_format": settings.LOG_FORMAT, "log_level": settings.LOG_LEVEL, "to_stdout": settings.LOG_TO_STDOUT},
    )
