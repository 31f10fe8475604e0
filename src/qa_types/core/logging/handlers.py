# src/qa_types/core/logging/handlers.py
"""
Handler factories for logging.dictConfig.

Each function is pure: it takes the validated Settings and returns a handler configuration dict.
builder.py decides which of them are wired in.
"""

from qa_types.config.settings import Settings
from pathlib import Path

# Every handler runs both filters; the names are declared in builder.make_dict_config().
_FILTERS = ["request_id", "redact"]


def _formatter_name(settings: Settings) -> str:
    return "json" if settings.LOG_FORMAT == "json" else "standard"


def get_console_handler(settings: Settings) -> dict:
    """
    Console/stream handler (stderr), all levels >= LOG_LEVEL, formatter chosen by LOG_FORMAT.
    """
    return {
        "class": "logging.StreamHandler",
        "formatter": _formatter_name(settings),
        "level": settings.LOG_LEVEL,
        "filters": list(_FILTERS),
    }


def get_file_handler(settings: Settings) -> dict:
    """Rotating `app.log` under LOG_DIR, all levels >= LOG_LEVEL."""
    file_path = str(Path(settings.LOG_DIR) / "app.log")
    return {
        "class": "logging.handlers.RotatingFileHandler",
        "formatter": _formatter_name(settings),
        "level": settings.LOG_LEVEL,
        "filename": file_path,
        "maxBytes": settings.LOG_MAX_BYTES,
        "backupCount": settings.LOG_BACKUP_COUNT,
        "encoding": "utf-8",
        "filters": list(_FILTERS),
    }


def get_error_file_handler(settings: Settings) -> dict:
    """Rotating `errors.log`: ERROR and above only, always JSON."""
    error_file_path = str(Path(settings.LOG_DIR) / "errors.log")
    return {
        "class": "logging.handlers.RotatingFileHandler",
        "formatter": "json",
        "level": "ERROR",
        "filename": error_file_path,
        "maxBytes": settings.LOG_MAX_BYTES,
        "backupCount": settings.LOG_BACKUP_COUNT,
        "encoding": "utf-8",
        "filters": list(_FILTERS),
    }


def get_error_console_handler(settings: Settings) -> dict:
    return {
        "class": "logging.StreamHandler",
        "formatter": "json",
        "level": "ERROR",
        "filters": list(_FILTERS),
    }


"""
-------------------------------------------------
Which handlers are active?
-------------------------------------------------
| `LOG_TO_STDOUT` | `LOG_DIR` Set  | Active Handlers                     |
| --------------- | -------------- | ----------------------------------- |
| `true`          | doesn't matter | `console` + `error_console`         |
| `false`         | not set        | `console` + `error_console`         |
| `false`         | set            | `console` + `file` + `error_file`   |

In CI, `LOG_TO_STDOUT=false` with `LOG_DIR=artifacts/logs` keeps a JSON `app.log` of the whole
test session next to the junit report, and `errors.log` holds only the failures.
"""
