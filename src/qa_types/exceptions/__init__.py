# qa_types/
# │
# ├── exceptions/
# │   ├── __init__.py
# │   ├── base.py                    # QAError hierarchy (NotFoundError, ThresholdExceededError, ScanError, ...)
# │   └── mapper.py                  # db_error_handler: map SQLAlchemy errors to app-level errors

from .base import (
    QAError,
    NotFoundError,
    DuplicateError,
    InvalidInputError,
    RepositoryError,
    UnknownCategoryError,
    AuthenticationError,
    ThresholdExceededError,
    BrowserError,
    ScanError,
    ScanTimeoutError,
)

__all__ = [
    "QAError",
    "NotFoundError",
    "DuplicateError",
    "InvalidInputError",
    "RepositoryError",
    "UnknownCategoryError",
    "AuthenticationError",
    "ThresholdExceededError",
    "BrowserError",
    "ScanError",
    "ScanTimeoutError",
]
