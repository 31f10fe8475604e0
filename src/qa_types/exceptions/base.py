"""
Application-level exceptions shared by the catalogue and the examples.
"""

from typing import Iterable

# canonical application-level exception

class QAError(Exception):
    """
    Base exception for every error raised by this package.

    - message: human-friendly message (safe to show to clients)
    - fields: optional list of field names related to the error (e.g., ['user_id'])
    - error_code: canonical short code (e.g., 'not_found', 'invalid_input') used by clients
    """

    # Map canonical error_code -> default HTTP status.
    ERROR_CODE_TO_STATUS = {
        "duplicate": 409,
        "not_found": 404,
        "invalid_input": 422,
        "unknown_category": 422,
        "authentication_failed": 401,
        # fallback: default to 400 for everything else
    }

    def __init__(self, message: str, *, fields: Iterable[str] | None = None,
                 error_code: str | None = None):
        super().__init__(message)
        self.message = message
        self.fields = list(fields) if fields else None
        self.error_code = error_code

    def __str__(self) -> str:
        base = self.message
        parts = []
        if self.fields:
            parts.append(f"fields: {', '.join(self.fields)}")
        if self.error_code:
            parts.append(f"code: {self.error_code}")
        if parts:
            return f"{base} ({'; '.join(parts)})"
        return base

    def to_payload(self) -> dict:
        """
        Return a JSON-serializable dict suitable for HTTP responses.
        Standard shape:
            {
                "detail": "A human-friendly message",
                "code": "not_found",           # optional canonical code
                "fields": ["user_id"],         # optional list for client usage
            }
        """
        payload = {"detail": self.message}
        if self.error_code:
            payload["code"] = self.error_code
        if self.fields:
            payload["fields"] = list(self.fields)
        return payload

    def http_status(self) -> int:
        """
        Return the HTTP status code that should accompany this error.
        Unknown or missing error codes map to 400 (Bad Request).
        """
        if self.error_code:
            return self.ERROR_CODE_TO_STATUS.get(self.error_code, 400)
        return 400


# ----------------------------------------------------------------------
# Lookup / input errors
# ----------------------------------------------------------------------

class NotFoundError(QAError):
    def __init__(self, message: str = "Not found", *, fields: Iterable[str] | None = None):
        super().__init__(message, fields=fields, error_code="not_found")


class DuplicateError(QAError):
    def __init__(self, message: str, *, fields: Iterable[str] | None = None):
        super().__init__(message, fields=fields, error_code="duplicate")


class InvalidInputError(QAError):
    """Raised when a caller passes a value outside the accepted domain (negative duration, id <= 0, ...)."""

    def __init__(self, message: str, *, fields: Iterable[str] | None = None):
        super().__init__(message, fields=fields, error_code="invalid_input")


class RepositoryError(QAError):
    """Unexpected database failure, raised with the original exception chained."""


class UnknownCategoryError(QAError):
    def __init__(self, name: str):
        super().__init__(f"Unknown testing category: {name!r}", fields=["category"], error_code="unknown_category")
        self.name = name


class AuthenticationError(QAError):
    def __init__(self, message: str, *, fields: Iterable[str] | None = None):
        super().__init__(message, fields=fields, error_code="authentication_failed")


# ----------------------------------------------------------------------
# Example-specific failures
# ----------------------------------------------------------------------

class ThresholdExceededError(QAError):
    """A timed operation took longer than its allowed threshold."""

    def __init__(self, elapsed: float, threshold: float, *, operation: str | None = None):
        what = operation or "operation"
        super().__init__(
            f"{what} took {elapsed:.3f}s, exceeding the {threshold:.3f}s threshold",
            error_code="threshold_exceeded",
        )
        self.elapsed = elapsed
        self.threshold = threshold


class BrowserError(QAError):
    """The browser could not be started or a page element never appeared."""

    def __init__(self, message: str):
        super().__init__(message, error_code="browser_error")


class ScanError(QAError):
    """The security scanner rejected a request or returned something unusable."""

    def __init__(self, message: str, *, error_code: str = "scan_failed"):
        super().__init__(message, error_code=error_code)


class ScanTimeoutError(ScanError):
    def __init__(self, phase: str, timeout: float, progress: int):
        super().__init__(
            f"{phase} did not finish within {timeout:.0f}s (last progress {progress}%)",
            error_code="scan_timeout",
        )
        self.phase = phase
        self.timeout = timeout
        self.progress = progress


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


r"""
# =================================================================================================================
# Which exception do I catch?
# =================================================================================================================

| Raised by                               | Exception                   | HTTP status (login app) |
| --------------------------------------- | --------------------------- | ----------------------- |
| `catalogue.get_category_info("nope")`   | `UnknownCategoryError`      | 422                     |
| `UserService.require_user_name(42)`     | `NotFoundError`             | 404                     |
| `UserService.get_user_name(0)`          | `InvalidInputError`         | 422                     |
| `UserRepository.create_user(dup_name)`  | `DuplicateError`            | 409                     |
| `assert_completes_within(...)`          | `ThresholdExceededError`    | 400 (not served)        |
| `LoginPage.flash_message()`             | `BrowserError`              | 400 (not served)        |
| `ZapScanner.run(...)`                   | `ScanError`/`ScanTimeoutError` | 400 (not served)     |

Everything derives from `QAError`, so `except QAError` is the catch-all for callers that only need to know
"this package refused". Failed assertions inside tests stay plain `AssertionError`s: they belong to pytest.
"""
