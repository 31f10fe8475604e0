# qa_types/api/error_handlers.py
"""
FastAPI exception handlers that map package exceptions to HTTP responses.

Exceptions carry their own payload (`.to_payload()`) and status (`.http_status()`); the handlers
only log and serialize.
"""

from fastapi import Request
from fastapi.responses import JSONResponse
import logging
from qa_types.exceptions.base import (
    QAError,
    NotFoundError,
    InvalidInputError,
    DuplicateError,
)

logger = logging.getLogger(__name__)


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    logger.info("NotFoundError for %s %s: fields=%s", request.method, request.url.path, exc.fields)
    return JSONResponse(status_code=exc.http_status(), content=exc.to_payload())


async def client_error_handler(request: Request, exc: QAError) -> JSONResponse:
    """
    422 / 409 for input the caller can fix (bad id, duplicate name).
    """
    logger.info("%s for %s %s: fields=%s", type(exc).__name__, request.method, request.url.path, exc.fields)
    return JSONResponse(status_code=exc.http_status(), content=exc.to_payload())


async def qa_error_handler(request: Request, exc: QAError) -> JSONResponse:
    """
    Fallback for every other QAError -> 400 by default (or the code-defined status).
    """
    logger.warning("%s for %s %s: %s", type(exc).__name__, request.method, request.url.path, str(exc))
    return JSONResponse(status_code=exc.http_status(), content=exc.to_payload())


def register_exception_handlers(app) -> None:
    # Most specific first
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(InvalidInputError, client_error_handler)
    app.add_exception_handler(DuplicateError, client_error_handler)
    app.add_exception_handler(QAError, qa_error_handler)
