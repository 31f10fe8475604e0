# src/qa_types/core/logging/middleware.py
"""
Request ID middleware for the login demo application (FastAPI / Starlette).

Each request gets an identifier that ends up on every log record emitted while handling it
(via RequestIdFilter) and is echoed back in the `X-Request-ID` response header. When a browser
test fails, the id shown in the server log can be matched to the page the driver was on.

An incoming `X-Request-ID` is reused only when it is a valid UUID; anything else (including values
containing newlines, which would allow log injection) is replaced by a fresh UUID4.
"""

import uuid
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from .filters import set_request_id, reset_request_id

REQUEST_ID_HEADER = "X-Request-ID"


def _valid_request_id(value: str | None) -> str | None:
    if not value:
        return None
    try:
        return str(uuid.UUID(value))
    except ValueError:
        return None


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Stores the request id in a contextvar for the duration of the request and adds it to the response.
    """

    async def dispatch(self, request: Request, call_next):
        rid = _valid_request_id(request.headers.get(REQUEST_ID_HEADER)) or str(uuid.uuid4())

        token = set_request_id(rid)
        try:
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = rid
            return response
        finally:
            reset_request_id(token)
