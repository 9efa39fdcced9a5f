"""
Request ID middleware.

Each request gets an id from the incoming `X-Request-ID` header (when it is a
valid UUID) or a fresh UUID4. The id is stored in the logging contextvar for the
duration of the request and echoed back in the `X-Request-ID` response header.

Unexpected exceptions escape the app's exception middleware and would reach the
outermost server-error middleware after the id is reset. Passing `error_handler`
renders them here instead, while the id is still set, so the error log line and
the 500 response both carry it.
"""

import uuid
from typing import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from .filters import set_request_id, reset_request_id

REQUEST_ID_HEADER = "X-Request-ID"

ErrorHandler = Callable[[Request, Exception], Awaitable[Response]]


def _incoming_or_new(value: str | None) -> str:
    if value:
        try:
            # reject arbitrary strings (log injection); accept UUID-shaped ids only
            return str(uuid.UUID(value))
        except ValueError:
            pass
    return str(uuid.uuid4())


class RequestIDMiddleware(BaseHTTPMiddleware):

    def __init__(self, app: ASGIApp, error_handler: ErrorHandler | None = None):
        super().__init__(app)
        self.error_handler = error_handler

    async def dispatch(self, request: Request, call_next):
        rid = _incoming_or_new(request.headers.get(REQUEST_ID_HEADER))
        token = set_request_id(rid)

        try:
            try:
                response = await call_next(request)
            except Exception as exc:
                if self.error_handler is None:
                    raise
                response = await self.error_handler(request, exc)
            response.headers[REQUEST_ID_HEADER] = rid
            return response
        finally:
            reset_request_id(token)
