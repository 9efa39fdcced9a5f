# bazaar/api/v1/error_handlers.py
"""
FastAPI exception handlers: the single place where errors become HTTP responses.

How it fits together:
    - Services and repositories raise `AppError` tagged with an `ErrorCategory`.
    - `app_error_handler` switches on the category (not on the exception class)
      for the body shape; the status code comes from `AppError.http_status()`:
        NOT_FOUND    -> 404 {"status", "message", "timestamp"}
        BAD_REQUEST  -> 400 {"<field>": "<message>", ...}
        UNCLASSIFIED -> 500 generic envelope
    - Request validation failures (bad JSON, missing/invalid fields, bad path params)
      -> 400 {"<field>": "<message>", ...}
    - Anything else -> 500 generic envelope. Tracebacks are logged, never returned.
      `RequestIDMiddleware` renders these through `unhandled_error_handler` so the
      request id is still set for the log line and echoed on the response.
"""

import logging
from typing import Any, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from bazaar.exceptions.base import AppError, ErrorCategory
from bazaar.schemas.error import ErrorResponse

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred"

# Location prefixes FastAPI puts in front of the field path
_LOCATION_PREFIXES = {"body", "path", "query", "header", "cookie"}


def _error_envelope(status_code: int, message: str) -> JSONResponse:
    payload = ErrorResponse(status=status_code, message=message)
    return JSONResponse(status_code=status_code, content=payload.model_dump())


def _field_name(loc: Sequence[Any]) -> str:
    """
    ("body", "email") -> "email"; ("body", "address", "city") -> "address.city";
    ("body",) -> "body" (the whole body is unusable, e.g. malformed JSON).
    """
    parts = [str(p) for p in loc]
    if len(parts) > 1 and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    return ".".join(parts) or "body"


def validation_errors_to_fields(errors: Sequence[dict]) -> dict[str, str]:
    """Collapse pydantic error dicts into {field: message}; the first message per field wins."""
    fields: dict[str, str] = {}
    for err in errors:
        # malformed JSON reports a character offset as its location
        loc = ("body",) if err.get("type") == "json_invalid" else err.get("loc", ())
        fields.setdefault(_field_name(loc), err.get("msg", "Invalid value"))
    return fields


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    status_code = exc.http_status()

    if exc.category is ErrorCategory.NOT_FOUND:
        logger.info("NotFound for %s %s: %s", request.method, request.url.path, exc.message)
        return _error_envelope(status_code, exc.message)

    if exc.category is ErrorCategory.BAD_REQUEST:
        logger.info("BadRequest for %s %s: fields=%s", request.method, request.url.path, exc.fields)
        content = exc.fields or {"detail": exc.message}
        return JSONResponse(status_code=status_code, content=content)

    # UNCLASSIFIED: the message may describe internals, keep it in the logs only
    logger.error("Unclassified error for %s %s: %s", request.method, request.url.path, exc)
    return _error_envelope(status_code, GENERIC_ERROR_MESSAGE)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = validation_errors_to_fields(exc.errors())
    logger.info("Validation failed for %s %s: fields=%s", request.method, request.url.path, sorted(fields))
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=fields)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error for %s %s", request.method, request.url.path)
    return _error_envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_MESSAGE)


# Helper to register all handlers on an app (called from the app factory)
def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
