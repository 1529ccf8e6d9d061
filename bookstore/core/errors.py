"""
Error taxonomy and the JSON error envelope.

Every failure response has the same shape::

    {"error": true, "code": "not_found", "message": "Book not found"}

Validation failures additionally carry ``errors``, a list of
``{"field": ..., "message": ...}`` descriptors in request order.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

VALUE_ERROR_PREFIX = "Value error, "


class BookstoreError(Exception):
    """Base class for failures that map onto an HTTP response."""

    status_code = 500
    code = "internal_error"

    def __init__(self, message: str, code: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        if status_code is not None:
            self.status_code = status_code


class RequestValidationFailed(BookstoreError):
    status_code = 400
    code = "validation_error"

    def __init__(self, errors: list[dict[str, str]], message: str = "Validation failed"):
        super().__init__(message)
        self.errors = errors


class MissingFieldsError(BookstoreError):
    """Raised when a PUT body omits one of the fields it must replace."""

    status_code = 400
    code = "missing_fields"


class EntityNotFoundError(BookstoreError):
    status_code = 404
    code = "not_found"


class PersistenceError(BookstoreError):
    """A mutation could not be stored; carries a verb-specific message."""

    status_code = 500
    code = "persistence_error"


class DataReadError(BookstoreError):
    code = "data_read_error"

    def __init__(self, message: str = "Data could not be read"):
        super().__init__(message)


class DataWriteError(BookstoreError):
    code = "data_write_error"

    def __init__(self, message: str = "Data could not be saved"):
        super().__init__(message)


def error_body(message: str, code: str, errors: list[dict[str, str]] | None = None) -> dict[str, Any]:
    body: dict[str, Any] = {"error": True, "code": code, "message": message}
    if errors is not None:
        body["errors"] = errors
    return body


def _field_name(loc: Iterable[Any]) -> str:
    parts = [str(p) for p in loc]
    # FastAPI prefixes the source ("body", "path", "query")
    if len(parts) > 1 and parts[0] in {"body", "path", "query"}:
        parts = parts[1:]
    return ".".join(parts) or "body"


def _error_message(err: dict[str, Any]) -> str:
    ctx = err.get("ctx") or {}
    original = ctx.get("error")
    if isinstance(original, Exception) and str(original):
        return str(original)
    message = str(err.get("msg", "Invalid value"))
    # pydantic prefixes messages raised from validators
    if message.startswith(VALUE_ERROR_PREFIX):
        message = message[len(VALUE_ERROR_PREFIX):]
    return message


def validation_errors(exc: RequestValidationError) -> list[dict[str, str]]:
    """Flatten pydantic errors into ``{field, message}`` descriptors."""
    return [{"field": _field_name(err.get("loc", ())), "message": _error_message(err)} for err in exc.errors()]


async def _bookstore_error_handler(request: Request, exc: BookstoreError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    errors = exc.errors if isinstance(exc, RequestValidationFailed) else None
    return JSONResponse(error_body(exc.message, exc.code, errors), status_code=exc.status_code)


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = validation_errors(exc)
    logger.info("%s %s rejected: %d validation error(s)", request.method, request.url.path, len(errors))
    return JSONResponse(error_body("Validation failed", "validation_error", errors), status_code=400)


async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return JSONResponse(
        error_body(message, "http_error"),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    status_code = getattr(exc, "status_code", None) or getattr(exc, "status", None) or 500
    if not isinstance(status_code, int):
        status_code = 500
    message = str(exc) or "Internal Server Error"
    return JSONResponse(error_body(message, "internal_error"), status_code=status_code)


def register_error_handlers(app: FastAPI) -> None:
    """Attach the envelope-producing handlers to ``app``."""
    app.add_exception_handler(BookstoreError, _bookstore_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
