"""Error Handlers — global exception handlers for the userbase API.

Invariants:
    - Every response body is a UserbaseError envelope (code, message, category, severity, timestamp)
    - UserbaseError → its own HTTP status
    - RequestValidationError → RequestDataError (400), details keyed by field like entity validation
    - Exception (catch-all) → InternalError (500), never leaks internal details

Design Decisions:
    - Framework errors are converted to domain errors first, so every body comes from to_response()
    - Request sources ("body", "query", "path") are dropped from field names so clients
      see the same keys as EntityValidationError details
    - Not-found/conflict logged at warning: expected client-side outcomes, not faults
"""

import logging
from collections.abc import Sequence
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from userbase.core.domain_types import FieldsErrors
from userbase.core.errors import ErrorContext, InternalError, RequestDataError, UserbaseError

logger = logging.getLogger(__name__)

_REQUEST_SOURCES = ("body", "query", "path", "header", "cookie")


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(UserbaseError)
    async def userbase_error_handler(request: Request, exc: UserbaseError):
        return _error_response(request, exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return _error_response(request, RequestDataError(group_request_errors(exc.errors())))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled {type(exc).__name__} on {request.url.path}",
            exc_info=exc,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        error = InternalError(ErrorContext(debug_info={"exception": type(exc).__name__}))
        return JSONResponse(status_code=error.http_status, content=error.to_response())


def group_request_errors(errors: Sequence[dict[str, Any]]) -> FieldsErrors:
    """Group framework validation entries by field name, keeping message order."""
    grouped: FieldsErrors = {}
    for error in errors:
        loc = [str(part) for part in error.get("loc") or ()]
        if loc and loc[0] in _REQUEST_SOURCES:
            source, loc = loc[0], loc[1:]
        else:
            source = "data"
        field = ".".join(loc) or source
        grouped.setdefault(field, []).append(error["msg"])
    return grouped


def _error_response(request: Request, exc: UserbaseError) -> JSONResponse:
    level = logging.WARNING if exc.http_status < 500 else logging.ERROR
    logger.log(
        level,
        f"{type(exc).__name__}: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())
