"""Error Handlers — global exception handlers for the resource API.

Invariants:
    - ResourceError -> its own status and envelope
    - RequestValidationError (body/path parsing) -> 400 "Validation Failed" with field details
    - Starlette HTTPException (unknown route, wrong method) -> same envelope, framework status
    - Exception (catch-all) -> 500 with a generic message, never leaks internal details

Design Decisions:
    - Four-layer handler: domain (ResourceError), parsing (Pydantic), routing (Starlette), catch-all
    - Extracted from main.py (ADR: import fan-out < 10)
    - Every handler funnels into error_translation.error_response
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from resource_api.api.error_translation import error_response
from resource_api.core.errors import (
    HttpStatusError, ResourceError, UnexpectedError, ValidationFailedError,
)
from resource_api.core.validation import Violation


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_resource_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_resource_error_handler(app: FastAPI) -> None:
    """Register handler for resource errors raised instead of returned."""

    @app.exception_handler(ResourceError)
    async def resource_error_handler(request: Request, exc: ResourceError):
        return error_response(exc, request.url.path)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic request parsing error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        return error_response(
            _violations_from(exc), request.url.path,
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing-level HTTP error handler."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        detail = exc.detail if isinstance(exc.detail, str) else None
        return error_response(
            HttpStatusError(exc.status_code, detail), request.url.path,
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        return error_response(UnexpectedError(exc), request.url.path)


def _violations_from(exc: RequestValidationError) -> ValidationFailedError:
    """Build a ValidationFailedError from pydantic's error list."""
    violations = []
    for e in exc.errors():
        loc = [str(part) for part in e.get("loc", ())]
        if e.get("type") == "json_invalid":
            # loc is ("body", <byte offset>)
            field = "body"
        else:
            # ("body", "price") -> "price"; ("body",) -> "body"
            field = ".".join(loc[1:]) if len(loc) > 1 else ".".join(loc) or "request"
        violations.append(Violation(field, e.get("msg", "invalid value")))
    return ValidationFailedError(violations)
