"""Error Translation — the single point where a ResourceError becomes an HTTP response.

Invariants:
    - Status code and body come only from the error (http_status, to_response)
    - The only place failures are logged: expected ones at INFO, CRITICAL ones at ERROR
      with the original stack trace
    - Response bodies never carry exception text of unexpected failures

Design Decisions:
    - Shared by route handlers (Failed outcomes) and global exception handlers
      (framework/unexpected errors) so both paths produce identical envelopes
"""

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

from resource_api.core.errors import (
    ErrorSeverity, ResourceError, UnexpectedError, ValidationFailedError,
)
from resource_api.core.outcome import Failed, Outcome

logger = logging.getLogger(__name__)


def _log(error: ResourceError, path: str) -> None:
    extra = {
        "error_code": error.code,
        "path": path,
        "resource": error.context.resource,
        "entity_id": error.context.entity_id,
        "violation_count": (
            len(error.violations) if isinstance(error, ValidationFailedError) else None
        ),
    }
    if error.severity is ErrorSeverity.CRITICAL:
        cause = error.cause if isinstance(error, UnexpectedError) else None
        exc_info = (type(cause), cause, cause.__traceback__) if cause else False
        logger.error(
            f"{error.code} on {path}: {cause!r}", extra=extra, exc_info=exc_info,
        )
    else:
        logger.info(f"{error.code} on {path}: {error.message}", extra=extra)


def error_response(
    error: ResourceError, path: str, headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Translate error into its JSON envelope and status code."""
    _log(error, path)
    return JSONResponse(
        status_code=error.http_status,
        content=error.to_response(path),
        headers=headers,
    )


def respond(outcome: Outcome, request: Request) -> Any:
    """Unwrap a success value, or translate a failure for this request."""
    if isinstance(outcome, Failed):
        return error_response(outcome.error, request.url.path)
    return outcome.value
