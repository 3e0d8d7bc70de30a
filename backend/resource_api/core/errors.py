"""Error Hierarchy — typed, categorized failures for every CRUD failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity),
      an HTTP status and a client-facing error label
    - Expected failures (not found, validation, constraint) are WARNING severity;
      unexpected failures are CRITICAL
    - to_response() produces the single error envelope used by every resource:
      {timestamp, status, error, message, path, validationErrors?}
    - validationErrors is omitted (absent, not empty) when there are none
    - UnexpectedError never leaks its cause into the response

Design Decisions:
    - Single hierarchy with ResourceError base: one global handler catches all (ADR: uniform error shape)
    - Errors stay Exception subclasses so the store boundary can raise them, while the
      service hands them back as values inside Failed outcomes
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from http import HTTPStatus
from typing import Any, Iterable

from resource_api.core.validation import Violation


GENERIC_INTERNAL_MESSAGE = "An internal error occurred. Please contact support."


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONSTRAINT = "constraint"
    PROTOCOL = "protocol"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource: str | None = None
    entity_id: Any = None


class ResourceError(Exception):
    """Base exception for all resource errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        label: str,
        severity: ErrorSeverity = ErrorSeverity.WARNING,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.label = label
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    @property
    def details(self) -> list[str] | None:
        """Per-item detail lines; None when the error carries none."""
        return None

    def to_response(self, path: str) -> dict:
        """Convert to the standardized REST error envelope."""
        body = {
            "timestamp": self.context.timestamp.isoformat(),
            "status": self.http_status,
            "error": self.label,
            "message": self.message,
            "path": path,
        }
        details = self.details
        if details:
            body["validationErrors"] = details
        return body


# ─── Expected Errors (400-level) ────────────────────────────────

class NotFoundError(ResourceError):
    """No entity of the given resource exists for the id."""
    def __init__(self, entity: str, entity_id: Any):
        super().__init__(
            f"{entity} not found with id: {entity_id}",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            "Resource Not Found", ErrorSeverity.WARNING,
            ErrorContext(resource=entity, entity_id=entity_id), 404,
        )
        self.entity = entity
        self.entity_id = entity_id


class ValidationFailedError(ResourceError):
    """Payload broke one or more field rules."""
    def __init__(self, violations: Iterable[Violation], resource: str | None = None):
        super().__init__(
            "Invalid input data",
            "VALIDATION_FAILED", ErrorCategory.VALIDATION,
            "Validation Failed", ErrorSeverity.WARNING,
            ErrorContext(resource=resource), 400,
        )
        self.violations = list(violations)

    @property
    def details(self) -> list[str] | None:
        return [str(v) for v in self.violations] or None


class ConstraintViolationError(ResourceError):
    """The store rejected a write because a table constraint was violated."""
    def __init__(self, messages: Iterable[str], resource: str | None = None):
        super().__init__(
            "Validation failed",
            "CONSTRAINT_VIOLATION", ErrorCategory.CONSTRAINT,
            "Constraint Violation", ErrorSeverity.WARNING,
            ErrorContext(resource=resource), 400,
        )
        self.messages = list(messages)

    @property
    def details(self) -> list[str] | None:
        return list(self.messages) or None


class HttpStatusError(ResourceError):
    """Routing-level failure (unknown path, wrong method) raised by the web framework."""
    def __init__(self, status: int, detail: str | None = None):
        try:
            label = HTTPStatus(status).phrase
        except ValueError:
            label = "HTTP Error"
        super().__init__(
            detail or label,
            f"HTTP_{status}", ErrorCategory.PROTOCOL,
            label, ErrorSeverity.WARNING if status < 500 else ErrorSeverity.CRITICAL,
            None, status,
        )


# ─── Unexpected Errors (500-level) ──────────────────────────────

class UnexpectedError(ResourceError):
    """Anything else. The cause is kept for logs only."""
    def __init__(self, cause: BaseException | None = None):
        super().__init__(
            GENERIC_INTERNAL_MESSAGE,
            "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            "Internal Server Error", ErrorSeverity.CRITICAL,
            None, 500,
        )
        self.cause = cause
