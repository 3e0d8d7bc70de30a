"""Error Hierarchy — verifies status codes, labels, and the response envelope.

Tests:
    - Each error carries its HTTP status, label, and message
    - to_response() emits {timestamp, status, error, message, path}
    - validationErrors present only when there are details
    - UnexpectedError never exposes its cause
"""

from datetime import datetime

from resource_api.core.errors import (
    GENERIC_INTERNAL_MESSAGE, ConstraintViolationError, ErrorCategory, ErrorSeverity,
    HttpStatusError, NotFoundError, UnexpectedError, ValidationFailedError,
)
from resource_api.core.validation import Violation


def test_not_found_envelope():
    body = NotFoundError("Product", 42).to_response("/api/product/42")
    assert body["status"] == 404
    assert body["error"] == "Resource Not Found"
    assert body["message"] == "Product not found with id: 42"
    assert body["path"] == "/api/product/42"
    assert "validationErrors" not in body


def test_envelope_timestamp_is_iso_8601():
    body = NotFoundError("Student", 1).to_response("/api/students/1")
    assert isinstance(datetime.fromisoformat(body["timestamp"]), datetime)


def test_validation_failed_lists_field_messages():
    err = ValidationFailedError([
        Violation("name", "Product name is required"),
        Violation("price", "Product price must be greater than 0"),
    ], resource="Product")
    body = err.to_response("/api/product")
    assert err.http_status == 400
    assert body["error"] == "Validation Failed"
    assert body["message"] == "Invalid input data"
    assert body["validationErrors"] == [
        "name: Product name is required",
        "price: Product price must be greater than 0",
    ]


def test_constraint_violation_envelope():
    err = ConstraintViolationError(["check constraint ck_products_price_min violated"])
    body = err.to_response("/api/product")
    assert body["status"] == 400
    assert body["error"] == "Constraint Violation"
    assert body["message"] == "Validation failed"
    assert body["validationErrors"] == ["check constraint ck_products_price_min violated"]
    assert err.category is ErrorCategory.CONSTRAINT


def test_unexpected_error_hides_cause():
    err = UnexpectedError(RuntimeError("password=hunter2"))
    body = err.to_response("/api/product")
    assert body["status"] == 500
    assert body["error"] == "Internal Server Error"
    assert body["message"] == GENERIC_INTERNAL_MESSAGE
    assert "hunter2" not in str(body)
    assert err.severity is ErrorSeverity.CRITICAL


def test_http_status_error_uses_reason_phrase():
    err = HttpStatusError(405)
    assert err.label == "Method Not Allowed"
    assert err.message == "Method Not Allowed"
    assert err.code == "HTTP_405"
    assert err.severity is ErrorSeverity.WARNING


def test_http_status_error_unknown_code_and_detail():
    err = HttpStatusError(599, "upstream gave up")
    assert err.label == "HTTP Error"
    assert err.message == "upstream gave up"
    assert err.severity is ErrorSeverity.CRITICAL
