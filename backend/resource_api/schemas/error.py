"""Error Schema — documents the error envelope in the OpenAPI description.

Invariants:
    - Mirrors ResourceError.to_response() field for field
    - validationErrors absent (not null) when there are no per-field details
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Uniform error body returned by every endpoint."""
    model_config = ConfigDict(populate_by_name=True)

    timestamp: datetime
    status: int
    error: str
    message: str
    path: str
    validation_errors: list[str] | None = Field(None, alias="validationErrors")


ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid input data"},
    404: {"model": ErrorResponse, "description": "Resource not found"},
    500: {"model": ErrorResponse, "description": "Internal server error"},
}
