"""Student Schemas — wire DTO for the student resource."""

from pydantic import BaseModel


class StudentDto(BaseModel):
    """Student as exchanged with clients. All fields optional (see schemas/__init__)."""
    id: int | None = None
    name: str | None = None
    email: str | None = None
    age: int | None = None
