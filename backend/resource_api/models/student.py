"""Student ORM — persists an enrolled student.

Invariants:
    - id is an integer primary key assigned by the database on insert, never reused
    - name and email are non-nullable text; email at most EMAIL_MAX_LENGTH characters
    - age is a non-nullable integer, at least 1 (CHECK constraint)
"""

from sqlalchemy import BigInteger, CheckConstraint, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from resource_api.db.base import Base

EMAIL_MAX_LENGTH = 320


class Student(Base):
    """Student entity — name, email and age."""
    __tablename__ = "students"
    __table_args__ = (
        CheckConstraint("age >= 1", name="ck_students_age_min"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(String(EMAIL_MAX_LENGTH), nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"<Student(id={self.id!r}, name={self.name!r}, email={self.email!r})>"
