"""Integrity Classifier — turns driver IntegrityError and DataError into client-safe constraint messages.

Invariants:
    - Never returns raw driver text: only column or constraint names are echoed
    - Always returns at least one message
    - Understands PostgreSQL and SQLite wording; anything else gets the generic message

Design Decisions:
    - Regex on the driver message: SQLAlchemy exposes no portable constraint metadata
      on IntegrityError (ADR: best-effort extraction, generic fallback)
"""

import re

from sqlalchemy.exc import DataError, IntegrityError

GENERIC_CONSTRAINT_MESSAGE = "integrity constraint violated"
GENERIC_DATA_MESSAGE = "value does not fit its column"

_NOT_NULL_PATTERNS = (
    re.compile(r'null value in column "(?P<col>[^"]+)"', re.IGNORECASE),
    re.compile(r"NOT NULL constraint failed: (?P<cols>.+)$", re.IGNORECASE | re.MULTILINE),
)
_UNIQUE_PATTERNS = (
    re.compile(r"key \((?P<cols>[^)]+)\)=", re.IGNORECASE),
    re.compile(r"UNIQUE constraint failed: (?P<cols>.+)$", re.IGNORECASE | re.MULTILINE),
)
_DATA_PATTERNS = (
    (re.compile(r"value too long", re.IGNORECASE), "value too long for its column"),
    (
        re.compile(r"numeric field overflow|out of range", re.IGNORECASE),
        "value out of range for its column",
    ),
)
_CHECK_PATTERNS = (
    re.compile(r'violates check constraint "(?P<name>[^"]+)"', re.IGNORECASE),
    re.compile(r"CHECK constraint failed: (?P<name>.+)$", re.IGNORECASE | re.MULTILINE),
)


def _split_columns(raw: str) -> list[str]:
    # "products.name, products.price" -> ["name", "price"]
    return [c.split(".")[-1].strip().strip('"') for c in re.split(r",\s*", raw.strip())]


def _match_columns(patterns, msg: str) -> list[str] | None:
    for pattern in patterns:
        m = pattern.search(msg)
        if m:
            groups = m.groupdict()
            if groups.get("col"):
                return [groups["col"]]
            return _split_columns(groups["cols"])
    return None


def describe_integrity_error(exc: IntegrityError) -> list[str]:
    """Best-effort list of human-readable constraint messages for exc."""
    msg = str(exc.orig) if exc.orig is not None else str(exc)

    columns = _match_columns(_NOT_NULL_PATTERNS, msg)
    if columns:
        return [f"{col} must not be null" for col in columns]

    columns = _match_columns(_UNIQUE_PATTERNS, msg)
    if columns:
        return [f"{col} must be unique" for col in columns]

    for pattern in _CHECK_PATTERNS:
        m = pattern.search(msg)
        if m:
            return [f"check constraint {m.group('name').strip()} violated"]

    return [GENERIC_CONSTRAINT_MESSAGE]


def describe_data_error(exc: DataError) -> list[str]:
    """Client-safe message for a value the column type cannot hold."""
    msg = str(exc.orig) if exc.orig is not None else str(exc)
    for pattern, text in _DATA_PATTERNS:
        if pattern.search(msg):
            return [text]
    return [GENERIC_DATA_MESSAGE]
