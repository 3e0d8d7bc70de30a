"""Integrity Classifier — verifies driver messages become client-safe constraint messages."""

from sqlalchemy.exc import DataError, IntegrityError

from resource_api.infrastructure.integrity import (
    GENERIC_CONSTRAINT_MESSAGE, GENERIC_DATA_MESSAGE,
    describe_data_error, describe_integrity_error,
)


def _integrity(message: str) -> IntegrityError:
    return IntegrityError("INSERT ...", {}, Exception(message))


def test_sqlite_not_null():
    exc = _integrity("NOT NULL constraint failed: products.name")
    assert describe_integrity_error(exc) == ["name must not be null"]


def test_postgres_not_null():
    exc = _integrity('null value in column "price" of relation "products" violates not-null constraint')
    assert describe_integrity_error(exc) == ["price must not be null"]


def test_sqlite_unique_multiple_columns():
    exc = _integrity("UNIQUE constraint failed: students.email, students.name")
    assert describe_integrity_error(exc) == ["email must be unique", "name must be unique"]


def test_postgres_unique():
    exc = _integrity(
        'duplicate key value violates unique constraint "uq_email"\n'
        "DETAIL:  Key (email)=(a@b.com) already exists.",
    )
    assert describe_integrity_error(exc) == ["email must be unique"]


def test_sqlite_check():
    exc = _integrity("CHECK constraint failed: ck_products_price_min")
    assert describe_integrity_error(exc) == ["check constraint ck_products_price_min violated"]


def test_postgres_check():
    exc = _integrity(
        'new row for relation "students" violates check constraint "ck_students_age_min"',
    )
    assert describe_integrity_error(exc) == ["check constraint ck_students_age_min violated"]


def test_unknown_message_falls_back_to_generic():
    exc = _integrity("something odd happened")
    assert describe_integrity_error(exc) == [GENERIC_CONSTRAINT_MESSAGE]


def _data(message: str) -> DataError:
    return DataError("INSERT ...", {}, Exception(message))


def test_postgres_value_too_long():
    exc = _data("value too long for type character varying(320)")
    assert describe_data_error(exc) == ["value too long for its column"]


def test_postgres_numeric_overflow():
    exc = _data("numeric field overflow\nDETAIL:  A field with precision 19, scale 2 ...")
    assert describe_data_error(exc) == ["value out of range for its column"]


def test_postgres_integer_out_of_range():
    assert describe_data_error(_data("integer out of range")) == [
        "value out of range for its column",
    ]


def test_unknown_data_error_falls_back_to_generic():
    assert describe_data_error(_data("invalid input syntax")) == [GENERIC_DATA_MESSAGE]
