"""DTO Schemas — verifies parsing leniency and price serialization."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from resource_api.schemas.product import ProductDto
from resource_api.schemas.student import StudentDto


def test_all_fields_optional():
    assert ProductDto().model_dump() == {
        "id": None, "name": None, "description": None, "price": None,
    }
    assert StudentDto().age is None


def test_price_parses_json_number_as_exact_decimal():
    dto = ProductDto.model_validate_json('{"price": 9.99}')
    assert dto.price == Decimal("9.99")


def test_price_serializes_as_json_number():
    dto = ProductDto(id=1, name="Widget", description="d", price=Decimal("19.99"))
    assert dto.model_dump_json() == '{"id":1,"name":"Widget","description":"d","price":19.99}'


def test_price_rejects_non_numeric_text():
    with pytest.raises(ValidationError):
        ProductDto(price="cheap")


def test_student_age_must_be_integer():
    with pytest.raises(ValidationError):
        StudentDto(age="old")
