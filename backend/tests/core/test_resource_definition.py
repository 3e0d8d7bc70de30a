"""Resource Definition — verifies construction-time checks and the shipped catalog."""

import pytest

from resource_api.core.resource_definition import ResourceDefinition
from resource_api.core.validation import NotNull
from resource_api.models.product import Product
from resource_api.schemas.product import ProductDto
from resource_api.services.resource_catalog import PRODUCT, STUDENT


def test_id_is_not_a_domain_field():
    with pytest.raises(ValueError, match="'id'"):
        ResourceDefinition("Product", Product, ProductDto, ("id", "name"), {})


def test_rules_must_target_declared_fields():
    with pytest.raises(ValueError, match="sku"):
        ResourceDefinition(
            "Product", Product, ProductDto, ("name",), {"sku": (NotNull("x"),)},
        )


def test_catalog_fields():
    assert PRODUCT.fields == ("name", "description", "price")
    assert STUDENT.fields == ("name", "email", "age")
    assert set(PRODUCT.rules) == set(PRODUCT.fields)
    assert set(STUDENT.rules) == set(STUDENT.fields)
