"""Resource Catalog — the concrete resource definitions served by the API.

Invariants:
    - Rule messages are the client-facing texts returned in validationErrors
    - Field order here is the order violations are reported in
"""

from decimal import Decimal

from resource_api.core.resource_definition import ResourceDefinition
from resource_api.core.validation import (
    EmailFormat, MaxLength, MaxValue, MinValue, NotBlank, NotNull,
)
from resource_api.models.product import PRICE_MAX, Product
from resource_api.models.student import EMAIL_MAX_LENGTH, Student
from resource_api.schemas.product import ProductDto
from resource_api.schemas.student import StudentDto


PRODUCT = ResourceDefinition(
    name="Product",
    entity_type=Product,
    dto_type=ProductDto,
    fields=("name", "description", "price"),
    rules={
        "name": (
            NotBlank("Product name is required"),
            NotNull("Product name cannot be null"),
        ),
        "description": (
            NotBlank("Product description is required"),
            NotNull("Product description cannot be null"),
        ),
        "price": (
            NotNull("Product price is required"),
            MinValue(Decimal("0.01"), "Product price must be greater than 0"),
            MaxValue(PRICE_MAX, f"Product price must be at most {PRICE_MAX}"),
        ),
    },
)

STUDENT = ResourceDefinition(
    name="Student",
    entity_type=Student,
    dto_type=StudentDto,
    fields=("name", "email", "age"),
    rules={
        "name": (
            NotBlank("Name is required and cannot be blank"),
        ),
        "email": (
            NotBlank("Email is required and cannot be blank"),
            EmailFormat("Email must be a valid email address"),
            MaxLength(
                EMAIL_MAX_LENGTH,
                f"Email must be at most {EMAIL_MAX_LENGTH} characters",
            ),
        ),
        "age": (
            NotNull("Age is required"),
            MinValue(Decimal(1), "Age must be at least 1"),
        ),
    },
)
