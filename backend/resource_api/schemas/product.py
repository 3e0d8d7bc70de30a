"""Product Schemas — wire DTO for the product resource.

Invariants:
    - All fields optional: None means "absent" for updates and "missing" for creates
    - price parses any JSON number/decimal string into Decimal and serializes back as a JSON number
    - id is ignored on create and never changes on update
"""

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, PlainSerializer

Price = Annotated[
    Decimal, PlainSerializer(float, return_type=float, when_used="json"),
]


class ProductDto(BaseModel):
    """Product as exchanged with clients."""
    id: int | None = None
    name: str | None = None
    description: str | None = None
    price: Price | None = None
