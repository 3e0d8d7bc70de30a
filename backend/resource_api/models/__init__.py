"""ORM Models — SQLAlchemy declarative models for all resources.

Invariants:
    - All models inherit from Base (db/base.py)
    - One flat table per resource, no relationships

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all/autogenerate
"""

from resource_api.models.product import Product  # noqa: F401
from resource_api.models.student import Student  # noqa: F401
