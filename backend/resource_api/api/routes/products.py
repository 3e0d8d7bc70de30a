"""Product Routes — CRUD endpoints for products under /api/product.

Invariants:
    - Singular prefix kept for compatibility with existing clients
"""

from resource_api.api.routes.resource_routes import build_resource_router
from resource_api.services.resource_catalog import PRODUCT

router = build_resource_router(PRODUCT, prefix="/api/product", tag="products")
