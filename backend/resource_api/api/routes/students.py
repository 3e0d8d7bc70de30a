"""Student Routes — CRUD endpoints for students under /api/students."""

from resource_api.api.routes.resource_routes import build_resource_router
from resource_api.services.resource_catalog import STUDENT

router = build_resource_router(STUDENT, prefix="/api/students", tag="students")
