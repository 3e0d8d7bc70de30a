"""Resource CRUD API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to the {timestamp, status, error, message, path} envelope
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager, disposed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - OpenAPI metadata (contact, license) declared here; docs served at /docs
    - Optional dashboard build mounted last, so unknown /api paths still reach the 404 envelope
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from resource_api.api.error_handlers import register_error_handlers
from resource_api.api.routes import health, products, students
from resource_api.config import get_settings
from resource_api.infrastructure.database import init_db
from resource_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_auto_create:
        await manager.create_all()
    logger.info("Resource API started")
    yield
    logger.info("Resource API shutting down")
    await manager.dispose()


settings = get_settings()

app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
    description="Validated CRUD endpoints for products and students.",
    contact={"name": "API Support", "email": "support@example.com"},
    license_info={
        "name": "Apache 2.0",
        "url": "https://www.apache.org/licenses/LICENSE-2.0.html",
    },
    lifespan=lifespan,
)

# CORS — configured from settings, not hardcoded
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["*"],
    allow_credentials=False,
    expose_headers=["Authorization", "Content-Type"],
    max_age=settings.cors_max_age,
)


def mount_dashboard(app: FastAPI, directory: str) -> bool:
    """Serve a static dashboard build at / if directory exists."""
    if not os.path.isdir(directory):
        return False
    app.mount("/", StaticFiles(directory=directory, html=True), name="static")
    return True


# Routes — explicit registration
app.include_router(health.router)
app.include_router(products.router)
app.include_router(students.router)

# Static files — mounted AFTER API routes so /api/* takes precedence
mount_dashboard(app, settings.static_dir)

register_error_handlers(app)
