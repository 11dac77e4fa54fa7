"""Products API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ProductApiError → structured JSON responses
    - CORS allows only the configured frontend origins
    - Database initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: one place for setup and teardown
    - Stock /docs disabled; api/routes/docs.py serves a titled, styled Swagger UI
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from products_api.api.error_handlers import register_error_handlers
from products_api.api.routes import docs, health, products
from products_api.config import get_settings
from products_api.infrastructure.database import close_db, init_db
from products_api.infrastructure.observability import (
    RequestLoggingMiddleware, setup_logging,
)

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
    if settings.database_create_schema:
        try:
            await manager.create_schema()
        except Exception as e:
            # API still starts; readiness probe reports the database as down
            logger.error(f"Could not connect to the database: {e}", exc_info=True)
    logger.info("Products API started")
    yield
    await close_db()
    logger.info("Products API shutting down")


app = FastAPI(
    title="REST API FastAPI / Python",
    description="API Docs for Products",
    version="1.0.0",
    lifespan=lifespan,
    docs_url=None,
    openapi_tags=[
        {"name": "Products", "description": "API operations related to products"},
    ],
)

settings = get_settings()
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(products.router)
app.include_router(docs.router)

if os.path.isdir(settings.static_dir):
    app.mount("/public", StaticFiles(directory=settings.static_dir), name="public")

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
