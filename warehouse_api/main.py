"""Beverage Warehouse API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Every request passes the Basic authentication gate before routing,
      except the configured health-probe paths
    - Global error handlers map CatalogError → status + envelope (or empty body)
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - CORS added after the gate so it wraps it: preflight requests carry no credentials
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from warehouse_api.api.auth_gate import install_auth_gate
from warehouse_api.api.error_handlers import register_error_handlers
from warehouse_api.api.routes import health
from warehouse_api.api.routes.catalog import (
    categories_router, orders_router, products_router,
)
from warehouse_api.config import get_settings
from warehouse_api.infrastructure.database import close_db, init_db
from warehouse_api.infrastructure.identity_store import StaticCredentialVerifier
from warehouse_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Beverage Warehouse API started")
    yield
    await close_db()
    logger.info("Beverage Warehouse API shutting down")


app = FastAPI(
    title="Beverage Warehouse API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()

# Authentication gate: innermost middleware, runs before routing
install_auth_gate(
    app,
    StaticCredentialVerifier(settings.basic_auth_users),
    realm=settings.basic_auth_realm,
    exempt_paths=settings.auth_exempt_paths,
)

# CORS from settings
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(categories_router)
app.include_router(products_router)
app.include_router(orders_router)

register_error_handlers(app)
