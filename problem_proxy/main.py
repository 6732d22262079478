"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (problems, health) under the /api prefix
- Error handlers (centralized domain-to-HTTP mapping)
- CORS policy for the frontend origins
- Logging configuration
- The ServiceNow Table API adapter

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from problem_proxy.core.config import Settings, get_settings
from problem_proxy.infrastructure.problems.table_api_client import (
    ServiceNowTableClient,
)
from problem_proxy.interfaces.health import router as health_router
from problem_proxy.interfaces.problems.router import router as problems_router
from problem_proxy.shared.errors.handlers import register_error_handlers
from problem_proxy.shared.logging import configure_logging

logger = logging.getLogger(__name__)

API_PREFIX = "/api"

# Frontend origins allowed to call the API. Changing these needs a release.
CORS_ALLOWED_ORIGINS = [
    "http://localhost:3001",
    "http://vps-26fe98e4.vps.ovh.net:4000",
]
CORS_ALLOWED_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
CORS_ALLOWED_HEADERS = ["Content-Type", "Authorization"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: release the upstream HTTP client on shutdown."""
    yield
    app.state.table_api.close()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and CORS middleware.
    This is the composition root of the application.

    Args:
        settings: Configuration to run with. Loaded from the
            environment when omitted.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or get_settings()
    configure_logging(level=settings.log_level)

    missing = settings.missing_credentials()
    if missing:
        logger.warning(
            "ServiceNow settings not set: %s. Upstream calls will fail.",
            ", ".join(missing),
        )

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.table_api = ServiceNowTableClient(settings)

    # --- CORS ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ALLOWED_ORIGINS,
        allow_methods=CORS_ALLOWED_METHODS,
        allow_headers=CORS_ALLOWED_HEADERS,
    )

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix=API_PREFIX)
    app.include_router(problems_router, prefix=API_PREFIX)

    return app


app = create_app()
