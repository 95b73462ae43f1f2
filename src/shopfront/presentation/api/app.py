"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

All API endpoints live under the /api prefix. The health check and the
info endpoint stay at the root.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shopfront.presentation.api.dependencies import create_tables, get_engine
from shopfront.presentation.api.exception_handlers import setup_exception_handlers
from shopfront.presentation.api.routers import (
    admin_router,
    reports_router,
    superuser_router,
    users_router,
)
from shopfront_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure application logging.

    Sets up logging for the shopfront application with:
    - Console output with timestamps and module names
    - Configurable log level for shopfront modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("shopfront").setLevel(log_level)
    logging.getLogger("shopfront_auth").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_PREFIX = "/api"

OPENAPI_TAGS = [
    {
        "name": "Users",
        "description": """Registration, signin and self-service profile.

**Roles:**
- `user`: regular customer
- `admin`: user with the admin flag set
- `superuser`: the single bootstrap account (admin implied)

Signin tries the active superuser first, then the user store. Failures
never reveal whether the email or the password was wrong.
""",
    },
    {
        "name": "Superuser",
        "description": """One-time setup of the superuser.

Until a superuser exists, every route except superuser setup/check and
signin answers `503 SETUP_REQUIRED`.
""",
    },
    {"name": "Admin", "description": "User management and dashboard counters."},
    {
        "name": "Reports",
        "description": """Derived reports over orders and products.

**Types:** `overview`, `sales`, `products`, `users`. Use `days` to set the
trailing window (default 7) and `/export` for an Excel download.
""",
    },
    {"name": "Health", "description": "Service health monitoring endpoints."},
    {"name": "Info", "description": "API information and discovery."},
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting Shopfront API v%s...", API_VERSION)
    try:
        await create_tables()
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None
    yield

    # Shutdown - dispose the shared engine and its connection pool
    logger.info("Shutting down Shopfront API...")
    await get_engine().dispose()
    logger.info("Database connections closed")


def create_api_router() -> APIRouter:
    """Create the API router with all endpoints mounted."""
    api_router = APIRouter()

    api_router.include_router(users_router, prefix="/users", tags=["Users"])
    api_router.include_router(
        superuser_router,
        prefix="/superuser",
        tags=["Superuser"],
    )
    api_router.include_router(
        reports_router,
        prefix="/admin/reports",
        tags=["Reports"],
    )
    api_router.include_router(admin_router, prefix="/admin", tags=["Admin"])

    return api_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    # Configure logging on first app creation (not on module import)
    _configure_logging()

    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=f"{settings.app_name} API",
        description=(
            "Storefront **administration backend**: user, admin and superuser "
            "authentication plus order and product reporting."
        ),
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register domain exception handlers for consistent error responses
    setup_exception_handlers(app)

    app.include_router(create_api_router(), prefix=API_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Health check endpoint for load balancers and monitoring."""
        return {"status": "healthy", "version": API_VERSION}

    @app.get("/", tags=["Info"])
    async def root() -> dict:
        """API root endpoint with version information."""
        return {
            "name": f"{settings.app_name} API",
            "version": API_VERSION,
            "docs": "/docs" if settings.api_debug else None,
            "api_base": API_PREFIX,
            "endpoints": {
                "health": "/health",
                "users": f"{API_PREFIX}/users",
                "superuser": f"{API_PREFIX}/superuser",
                "admin": f"{API_PREFIX}/admin",
                "reports": f"{API_PREFIX}/admin/reports",
            },
        }

    return app


# Application instance for uvicorn
app = create_app()
