"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

API Versioning:
    All API endpoints are versioned under /api/v1/ prefix.
    The health check endpoint remains unversioned at /health.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from usermgmt import __version__
from usermgmt.infrastructure.persistence.sqlalchemy.init_db import (
    initialize_database,
)
from usermgmt.presentation.api.dependencies import get_engine
from usermgmt.presentation.api.exception_handlers import setup_exception_handlers
from usermgmt.presentation.api.routers import profiles_router, roles_router
from usermgmt_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure application logging.

    Console output with timestamps and module names, the usermgmt level
    taken from settings and WARNING for noisy third-party libraries.
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

    logging.getLogger("usermgmt").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Roles",
        "description": """Named permission categories.

**Initial roles** (present after startup):
- `1` User
- `2` Admin
- `3` Moderator

Names are unique and compared case-sensitively.
""",
    },
    {
        "name": "Profiles",
        "description": """User profiles, each attached to exactly one role.

**Rules:**
- Email addresses are unique across profiles
- `role_id` must reference an existing role on create and update
- Reads embed the role; create/update return `role_id` only
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting User Management API v%s...", __version__)
    engine = get_engine()
    try:
        seeded = await initialize_database(engine)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None
    logger.info("Database ready (%d initial roles inserted)", seeded)
    yield

    # Shutdown - dispose the shared engine and its connection pool
    logger.info("Shutting down User Management API...")
    await engine.dispose()
    logger.info("Database connections closed")


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoints."""
    v1_router = APIRouter()
    v1_router.include_router(roles_router, prefix="/roles", tags=["Roles"])
    v1_router.include_router(profiles_router, prefix="/profiles", tags=["Profiles"])
    return v1_router


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
        description="Roles and user profiles with audited persistence.",
        version=__version__,
        debug=settings.debug,
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

    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Health check endpoint, unversioned for load balancers."""
        return {
            "status": "healthy",
            "version": __version__,
            "api_versions": ["v1"],
        }

    return app


# Application instance for uvicorn
app = create_app()
