"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers. Long-lived collaborators are built
here once and attached to ``app.state``; run with
``uvicorn --factory todolist.presentation.api.app:create_app``.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from todolist.infrastructure.persistence.sqlalchemy.database import (
    check_connection,
    create_engine,
    create_session_maker,
    create_tables,
)
from todolist.presentation.api.exception_handlers import setup_exception_handlers
from todolist.presentation.api.routers import todos_router, users_router
from todolist_auth import JWTService, PasswordHashingService
from todolist_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"

# OpenAPI tags metadata for documentation
OPENAPI_TAGS = [
    {
        "name": "Users",
        "description": """Registration, login and self-service profile management.

**Security:**
- Passwords are hashed with bcrypt (8-128 characters)
- Bearer JWT tokens for stateless authentication
- Users can only read, update or delete their own profile
- Changing password or email requires the current password
""",
    },
    {
        "name": "Todos",
        "description": """Todo items of the authenticated user.

Todos are always owned by the caller. A todo owned by someone else is
reported exactly like a missing one (404).
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
    {
        "name": "Info",
        "description": "API information and discovery.",
    },
]


def _configure_logging(settings: Settings) -> None:
    """Configure application logging.

    - Console output with timestamps and module names
    - Configurable log level for todolist modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    for name in ("todolist", "todolist_auth", "todolist_config"):
        logging.getLogger(name).setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("asyncpg").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings: Settings = app.state.settings
    logger.info(
        "Starting %s API v%s (%s)...",
        settings.app_name,
        API_VERSION,
        settings.environment,
    )

    engine = app.state.engine
    try:
        await create_tables(engine)
    except (ConnectionRefusedError, OSError):
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None

    yield

    # Shutdown - dispose the engine and its connection pool
    logger.info("Shutting down %s API...", settings.app_name)
    await engine.dispose()
    logger.info("Database connections closed")


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
    if settings is None:
        settings = get_settings()

    _configure_logging(settings)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="A multi-user **todo list** backend with bearer authentication.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    # Explicit container: shared by every request of this app instance
    engine = create_engine(settings.sqlalchemy_url, echo=settings.db_echo)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_maker = create_session_maker(engine)
    app.state.password_service = PasswordHashingService(
        rounds=settings.password_hash_rounds,
    )
    app.state.jwt_service = JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app, settings)

    app.include_router(users_router, prefix="/users", tags=["Users"])
    app.include_router(todos_router, prefix="/todos", tags=["Todos"])

    @app.get("/health", tags=["Health"])
    async def health_check() -> JSONResponse:
        """Health check endpoint.

        Probes the database with ``SELECT 1``; 503 when it is unreachable.
        """
        connected = await check_connection(app.state.engine)
        body = {
            "success": connected,
            "status": "healthy" if connected else "unhealthy",
            "version": API_VERSION,
            "environment": settings.environment,
            "database": "connected" if connected else "disconnected",
        }
        return JSONResponse(
            status_code=(
                status.HTTP_200_OK
                if connected
                else status.HTTP_503_SERVICE_UNAVAILABLE
            ),
            content=body,
        )

    @app.get("/", tags=["Info"])
    async def root() -> dict:
        """API root endpoint with version information."""
        return {
            "success": True,
            "message": f"{settings.app_name} API is running",
            "version": API_VERSION,
            "environment": settings.environment,
            "docs": "/docs" if settings.api_debug else None,
            "health": "/health",
            "endpoints": {
                "users": "/users",
                "todos": "/todos",
            },
        }

    return app
