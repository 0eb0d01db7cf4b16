"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import get_settings
from .errors import register_exception_handlers
from .routes import health, users
from modules.activities.routes import router as activities_router
from modules.animals.routes import router as animals_router
from modules.auth.routes import router as auth_router
from modules.farms.routes import router as farms_router
from modules.notifications.routes import router as notifications_router
from modules.staff.routes import router as staff_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings = get_settings()
    logger.info("Starting %s on %s:%s", settings.app_name, settings.host, settings.port)
    if not settings.jwt_secret:
        logger.warning("JWT_SECRET is not set; authenticated endpoints will reject every request")
    yield
    # Shutdown
    logger.info("Shutting down %s", settings.app_name)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title=settings.app_name,
        description="Livestock identification and farm record keeping API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(auth_router, prefix="/api/auth", tags=["auth"])
    app.include_router(staff_router, prefix="/api/users/staff", tags=["staff"])
    app.include_router(users.router, prefix="/api/users", tags=["users"])
    app.include_router(farms_router, prefix="/api/farm", tags=["farm"])
    app.include_router(animals_router, prefix="/api/animals", tags=["animals"])
    app.include_router(activities_router, prefix="/api/activities", tags=["activities"])
    app.include_router(notifications_router, prefix="/api/notifications", tags=["notifications"])

    return app


# Application instance for uvicorn
app = create_app()
