# 📄 File: app/main.py
#
# 🧭 Purpose (Layman Explanation):
# The main control center that starts up the User Records API, connects all the different parts together,
# and makes sure everything is ready to handle requests.
#
# 🧪 Purpose (Technical Summary):
# FastAPI application factory and entry point with logging setup, middleware stack, exception handlers,
# router registration and database lifecycle management.
#
# 🔗 Dependencies:
# - FastAPI framework, uvicorn
# - app.shared.config.settings
# - app.shared.infrastructure.database.connection
# - app.api.middleware (error handling, logging, rate limiting)
# - app.api.v1 (health and versioned routers)
#
# 🔄 Connected Modules / Calls From:
# - uvicorn server startup (app.main:app)
# - python -m app.main
# - tests/conftest.py (create_application)

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.middleware import (
    ErrorHandlingMiddleware,
    RequestLoggingMiddleware,
    register_exception_handlers,
    setup_rate_limiting,
)
from app.api.middleware.error_handling import REQUEST_ID_HEADER
from app.api.v1.health import health_router
from app.api.v1.router import API_V1_PREFIX, api_v1_router
from app.shared.config.settings import get_settings
from app.shared.infrastructure.database.connection import close_database, initialize_database
from app.shared.utils.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Configures logging and opens the database engine on startup; disposes
    the engine on shutdown.
    """
    settings = get_settings()
    setup_logging(force=True)
    logger.info(f"🚀 {settings.APP_NAME} starting up ({settings.ENVIRONMENT})...")

    await initialize_database()
    logger.info("✅ Database connection initialized")

    try:
        yield  # Application is running
    finally:
        logger.info(f"🔄 {settings.APP_NAME} shutting down...")
        await close_database()
        logger.info("✅ Database connections closed")


def create_application() -> FastAPI:
    """
    Application factory function.

    Creates and configures the FastAPI application with all necessary
    middleware, routers, and settings based on the current environment.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        lifespan=lifespan,
        debug=settings.DEBUG,
    )

    # =========================================================================
    # EXCEPTION HANDLERS
    # =========================================================================

    register_exception_handlers(app)

    # =========================================================================
    # MIDDLEWARE CONFIGURATION (last added runs first)
    # =========================================================================

    setup_rate_limiting(app, settings)

    if not settings.is_testing:
        app.add_middleware(RequestLoggingMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER, "X-RateLimit-Limit", "X-RateLimit-Remaining", "Retry-After"],
    )

    # Error handling middleware (outermost, catches everything)
    app.add_middleware(ErrorHandlingMiddleware)

    # =========================================================================
    # ROUTER REGISTRATION
    # =========================================================================

    # Health check routes (no prefix)
    app.include_router(health_router)

    app.include_router(api_v1_router, prefix=API_V1_PREFIX)

    return app


# Create the FastAPI application
app = create_application()


def main():
    """
    Main function for running the application in development.

    This function is used when running the application directly
    with python -m app.main or as a script entry point.
    """
    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD and settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
        workers=1 if settings.RELOAD else settings.WORKERS,
    )


if __name__ == "__main__":
    main()
