"""Application factory for creating and configuring the FastAPI application."""

from fastapi import FastAPI

from authcore.adapters.api.v1 import api_router
from authcore.core.config.settings import settings
from authcore.core.handlers import register_exception_handlers


def create_application() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        FastAPI: The configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        debug=settings.DEBUG,
    )

    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api/v1")

    return app
