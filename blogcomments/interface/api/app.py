"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from blogcomments.config import Settings
from blogcomments.interface.api.errors import request_validation_handler
from blogcomments.interface.api.routes import admin, comments, health
from blogcomments.util.di.container import create_container, setup_di
from blogcomments.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, scripts/start_app.py handles this.
    In tests, tests/conftest.py does.

    Args:
        container: DI container to use; the production container when None

    Returns:
        Configured application
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Blog Comments API",
        description="Moderated comments and replies for blog posts",
        version="1.0.0",
    )

    instrument_fastapi(app_instance)

    # Requests from origins outside the allow-list get no CORS headers
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allowed_origins,
        allow_methods=settings.cors.allowed_methods,
        allow_headers=settings.cors.allowed_headers,
    )

    app_instance.add_exception_handler(
        RequestValidationError, request_validation_handler
    )

    if container is None:
        container = create_container()
    setup_di(app_instance, container)

    app_instance.include_router(health.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(admin.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
