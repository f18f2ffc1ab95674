"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI

from miniblog.interface.api.routes import (
    categories,
    files,
    health,
    posts,
    tags,
)
from miniblog.util.di.container import create_container, setup_di
from miniblog.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; the production container is built
            when omitted. Tests pass a container with in-memory persistence.
    """
    app_instance = FastAPI(
        title="Miniblog API",
        description="Backend API for a single-author blog with posts, comments, tags and categories",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(categories.router)
    app_instance.include_router(tags.router)
    app_instance.include_router(files.router)

    return app_instance
