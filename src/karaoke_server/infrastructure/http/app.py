"""FastAPI application factory."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ... import __version__
from .errors import register_error_handlers
from .routes import config_routes, health_routes, media_routes, queue_routes

if TYPE_CHECKING:
    from ...config.container import Container


def create_app(container: Container) -> FastAPI:
    """Create the HTTP application bound to a container.

    The container is stored on ``app.state`` so every request shares its
    queue store and config registry.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        await container.initialize()
        try:
            yield
        finally:
            await container.shutdown()

    app = FastAPI(title="Karaoke Server", version=__version__, lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(container.settings.server.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Content-Range", "Accept-Ranges", "Content-Length"],
    )

    register_error_handlers(app)

    app.include_router(health_routes.router)
    app.include_router(config_routes.router)
    app.include_router(queue_routes.router)
    app.include_router(media_routes.router)

    return app
