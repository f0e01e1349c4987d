"""FastAPI dependency providers backed by the application container."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from ...application.services.media_service import MediaApplicationService
from ...application.services.queue_service import QueueApplicationService
from ...config.container import Container
from ...config.registry import ConfigRegistry


def get_container(request: Request) -> Container:
    container = getattr(request.app.state, "container", None)
    if container is None:
        raise RuntimeError("Container not found on application state")
    return container


def get_config_registry(request: Request) -> ConfigRegistry:
    return get_container(request).config_registry


def get_media_service(request: Request) -> MediaApplicationService:
    return get_container(request).media_service


def get_queue_service(request: Request) -> QueueApplicationService:
    return get_container(request).queue_service


ConfigRegistryDep = Annotated[ConfigRegistry, Depends(get_config_registry)]
MediaServiceDep = Annotated[MediaApplicationService, Depends(get_media_service)]
QueueServiceDep = Annotated[QueueApplicationService, Depends(get_queue_service)]
