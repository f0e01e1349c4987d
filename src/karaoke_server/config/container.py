"""Dependency Injection Container

Manages the application's dependency graph, providing lazy initialization
for the registry, resolver, streaming server, queue store, and services.
Components are created on-demand and cached for the process lifetime, which
makes the queue store and config registry the single shared instances every
request goes through.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from ..application.services.media_service import MediaApplicationService
    from ..application.services.queue_service import QueueApplicationService
    from ..domain.queue.repository import QueueStore
    from ..infrastructure.media.filename_resolver import FilenameResolver
    from ..infrastructure.media.range_server import RangeMediaServer
    from .registry import ConfigRegistry
    from .settings import Settings


@dataclass
class Container:
    """Dependency injection container.

    Components are lazily initialized when first accessed.
    """

    settings: Settings

    _config_registry: ConfigRegistry | None = None
    _filename_resolver: FilenameResolver | None = None
    _media_server: RangeMediaServer | None = None
    _queue_store: QueueStore | None = None

    _media_service: MediaApplicationService | None = None
    _queue_service: QueueApplicationService | None = None

    # === Configuration ===

    @property
    def config_registry(self) -> ConfigRegistry:
        """Get the runtime media-root registry."""
        if self._config_registry is None:
            from ..domain.media.value_objects import MediaKind
            from .registry import ConfigRegistry

            media = self.settings.media
            self._config_registry = ConfigRegistry(
                defaults={
                    MediaKind.VIDEO: media.default_videos_path,
                    MediaKind.AUDIO: media.default_sounds_path,
                },
                overrides={
                    MediaKind.VIDEO: self.settings.videos_path,
                    MediaKind.AUDIO: self.settings.sounds_path,
                },
            )
        return self._config_registry

    # === Infrastructure ===

    @property
    def filename_resolver(self) -> FilenameResolver:
        """Get the filename resolver."""
        if self._filename_resolver is None:
            from ..infrastructure.media.filename_resolver import FilenameResolver

            self._filename_resolver = FilenameResolver()
        return self._filename_resolver

    @property
    def media_server(self) -> RangeMediaServer:
        """Get the range-aware media server."""
        if self._media_server is None:
            from ..infrastructure.media.range_server import RangeMediaServer

            self._media_server = RangeMediaServer(chunk_size=self.settings.media.stream_chunk_size)
        return self._media_server

    @property
    def queue_store(self) -> QueueStore:
        """Get the shared queue store."""
        if self._queue_store is None:
            from ..infrastructure.persistence.queue_store import InMemoryQueueStore

            self._queue_store = InMemoryQueueStore(max_size=self.settings.queue.max_size)
        return self._queue_store

    # === Application Services ===

    @property
    def media_service(self) -> MediaApplicationService:
        """Get the media application service."""
        if self._media_service is None:
            from ..application.services.media_service import MediaApplicationService

            self._media_service = MediaApplicationService(
                config_registry=self.config_registry,
                filename_resolver=self.filename_resolver,
                media_server=self.media_server,
            )
        return self._media_service

    @property
    def queue_service(self) -> QueueApplicationService:
        """Get the queue application service."""
        if self._queue_service is None:
            from ..application.services.queue_service import QueueApplicationService

            self._queue_service = QueueApplicationService(queue_store=self.queue_store)
        return self._queue_service

    # === Lifecycle ===

    async def initialize(self) -> None:
        """Eagerly build the shared singletons before the first request."""
        registry = self.config_registry
        _ = self.queue_service
        _ = self.media_service
        logger.info("Container initialized with roots %s", registry.snapshot())

    async def shutdown(self) -> None:
        """Drop cached components; the in-memory queue does not survive restarts."""
        self._queue_service = None
        self._queue_store = None
        self._media_service = None


def create_container(settings: Settings) -> Container:
    """Create a new dependency injection container."""
    return Container(settings)
