"""Media Application Service - resolves and streams karaoke assets."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from ...domain.media.value_objects import MediaKind
from ...domain.shared.exceptions import ForbiddenExtensionError

if TYPE_CHECKING:
    from starlette.responses import StreamingResponse

    from ...config.registry import ConfigRegistry
    from ...infrastructure.media.filename_resolver import FilenameResolver
    from ...infrastructure.media.range_server import RangeMediaServer


class MediaApplicationService:
    """Glue between the current media roots, resolution, and range streaming."""

    def __init__(
        self,
        *,
        config_registry: ConfigRegistry,
        filename_resolver: FilenameResolver,
        media_server: RangeMediaServer,
    ) -> None:
        self._registry = config_registry
        self._resolver = filename_resolver
        self._server = media_server

    def check_extension(self, kind: MediaKind, filename: str) -> None:
        """Reject explicit extensions outside the kind's allow-list.

        Names without an extension pass; they are resolved by prefix.

        Raises:
            ForbiddenExtensionError: If the extension is not allowed.
        """
        suffix = Path(filename).suffix.lower()
        if suffix and suffix not in kind.allowed_extensions:
            raise ForbiddenExtensionError(suffix)

    async def stream(
        self, kind: MediaKind, filename: str, range_header: str | None = None
    ) -> StreamingResponse:
        """Resolve ``filename`` under the current root for ``kind`` and stream it.

        The root is read once per request, so a concurrent ``/config`` change
        never affects a stream that has already started.

        Raises:
            MediaNotFoundError: If nothing resolves.
        """
        root = self._registry.root(kind)
        media = await self._resolver.resolve_async(root, filename)
        return await self._server.serve(media, range_header)

    async def stream_video(self, filename: str, range_header: str | None = None) -> StreamingResponse:
        return await self.stream(MediaKind.VIDEO, filename, range_header)

    async def stream_sound(self, filename: str, range_header: str | None = None) -> StreamingResponse:
        """Stream a sound effect; only ``.mp3``, ``.wav`` and ``.ogg`` are served."""
        self.check_extension(MediaKind.AUDIO, filename)
        return await self.stream(MediaKind.AUDIO, filename, range_header)

    async def diagnose_video(self, number: str) -> dict[str, Any]:
        return await self._resolver.diagnose_async(self._registry.root(MediaKind.VIDEO), number)
