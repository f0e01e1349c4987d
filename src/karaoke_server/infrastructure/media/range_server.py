"""Byte-range aware file streaming for the playback terminal.

Browsers seek inside karaoke videos by issuing ``Range`` requests. Each
response reads through its own file handle; the handle is closed when the
body finishes, fails, or the client disconnects mid-stream.
"""

from __future__ import annotations

import asyncio
import logging
import os
from typing import BinaryIO, Final

from starlette.responses import StreamingResponse
from starlette.types import Receive, Scope, Send

from karaoke_server.domain.media.value_objects import RangeSpec, ResolvedMedia
from karaoke_server.domain.shared.exceptions import MediaNotFoundError
from karaoke_server.domain.shared.messages import LogTemplates

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE: Final[int] = 256 * 1024


class FileWindow:
    """Async iterator over ``length`` bytes of an open file, starting at ``start``.

    Owns the handle: it is closed on exhaustion or by :meth:`aclose`.
    Disk reads run in a worker thread so a slow disk never stalls the loop.
    """

    def __init__(
        self,
        handle: BinaryIO,
        *,
        start: int,
        length: int,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        name: str = "",
    ) -> None:
        self._handle = handle
        self._start = start
        self._remaining = length
        self._chunk_size = chunk_size
        self._name = name
        self._positioned = start == 0
        self.bytes_sent = 0

    @property
    def closed(self) -> bool:
        return self._handle.closed

    def __aiter__(self) -> FileWindow:
        return self

    async def __anext__(self) -> bytes:
        if self.closed or self._remaining <= 0:
            await self.aclose()
            raise StopAsyncIteration

        try:
            if not self._positioned:
                await asyncio.to_thread(self._handle.seek, self._start)
                self._positioned = True
            chunk = await asyncio.to_thread(self._handle.read, min(self._chunk_size, self._remaining))
        except BaseException:
            await self.aclose()
            raise

        if not chunk:
            await self.aclose()
            raise StopAsyncIteration

        self._remaining -= len(chunk)
        self.bytes_sent += len(chunk)
        return chunk

    async def aclose(self) -> None:
        # No await points: must complete even inside a cancelled scope.
        if not self._handle.closed:
            self._handle.close()
            logger.debug(LogTemplates.STREAM_CLOSED, self._name, self.bytes_sent)


class MediaStreamResponse(StreamingResponse):
    """StreamingResponse that always closes its body iterator.

    Starlette stops iterating when the client goes away but leaves the
    iterator as is; closing it here releases the file handle immediately.
    """

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        try:
            await super().__call__(scope, receive, send)
        finally:
            aclose = getattr(self.body_iterator, "aclose", None)
            if aclose is not None:
                await aclose()


class RangeMediaServer:
    """Builds 200/206 streaming responses for resolved media files."""

    def __init__(self, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        self._chunk_size = chunk_size

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    def _open(self, media: ResolvedMedia) -> tuple[BinaryIO, int]:
        try:
            handle = media.path.open("rb")
        except FileNotFoundError as exc:
            raise MediaNotFoundError(media.kind.value, media.filename) from exc
        try:
            size = os.fstat(handle.fileno()).st_size
        except OSError:
            handle.close()
            raise
        return handle, size

    async def serve(self, media: ResolvedMedia, range_header: str | None = None) -> StreamingResponse:
        """Stream ``media``, honouring a single ``bytes=`` range if present.

        A malformed or unsatisfiable range is not an error: the whole file is
        sent with status 200.

        Raises:
            MediaNotFoundError: If the file disappeared after resolution.
        """
        handle, size = await asyncio.to_thread(self._open, media)
        byte_range = RangeSpec.from_header(range_header, size)

        if byte_range is None:
            logger.info(LogTemplates.STREAM_FULL, media.filename, size)
            body = FileWindow(handle, start=0, length=size, chunk_size=self._chunk_size, name=media.filename)
            return MediaStreamResponse(
                body,
                status_code=200,
                media_type=media.content_type,
                headers={
                    "Content-Length": str(size),
                    "Accept-Ranges": "bytes",
                },
            )

        logger.info(LogTemplates.STREAM_RANGE, media.filename, byte_range.start, byte_range.end, size)
        body = FileWindow(
            handle, start=byte_range.start, length=byte_range.length, chunk_size=self._chunk_size, name=media.filename
        )
        return MediaStreamResponse(
            body,
            status_code=206,
            media_type=media.content_type,
            headers={
                "Content-Range": byte_range.content_range,
                "Accept-Ranges": "bytes",
                "Content-Length": str(byte_range.length),
            },
        )
