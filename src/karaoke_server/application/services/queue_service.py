"""Queue Application Service - validates requests and drives the shared queue."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from ...domain.queue.entities import QueueEntry
from ...domain.shared.exceptions import ValidationError
from ...domain.shared.messages import ErrorMessages, LogTemplates
from ...domain.shared.types import NonNegativeInt
from ...domain.shared.validators import clean_text, is_blank_song_ref

if TYPE_CHECKING:
    from ...domain.queue.repository import QueueStore

logger = logging.getLogger(__name__)


class QueueInfo(BaseModel):

    entries: list[QueueEntry]
    total_length: NonNegativeInt

    @property
    def head(self) -> QueueEntry | None:
        return self.entries[0] if self.entries else None


class QueueApplicationService:
    """Manages queue operations (add, remove, dequeue, reorder, clear) for all devices."""

    def __init__(self, *, queue_store: QueueStore) -> None:
        self._store = queue_store

    async def enqueue(self, song: Any, singer: Any) -> QueueEntry:
        """Validate raw client input and append a new performance.

        Raises:
            ValidationError: If ``song`` is missing or ``singer`` is blank.
            BusinessRuleViolationError: If the queue is full.
        """
        if is_blank_song_ref(song):
            raise ValidationError(ErrorMessages.MISSING_SONG, field="song")

        singer_name = clean_text(singer)
        if not singer_name:
            raise ValidationError(ErrorMessages.MISSING_SINGER, field="singer")

        entry = await self._store.add(song, singer_name)
        logger.info(LogTemplates.QUEUE_ENQUEUED, entry.id, entry.singer, entry.position)
        return entry

    async def remove(self, entry_id: str) -> QueueEntry:
        entry = await self._store.remove_by_id(entry_id)
        logger.info(LogTemplates.QUEUE_REMOVED, entry.id)
        return entry

    async def dequeue(self, index: int = 0) -> QueueEntry:
        """Remove the entry at ``index`` (the head by default) for playback."""
        entry = await self._store.remove_by_index(index)
        logger.info(LogTemplates.QUEUE_DEQUEUED, entry.id, index)
        return entry

    async def move(self, from_index: int, to_index: int) -> bool:
        success = await self._store.move(from_index, to_index)
        if success:
            logger.info(LogTemplates.QUEUE_MOVED, from_index, to_index)
        else:
            logger.info(LogTemplates.QUEUE_MOVE_REJECTED, from_index, to_index, await self._store.count())
        return success

    async def clear(self) -> int:
        count = await self._store.clear()
        logger.info(LogTemplates.QUEUE_CLEARED, count)
        return count

    async def get_queue(self) -> QueueInfo:
        entries = await self._store.list()
        return QueueInfo(entries=entries, total_length=len(entries))
