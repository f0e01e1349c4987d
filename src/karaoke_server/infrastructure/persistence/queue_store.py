"""In-memory QueueStore implementation.

Queue state lives for the lifetime of the process. All operations, reads
included, run under a single ``asyncio.Lock``: reads renumber as a side
effect, and the lock keeps that renumbering atomic with respect to writers.
State is replaced wholesale (never edited in place), so a snapshot returned
to one caller is never altered by a later mutation.
"""

from __future__ import annotations

import asyncio

from karaoke_server.domain.queue.entities import QueueEntry, new_entry_id
from karaoke_server.domain.queue.repository import QueueStore
from karaoke_server.domain.queue.services import QueueDomainService
from karaoke_server.domain.shared.exceptions import (
    BusinessRuleViolationError,
    EntityNotFoundError,
    ValidationError,
)
from karaoke_server.domain.shared.messages import ErrorMessages
from karaoke_server.domain.shared.types import NonEmptyStr, QueueIndexInt, SongRef


class InMemoryQueueStore(QueueStore):
    """Single-writer, process-wide performance queue."""

    def __init__(self, *, max_size: int = 200) -> None:
        self._entries: list[QueueEntry] = []
        self._lock = asyncio.Lock()
        self._max_size = max_size

    @property
    def max_size(self) -> int:
        return self._max_size

    def _commit(self, entries: list[QueueEntry]) -> list[QueueEntry]:
        self._entries = entries
        return list(entries)

    async def list(self) -> list[QueueEntry]:
        async with self._lock:
            return self._commit(QueueDomainService.normalize(self._entries))

    async def add(self, song: SongRef, singer: NonEmptyStr) -> QueueEntry:
        async with self._lock:
            if len(self._entries) >= self._max_size:
                raise BusinessRuleViolationError(
                    rule="MAX_QUEUE_SIZE",
                    message=ErrorMessages.QUEUE_FULL.format(max_size=self._max_size),
                )

            taken = {entry.id for entry in self._entries}
            entry = QueueEntry(
                song=song,
                singer=singer,
                position=QueueDomainService.next_position(self._entries),
            )
            while entry.id in taken:
                entry = entry.model_copy(update={"id": new_entry_id()})

            self._commit([*self._entries, entry])
            return entry

    async def remove_by_id(self, entry_id: str) -> QueueEntry:
        async with self._lock:
            ordered = QueueDomainService.normalize(self._entries)
            for index, entry in enumerate(ordered):
                if entry.id == entry_id:
                    del ordered[index]
                    self._commit(QueueDomainService.renumber(ordered))
                    return entry
            raise EntityNotFoundError("QueueEntry", entry_id, ErrorMessages.QUEUE_ENTRY_NOT_FOUND)

    async def remove_by_index(self, index: QueueIndexInt) -> QueueEntry:
        async with self._lock:
            ordered = QueueDomainService.normalize(self._entries)
            if not QueueDomainService.index_in_range(index, len(ordered)):
                raise ValidationError(
                    ErrorMessages.INVALID_QUEUE_INDEX.format(index=index, length=len(ordered)),
                    field="index",
                )
            entry = ordered.pop(index)
            self._commit(QueueDomainService.renumber(ordered))
            return entry

    async def move(self, from_index: int, to_index: int) -> bool:
        async with self._lock:
            ordered = QueueDomainService.normalize(self._entries)
            length = len(ordered)
            if not (
                QueueDomainService.index_in_range(from_index, length)
                and QueueDomainService.index_in_range(to_index, length)
            ):
                return False

            entry = ordered.pop(from_index)
            ordered.insert(to_index, entry)
            self._commit(QueueDomainService.renumber(ordered))
            return True

    async def clear(self) -> int:
        async with self._lock:
            count = len(self._entries)
            self._commit([])
            return count

    async def count(self) -> int:
        return len(self._entries)
