"""Domain service for queue ordering rules."""

from __future__ import annotations

from collections.abc import Sequence

from karaoke_server.domain.queue.entities import QueueEntry


class QueueDomainService:
    """Pure ordering rules shared by every queue store implementation."""

    @classmethod
    def next_position(cls, entries: Sequence[QueueEntry]) -> int:
        """Position for a new entry: current max + 1, or 1 when empty."""
        return max((entry.position for entry in entries), default=0) + 1

    @classmethod
    def renumber(cls, entries: Sequence[QueueEntry]) -> list[QueueEntry]:
        """Assign dense positions 1..N following the given array order."""
        return [entry.at_position(index) for index, entry in enumerate(entries, start=1)]

    @classmethod
    def normalize(cls, entries: Sequence[QueueEntry]) -> list[QueueEntry]:
        """Sort by ``(position, created_at)`` and renumber to 1..N."""
        return cls.renumber(sorted(entries, key=lambda entry: entry.sort_key))

    @classmethod
    def is_dense(cls, entries: Sequence[QueueEntry]) -> bool:
        return sorted(entry.position for entry in entries) == list(range(1, len(entries) + 1))

    @classmethod
    def index_in_range(cls, index: int, length: int) -> bool:
        return 0 <= index < length
