"""
Queue Domain Repository Interface

Abstract base class defining the contract for the shared performance queue.
Implementations live in the infrastructure layer.
"""

from abc import ABC, abstractmethod

from karaoke_server.domain.queue.entities import QueueEntry
from karaoke_server.domain.shared.types import NonEmptyStr, QueueIndexInt, SongRef


class QueueStore(ABC):
    """Abstract store for the venue's single, globally ordered queue.

    Every mutating call must be serialized against the others so that
    concurrent devices never observe duplicate or gapped positions.
    """

    @abstractmethod
    async def list(self) -> list[QueueEntry]:
        """Return entries ordered by ``(position, created_at)``.

        As a side effect, positions are renumbered to 1..N to match that order.

        Returns:
            The normalized entries.
        """
        ...

    @abstractmethod
    async def add(self, song: SongRef, singer: NonEmptyStr) -> QueueEntry:
        """Append a new entry at ``max(position) + 1``.

        Args:
            song: Opaque song reference.
            singer: Trimmed, non-empty singer name.

        Returns:
            The created entry.

        Raises:
            BusinessRuleViolationError: If the queue is at capacity.
        """
        ...

    @abstractmethod
    async def remove_by_id(self, entry_id: str) -> QueueEntry:
        """Remove an entry by id and close the gap.

        Args:
            entry_id: The entry identifier.

        Returns:
            The removed entry.

        Raises:
            EntityNotFoundError: If no entry has this id.
        """
        ...

    @abstractmethod
    async def remove_by_index(self, index: QueueIndexInt) -> QueueEntry:
        """Remove the entry at a 0-based index of the normalized ordering.

        Args:
            index: Index into the current ordering.

        Returns:
            The removed entry.

        Raises:
            ValidationError: If the index is outside ``[0, N)``.
        """
        ...

    @abstractmethod
    async def move(self, from_index: int, to_index: int) -> bool:
        """Relocate one entry within the ordering.

        Args:
            from_index: Current 0-based index of the entry.
            to_index: Target 0-based index.

        Returns:
            True if moved, False (with no mutation) if either index is out of range.
        """
        ...

    @abstractmethod
    async def clear(self) -> int:
        """Remove every entry.

        Returns:
            Number of entries removed.
        """
        ...

    @abstractmethod
    async def count(self) -> int:
        """Get the number of live entries."""
        ...
