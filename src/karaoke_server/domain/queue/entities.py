"""Core domain entities for the performance queue."""

from __future__ import annotations

from typing import Any
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from karaoke_server.domain.shared.datetime_utils import iso_z, utcnow
from karaoke_server.domain.shared.types import (
    NonEmptyStr,
    QueueEntryIdStr,
    QueuePositionInt,
    SongRef,
    UtcDatetimeField,
)
from karaoke_server.domain.shared.validators import validate_non_empty_string


def new_entry_id() -> str:
    """Generate a fresh queue entry id (``q_`` + 128 random bits)."""
    return f"q_{uuid4().hex}"


class QueueEntry(BaseModel):
    """Immutable snapshot of one pending performance.

    Renumbering never mutates an entry in place; the store swaps in copies
    produced by :meth:`at_position`, so readers always see whole snapshots.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: QueueEntryIdStr = Field(default_factory=new_entry_id)
    song: SongRef
    singer: NonEmptyStr
    position: QueuePositionInt = Field(serialization_alias="queue_position")
    created_at: UtcDatetimeField = Field(default_factory=utcnow)

    @field_validator("singer")
    @classmethod
    def validate_singer(cls, v: str) -> str:
        return validate_non_empty_string(v, "singer").strip()

    @field_serializer("created_at")
    def serialize_created_at(self, v: Any) -> str:
        return iso_z(v)

    @property
    def sort_key(self) -> tuple[Any, ...]:
        return (self.position, self.created_at)

    def at_position(self, position: QueuePositionInt) -> QueueEntry:
        """Return this entry renumbered to ``position`` (self if unchanged)."""
        if position == self.position:
            return self
        return self.model_copy(update={"position": position})

    def to_wire(self) -> dict[str, Any]:
        """JSON-ready dict in the shape device clients poll."""
        return self.model_dump(mode="json", by_alias=True)
