"""Reusable Pydantic Annotated types for domain-wide validation.

Every constrained type used across the server is defined here once,
so models can simply annotate their fields::

    from karaoke_server.domain.shared.types import NonEmptyStr, PositiveInt

    class MyModel(BaseModel):
        singer: NonEmptyStr
        position: PositiveInt
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from karaoke_server.domain.shared.messages import ErrorMessages

# ── Numeric constraints ─────────────────────────────────────────────

NonNegativeInt = Annotated[int, Field(ge=0)]
"""Integer >= 0."""

PositiveInt = Annotated[int, Field(gt=0)]
"""Integer > 0."""


# ── String constraints ──────────────────────────────────────────────

NonEmptyStr = Annotated[str, Field(min_length=1)]
"""String with at least one character."""

QueueEntryIdStr = Annotated[str, Field(pattern=r"^q_[0-9a-f]{32}$")]
"""Queue entry identifier: ``q_`` followed by 32 hex digits."""


# ── Queue constraints ───────────────────────────────────────────────

QueueIndexInt = Annotated[int, Field(ge=0)]
"""Zero-based index into the normalized queue ordering."""

QueuePositionInt = PositiveInt
"""One-based, dense queue position."""

SongRef = dict[str, Any] | str | int
"""Opaque song reference as sent by clients (catalog record, number or id)."""


# ── Media constraints ───────────────────────────────────────────────

ChunkSize = Annotated[int, Field(ge=4096, le=8 * 1024 * 1024)]
"""Streaming read size: 4 KiB … 8 MiB."""

PortNumber = Annotated[int, Field(ge=1, le=65535)]
"""TCP port."""

MaxQueueSize = Annotated[int, Field(ge=1, le=1000)]
"""Maximum queue size: 1 … 1 000."""


# ── Datetime constraints ────────────────────────────────────────────

def _ensure_utc(v: datetime) -> datetime:
    """Validate that a datetime is timezone-aware and normalise to UTC."""
    if v.tzinfo is None:
        raise ValueError(ErrorMessages.TIMEZONE_REQUIRED)
    return v.astimezone(UTC)


UtcDatetimeField = Annotated[datetime, BeforeValidator(_ensure_utc)]
"""Timezone-aware datetime, normalised to UTC on input."""
