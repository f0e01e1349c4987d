"""Date/time helpers.

- Always store and operate on timezone-aware UTC datetimes.
- Serialize with an explicit ``Z`` suffix, the format browsers parse natively.
"""

from __future__ import annotations

from datetime import UTC, datetime


def utcnow() -> datetime:
    """Preferred replacement for `datetime.now(UTC)`.

    Returns a timezone-aware datetime in UTC.
    """
    return datetime.now(UTC)


def iso_z(dt: datetime) -> str:
    """RFC3339 with trailing 'Z' and millisecond precision."""
    return dt.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")
