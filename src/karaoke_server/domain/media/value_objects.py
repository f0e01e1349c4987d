"""Immutable value objects for the media bounded context."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Final

_RANGE_PATTERN: Final = re.compile(r"^\s*bytes\s*=\s*(\d*)\s*-\s*(\d*)\s*$", re.IGNORECASE)


class MediaKind(Enum):
    """The two asset families served to the playback terminal."""

    VIDEO = "video"
    AUDIO = "audio"

    @property
    def mime_types(self) -> dict[str, str]:
        if self is MediaKind.VIDEO:
            return {
                ".mp4": "video/mp4",
                ".mkv": "video/x-matroska",
                ".mov": "video/quicktime",
                ".avi": "video/x-msvideo",
            }
        return {
            ".mp3": "audio/mpeg",
            ".wav": "audio/wav",
            ".ogg": "audio/ogg",
        }

    @property
    def allowed_extensions(self) -> tuple[str, ...]:
        return tuple(self.mime_types)

    @property
    def default_extension(self) -> str:
        return ".mp4" if self is MediaKind.VIDEO else ".mp3"

    @property
    def default_mime_type(self) -> str:
        return "video/mp4" if self is MediaKind.VIDEO else "audio/mpeg"

    def is_allowed(self, filename: str) -> bool:
        return Path(filename).suffix.lower() in self.mime_types

    def mime_type_for(self, filename: str) -> str:
        """Look up the MIME type by extension, falling back to the kind's default."""
        return self.mime_types.get(Path(filename).suffix.lower(), self.default_mime_type)


@dataclass(frozen=True)
class MediaRoot:
    """The directory currently configured for one media kind."""

    kind: MediaKind
    path: str

    def __str__(self) -> str:
        return self.path


@dataclass(frozen=True)
class ResolvedMedia:
    """A concrete, existing file chosen for a logical identifier."""

    kind: MediaKind
    path: Path

    @property
    def filename(self) -> str:
        return self.path.name

    @property
    def content_type(self) -> str:
        return self.kind.mime_type_for(self.path.name)


@dataclass(frozen=True)
class RangeSpec:
    """Inclusive byte window of a file, derived from a ``Range`` header."""

    start: int
    end: int
    total_size: int

    def __post_init__(self) -> None:
        if not 0 <= self.start <= self.end < self.total_size:
            raise ValueError(f"Unsatisfiable range {self.start}-{self.end}/{self.total_size}")

    @property
    def length(self) -> int:
        return self.end - self.start + 1

    @property
    def content_range(self) -> str:
        return f"bytes {self.start}-{self.end}/{self.total_size}"

    @classmethod
    def from_header(cls, header: str | None, total_size: int) -> RangeSpec | None:
        """Parse a single-range ``bytes=`` header against a file size.

        Returns None for a missing, malformed or unsatisfiable header; callers
        serve the whole file in that case instead of rejecting the request.
        """
        if not header or total_size <= 0:
            return None

        match = _RANGE_PATTERN.match(header)
        if match is None:
            return None

        start_str, end_str = match.groups()
        if not start_str:
            # Suffix form: last N bytes.
            if not end_str or int(end_str) == 0:
                return None
            start = max(0, total_size - int(end_str))
            return cls(start=start, end=total_size - 1, total_size=total_size)

        start = int(start_str)
        end = int(end_str) if end_str else total_size - 1
        end = min(end, total_size - 1)
        if start > end:
            return None
        return cls(start=start, end=end, total_size=total_size)
