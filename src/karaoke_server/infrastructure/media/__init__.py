"""Filesystem media resolution and byte-range streaming."""

from karaoke_server.infrastructure.media.filename_resolver import FilenameResolver
from karaoke_server.infrastructure.media.range_server import RangeMediaServer

__all__ = ["FilenameResolver", "RangeMediaServer"]
