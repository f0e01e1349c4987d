"""
Media Bounded Context

Value objects describing where karaoke assets live and which bytes to send.
"""

from karaoke_server.domain.media.value_objects import MediaKind, MediaRoot, RangeSpec, ResolvedMedia

__all__ = ["MediaKind", "MediaRoot", "RangeSpec", "ResolvedMedia"]
