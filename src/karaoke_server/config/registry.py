"""Runtime-mutable media roots.

Settings are frozen after startup; the directories the terminal plays from
must remain adjustable while the venue is open, so they live here instead.
"""

from __future__ import annotations

import logging
import threading
from typing import Any

from ..domain.media.value_objects import MediaKind, MediaRoot
from ..domain.shared.messages import LogTemplates
from ..domain.shared.validators import clean_path_candidate

logger = logging.getLogger(__name__)


class ConfigRegistry:
    """Single source of truth for the video and audio roots.

    ``get`` returns the override when one is set, otherwise the built-in
    default for the kind. Streams already in flight keep the path they
    resolved with; only later lookups observe a change.
    """

    def __init__(
        self,
        defaults: dict[MediaKind, str],
        overrides: dict[MediaKind, str | None] | None = None,
    ) -> None:
        self._defaults = dict(defaults)
        self._overrides: dict[MediaKind, str] = {}
        self._lock = threading.Lock()
        for kind, candidate in (overrides or {}).items():
            cleaned = clean_path_candidate(candidate)
            if cleaned is not None:
                self._overrides[kind] = cleaned

    def get(self, kind: MediaKind) -> str:
        with self._lock:
            return self._overrides.get(kind, self._defaults[kind])

    def root(self, kind: MediaKind) -> MediaRoot:
        return MediaRoot(kind=kind, path=self.get(kind))

    def set(self, kind: MediaKind, candidate: Any) -> bool:
        """Replace the root for ``kind`` if ``candidate`` is a non-blank string.

        Anything else is ignored without raising.

        Returns:
            True if the root changed.
        """
        cleaned = clean_path_candidate(candidate)
        if cleaned is None:
            logger.debug(LogTemplates.MEDIA_ROOT_IGNORED, kind.value, candidate)
            return False

        with self._lock:
            self._overrides[kind] = cleaned
        logger.info(LogTemplates.MEDIA_ROOT_CHANGED, kind.value, cleaned)
        return True

    def snapshot(self) -> dict[str, str]:
        """Current roots in the wire shape used by ``/config``."""
        with self._lock:
            return {
                "videosPath": self._overrides.get(MediaKind.VIDEO, self._defaults[MediaKind.VIDEO]),
                "soundsPath": self._overrides.get(MediaKind.AUDIO, self._defaults[MediaKind.AUDIO]),
            }
