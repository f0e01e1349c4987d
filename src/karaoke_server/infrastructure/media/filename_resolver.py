"""Resolve logical song identifiers to files under a media root.

Karaoke libraries are named inconsistently: ``20001.mp4``, ``20001.MKV`` and
``20001 - Artist - Title.avi`` all mean song 20001. Resolution tries the
exact request, then ``<id><default ext>``, then the lexicographically first
file whose name starts with the identifier and carries an allowed extension.
"""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path
from typing import Any

from karaoke_server.domain.media.value_objects import MediaKind, MediaRoot, ResolvedMedia
from karaoke_server.domain.shared.exceptions import MediaNotFoundError
from karaoke_server.domain.shared.messages import LogTemplates

logger = logging.getLogger(__name__)


def is_safe_name(name: str) -> bool:
    """True if ``name`` is a bare filename that cannot escape its root."""
    if not name or name in (".", ".."):
        return False
    if "/" in name or "\\" in name or "\x00" in name:
        return False
    return ".." not in Path(name).parts and not Path(name).is_absolute()


class FilenameResolver:
    """Maps a logical identifier to a concrete, existing file."""

    def identifier_for(self, name: str) -> str:
        """Strip the extension: ``"20001.mp4"`` -> ``"20001"``."""
        return Path(name).stem if Path(name).suffix else name

    def list_candidates(self, kind: MediaKind, directory: Path, identifier: str) -> list[str]:
        """Sorted names of regular files matching ``identifier`` by prefix.

        Raises:
            OSError: If the directory cannot be listed.
        """
        with os.scandir(directory) as entries:
            names = [
                entry.name
                for entry in entries
                if entry.is_file()
                and entry.name.startswith(identifier)
                and kind.is_allowed(entry.name)
            ]
        return sorted(names)

    def resolve(self, root: MediaRoot, name: str) -> ResolvedMedia:
        """Find the file for ``name`` under ``root``.

        Raises:
            MediaNotFoundError: If the name is unsafe, the root cannot be
                listed, or no candidate matches.
        """
        kind = root.kind
        if not is_safe_name(name):
            logger.warning(LogTemplates.MEDIA_UNSAFE_NAME, kind.value, name)
            raise MediaNotFoundError(kind.value, name)

        directory = Path(root.path)
        identifier = self.identifier_for(name)

        exact_names = [name] if kind.is_allowed(name) else []
        exact_names.append(f"{identifier}{kind.default_extension}")
        for candidate in exact_names:
            path = directory / candidate
            if path.is_file():
                logger.debug(LogTemplates.MEDIA_EXACT_HIT, kind.value, name, path)
                return ResolvedMedia(kind=kind, path=path)

        try:
            candidates = self.list_candidates(kind, directory, identifier)
        except OSError as exc:
            logger.warning(LogTemplates.MEDIA_ROOT_UNLISTABLE, kind.value, directory, exc)
            raise MediaNotFoundError(kind.value, name) from exc

        if not candidates:
            logger.info(LogTemplates.MEDIA_NOT_FOUND, kind.value, name, directory)
            raise MediaNotFoundError(kind.value, name)

        path = directory / candidates[0]
        logger.info(LogTemplates.MEDIA_PREFIX_HIT, kind.value, name, path, len(candidates))
        return ResolvedMedia(kind=kind, path=path)

    async def resolve_async(self, root: MediaRoot, name: str) -> ResolvedMedia:
        """Run :meth:`resolve` off the event loop."""
        return await asyncio.to_thread(self.resolve, root, name)

    def diagnose(self, root: MediaRoot, number: str) -> dict[str, Any]:
        """Debug report of how ``number`` would resolve under ``root``."""
        directory = Path(root.path)
        exact = directory / f"{number}{root.kind.default_extension}"
        exists_exact = is_safe_name(number) and exact.is_file()

        candidates: list[str] = []
        if is_safe_name(number):
            try:
                candidates = self.list_candidates(root.kind, directory, number)
            except OSError as exc:
                logger.warning(LogTemplates.MEDIA_ROOT_UNLISTABLE, root.kind.value, directory, exc)

        if exists_exact:
            resolved: str | None = str(exact)
        elif candidates:
            resolved = str(directory / candidates[0])
        else:
            resolved = None

        return {
            "videosPath": root.path,
            "number": number,
            "exact": str(exact),
            "existsExact": exists_exact,
            "candidates": candidates,
            "resolved": resolved,
        }

    async def diagnose_async(self, root: MediaRoot, number: str) -> dict[str, Any]:
        return await asyncio.to_thread(self.diagnose, root, number)
