from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from lce.domain.errors import AccessError
from lce.domain.interfaces import AccessMode, IAccessProvider

logger = logging.getLogger(__name__)


class FilesystemAccessProvider(IAccessProvider):
    """
    Desktop stand-in for a sandbox permission API.

    A grant is given when the OS would let us perform the requested mode; a write
    to a file that does not exist yet checks the parent directory instead.
    Active grants are tracked so callers (and tests) can see what is still held.
    """

    def __init__(self) -> None:
        self._active: dict[Path, int] = {}

    def start_access(self, path: Path, mode: AccessMode) -> bool:
        if mode is AccessMode.READ:
            allowed = path.is_file() and os.access(path, os.R_OK)
        elif path.exists():
            allowed = path.is_file() and os.access(path, os.W_OK)
        else:
            allowed = os.access(path.parent, os.W_OK)
        if allowed:
            self._active[path] = self._active.get(path, 0) + 1
        return allowed

    def stop_access(self, path: Path) -> None:
        n = self._active.get(path, 0)
        if n <= 1:
            self._active.pop(path, None)
        else:
            self._active[path] = n - 1

    @property
    def active(self) -> list[Path]:
        return list(self._active)


@contextmanager
def scoped_access(
    provider: IAccessProvider, path: Path, mode: AccessMode = AccessMode.READ
) -> Iterator[Path]:
    """
    Acquire access to ``path`` for the duration of the block.

    Raises AccessError when the provider refuses. Release always runs once the grant
    was given, whatever happens inside the block.
    """
    if not provider.start_access(path, mode):
        logger.warning("Scoped %s access refused for %s", mode.value, path)
        raise AccessError(path)
    logger.debug("Scoped %s access granted for %s", mode.value, path)
    try:
        yield path
    finally:
        provider.stop_access(path)
        logger.debug("Scoped access released for %s", path)
