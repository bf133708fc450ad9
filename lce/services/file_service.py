from __future__ import annotations

import tempfile
from pathlib import Path

from PyQt6.QtCore import QIODevice, QSaveFile

from lce.domain.interfaces import IFileService
from lce.utils.constants import STAGING_DIR_PREFIX


class FileService(IFileService):
    """Atomic reads/writes for text files, plus the staging area used by the export dialog."""

    def __init__(self, staging_root: Path | None = None) -> None:
        self._staging_root = staging_root
        self._staging_dir: Path | None = None

    def read_text(self, path: Path) -> str:
        # Decode the raw bytes: no newline translation, CRLF and U+2029 survive a round trip.
        return path.read_bytes().decode("utf-8")

    def write_text_atomic(self, path: Path, text: str) -> None:
        self._commit(path, text.encode("utf-8"))

    def stage_text(self, name: str, text: str) -> Path:
        """Write text to <staging dir>/<name>; an existing staged file is replaced."""
        base = Path(name).name
        if not base:
            raise OSError(f"Not a usable file name: {name!r}")
        staged = self.staging_dir() / base
        self.write_text_atomic(staged, text)
        return staged

    def copy_atomic(self, src: Path, dest: Path) -> None:
        self._commit(dest, src.read_bytes())

    def staging_dir(self) -> Path:
        """Private (0700) directory created on first use and kept for this service's lifetime."""
        if self._staging_dir is None:
            if self._staging_root is not None:
                self._staging_root.mkdir(parents=True, exist_ok=True)
            self._staging_dir = Path(
                tempfile.mkdtemp(prefix=STAGING_DIR_PREFIX, dir=self._staging_root)
            )
        return self._staging_dir

    def _commit(self, path: Path, data: bytes) -> None:
        sf = QSaveFile(str(path))
        if not sf.open(QIODevice.OpenModeFlag.WriteOnly):
            raise OSError(f"Cannot open for write: {path}")
        sf.write(data)
        if not sf.commit():
            raise OSError(f"Commit failed for: {path}")
