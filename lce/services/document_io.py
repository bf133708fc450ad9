from __future__ import annotations

import logging
from pathlib import Path

from lce.domain.errors import AccessError, FileIOError
from lce.domain.interfaces import AccessMode, IAccessProvider, IFileService
from lce.domain.models import OpenResult
from lce.services.scoped_access import scoped_access

logger = logging.getLogger(__name__)


class DocumentIO:
    """Open and re-save user-chosen files, always inside a scoped access grant."""

    def __init__(self, files: IFileService, access: IAccessProvider) -> None:
        self._files = files
        self._access = access

    def open(self, path: Path) -> OpenResult:
        """
        Read ``path`` as UTF-8. Any failure (access refused, missing file, bad encoding,
        I/O) collapses into OpenResult.failed(); the cause only goes to the log.
        """
        try:
            with scoped_access(self._access, path, AccessMode.READ):
                text = self._files.read_text(path)
        except AccessError:
            return OpenResult.failed()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Error reading file %s: %s", path, e)
            return OpenResult.failed()
        return OpenResult(text=text, display_name=path.name, location=path)

    def resave(self, path: Path, text: str) -> None:
        """Write ``text`` straight to a previously opened location."""
        with scoped_access(self._access, path, AccessMode.WRITE):
            try:
                self._files.write_text_atomic(path, text)
            except OSError as e:
                raise FileIOError(path, str(e)) from e
        logger.info("Saved %s", path)
