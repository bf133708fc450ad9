from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IFileDialogService(Protocol):
    """
    Abstract UI port for the import/export pickers. Keeps the rest of the app decoupled from Qt.
    """

    def get_open_file(
            self,
            parent: Any | None,
            caption: str,
            start_dir: str | None,
            filter_str: str,
    ) -> Path | None:
        """Return a selected file path or None if cancelled."""
        ...

    def get_export_path(
            self,
            parent: Any | None,
            caption: str,
            suggested_name: str,
            filter_str: str,
    ) -> Path | None:
        """Return the destination chosen for a staged file, or None if cancelled."""
        ...
