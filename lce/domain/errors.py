from __future__ import annotations

from pathlib import Path


class EditorError(Exception):
    """Base class for every error the editor turns into an alert."""


class ValidationError(EditorError):
    """Input rejected before any dialog is shown. str() is the user message."""


class AccessError(EditorError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"Access denied: {path}")
        self.path = path


class FileIOError(EditorError):
    """Read or write failure. Chain the underlying OSError with ``raise ... from``."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(reason)
        self.path = path
