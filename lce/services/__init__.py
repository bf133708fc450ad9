"""Concrete service implementations."""

from .document_io import DocumentIO
from .file_service import FileService
from .scoped_access import FilesystemAccessProvider, scoped_access

__all__ = ["DocumentIO", "FileService", "FilesystemAccessProvider", "scoped_access"]
