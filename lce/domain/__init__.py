"""Domain layer: interfaces, errors and simple models (dataclasses)."""

from .errors import AccessError, EditorError, FileIOError, ValidationError
from .interfaces import AccessMode, IAccessProvider, IAppConfig, IConfigService, IFileService
from .models import Capabilities, Document, OpenResult, SaveOutcome, UiState

__all__ = [
    "AccessMode",
    "IAccessProvider",
    "IAppConfig",
    "IConfigService",
    "IFileService",
    "EditorError",
    "ValidationError",
    "AccessError",
    "FileIOError",
    "Capabilities",
    "Document",
    "OpenResult",
    "SaveOutcome",
    "UiState",
]
