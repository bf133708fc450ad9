from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from lce.domain.models import Capabilities


class AccessMode(Enum):
    READ = "read"
    WRITE = "write"


class IFileService(Protocol):
    """Read/write text files. Writes should be atomic when possible."""

    def read_text(self, path: Path) -> str: ...
    def write_text_atomic(self, path: Path, text: str) -> None: ...
    def stage_text(self, name: str, text: str) -> Path: ...
    def copy_atomic(self, src: Path, dest: Path) -> None: ...


class IAccessProvider(Protocol):
    """Grant and revoke temporary access to a user-chosen location."""

    def start_access(self, path: Path, mode: AccessMode) -> bool: ...
    def stop_access(self, path: Path) -> None: ...


class IConfigService(Protocol):
    """Read-only key/value configuration grouped in sections."""

    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_int(self, section: str, key: str, default: int | None = None) -> int | None: ...
    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None: ...


class IAppConfig(Protocol):
    """Typed settings the container reads when wiring the editor."""

    def log_level(self) -> int: ...
    def dark_mode(self) -> bool: ...
    def tab_width(self) -> int: ...
    def font_point_size(self) -> int: ...
    def notify_on_cancel(self) -> bool: ...
    def capabilities(self) -> Capabilities: ...
