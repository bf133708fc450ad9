from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


@dataclass
class Document:
    text: str = ""
    filename: str = ""
    source: Path | None = None


@dataclass
class UiState:
    dark_mode: bool = False
    save_dialog_visible: bool = False
    open_dialog_visible: bool = False
    alert_message: str | None = None

    @property
    def modal_visible(self) -> bool:
        return (
            self.save_dialog_visible
            or self.open_dialog_visible
            or self.alert_message is not None
        )


@dataclass(frozen=True)
class Capabilities:
    """Which variant of the editor screen is built."""

    can_open: bool = True
    can_save: bool = True
    can_resave: bool = True

    @classmethod
    def save_only(cls) -> Capabilities:
        return cls(can_open=False, can_save=True, can_resave=False)


@dataclass(frozen=True)
class OpenResult:
    text: str | None
    display_name: str = ""
    location: Path | None = None

    @property
    def ok(self) -> bool:
        return self.text is not None

    @classmethod
    def failed(cls) -> OpenResult:
        return cls(text=None, display_name="", location=None)


class SaveOutcome(Enum):
    SAVED = "saved"
    CANCELLED = "cancelled"
    INVALID = "invalid"
    FAILED = "failed"
    BUSY = "busy"
