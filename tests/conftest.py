from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import pytest
from PyQt6.QtWidgets import QApplication

from lce.domain.interfaces import AccessMode
from lce.domain.models import Capabilities
from lce.services.document_io import DocumentIO
from lce.services.file_service import FileService
from lce.services.scoped_access import FilesystemAccessProvider
from lce.services.ui.presenters.editor_presenter import EditorPresenter

# Headless CI has no display server
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


# --- Fallback QApplication fixture (works with or without pytest-qt) ---
@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        if created:
            app.quit()


# --- Fakes for the UI ports ---


class FakeDialogs:
    def __init__(self) -> None:
        self.open_result: Path | None = None
        self.export_result: Path | None = None
        self.open_calls: list[tuple[str | None, str]] = []
        self.export_calls: list[str] = []

    def get_open_file(self, parent: Any, caption: str, start_dir: str | None, filter_str: str):
        self.open_calls.append((start_dir, filter_str))
        return self.open_result

    def get_export_path(self, parent: Any, caption: str, suggested_name: str, filter_str: str):
        self.export_calls.append(suggested_name)
        return self.export_result


class FakeMessages:
    def __init__(self) -> None:
        self.infos: list[str] = []
        self.errors: list[str] = []

    def info(self, parent: Any, title: str, text: str) -> None:
        self.infos.append(text)

    def error(self, parent: Any, title: str, text: str) -> None:
        self.errors.append(text)

    @property
    def all(self) -> list[str]:
        return self.infos + self.errors


class FakeView:
    def __init__(self) -> None:
        self.text = ""
        self.filename = ""
        self.dark: bool | None = None

    def set_editor_text(self, text: str) -> None:
        self.text = text

    def set_filename_text(self, name: str) -> None:
        self.filename = name

    def apply_theme(self, dark: bool) -> None:
        self.dark = dark


class RecordingAccessProvider(FilesystemAccessProvider):
    """Real filesystem checks, plus a switch to refuse and a log of every call."""

    def __init__(self) -> None:
        super().__init__()
        self.refuse = False
        self.started: list[tuple[Path, AccessMode]] = []
        self.stopped: list[Path] = []

    def start_access(self, path: Path, mode: AccessMode) -> bool:
        self.started.append((path, mode))
        if self.refuse:
            return False
        return super().start_access(path, mode)

    def stop_access(self, path: Path) -> None:
        self.stopped.append(path)
        super().stop_access(path)


# --- Common fixtures ---


@pytest.fixture()
def file_service(tmp_path: Path) -> FileService:
    return FileService(staging_root=tmp_path / "tmp")


@pytest.fixture()
def access() -> RecordingAccessProvider:
    return RecordingAccessProvider()


@pytest.fixture()
def dialogs() -> FakeDialogs:
    return FakeDialogs()


@pytest.fixture()
def messages() -> FakeMessages:
    return FakeMessages()


@pytest.fixture()
def view() -> FakeView:
    return FakeView()


@pytest.fixture()
def make_presenter(view, file_service, access, messages, dialogs):
    def _make(
        capabilities: Capabilities | None = None, **kwargs: Any
    ) -> EditorPresenter:
        return EditorPresenter(
            view=view,
            files=file_service,
            io=DocumentIO(file_service, access),
            messages=messages,
            dialogs=dialogs,
            capabilities=capabilities,
            **kwargs,
        )

    return _make


@pytest.fixture()
def presenter(make_presenter) -> EditorPresenter:
    return make_presenter()
