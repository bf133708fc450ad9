from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

from lce.domain.errors import EditorError, ValidationError
from lce.domain.interfaces import IFileService
from lce.domain.models import Capabilities, Document, OpenResult, SaveOutcome, UiState
from lce.services.document_io import DocumentIO
from lce.services.ui.ports.dialogs import IFileDialogService
from lce.services.ui.ports.messages import IMessageService
from lce.utils.constants import (
    EXPORT_FILTER,
    MSG_NEED_FILENAME,
    MSG_NEED_TEXT,
    MSG_OPEN_FAILED,
    MSG_SAVE_CANCELLED,
    MSG_SAVE_FAILED,
    MSG_SAVED,
    MSG_TITLE,
    OPEN_FILTERS,
)

logger = logging.getLogger(__name__)


@runtime_checkable
class IEditorView(Protocol):
    """Passive view surface (implemented by the Qt MainWindow)."""

    def set_editor_text(self, text: str) -> None: ...
    def set_filename_text(self, name: str) -> None: ...
    def apply_theme(self, dark: bool) -> None: ...


def validate_for_export(filename: str, text: str) -> None:
    """Raise ValidationError for the first missing input; filename is checked first."""
    if not filename:
        raise ValidationError(MSG_NEED_FILENAME)
    if not text:
        raise ValidationError(MSG_NEED_TEXT)


class EditorPresenter:
    """
    Owns document + UI state for the single editor screen.

    Every user action lands here; errors are caught at this boundary and turned into
    exactly one alert. Which actions exist is decided by ``capabilities``.
    """

    def __init__(
        self,
        view: IEditorView,
        files: IFileService,
        io: DocumentIO,
        messages: IMessageService,
        dialogs: IFileDialogService,
        *,
        capabilities: Capabilities | None = None,
        dark_mode: bool = False,
        notify_on_cancel: bool = False,
    ) -> None:
        self.view = view
        self.files = files
        self.io = io
        self.messages = messages
        self.dialogs = dialogs
        self.capabilities = capabilities or Capabilities()
        self.notify_on_cancel = notify_on_cancel

        self.doc = Document()
        self.ui = UiState(dark_mode=dark_mode)

    # ---------- editing ----------

    def set_text(self, text: str) -> None:
        self.doc.text = text

    def set_filename(self, name: str) -> None:
        self.doc.filename = name

    def toggle_theme(self) -> bool:
        self.ui.dark_mode = not self.ui.dark_mode
        self.view.apply_theme(self.ui.dark_mode)
        return self.ui.dark_mode

    def clear(self) -> None:
        self.doc = Document()
        self.view.set_editor_text("")
        self.view.set_filename_text("")

    # ---------- save ----------

    def save(self) -> SaveOutcome:
        if not self.capabilities.can_save:
            return SaveOutcome.INVALID
        if self.ui.modal_visible:
            logger.debug("Save ignored: a dialog is already visible")
            return SaveOutcome.BUSY

        if self.doc.source is not None and self.capabilities.can_resave:
            return self._resave(self.doc.source)

        try:
            validate_for_export(self.doc.filename, self.doc.text)
        except ValidationError as e:
            self._info(str(e))
            return SaveOutcome.INVALID

        try:
            staged = self.files.stage_text(self.doc.filename, self.doc.text)
        except OSError as e:
            logger.warning("Error creating temporary file: %s", e)
            self._error(MSG_SAVE_FAILED.format(error=e))
            return SaveOutcome.FAILED

        self.ui.save_dialog_visible = True
        try:
            dest = self.dialogs.get_export_path(self.view, "Save", staged.name, EXPORT_FILTER)
        finally:
            self.ui.save_dialog_visible = False

        if dest is None:
            logger.debug("Export dialog cancelled")
            if self.notify_on_cancel:
                self._info(MSG_SAVE_CANCELLED)
            return SaveOutcome.CANCELLED

        try:
            self.files.copy_atomic(staged, dest)
        except OSError as e:
            logger.warning("Export to %s failed: %s", dest, e)
            self._error(MSG_SAVE_FAILED.format(error=e))
            return SaveOutcome.FAILED

        logger.info("Exported %s", dest)
        self._info(MSG_SAVED)
        return SaveOutcome.SAVED

    def _resave(self, path: Path) -> SaveOutcome:
        try:
            self.io.resave(path, self.doc.text)
        except EditorError as e:
            logger.warning("Direct save to %s failed: %s", path, e)
            self._error(MSG_SAVE_FAILED.format(error=e))
            return SaveOutcome.FAILED
        self._info(MSG_SAVED)
        return SaveOutcome.SAVED

    # ---------- open ----------

    def open(self) -> OpenResult:
        if not self.capabilities.can_open:
            return OpenResult.failed()
        if self.ui.modal_visible:
            logger.debug("Open ignored: a dialog is already visible")
            return OpenResult.failed()

        start_dir = str(self.doc.source.parent) if self.doc.source else None
        self.ui.open_dialog_visible = True
        try:
            path = self.dialogs.get_open_file(self.view, "Open File", start_dir, OPEN_FILTERS)
        finally:
            self.ui.open_dialog_visible = False

        if path is None:
            logger.debug("Import dialog cancelled")
            if self.notify_on_cancel:
                self._error(MSG_OPEN_FAILED)
            return OpenResult.failed()

        return self.open_path(path)

    def open_path(self, path: Path) -> OpenResult:
        """Load ``path`` into the document; on failure the current document is kept."""
        if not self.capabilities.can_open:
            return OpenResult.failed()

        result = self.io.open(path)
        if not result.ok:
            self._error(MSG_OPEN_FAILED)
            return result

        self.doc = Document(
            text=result.text or "",
            filename=result.display_name,
            source=result.location,
        )
        self.view.set_editor_text(self.doc.text)
        self.view.set_filename_text(self.doc.filename)
        return result

    # ---------- alerts ----------

    def _info(self, text: str) -> None:
        self.ui.alert_message = text
        try:
            self.messages.info(self.view, MSG_TITLE, text)
        finally:
            self.ui.alert_message = None

    def _error(self, text: str) -> None:
        self.ui.alert_message = text
        try:
            self.messages.error(self.view, MSG_TITLE, text)
        finally:
            self.ui.alert_message = None
