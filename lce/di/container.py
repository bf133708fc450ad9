from __future__ import annotations

from pathlib import Path

from lce.domain.interfaces import IAccessProvider, IFileService
from lce.domain.models import Capabilities
from lce.services.config.app_config import AppConfig, build_app_config
from lce.services.document_io import DocumentIO
from lce.services.file_service import FileService
from lce.services.scoped_access import FilesystemAccessProvider
from lce.services.ui.adapters import QtFileDialogService, QtMessageService
from lce.services.ui.main_window import MainWindow
from lce.services.ui.ports.dialogs import IFileDialogService
from lce.services.ui.ports.messages import IMessageService
from lce.services.ui.presenters.editor_presenter import EditorPresenter, IEditorView
from lce.utils.constants import APP_NAME


class Container:
    """
    Lightweight DI container:
      - Wires default services if not provided
      - Reads editor settings and the capability set from AppConfig
      - Builds the window and binds its presenter
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        files: IFileService | None = None,
        access: IAccessProvider | None = None,
        dialogs: IFileDialogService | None = None,
        messages: IMessageService | None = None,
        capabilities: Capabilities | None = None,
    ) -> None:
        self.config: AppConfig = config or build_app_config()
        self.file_service: IFileService = files or FileService()
        self.access: IAccessProvider = access or FilesystemAccessProvider()
        self.document_io = DocumentIO(self.file_service, self.access)

        # UI service ports (Qt-backed adapters by default)
        self.dialogs: IFileDialogService = dialogs or QtFileDialogService()
        self.messages: IMessageService = messages or QtMessageService()

        self.capabilities = capabilities or self.config.capabilities()

    @staticmethod
    def default(*, explicit_ini: Path | None = None) -> Container:
        return Container(config=build_app_config(explicit_ini=explicit_ini))

    # ---------- UI factories ----------

    def build_presenter(self, view: IEditorView) -> EditorPresenter:
        return EditorPresenter(
            view=view,
            files=self.file_service,
            io=self.document_io,
            messages=self.messages,
            dialogs=self.dialogs,
            capabilities=self.capabilities,
            dark_mode=self.config.dark_mode(),
            notify_on_cancel=self.config.notify_on_cancel(),
        )

    def build_main_window(
        self,
        *,
        start_path: Path | None = None,
        app_title: str = APP_NAME,
    ) -> MainWindow:
        """Create the Qt MainWindow, attach its presenter and optionally open ``start_path``."""
        window = MainWindow(
            capabilities=self.capabilities,
            tab_width=self.config.tab_width(),
            font_point_size=self.config.font_point_size(),
            app_title=app_title,
        )
        presenter = self.build_presenter(view=window)
        window.attach_presenter(presenter)

        if start_path is not None:
            presenter.open_path(start_path)

        return window
