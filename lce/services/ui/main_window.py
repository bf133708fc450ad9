from __future__ import annotations

from PyQt6.QtGui import QAction, QFontDatabase, QKeySequence
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLineEdit,
    QMainWindow,
    QPlainTextEdit,
    QPushButton,
    QStyle,
    QVBoxLayout,
    QWidget,
)

from lce.domain.models import Capabilities
from lce.services.ui.presenters.editor_presenter import EditorPresenter
from lce.utils.constants import (
    APP_NAME,
    DARK_COLORS,
    FILENAME_PLACEHOLDER,
    LIGHT_COLORS,
    MOON_COLOR,
    SUN_COLOR,
)


class MainWindow(QMainWindow):
    """Thin single-screen view; every action is forwarded to the attached EditorPresenter."""

    def __init__(
        self,
        *,
        capabilities: Capabilities | None = None,
        tab_width: int = 4,
        font_point_size: int = 12,
        app_title: str = APP_NAME,
    ) -> None:
        super().__init__()
        self.setWindowTitle(app_title)
        self.resize(480, 720)

        self.capabilities = capabilities or Capabilities()
        self.presenter: EditorPresenter | None = None

        # Widgets
        self.theme_btn = QPushButton(self)
        self.theme_btn.setFlat(True)
        self.theme_btn.setToolTip("Toggle light/dark")

        self.clear_btn = QPushButton(self)
        self.clear_btn.setFlat(True)
        self.clear_btn.setIcon(self.style().standardIcon(QStyle.StandardPixmap.SP_TrashIcon))
        self.clear_btn.setToolTip("Clear")

        self.filename_edit = QLineEdit(self)
        self.filename_edit.setPlaceholderText(FILENAME_PLACEHOLDER)

        self.editor = QPlainTextEdit(self)
        font = QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont)
        font.setPointSize(font_point_size)
        self.editor.setFont(font)
        self.editor.setTabStopDistance(tab_width * self.editor.fontMetrics().horizontalAdvance(" "))
        self.editor.setMinimumHeight(300)

        self.open_btn = QPushButton("Open File", self)
        self.open_btn.setIcon(self.style().standardIcon(QStyle.StandardPixmap.SP_DirOpenIcon))
        self.save_btn = QPushButton("Save", self)
        self.save_btn.setIcon(
            self.style().standardIcon(QStyle.StandardPixmap.SP_DialogSaveButton)
        )
        for b in (self.open_btn, self.save_btn):
            b.setMinimumSize(140, 44)

        # Layout
        top = QHBoxLayout()
        top.addWidget(self.theme_btn)
        top.addStretch(1)
        top.addWidget(self.clear_btn)

        buttons = QHBoxLayout()
        buttons.addStretch(1)
        buttons.addWidget(self.open_btn)
        buttons.addWidget(self.save_btn)
        buttons.addStretch(1)

        root = QVBoxLayout()
        root.setSpacing(20)
        root.addLayout(top)
        root.addWidget(self.filename_edit)
        root.addWidget(self.editor, 1)
        root.addLayout(buttons)

        central = QWidget(self)
        central.setLayout(root)
        self.setCentralWidget(central)

        self._build_actions()

        # Capabilities decide which controls exist for the user
        self.open_btn.setVisible(self.capabilities.can_open)
        self.act_open.setEnabled(self.capabilities.can_open)
        self.save_btn.setVisible(self.capabilities.can_save)
        self.act_save.setEnabled(self.capabilities.can_save)

        # Signals
        self.theme_btn.clicked.connect(self._toggle_theme)
        self.clear_btn.clicked.connect(self._clear)
        self.open_btn.clicked.connect(self._open)
        self.save_btn.clicked.connect(self._save)
        self.editor.textChanged.connect(self._on_text_changed)
        self.filename_edit.textChanged.connect(self._on_filename_changed)

        self.apply_theme(False)

    # ---------- UI creation ----------
    def _build_actions(self) -> None:
        self.act_open = QAction(
            "Open…", self, shortcut=QKeySequence.StandardKey.Open, triggered=self._open
        )
        self.act_save = QAction(
            "Save", self, shortcut=QKeySequence.StandardKey.Save, triggered=self._save
        )
        self.addAction(self.act_open)
        self.addAction(self.act_save)

    def attach_presenter(self, presenter: EditorPresenter) -> None:
        self.presenter = presenter
        presenter.set_text(self.editor.toPlainText())
        presenter.set_filename(self.filename_edit.text())
        self.apply_theme(presenter.ui.dark_mode)

    # ---------- IEditorView ----------
    def set_editor_text(self, text: str) -> None:
        # Programmatic loads must not echo back: toPlainText() rewrites NBSP and U+2029.
        was_blocked = self.editor.blockSignals(True)
        try:
            self.editor.setPlainText(text)
        finally:
            self.editor.blockSignals(was_blocked)

    def set_filename_text(self, name: str) -> None:
        was_blocked = self.filename_edit.blockSignals(True)
        try:
            self.filename_edit.setText(name)
        finally:
            self.filename_edit.blockSignals(was_blocked)

    def apply_theme(self, dark: bool) -> None:
        window_bg, editor_bg, fg = DARK_COLORS if dark else LIGHT_COLORS
        self.theme_btn.setText("☾" if dark else "☀")
        self.theme_btn.setStyleSheet(
            f"color: {MOON_COLOR if dark else SUN_COLOR}; font-size: 24px; border: none;"
        )
        self.centralWidget().setStyleSheet(f"QWidget {{ background: {window_bg}; }}")
        field_css = f"background: {editor_bg}; color: {fg}; border-radius: 8px; padding: 8px;"
        self.editor.setStyleSheet(f"QPlainTextEdit {{ {field_css} }}")
        self.filename_edit.setStyleSheet(f"QLineEdit {{ {field_css} }}")
        self.open_btn.setStyleSheet("color: white; background: #007aff; border-radius: 8px;")
        self.save_btn.setStyleSheet("color: white; background: #34c759; border-radius: 8px;")

    # ---------- Actions ----------
    def _toggle_theme(self) -> None:
        if self.presenter:
            self.presenter.toggle_theme()

    def _clear(self) -> None:
        if self.presenter:
            self.presenter.clear()

    def _open(self) -> None:
        if self.presenter:
            self.presenter.open()

    def _save(self) -> None:
        if self.presenter:
            self.presenter.save()

    def _on_text_changed(self) -> None:
        if self.presenter:
            self.presenter.set_text(self.editor.toPlainText())

    def _on_filename_changed(self, text: str) -> None:
        if self.presenter:
            self.presenter.set_filename(text)
