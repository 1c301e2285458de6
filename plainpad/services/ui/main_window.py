from __future__ import annotations

from PyQt6.QtCore import QByteArray
from PyQt6.QtGui import QAction, QFontDatabase, QKeySequence, QTextCursor
from PyQt6.QtWidgets import (
    QLabel,
    QMainWindow,
    QPlainTextEdit,
    QStatusBar,
    QToolBar,
)

from plainpad.domain.buffer import MoveTo, Replace
from plainpad.domain.errors import FileIOError
from plainpad.domain.events import Edit, Event, New, OpenRequested, SaveRequested
from plainpad.domain.interfaces import ISettingsService
from plainpad.domain.models import NEW_FILE_LABEL, DocumentState, status_line
from plainpad.utils.constants import WINDOW_TITLE


class MainWindow(QMainWindow):
    """
    Thin PyQt window. It never changes the document itself: toolbar actions and
    widget edits become events for the presenter, and `render` paints whatever
    state comes back.
    """

    def __init__(self, settings: ISettingsService, *, app_title: str = WINDOW_TITLE) -> None:
        super().__init__()
        self.setWindowTitle(app_title)
        self.resize(900, 640)

        self.settings = settings
        self._presenter = None
        self._state: DocumentState | None = None
        self._generation: int | None = None
        self._syncing = False

        # Widgets
        self.editor = QPlainTextEdit(self)
        self.editor.setFont(QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont))
        self.editor.setTabStopDistance(4 * self.editor.fontMetrics().horizontalAdvance(" "))
        self.setCentralWidget(self.editor)

        self.path_label = QLabel(NEW_FILE_LABEL, self)
        self.position_label = QLabel("1:1", self)

        # Signals
        self.editor.textChanged.connect(self._on_text_changed)
        self.editor.cursorPositionChanged.connect(self._on_cursor_moved)

        # UI
        self._build_actions()
        self._build_toolbar()
        self._build_menu()
        self._build_status_bar()

        geo = self.settings.get_geometry()
        if isinstance(geo, (bytes, bytearray)):
            self.restoreGeometry(QByteArray(geo))

    def attach_presenter(self, presenter) -> None:
        self._presenter = presenter

    @property
    def presenter(self):
        return self._presenter

    # ---------- UI creation ----------
    def _build_actions(self) -> None:
        self.act_new = QAction(
            "New", self, shortcut=QKeySequence.StandardKey.New, triggered=self._new_file
        )
        self.act_open = QAction(
            "Open…",
            self,
            shortcut=QKeySequence.StandardKey.Open,
            triggered=self._open_dialog,
        )
        self.act_save = QAction(
            "Save", self, shortcut=QKeySequence.StandardKey.Save, triggered=self._save
        )
        self.exit_action = QAction("&Exit", self)
        self.exit_action.setShortcut("Ctrl+Q")
        self.exit_action.setStatusTip("Exit application")
        self.exit_action.triggered.connect(self.close)

    def _build_toolbar(self) -> None:
        tb = QToolBar("Main", self)
        tb.setMovable(False)
        for a in (self.act_new, self.act_open, self.act_save):
            tb.addAction(a)
        self.addToolBar(tb)

    def _build_menu(self) -> None:
        filem = self.menuBar().addMenu("&File")
        filem.addAction(self.act_new)
        filem.addAction(self.act_open)
        filem.addAction(self.act_save)
        filem.addSeparator()
        filem.addAction(self.exit_action)

    def _build_status_bar(self) -> None:
        bar = QStatusBar(self)
        bar.addWidget(self.path_label, 1)
        bar.addPermanentWidget(self.position_label)
        self.setStatusBar(bar)

    # ---------- IMainView ----------
    def render(self, state: DocumentState) -> None:
        if state.generation != self._generation:
            self._generation = state.generation
            self._syncing = True
            try:
                self.editor.setPlainText(state.text)
                self.editor.moveCursor(QTextCursor.MoveOperation.Start)
            finally:
                self._syncing = False

        message, position = status_line(state)
        self.path_label.setText(message)
        self.path_label.setStyleSheet(
            "color: #e06c75;" if isinstance(state.last_error, FileIOError) else ""
        )
        self.position_label.setText(position)
        self._state = state

    def set_busy(self, busy: bool) -> None:
        self.act_open.setEnabled(not busy)
        self.act_save.setEnabled(not busy)

    # ---------- Actions ----------
    def _new_file(self) -> None:
        self._emit(New())

    def _open_dialog(self) -> None:
        self._emit(OpenRequested())

    def _save(self) -> None:
        self._emit(SaveRequested())

    # ---------- Helpers ----------
    def _emit(self, event: Event) -> None:
        if self._presenter is not None:
            self._presenter.dispatch(event)

    def _on_text_changed(self) -> None:
        if self._syncing or self._state is None:
            return
        old = self._state.text
        new = self.editor.toPlainText()
        if new != old:
            self._emit(Edit(Replace.between(old, new)))

    def _on_cursor_moved(self) -> None:
        if self._syncing or self._state is None:
            return
        cursor = self.editor.textCursor()
        line = cursor.blockNumber()
        column = _utf16_to_index(cursor.block().text(), cursor.positionInBlock())
        if (line, column) != self._state.cursor_position:
            self._emit(Edit(MoveTo(line, column)))

    # ---------- Close ----------
    def closeEvent(self, event):
        self.settings.set_geometry(bytes(self.saveGeometry()))
        super().closeEvent(event)


def _utf16_to_index(text: str, units: int) -> int:
    """Qt reports columns in UTF-16 code units; Python indexes code points."""
    count = 0
    for i, ch in enumerate(text):
        if count >= units:
            return i
        count += 2 if ord(ch) > 0xFFFF else 1
    return len(text)
