from __future__ import annotations

import os
from pathlib import Path

import pytest

# Widgets are created in tests; no display is needed.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtCore import QSettings  # noqa: E402
from PyQt6.QtWidgets import QApplication  # noqa: E402

from plainpad.domain.models import DocumentState  # noqa: E402
from plainpad.services.file_gateway import FileGateway  # noqa: E402
from plainpad.services.file_service import FileService  # noqa: E402
from plainpad.services.settings_service import SettingsService  # noqa: E402


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


# --- Fakes ---


class FakeDialogs:
    """Async dialog port that answers from canned values and records what was asked."""

    def __init__(self, *, open_path: Path | None = None, save_path: Path | None = None) -> None:
        self.open_path = open_path
        self.save_path = save_path
        self.open_calls: list[str] = []
        self.save_calls: list[str] = []

    async def pick_open_file(self, caption: str, filter_str: str) -> Path | None:
        self.open_calls.append(caption)
        return self.open_path

    async def pick_save_file(self, caption: str, filter_str: str) -> Path | None:
        self.save_calls.append(caption)
        return self.save_path


class RecordingView:
    """IMainView that keeps every rendered state and busy flag."""

    def __init__(self) -> None:
        self.rendered: list[DocumentState] = []
        self.busy: list[bool] = []

    def render(self, state: DocumentState) -> None:
        self.rendered.append(state)

    def set_busy(self, busy: bool) -> None:
        self.busy.append(busy)


# --- Other common fixtures ---


@pytest.fixture()
def tmp_settings_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.ini"


@pytest.fixture()
def qsettings(tmp_settings_path: Path) -> QSettings:
    # Use an INI file so we don't touch system registry / platform stores
    s = QSettings(str(tmp_settings_path), QSettings.Format.IniFormat)
    s.clear()
    return s


@pytest.fixture()
def settings_service(qsettings: QSettings) -> SettingsService:
    return SettingsService(qsettings)


@pytest.fixture()
def file_service() -> FileService:
    return FileService()


@pytest.fixture()
def dialogs() -> FakeDialogs:
    return FakeDialogs()


@pytest.fixture()
def gateway(file_service: FileService, dialogs: FakeDialogs) -> FileGateway:
    return FileGateway(file_service, dialogs)


@pytest.fixture()
def view() -> RecordingView:
    return RecordingView()
