from __future__ import annotations

from PyQt6.QtCore import QByteArray, QSettings

from plainpad.domain.interfaces import ISettingsService
from plainpad.utils.constants import SETTINGS_GEOMETRY


class SettingsService(ISettingsService):
    """Persist the main window geometry between runs."""

    def __init__(self, qsettings: QSettings) -> None:
        self._s = qsettings

    def get_geometry(self) -> bytes | None:
        v = self._s.value(SETTINGS_GEOMETRY)
        return bytes(v) if isinstance(v, QByteArray) else None

    def set_geometry(self, blob: bytes) -> None:
        self._s.setValue(SETTINGS_GEOMETRY, QByteArray(blob))
