from __future__ import annotations

import errno
from pathlib import Path

from PyQt6.QtCore import QFileDevice, QIODevice, QSaveFile

from plainpad.domain.interfaces import IFileService


class FileService(IFileService):
    """Blocking whole-file UTF-8 reads and atomic writes. Safe to call from worker threads."""

    def read_text(self, path: Path) -> str:
        # newline="" keeps the bytes on disk intact so a save writes back exactly what was read
        with path.open("r", encoding="utf-8", newline="") as fh:
            return fh.read()

    def write_text_atomic(self, path: Path, text: str) -> None:
        if not path.parent.is_dir():
            raise FileNotFoundError(errno.ENOENT, "No such directory", str(path.parent))

        sf = QSaveFile(str(path))
        if not sf.open(QIODevice.OpenModeFlag.WriteOnly):
            self._raise_for(sf, path, "Cannot open for write")
        sf.write(text.encode("utf-8"))
        if not sf.commit():
            self._raise_for(sf, path, "Commit failed for")

    @staticmethod
    def _raise_for(sf: QSaveFile, path: Path, what: str) -> None:
        message = f"{what}: {path} ({sf.errorString()})"
        if sf.error() == QFileDevice.FileError.PermissionsError:
            raise PermissionError(errno.EACCES, message, str(path))
        raise OSError(message)
