from __future__ import annotations

from .qt_dialogs import QtAsyncFileDialogService

__all__ = [
    "QtAsyncFileDialogService",
]
