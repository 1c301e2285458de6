from __future__ import annotations

from .dialogs import IAsyncFileDialogService

__all__ = [
    "IAsyncFileDialogService",
]
