from __future__ import annotations

import asyncio
from pathlib import Path

from PyQt6.QtWidgets import QDialog, QFileDialog, QWidget

from plainpad.services.ui.ports.dialogs import IAsyncFileDialogService


class QtAsyncFileDialogService(IAsyncFileDialogService):
    """
    Qt-backed file dialogs that can be awaited.

    The dialog is shown window-modal with `open()` instead of `exec()`, so no
    nested event loop runs; the answer arrives through `finished` and resolves
    a future on the running asyncio loop.
    """

    def __init__(self, parent: QWidget | None = None) -> None:
        self._parent = parent

    def set_parent(self, parent: QWidget | None) -> None:
        self._parent = parent

    async def pick_open_file(self, caption: str, filter_str: str) -> Path | None:
        return await self._ask(
            caption,
            filter_str,
            accept_mode=QFileDialog.AcceptMode.AcceptOpen,
            file_mode=QFileDialog.FileMode.ExistingFile,
        )

    async def pick_save_file(self, caption: str, filter_str: str) -> Path | None:
        return await self._ask(
            caption,
            filter_str,
            accept_mode=QFileDialog.AcceptMode.AcceptSave,
            file_mode=QFileDialog.FileMode.AnyFile,
        )

    async def _ask(
        self,
        caption: str,
        filter_str: str,
        *,
        accept_mode: QFileDialog.AcceptMode,
        file_mode: QFileDialog.FileMode,
    ) -> Path | None:
        dialog = QFileDialog(self._parent, caption, "", filter_str)
        dialog.setAcceptMode(accept_mode)
        dialog.setFileMode(file_mode)

        future: asyncio.Future[Path | None] = asyncio.get_running_loop().create_future()

        def _finished(code: int) -> None:
            if future.done():
                return
            files = dialog.selectedFiles()
            if code == QDialog.DialogCode.Accepted.value and files:
                future.set_result(Path(files[0]))
            else:
                future.set_result(None)

        dialog.finished.connect(_finished)
        dialog.open()
        try:
            return await future
        finally:
            dialog.deleteLater()
