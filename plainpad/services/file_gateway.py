from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from plainpad.domain.errors import DialogClosed, FileIOError
from plainpad.domain.events import LoadedFile
from plainpad.domain.interfaces import IFileService
from plainpad.services.ui.ports.dialogs import IAsyncFileDialogService
from plainpad.utils.constants import OPEN_DIALOG_CAPTION, SAVE_DIALOG_CAPTION, TEXT_FILE_FILTER

logger = logging.getLogger(__name__)


class FileGateway:
    """
    Async file operations behind the editor's Open/Save commands.

    Disk access runs in the default executor so the UI loop stays responsive;
    dialogs are awaited through the dialog port. Failures are raised as
    `DialogClosed` or `FileIOError`, never as raw OS exceptions.
    """

    def __init__(self, files: IFileService, dialogs: IAsyncFileDialogService) -> None:
        self._files = files
        self._dialogs = dialogs

    async def load(self, path: Path) -> LoadedFile:
        logger.debug("Loading %s", path)
        try:
            content = await asyncio.to_thread(self._files.read_text, path)
        except (OSError, UnicodeError) as exc:
            error = FileIOError.from_exception(exc, path)
            logger.warning("Failed to load %s: %s (%s)", path, error, exc)
            raise error from exc
        logger.info("Loaded %s (%d chars)", path, len(content))
        return LoadedFile(path=path, content=content)

    async def pick_and_load(self) -> LoadedFile:
        path = await self._dialogs.pick_open_file(OPEN_DIALOG_CAPTION, TEXT_FILE_FILTER)
        if path is None:
            logger.info("Open dialog dismissed")
            raise DialogClosed()
        return await self.load(path)

    async def save(self, path: Path | None, text: str) -> Path:
        if path is None:
            path = await self._dialogs.pick_save_file(SAVE_DIALOG_CAPTION, TEXT_FILE_FILTER)
            if path is None:
                logger.info("Save dialog dismissed")
                raise DialogClosed()

        logger.debug("Saving %d chars to %s", len(text), path)
        try:
            await asyncio.to_thread(self._files.write_text_atomic, path, text)
        except OSError as exc:
            error = FileIOError.from_exception(exc, path)
            logger.warning("Failed to save %s: %s (%s)", path, error, exc)
            raise error from exc
        logger.info("Saved %s", path)
        return path
