from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class IAsyncFileDialogService(Protocol):
    """
    Abstract UI port for native file dialogs. Keeps the gateway decoupled from Qt.
    Both calls suspend until the user answers; neither blocks the event loop.
    """

    async def pick_open_file(self, caption: str, filter_str: str) -> Path | None:
        """Return the chosen file, or None if the dialog was dismissed."""
        ...

    async def pick_save_file(self, caption: str, filter_str: str) -> Path | None:
        """Return the chosen destination, or None if the dialog was dismissed."""
        ...
