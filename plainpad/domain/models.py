from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from plainpad.domain.buffer import TextBuffer
from plainpad.domain.errors import EditorError, FileIOError

NEW_FILE_LABEL = "New File"


@dataclass(frozen=True)
class DocumentState:
    """
    Everything the window shows: where the document lives, what is in it and
    what went wrong last. Instances are never mutated; the dispatcher hands out
    a new one for every transition, so a state doubles as a render snapshot.

    `generation` changes only when the buffer is replaced wholesale (New, a
    completed load), which tells views when to resync their text widget.
    """

    current_path: Path | None = None
    buffer: TextBuffer = field(default_factory=TextBuffer)
    last_error: EditorError | None = None
    generation: int = 0

    @property
    def text(self) -> str:
        return self.buffer.text

    @property
    def cursor_position(self) -> tuple[int, int]:
        return self.buffer.cursor_position


def status_line(state: DocumentState) -> tuple[str, str]:
    """Left and right status bar texts: error/path/"New File" and 1-based `line:column`."""
    if isinstance(state.last_error, FileIOError):
        message = str(state.last_error)
    elif state.current_path is not None:
        message = str(state.current_path)
    else:
        message = NEW_FILE_LABEL

    line, column = state.cursor_position
    return message, f"{line + 1}:{column + 1}"
