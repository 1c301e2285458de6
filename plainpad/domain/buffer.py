from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class TextBuffer:
    """
    Immutable edit buffer: the document text plus a caret offset into it.

    Every edit returns a new buffer; the text itself is never copied until an
    action actually changes it, so a freshly loaded file shares its string with
    whoever handed it over.
    """

    text: str = ""
    cursor: int = 0

    @classmethod
    def with_text(cls, text: str) -> TextBuffer:
        return cls(text=text, cursor=0)

    # ---------- queries ----------

    @property
    def cursor_position(self) -> tuple[int, int]:
        """Zero-based (line, column) of the caret."""
        line = self.text.count("\n", 0, self.cursor)
        column = self.cursor - (self.text.rfind("\n", 0, self.cursor) + 1)
        return line, column

    @property
    def line_count(self) -> int:
        return self.text.count("\n") + 1

    def line_bounds(self, offset: int) -> tuple[int, int]:
        """Start and end offsets of the line containing `offset` (end excludes the newline)."""
        start = self.text.rfind("\n", 0, offset) + 1
        end = self.text.find("\n", offset)
        return start, len(self.text) if end == -1 else end

    def offset_of(self, line: int, column: int) -> int:
        """Offset for a (line, column) pair, clamped to the buffer."""
        lines = self.text.split("\n")
        line = min(max(line, 0), len(lines) - 1)
        start = sum(len(x) + 1 for x in lines[:line])
        return start + min(max(column, 0), len(lines[line]))

    # ---------- mutation ----------

    def apply(self, action: EditAction) -> TextBuffer:
        return action.apply(self)

    def with_cursor(self, offset: int) -> TextBuffer:
        offset = min(max(offset, 0), len(self.text))
        if offset == self.cursor:
            return self
        return replace(self, cursor=offset)


@runtime_checkable
class EditAction(Protocol):
    """A single user edit; applying it never mutates the input buffer."""

    def apply(self, buffer: TextBuffer) -> TextBuffer: ...


class Motion(Enum):
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    LINE_START = auto()
    LINE_END = auto()
    DOCUMENT_START = auto()
    DOCUMENT_END = auto()


@dataclass(frozen=True)
class Replace:
    """Replace text[start:end] with `text` and leave the caret after the insertion."""

    start: int
    end: int
    text: str = ""

    @classmethod
    def between(cls, old: str, new: str) -> Replace:
        """Smallest single replacement turning `old` into `new`."""
        limit = min(len(old), len(new))
        prefix = 0
        while prefix < limit and old[prefix] == new[prefix]:
            prefix += 1
        suffix = 0
        while suffix < limit - prefix and old[-1 - suffix] == new[-1 - suffix]:
            suffix += 1
        return cls(prefix, len(old) - suffix, new[prefix : len(new) - suffix])

    def apply(self, buffer: TextBuffer) -> TextBuffer:
        size = len(buffer.text)
        start = min(max(self.start, 0), size)
        end = min(max(self.end, start), size)
        if start == end and not self.text:
            return buffer.with_cursor(start)
        text = buffer.text[:start] + self.text + buffer.text[end:]
        return TextBuffer(text=text, cursor=start + len(self.text))


@dataclass(frozen=True)
class Insert:
    """Type `text` at the caret."""

    text: str

    def apply(self, buffer: TextBuffer) -> TextBuffer:
        return Replace(buffer.cursor, buffer.cursor, self.text).apply(buffer)


@dataclass(frozen=True)
class Backspace:
    def apply(self, buffer: TextBuffer) -> TextBuffer:
        if buffer.cursor == 0:
            return buffer
        return Replace(buffer.cursor - 1, buffer.cursor).apply(buffer)


@dataclass(frozen=True)
class Delete:
    def apply(self, buffer: TextBuffer) -> TextBuffer:
        if buffer.cursor >= len(buffer.text):
            return buffer
        return Replace(buffer.cursor, buffer.cursor + 1).apply(buffer)


@dataclass(frozen=True)
class MoveTo:
    """Place the caret at (line, column), clamped to the text."""

    line: int
    column: int

    def apply(self, buffer: TextBuffer) -> TextBuffer:
        return buffer.with_cursor(buffer.offset_of(self.line, self.column))


@dataclass(frozen=True)
class Move:
    motion: Motion

    def apply(self, buffer: TextBuffer) -> TextBuffer:
        m = self.motion
        if m is Motion.LEFT:
            return buffer.with_cursor(buffer.cursor - 1)
        if m is Motion.RIGHT:
            return buffer.with_cursor(buffer.cursor + 1)
        if m is Motion.DOCUMENT_START:
            return buffer.with_cursor(0)
        if m is Motion.DOCUMENT_END:
            return buffer.with_cursor(len(buffer.text))

        start, end = buffer.line_bounds(buffer.cursor)
        if m is Motion.LINE_START:
            return buffer.with_cursor(start)
        if m is Motion.LINE_END:
            return buffer.with_cursor(end)

        line, column = buffer.cursor_position
        if m is Motion.UP:
            if line == 0:
                return buffer.with_cursor(0)
            return MoveTo(line - 1, column).apply(buffer)
        # DOWN
        if line == buffer.line_count - 1:
            return buffer.with_cursor(len(buffer.text))
        return MoveTo(line + 1, column).apply(buffer)
