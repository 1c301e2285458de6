from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from plainpad.domain.buffer import EditAction
from plainpad.domain.errors import EditorError


@dataclass(frozen=True)
class LoadedFile:
    """Result of a successful load: the path read and its full text."""

    path: Path
    content: str


# ---------- events (inputs to the dispatcher) ----------


@dataclass(frozen=True)
class Startup:
    default_path: Path


@dataclass(frozen=True)
class Edit:
    action: EditAction


@dataclass(frozen=True)
class New:
    pass


@dataclass(frozen=True)
class OpenRequested:
    pass


@dataclass(frozen=True)
class FileOpened:
    result: LoadedFile | EditorError


@dataclass(frozen=True)
class SaveRequested:
    pass


@dataclass(frozen=True)
class FileSaved:
    """
    `result` is the path written, or the failure. `generation` is the document
    generation the save was requested for.
    """

    result: Path | EditorError
    generation: int = 0


Event = Union[Startup, Edit, New, OpenRequested, FileOpened, SaveRequested, FileSaved]


# ---------- commands (async work the dispatcher asks for) ----------


@dataclass(frozen=True)
class LoadFile:
    path: Path


@dataclass(frozen=True)
class PickAndLoad:
    pass


@dataclass(frozen=True)
class SaveFile:
    path: Path | None
    text: str
    generation: int = 0


Command = Union[LoadFile, PickAndLoad, SaveFile]
