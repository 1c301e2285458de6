from __future__ import annotations

import errno
from enum import Enum
from pathlib import Path


class IOErrorKind(Enum):
    """Classification of filesystem failures (message is what the status bar shows)."""

    NOT_FOUND = "entity not found"
    PERMISSION_DENIED = "permission denied"
    IS_A_DIRECTORY = "is a directory"
    NOT_A_DIRECTORY = "not a directory"
    ALREADY_EXISTS = "entity already exists"
    INVALID_DATA = "stream did not contain valid UTF-8"
    OTHER = "other error"


_ERRNO_KINDS: dict[int, IOErrorKind] = {
    errno.ENOENT: IOErrorKind.NOT_FOUND,
    errno.EACCES: IOErrorKind.PERMISSION_DENIED,
    errno.EPERM: IOErrorKind.PERMISSION_DENIED,
    errno.EISDIR: IOErrorKind.IS_A_DIRECTORY,
    errno.ENOTDIR: IOErrorKind.NOT_A_DIRECTORY,
    errno.EEXIST: IOErrorKind.ALREADY_EXISTS,
}


class EditorError(Exception):
    """Base class for every failure a file operation can produce."""


class DialogClosed(EditorError):
    """The file picker was dismissed without a selection."""

    def __init__(self) -> None:
        super().__init__("dialog closed")


class FileIOError(EditorError):
    """A classified filesystem failure."""

    def __init__(self, kind: IOErrorKind, path: Path | None = None, detail: str = "") -> None:
        super().__init__(kind.value)
        self.kind = kind
        self.path = path
        self.detail = detail

    def __str__(self) -> str:
        return self.kind.value

    def __repr__(self) -> str:
        return f"FileIOError({self.kind.name}, path={self.path!r})"

    @classmethod
    def from_exception(cls, exc: BaseException, path: Path | None = None) -> FileIOError:
        """Map any lower-level exception onto a FileIOError."""
        if isinstance(exc, FileIOError):
            return exc
        return cls(_classify(exc), path=path, detail=str(exc))


def _classify(exc: BaseException) -> IOErrorKind:
    if isinstance(exc, UnicodeError):
        return IOErrorKind.INVALID_DATA
    if isinstance(exc, FileNotFoundError):
        return IOErrorKind.NOT_FOUND
    if isinstance(exc, PermissionError):
        return IOErrorKind.PERMISSION_DENIED
    if isinstance(exc, IsADirectoryError):
        return IOErrorKind.IS_A_DIRECTORY
    if isinstance(exc, NotADirectoryError):
        return IOErrorKind.NOT_A_DIRECTORY
    if isinstance(exc, FileExistsError):
        return IOErrorKind.ALREADY_EXISTS
    if isinstance(exc, OSError) and exc.errno is not None:
        return _ERRNO_KINDS.get(exc.errno, IOErrorKind.OTHER)
    return IOErrorKind.OTHER
