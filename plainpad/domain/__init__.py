"""Domain layer: document state, edit actions, events and the pure dispatcher."""

from .buffer import TextBuffer
from .dispatcher import Transition, update
from .errors import DialogClosed, EditorError, FileIOError, IOErrorKind
from .interfaces import IConfigService, IFileService, IMainView, ISettingsService
from .models import DocumentState, status_line

__all__ = [
    "TextBuffer",
    "DocumentState",
    "status_line",
    "Transition",
    "update",
    "EditorError",
    "DialogClosed",
    "FileIOError",
    "IOErrorKind",
    "IFileService",
    "ISettingsService",
    "IConfigService",
    "IMainView",
]
