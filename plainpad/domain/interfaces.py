from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

from plainpad.domain.models import DocumentState


class IFileService(Protocol):
    """Read/write whole UTF-8 text files. Writes should be atomic when possible."""

    def read_text(self, path: Path) -> str: ...
    def write_text_atomic(self, path: Path, text: str) -> None: ...


class ISettingsService(Protocol):
    """Persist and retrieve lightweight UI state."""

    def get_geometry(self) -> bytes | None: ...
    def set_geometry(self, blob: bytes) -> None: ...


class IConfigService(Protocol):
    """Read-only access to sectioned key/value configuration."""

    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_int(self, section: str, key: str, default: int | None = None) -> int | None: ...
    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None: ...
    def as_dict(self) -> Mapping[str, Mapping[str, str]]: ...


class IMainView(Protocol):
    """Passive view driven by the presenter (implemented by the Qt MainWindow)."""

    def render(self, state: DocumentState) -> None: ...
    def set_busy(self, busy: bool) -> None: ...
