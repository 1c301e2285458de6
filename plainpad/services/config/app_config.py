from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from plainpad.services.config.ini_config_service import IniConfigService
from plainpad.utils.constants import THEME_DARK, THEME_LIGHT, WINDOW_TITLE

_LOG_MAX_BYTES = 1_000_000
_LOG_BACKUP_COUNT = 3


def _project_root_fallback() -> Path:
    """
    Best-effort project root resolution that also works in PyInstaller:
      - PyInstaller onefile/onedir uses sys._MEIPASS as bundle root
      - dev mode uses this file location to walk upward
    """
    meipass = getattr(sys, "_MEIPASS", None)  # type: ignore[attr-defined]
    if meipass:
        return Path(meipass)

    # app_config.py -> plainpad/services/config/app_config.py
    return Path(__file__).resolve().parents[3]


@dataclass(frozen=True)
class AppConfig:
    """
    Typed view over IniConfigService.

    Default startup file precedence:
      1) [editor] default_path
      2) <project_root>/plainpad/main.py (the editor's own entry module)
    """

    ini: IniConfigService
    project_root: Path

    def default_path(self) -> Path:
        raw = (self.ini.get("editor", "default_path") or "").strip()
        if raw:
            return Path(raw).expanduser()
        return self.project_root / "plainpad" / "main.py"

    def theme(self) -> str:
        theme = (self.ini.get("ui", "theme") or THEME_DARK).strip().lower()
        return theme if theme in (THEME_DARK, THEME_LIGHT) else THEME_DARK

    def window_title(self) -> str:
        return (self.ini.get("ui", "title") or "").strip() or WINDOW_TITLE

    def log_level(self) -> int:
        name = (self.ini.get("logging", "level") or "INFO").strip().upper()
        level = logging.getLevelName(name)
        return level if isinstance(level, int) else logging.INFO

    def log_dir(self) -> Path | None:
        raw = (self.ini.get("logging", "dir") or "").strip()
        return Path(raw).expanduser() if raw else None

    def log_to_console(self) -> bool:
        return bool(self.ini.get_bool("logging", "console", True))

    def log_max_bytes(self) -> int:
        value = self.ini.get_int("logging", "max_bytes", _LOG_MAX_BYTES)
        return value if value and value > 0 else _LOG_MAX_BYTES

    def log_backup_count(self) -> int:
        value = self.ini.get_int("logging", "backup_count", _LOG_BACKUP_COUNT)
        return value if value is not None and value >= 0 else _LOG_BACKUP_COUNT

    @property
    def loaded_from(self) -> Path | None:
        return self.ini.loaded_from


def build_app_config(
    *, explicit_ini: Path | None = None, project_root: Path | None = None
) -> AppConfig:
    root = project_root or _project_root_fallback()
    ini = IniConfigService(explicit_path=explicit_ini, project_root=root)
    return AppConfig(ini=ini, project_root=root)
