# plainpad/services/config/ini_config_service.py
from __future__ import annotations

import configparser
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Optional

from platformdirs import user_config_dir

from plainpad.domain.interfaces import IConfigService

logger = logging.getLogger(__name__)


class IniConfigService(IConfigService):
    r"""
    INI-backed configuration reader.

    Load order (first hit wins):
      1. Explicit path provided at construction
      2. User config dir (e.g., ~/.config/PlainPad/config.ini or %APPDATA%\PlainPad\config.ini)
      3. Project default at <repo>/config/config.ini  (optional)

    Recognised keys:
      [editor] default_path   file opened at startup
      [ui]     theme          dark | light
      [ui]     title          window title
      [logging] level, dir, console, max_bytes, backup_count
    """

    DEFAULT_APP_DIR = "PlainPad"
    DEFAULT_FILE = "config.ini"

    def __init__(self, explicit_path: Optional[Path] = None, project_root: Optional[Path] = None):
        self._parser = configparser.ConfigParser(interpolation=None)
        self._loaded_from: Optional[Path] = None

        candidates: list[Path] = []
        if explicit_path:
            candidates.append(explicit_path)
        candidates.append(Path(user_config_dir(self.DEFAULT_APP_DIR)) / self.DEFAULT_FILE)
        if project_root:
            candidates.append(project_root / "config" / self.DEFAULT_FILE)

        for path in candidates:
            if not path.is_file():
                continue
            try:
                with path.open("r", encoding="utf-8") as fh:
                    self._parser.read_file(fh)
            except (OSError, UnicodeError, configparser.Error) as exc:
                # A broken config file must not keep the editor from starting.
                logger.warning("Skipping unreadable config %s: %s", path, exc)
                self._parser = configparser.ConfigParser(interpolation=None)
                continue
            self._loaded_from = path
            logger.debug("Configuration loaded from %s", path)
            break

        for section in ("editor", "ui", "logging"):
            if section not in self._parser:
                self._parser[section] = {}

    # ----- IConfigService -----

    def get(self, section: str, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._parser.get(section, key, fallback=default)

    def get_int(self, section: str, key: str, default: Optional[int] = None) -> Optional[int]:
        try:
            return self._parser.getint(section, key, fallback=default)
        except ValueError:
            return default

    def get_bool(self, section: str, key: str, default: Optional[bool] = None) -> Optional[bool]:
        raw = self.get(section, key)
        if raw is None:
            return default
        return self._parser.BOOLEAN_STATES.get(raw.strip().lower(), default)

    def as_dict(self) -> Mapping[str, Mapping[str, str]]:
        return {name: dict(self._parser[name]) for name in self._parser.sections()}

    @property
    def loaded_from(self) -> Optional[Path]:
        """For diagnostics."""
        return self._loaded_from
