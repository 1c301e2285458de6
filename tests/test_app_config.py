# tests/test_app_config.py
from __future__ import annotations

import logging
from pathlib import Path

import pytest

from plainpad.services.config.app_config import AppConfig, build_app_config


# ------------------------------
# Helpers
# ------------------------------
def _write(p: Path, text: str) -> None:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")


class FakeIni:
    """
    Minimal IniConfigService-like fake backed by a nested dict.
    We only implement what AppConfig calls.
    """

    def __init__(self, data: dict[str, dict[str, str]] | None = None, *, loaded_from: Path | None = None):
        self._data = data or {}
        self._loaded_from = loaded_from

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        return self._data.get(section, {}).get(key, default)

    def get_int(self, section: str, key: str, default: int | None = None) -> int | None:
        raw = self.get(section, key)
        try:
            return int(raw) if raw is not None else default
        except ValueError:
            return default

    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None:
        raw = self.get(section, key)
        if raw is None:
            return default
        return raw.strip().lower() in {"1", "true", "yes", "on"}

    @property
    def loaded_from(self) -> Path | None:
        return self._loaded_from


@pytest.fixture()
def no_user_config(monkeypatch, tmp_path):
    monkeypatch.setattr(
        "plainpad.services.config.ini_config_service.user_config_dir",
        lambda appname: str(tmp_path / "usercfg" / appname),
        raising=True,
    )


# ------------------------------
# default_path()
# ------------------------------
def test_default_path_falls_back_to_own_entry_module(tmp_path: Path):
    cfg = AppConfig(ini=FakeIni(), project_root=tmp_path)
    assert cfg.default_path() == tmp_path / "plainpad" / "main.py"


def test_default_path_from_config_expands_user(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    cfg = AppConfig(ini=FakeIni({"editor": {"default_path": "~/notes.txt"}}), project_root=tmp_path)
    assert cfg.default_path() == tmp_path / "notes.txt"


def test_blank_default_path_is_ignored(tmp_path: Path):
    cfg = AppConfig(ini=FakeIni({"editor": {"default_path": "   "}}), project_root=tmp_path)
    assert cfg.default_path() == tmp_path / "plainpad" / "main.py"


# ------------------------------
# ui
# ------------------------------
@pytest.mark.parametrize(
    "raw,expected",
    [(None, "dark"), ("dark", "dark"), ("LIGHT", "light"), (" light ", "light"), ("neon", "dark")],
)
def test_theme(tmp_path: Path, raw, expected):
    data = {"ui": {"theme": raw}} if raw is not None else {}
    assert AppConfig(ini=FakeIni(data), project_root=tmp_path).theme() == expected


def test_window_title_default_and_override(tmp_path: Path):
    assert AppConfig(ini=FakeIni(), project_root=tmp_path).window_title() == "PlainPad"
    cfg = AppConfig(ini=FakeIni({"ui": {"title": "My Pad"}}), project_root=tmp_path)
    assert cfg.window_title() == "My Pad"


# ------------------------------
# logging
# ------------------------------
@pytest.mark.parametrize(
    "raw,expected",
    [(None, logging.INFO), ("debug", logging.DEBUG), ("WARNING", logging.WARNING), ("loud", logging.INFO)],
)
def test_log_level(tmp_path: Path, raw, expected):
    data = {"logging": {"level": raw}} if raw is not None else {}
    assert AppConfig(ini=FakeIni(data), project_root=tmp_path).log_level() == expected


def test_log_dir_and_console(tmp_path: Path):
    cfg = AppConfig(ini=FakeIni(), project_root=tmp_path)
    assert cfg.log_dir() is None
    assert cfg.log_to_console() is True

    cfg = AppConfig(
        ini=FakeIni({"logging": {"dir": str(tmp_path / "logs"), "console": "off"}}),
        project_root=tmp_path,
    )
    assert cfg.log_dir() == tmp_path / "logs"
    assert cfg.log_to_console() is False


@pytest.mark.parametrize(
    "section,expected",
    [
        ({}, (1_000_000, 3)),
        ({"max_bytes": "2048", "backup_count": "0"}, (2048, 0)),
        ({"max_bytes": "-5", "backup_count": "-1"}, (1_000_000, 3)),
        ({"max_bytes": "big", "backup_count": "many"}, (1_000_000, 3)),
    ],
)
def test_log_rotation(tmp_path: Path, section, expected):
    cfg = AppConfig(ini=FakeIni({"logging": section}), project_root=tmp_path)
    assert (cfg.log_max_bytes(), cfg.log_backup_count()) == expected


def test_loaded_from_delegates_to_ini(tmp_path: Path):
    ini_path = tmp_path / "settings.ini"
    cfg = AppConfig(ini=FakeIni(loaded_from=ini_path), project_root=tmp_path)
    assert cfg.loaded_from == ini_path


# ------------------------------
# build_app_config(): integration-ish checks
# ------------------------------
def test_build_app_config_reads_project_config(no_user_config, tmp_path: Path):
    root = tmp_path / "repo"
    _write(root / "config" / "config.ini", "[ui]\ntheme = light\n[logging]\nmax_bytes = 65536\n")

    cfg = build_app_config(project_root=root)
    assert cfg.project_root == root
    assert cfg.theme() == "light"
    assert cfg.log_max_bytes() == 65536
    assert cfg.log_backup_count() == 3
    assert cfg.default_path() == root / "plainpad" / "main.py"


def test_build_app_config_passes_explicit_ini_path(no_user_config, tmp_path: Path):
    explicit_ini = tmp_path / "explicit.ini"
    _write(explicit_ini, f"[editor]\ndefault_path = {tmp_path / 'start.txt'}\n")

    cfg = build_app_config(explicit_ini=explicit_ini, project_root=tmp_path)

    assert cfg.loaded_from == explicit_ini
    assert cfg.default_path() == tmp_path / "start.txt"
