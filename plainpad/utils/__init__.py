"""App constants and utilities."""

from .constants import (
    APP_NAME,
    APP_ORG,
    OPEN_DIALOG_CAPTION,
    SAVE_DIALOG_CAPTION,
    SETTINGS_GEOMETRY,
    TEXT_FILE_FILTER,
    WINDOW_TITLE,
)

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "WINDOW_TITLE",
    "OPEN_DIALOG_CAPTION",
    "SAVE_DIALOG_CAPTION",
    "TEXT_FILE_FILTER",
    "SETTINGS_GEOMETRY",
]
