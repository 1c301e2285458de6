from __future__ import annotations

import logging

from PyQt6.QtGui import QColor, QPalette
from PyQt6.QtWidgets import QApplication

from plainpad.utils.constants import THEME_DARK

logger = logging.getLogger(__name__)

_DARK_COLORS: dict[QPalette.ColorRole, str] = {
    QPalette.ColorRole.Window: "#2b2d31",
    QPalette.ColorRole.WindowText: "#e7e9ee",
    QPalette.ColorRole.Base: "#1e1f22",
    QPalette.ColorRole.AlternateBase: "#2b2d31",
    QPalette.ColorRole.Text: "#e7e9ee",
    QPalette.ColorRole.Button: "#3a3d44",
    QPalette.ColorRole.ButtonText: "#e7e9ee",
    QPalette.ColorRole.Highlight: "#5865f2",
    QPalette.ColorRole.HighlightedText: "#ffffff",
    QPalette.ColorRole.ToolTipBase: "#1e1f22",
    QPalette.ColorRole.ToolTipText: "#e7e9ee",
    QPalette.ColorRole.PlaceholderText: "#a0a4ae",
    QPalette.ColorRole.Link: "#7aa2ff",
}


def apply_theme(app: QApplication, theme: str) -> None:
    """Switch the application to the Fusion style; `dark` also installs a dark palette."""
    app.setStyle("Fusion")
    if theme != THEME_DARK:
        app.setPalette(app.style().standardPalette())
        return

    palette = QPalette()
    for role, color in _DARK_COLORS.items():
        palette.setColor(role, QColor(color))
    app.setPalette(palette)
    logger.debug("Dark theme applied")
