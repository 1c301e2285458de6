from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path

from PyQt6.QtWidgets import QApplication
from qasync import QEventLoop

from plainpad.di.container import Container
from plainpad.services.config.app_config import build_app_config
from plainpad.services.ui.theme import apply_theme
from plainpad.utils.constants import APP_NAME, APP_ORG
from plainpad.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def run_app(argv: Sequence[str]) -> int:
    """
    Bootstraps Qt on a qasync event loop, composes the application via the DI
    container, shows the main window and kicks off the startup load.
    """
    QApplication.setOrganizationName(APP_ORG)
    QApplication.setApplicationName(APP_NAME)

    config = build_app_config()
    setup_logging(
        config.log_level(),
        log_dir=config.log_dir(),
        console=config.log_to_console(),
        max_bytes=config.log_max_bytes(),
        backup_count=config.log_backup_count(),
    )
    logger.info("Starting %s (config: %s)", APP_NAME, config.loaded_from or "defaults")

    app = QApplication(list(argv))
    apply_theme(app, config.theme())

    loop = QEventLoop(app)
    asyncio.set_event_loop(loop)
    app.aboutToQuit.connect(loop.stop)

    container = Container.default(config=config)

    # Optional file path to open passed as first CLI argument
    start_path = Path(argv[1]) if len(argv) > 1 else config.default_path()

    win = container.build_main_window(loop=loop)
    win.show()
    win.presenter.start(start_path)

    with loop:
        loop.run_forever()
    logger.info("Event loop stopped; exiting")
    return 0
