from __future__ import annotations

import asyncio

from PyQt6.QtCore import QSettings

from plainpad.domain.interfaces import IFileService, ISettingsService
from plainpad.services.config.app_config import AppConfig, build_app_config
from plainpad.services.file_gateway import FileGateway
from plainpad.services.file_service import FileService
from plainpad.services.settings_service import SettingsService
from plainpad.services.ui.adapters import QtAsyncFileDialogService
from plainpad.services.ui.main_window import MainWindow
from plainpad.services.ui.ports.dialogs import IAsyncFileDialogService
from plainpad.services.ui.presenters import MainPresenter
from plainpad.utils.constants import APP_NAME, APP_ORG


class Container:
    """
    Lightweight DI container:
      - Wires default services if not provided
      - Builds the file gateway on top of the file service and dialog port
      - Builds the main window with its presenter attached
    """

    def __init__(
        self,
        files: IFileService | None = None,
        settings: ISettingsService | None = None,
        qsettings: QSettings | None = None,
        dialogs: IAsyncFileDialogService | None = None,
        config: AppConfig | None = None,
    ) -> None:
        self.config: AppConfig = config or build_app_config()
        self.file_service: IFileService = files or FileService()
        self.settings_service: ISettingsService = settings or SettingsService(
            qsettings or QSettings()
        )
        self.dialogs: IAsyncFileDialogService = dialogs or QtAsyncFileDialogService()
        self.gateway = FileGateway(self.file_service, self.dialogs)

    @staticmethod
    def default(
        qsettings: QSettings | None = None,
        *,
        organization: str = APP_ORG,
        application: str = APP_NAME,
        config: AppConfig | None = None,
    ) -> Container:
        if qsettings is None:
            qsettings = QSettings(organization, application)
        return Container(qsettings=qsettings, config=config)

    # ---------- UI factories ----------

    def build_main_presenter(
        self, view, *, loop: asyncio.AbstractEventLoop | None = None
    ) -> MainPresenter:
        return MainPresenter(view=view, gateway=self.gateway, loop=loop)

    def build_main_window(
        self,
        *,
        app_title: str | None = None,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> MainWindow:
        """Create the Qt MainWindow, attach a presenter, and paint the initial state."""
        window = MainWindow(
            settings=self.settings_service,
            app_title=app_title or self.config.window_title(),
        )
        if isinstance(self.dialogs, QtAsyncFileDialogService):
            self.dialogs.set_parent(window)

        presenter = self.build_main_presenter(window, loop=loop)
        window.attach_presenter(presenter)
        window.render(presenter.state)
        return window
