"""Concrete service implementations: disk access, the async file gateway and UI settings."""

from .file_gateway import FileGateway
from .file_service import FileService
from .settings_service import SettingsService

__all__ = ["FileGateway", "FileService", "SettingsService"]
