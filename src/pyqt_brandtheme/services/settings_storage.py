"""QSettings-backed theme storage."""

import logging
from typing import Optional

from PyQt6.QtCore import QSettings

from pyqt_brandtheme.protocols import ThemeStorage, get_theme_config

logger = logging.getLogger(__name__)


class SettingsThemeStorage(ThemeStorage):
    """
    Persist theme state through QSettings.

    Uses the platform-native store for the configured organization and
    application by default, or an INI file when a path is given.
    """

    def __init__(self, file_path: Optional[str] = None, settings: Optional[QSettings] = None):
        if settings is not None:
            self._settings = settings
        elif file_path is not None:
            self._settings = QSettings(str(file_path), QSettings.Format.IniFormat)
        else:
            config = get_theme_config()
            self._settings = QSettings(config.settings_organization, config.settings_application)

    @property
    def settings(self) -> QSettings:
        return self._settings

    def get_item(self, key: str) -> Optional[str]:
        value = self._settings.value(key)
        if value is None:
            return None
        return str(value)

    def set_item(self, key: str, value: str) -> None:
        self._settings.setValue(key, value)
        self._settings.sync()
        logger.debug("Stored %s=%s in %s", key, value, self._settings.fileName())

    def remove_item(self, key: str) -> None:
        self._settings.remove(key)
        self._settings.sync()
