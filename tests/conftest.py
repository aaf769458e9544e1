"""pytest configuration and fixtures for pyqt-brandtheme tests."""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from pyqt_brandtheme.protocols import set_theme_config


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture(autouse=True)
def default_theme_config():
    """Reset the global theme configuration around each test."""
    set_theme_config(None)
    yield
    set_theme_config(None)


@pytest.fixture
def settings_path(tmp_path):
    """INI file standing in for the persisted settings store."""
    return str(tmp_path / "theme.ini")


@pytest.fixture
def storage(settings_path):
    from pyqt_brandtheme.services import SettingsThemeStorage

    return SettingsThemeStorage(settings_path)


@pytest.fixture
def surface():
    from pyqt_brandtheme.theming import StyleSurface

    return StyleSurface()


@pytest.fixture
def context(surface, storage):
    from pyqt_brandtheme.theming import ThemeContext

    ctx = ThemeContext(surface, storage)
    yield ctx
    ctx.close()
