"""Base configuration class for theming.

Provides hooks for applications to customize where the theme mode is
persisted and which built-in colors are used as fallbacks.
"""

from typing import Optional
from dataclasses import dataclass


@dataclass
class ThemeConfig:
    """Base configuration for theme behavior.

    Applications can subclass this to provide custom configuration.

    Attributes:
        storage_key: Key the active mode name is persisted under
        settings_organization: QSettings organization name
        settings_application: QSettings application name
        secondary_text_alpha: Alpha applied to the text color for secondary text
        dark_background_fallback: Background used when a dark background is rejected
        light_background_fallback: Background used when a light background is rejected
        dark_text_fallback: Text color used when a dark-mode text color is rejected
        light_text_fallback: Text color used when a light-mode text color is rejected
    """

    storage_key: str = "theme"
    settings_organization: str = "pyqt-brandtheme"
    settings_application: str = "console"
    secondary_text_alpha: float = 0.78
    dark_background_fallback: str = "#111827"
    light_background_fallback: str = "#fafafa"
    dark_text_fallback: str = "#ffffff"
    light_text_fallback: str = "#000000"


# Global config instance (set by application)
_theme_config: Optional[ThemeConfig] = None


def set_theme_config(config: Optional[ThemeConfig]) -> None:
    """Set the global theme configuration.

    Args:
        config: ThemeConfig instance, or None to restore defaults
    """
    global _theme_config
    _theme_config = config


def get_theme_config() -> ThemeConfig:
    """Get the current theme configuration.

    Returns:
        Current ThemeConfig or default if not set
    """
    if _theme_config is None:
        return ThemeConfig()
    return _theme_config
