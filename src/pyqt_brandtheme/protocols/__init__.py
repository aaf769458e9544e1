"""
Theming protocol definitions.

ABC-based contracts and configuration hooks that applications implement or
set to integrate the theming engine.
"""

from .theme_config import ThemeConfig, set_theme_config, get_theme_config
from .theme_storage import ThemeStorage

__all__ = [
    "ThemeConfig",
    "set_theme_config",
    "get_theme_config",
    "ThemeStorage",
]
