"""
Theme context for the console.

Holds the active dark/light mode and writes computed palettes for each
semantic role into the live style surface. One context is constructed at
startup and shared with the UI layer; it is the only writer of the
``--theme-*`` properties and of the persisted mode key.
"""

import logging
from typing import Dict, Optional, Tuple

from PyQt6.QtCore import QObject, pyqtSignal

from pyqt_brandtheme.protocols import ThemeStorage, get_theme_config
from .color import Color, ColorLike
from .palette_generator import Palette, compute_palette
from .style_surface import StyleSurface
from .theme_validator import is_suitable_background, is_suitable_text

logger = logging.getLogger(__name__)

DARK_THEME = "dark-theme"
LIGHT_THEME = "light-theme"

ROLE_PRIMARY = "primary"
ROLE_WARN = "warn"
ROLE_BACKGROUND = "background"
ROLE_TEXT = "text"
PALETTE_ROLES = (ROLE_PRIMARY, ROLE_WARN, ROLE_BACKGROUND)


def mode_name(is_dark: bool) -> str:
    """Return the key segment for a mode ('dark' or 'light')."""
    return "dark" if is_dark else "light"


def shade_property(mode: str, role: str, shade: str) -> str:
    return f"--theme-{mode}-{role}-{shade}"


def contrast_property(mode: str, role: str, shade: str) -> str:
    return f"--theme-{mode}-{role}-contrast-{shade}"


def text_property(mode: str) -> str:
    return f"--theme-{mode}-text"


def secondary_text_property(mode: str) -> str:
    return f"--theme-{mode}-secondary-text"


class ThemeContext(QObject):
    """
    Active theme mode plus the applied colors for every semantic role.

    mode_changed fires on every set_mode() call, in call order. Late
    subscribers read the current mode from is_dark.
    """

    mode_changed = pyqtSignal(bool)

    def __init__(
        self,
        surface: StyleSurface,
        storage: ThemeStorage,
        parent: Optional[QObject] = None,
    ):
        """
        Initialize the context. Starts in dark mode without touching storage.

        Args:
            surface: Style surface the palettes are written to
            storage: Durable store for the mode name
            parent: Optional Qt parent
        """
        super().__init__(parent)
        self._surface = surface
        self._storage = storage
        self._is_dark = True
        self._palettes: Dict[Tuple[str, str], Palette] = {}

    @property
    def surface(self) -> StyleSurface:
        return self._surface

    @property
    def storage(self) -> ThemeStorage:
        return self._storage

    @property
    def is_dark(self) -> bool:
        return self._is_dark

    @property
    def theme_name(self) -> str:
        return DARK_THEME if self._is_dark else LIGHT_THEME

    # ========== MODE ==========

    def set_mode(self, dark: bool) -> None:
        """
        Switch the active mode, persist it and notify subscribers.

        Args:
            dark: True for dark mode, False for light mode
        """
        self._is_dark = bool(dark)
        self._storage.set_item(get_theme_config().storage_key, self.theme_name)
        logger.debug("Theme mode set to %s", self.theme_name)
        self.mode_changed.emit(self._is_dark)

    def resume_from_storage(self) -> bool:
        """
        Restore the persisted mode. Anything but 'light-theme' means dark.

        Returns:
            bool: The resumed mode (True for dark)
        """
        stored = self._storage.get_item(get_theme_config().storage_key)
        if stored is None:
            logger.debug("No stored theme, defaulting to %s", DARK_THEME)
        self.set_mode(stored != LIGHT_THEME)
        return self._is_dark

    # ========== ROLE APPLICATION ==========

    def apply_primary(self, color: ColorLike, is_dark: bool) -> Palette:
        return self._apply_palette(ROLE_PRIMARY, color, is_dark)

    def apply_warn(self, color: ColorLike, is_dark: bool) -> Palette:
        return self._apply_palette(ROLE_WARN, color, is_dark)

    def apply_background(self, color: Optional[ColorLike], is_dark: bool) -> str:
        """
        Apply a background color, substituting the built-in default when the
        color is missing or does not suit the mode.

        Returns:
            str: Hex of the background actually applied
        """
        config = get_theme_config()
        fallback = config.dark_background_fallback if is_dark else config.light_background_fallback
        if not color:
            color = fallback
        elif not is_suitable_background(color, is_dark):
            logger.info(
                "Background (%s) is not %s enough for a %s theme. Falling back to default background %s",
                color, mode_name(is_dark), mode_name(is_dark), fallback,
            )
            color = fallback
        return self._apply_palette(ROLE_BACKGROUND, color, is_dark).base.hex

    def apply_text(self, color: Optional[ColorLike], is_dark: bool) -> str:
        """
        Apply a text color and its translucent secondary variant, substituting
        the built-in default when the color does not contrast with the mode.

        Returns:
            str: Hex of the text color actually applied
        """
        config = get_theme_config()
        fallback = config.dark_text_fallback if is_dark else config.light_text_fallback
        if not color:
            color = fallback
        elif not is_suitable_text(color, is_dark):
            logger.info(
                "Text color (%s) is not %s enough for a %s theme. Falling back to default text color %s",
                color, mode_name(not is_dark), mode_name(is_dark), fallback,
            )
            color = fallback

        text = Color.parse(color)
        mode = mode_name(is_dark)
        text_hex = text.to_hex()
        self._surface.set_properties({
            text_property(mode): text_hex,
            secondary_text_property(mode): text.set_alpha(config.secondary_text_alpha).to_hex8(),
        })
        return text_hex

    def palette(self, role: str, is_dark: bool) -> Optional[Palette]:
        """Return the latest palette applied for a role and mode."""
        return self._palettes.get((role, mode_name(is_dark)))

    def _apply_palette(self, role: str, color: ColorLike, is_dark: bool) -> Palette:
        palette = compute_palette(color)
        mode = mode_name(is_dark)
        values = {}
        for entry in palette:
            values[shade_property(mode, role, entry.name)] = entry.hex
            values[contrast_property(mode, role, entry.name)] = entry.contrast_color
        self._surface.set_properties(values)
        self._palettes[(role, mode)] = palette
        logger.debug("Applied %s %s palette from %s", mode, role, palette.base.hex)
        return palette

    def close(self) -> None:
        """Disconnect every mode_changed subscriber."""
        try:
            self.mode_changed.disconnect()
        except TypeError:
            # No receivers connected
            pass
