"""
QStyleSheet generator for the console theme.

Resolves the ``--theme-*`` custom properties on a StyleSurface into concrete
QStyleSheet strings for one mode. Qt stylesheets have no custom properties,
so every value is substituted at generation time.
"""

import logging

from .color import Color
from .color_scheme import ColorScheme
from .exceptions import InvalidColorFormat
from .style_surface import StyleSurface
from .theme_context import (
    ROLE_BACKGROUND,
    ROLE_PRIMARY,
    ROLE_WARN,
    contrast_property,
    mode_name,
    secondary_text_property,
    shade_property,
    text_property,
)

logger = logging.getLogger(__name__)


def to_qss_color(value: str) -> str:
    """
    Convert a color value to a QStyleSheet color.

    Opaque colors become '#rrggbb'; translucent ones become
    'rgba(r, g, b, a%)' since QSS reads 8-digit hex as #AARRGGBB.
    """
    color = Color.parse(value)
    if color.a == 1.0:
        return color.to_hex()
    r, g, b = color.to_rgb()
    return f"rgba({r}, {g}, {b}, {round(color.a * 100)}%)"


class StyleSheetGenerator:
    """
    Generates QStyleSheet strings from a StyleSurface.

    Properties that have not been written yet resolve to the built-in
    ColorScheme for the mode.
    """

    def __init__(self, surface: StyleSurface):
        """
        Initialize the style generator with a style surface.

        Args:
            surface: Surface holding the applied theme properties
        """
        self.surface = surface

    def _value(self, name: str, default: str) -> str:
        value = self.surface.get_property(name, default)
        try:
            return to_qss_color(value)
        except InvalidColorFormat:
            logger.warning("Style property %s holds invalid color %r", name, value)
            return to_qss_color(default)

    def _shade(self, is_dark: bool, role: str, shade: str) -> str:
        default = getattr(ColorScheme.default_for(is_dark), role)
        return self._value(shade_property(mode_name(is_dark), role, shade), default)

    def _contrast(self, is_dark: bool, role: str, shade: str) -> str:
        return self._value(contrast_property(mode_name(is_dark), role, shade), "#ffffff")

    def _text(self, is_dark: bool) -> str:
        default = ColorScheme.default_for(is_dark).text
        return self._value(text_property(mode_name(is_dark)), default)

    def _secondary_text(self, is_dark: bool) -> str:
        default = ColorScheme.default_for(is_dark).text
        return self._value(secondary_text_property(mode_name(is_dark)), default)

    def generate_window_style(self, is_dark: bool) -> str:
        """
        Generate QStyleSheet for top-level windows, dialogs and labels.

        Returns:
            str: QStyleSheet for base surfaces
        """
        return f"""
            QMainWindow, QDialog, QWidget {{
                background-color: {self._shade(is_dark, ROLE_BACKGROUND, "500")};
                color: {self._text(is_dark)};
            }}
            QLabel[secondary="true"] {{
                color: {self._secondary_text(is_dark)};
            }}
            QGroupBox {{
                background-color: {self._shade(is_dark, ROLE_BACKGROUND, "400" if is_dark else "600")};
                border-radius: 5px;
                margin-top: 5px;
                padding-top: 5px;
            }}
        """

    def generate_button_style(self, is_dark: bool) -> str:
        """
        Generate QStyleSheet for primary and warn buttons.

        Returns:
            str: QStyleSheet for button styling
        """
        return f"""
            QPushButton {{
                background-color: {self._shade(is_dark, ROLE_PRIMARY, "500")};
                color: {self._contrast(is_dark, ROLE_PRIMARY, "500")};
                border: none;
                border-radius: 3px;
                padding: 5px 10px;
            }}
            QPushButton:hover {{
                background-color: {self._shade(is_dark, ROLE_PRIMARY, "400")};
                color: {self._contrast(is_dark, ROLE_PRIMARY, "400")};
            }}
            QPushButton:pressed {{
                background-color: {self._shade(is_dark, ROLE_PRIMARY, "700")};
                color: {self._contrast(is_dark, ROLE_PRIMARY, "700")};
            }}
            QPushButton[warn="true"] {{
                background-color: {self._shade(is_dark, ROLE_WARN, "500")};
                color: {self._contrast(is_dark, ROLE_WARN, "500")};
            }}
            QPushButton[warn="true"]:hover {{
                background-color: {self._shade(is_dark, ROLE_WARN, "400")};
            }}
            QPushButton:disabled {{
                background-color: {self._shade(is_dark, ROLE_BACKGROUND, "600" if is_dark else "700")};
                color: {self._secondary_text(is_dark)};
            }}
        """

    def generate_input_style(self, is_dark: bool) -> str:
        """
        Generate QStyleSheet for text inputs, spin boxes and combo boxes.

        Returns:
            str: QStyleSheet for input styling
        """
        return f"""
            QLineEdit, QSpinBox, QDoubleSpinBox, QComboBox, QTextEdit {{
                background-color: {self._shade(is_dark, ROLE_BACKGROUND, "300" if is_dark else "50")};
                color: {self._text(is_dark)};
                border: 1px solid {self._shade(is_dark, ROLE_BACKGROUND, "100" if is_dark else "800")};
                border-radius: 3px;
                padding: 5px;
                selection-background-color: {self._shade(is_dark, ROLE_PRIMARY, "500")};
                selection-color: {self._contrast(is_dark, ROLE_PRIMARY, "500")};
            }}
            QLineEdit:focus, QSpinBox:focus, QDoubleSpinBox:focus, QComboBox:focus, QTextEdit:focus {{
                border: 1px solid {self._shade(is_dark, ROLE_PRIMARY, "500")};
            }}
            QLineEdit[invalid="true"] {{
                border: 1px solid {self._shade(is_dark, ROLE_WARN, "500")};
            }}
        """

    def generate_complete_application_style(self, is_dark: bool) -> str:
        """
        Generate the complete application stylesheet for a mode.

        Returns:
            str: Complete QStyleSheet
        """
        return (
            self.generate_window_style(is_dark)
            + self.generate_button_style(is_dark)
            + self.generate_input_style(is_dark)
        )
