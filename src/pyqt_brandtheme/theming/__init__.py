"""
Theming and styling system.

Color math, palette generation, theme validation, the theme context and the
Qt palette/stylesheet binding for consistent application-wide theming.
"""

from .exceptions import ThemeError, InvalidColorFormat
from .color import Color, contrast_ratio
from .palette_generator import (
    CONTRAST_DARK,
    CONTRAST_LIGHT,
    SHADE_LABELS,
    Palette,
    PaletteEntry,
    compute_palette,
    get_contrast,
)
from .theme_validator import (
    is_suitable_dark_background,
    is_suitable_light_background,
    is_suitable_dark_text,
    is_suitable_light_text,
    is_suitable_background,
    is_suitable_text,
)
from .style_surface import StyleSurface
from .theme_context import ThemeContext, DARK_THEME, LIGHT_THEME
from .color_scheme import ColorScheme
from .style_generator import StyleSheetGenerator
from .palette_manager import PaletteManager, ThemeManager

__all__ = [
    "ThemeError",
    "InvalidColorFormat",
    "Color",
    "contrast_ratio",
    "CONTRAST_DARK",
    "CONTRAST_LIGHT",
    "SHADE_LABELS",
    "Palette",
    "PaletteEntry",
    "compute_palette",
    "get_contrast",
    "is_suitable_dark_background",
    "is_suitable_light_background",
    "is_suitable_dark_text",
    "is_suitable_light_text",
    "is_suitable_background",
    "is_suitable_text",
    "StyleSurface",
    "ThemeContext",
    "DARK_THEME",
    "LIGHT_THEME",
    "ColorScheme",
    "StyleSheetGenerator",
    "PaletteManager",
    "ThemeManager",
]
