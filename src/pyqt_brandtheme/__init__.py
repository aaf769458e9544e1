"""
pyqt-brandtheme: branded light/dark theming engine for PyQt6 consoles.

Derives full tonal palettes from single brand colors and keeps a running
QApplication themed as the mode or the organization's branding changes.

Architecture:
- Color math: immutable Color with HSL derivations and WCAG contrast
- Palette generation: fixed 14-shade palettes with per-shade contrast colors
- Validation: light/dark suitability gates for policy-supplied colors
- Theme context: active mode, persisted mode, ``--theme-*`` style properties
- Qt binding: QPalette and QStyleSheet generation from the style properties
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
