"""
QPalette manager for the console theme.

Builds a QPalette from the theme properties on a StyleSurface and applies it,
together with the generated stylesheet, to the running QApplication whenever
the theme mode or any theme property changes.
"""

import logging
from collections.abc import Mapping
from typing import Callable, List, Optional

from PyQt6.QtCore import QTimer
from PyQt6.QtGui import QColor, QPalette
from PyQt6.QtWidgets import QApplication

from pyqt_brandtheme.protocols import ThemeStorage
from .color import Color
from .color_scheme import ColorScheme
from .exceptions import InvalidColorFormat
from .style_generator import StyleSheetGenerator
from .style_surface import StyleSurface
from .theme_context import (
    ROLE_BACKGROUND,
    ROLE_PRIMARY,
    ROLE_WARN,
    ThemeContext,
    contrast_property,
    mode_name,
    secondary_text_property,
    shade_property,
    text_property,
)

logger = logging.getLogger(__name__)


class PaletteManager:
    """
    Manages QPalette integration with the style surface.

    Provides methods to turn the applied theme properties into a QPalette and
    apply it to the application.
    """

    def __init__(self, surface: StyleSurface):
        """
        Initialize the palette manager with a style surface.

        Args:
            surface: Surface holding the applied theme properties
        """
        self.surface = surface
        self._original_palette = None

    @property
    def has_original_palette(self) -> bool:
        return self._original_palette is not None

    def _qcolor(self, name: str, default: str) -> QColor:
        value = self.surface.get_property(name, default)
        try:
            return Color.parse(value).to_qcolor()
        except InvalidColorFormat:
            logger.warning("Style property %s holds invalid color %r", name, value)
            return Color.parse(default).to_qcolor()

    def create_palette(self, is_dark: bool) -> QPalette:
        """
        Create a QPalette for a mode from the current surface properties.

        Args:
            is_dark: Mode to build the palette for

        Returns:
            QPalette: Configured palette
        """
        mode = mode_name(is_dark)
        defaults = ColorScheme.default_for(is_dark)

        def shade(role: str, name: str) -> QColor:
            return self._qcolor(shade_property(mode, role, name), getattr(defaults, role))

        def contrast(role: str, name: str) -> QColor:
            return self._qcolor(contrast_property(mode, role, name), "#ffffff")

        text = self._qcolor(text_property(mode), defaults.text)
        secondary_text = self._qcolor(secondary_text_property(mode), defaults.text)

        palette = QPalette()

        # Window colors
        palette.setColor(QPalette.ColorRole.Window, shade(ROLE_BACKGROUND, "500"))
        palette.setColor(QPalette.ColorRole.WindowText, text)

        # Base colors (input fields, etc.)
        palette.setColor(QPalette.ColorRole.Base, shade(ROLE_BACKGROUND, "300" if is_dark else "50"))
        palette.setColor(QPalette.ColorRole.AlternateBase, shade(ROLE_BACKGROUND, "400" if is_dark else "600"))
        palette.setColor(QPalette.ColorRole.Text, text)
        palette.setColor(QPalette.ColorRole.PlaceholderText, secondary_text)

        # Button colors
        palette.setColor(QPalette.ColorRole.Button, shade(ROLE_PRIMARY, "500"))
        palette.setColor(QPalette.ColorRole.ButtonText, contrast(ROLE_PRIMARY, "500"))

        # Selection colors
        palette.setColor(QPalette.ColorRole.Highlight, shade(ROLE_PRIMARY, "500"))
        palette.setColor(QPalette.ColorRole.HighlightedText, contrast(ROLE_PRIMARY, "500"))
        palette.setColor(QPalette.ColorRole.Link, shade(ROLE_PRIMARY, "300" if is_dark else "500"))
        palette.setColor(QPalette.ColorRole.BrightText, shade(ROLE_WARN, "500"))

        # Disabled colors
        palette.setColor(QPalette.ColorGroup.Disabled, QPalette.ColorRole.WindowText, secondary_text)
        palette.setColor(QPalette.ColorGroup.Disabled, QPalette.ColorRole.Text, secondary_text)
        palette.setColor(QPalette.ColorGroup.Disabled, QPalette.ColorRole.ButtonText, secondary_text)

        # Additional color roles
        palette.setColor(QPalette.ColorRole.ToolTipBase, shade(ROLE_BACKGROUND, "400" if is_dark else "600"))
        palette.setColor(QPalette.ColorRole.ToolTipText, text)

        return palette

    def apply_palette_to_application(self, is_dark: bool, app: Optional[QApplication] = None):
        """
        Apply the palette for a mode to the entire application.

        Args:
            is_dark: Mode to apply
            app: QApplication instance (uses QApplication.instance() if None)
        """
        if app is None:
            app = QApplication.instance()

        if app is None:
            logger.warning("No QApplication instance found, cannot apply palette")
            return

        # Store original palette for restoration
        if self._original_palette is None:
            self._original_palette = app.palette()

        app.setPalette(self.create_palette(is_dark))
        logger.debug("Applied %s palette to application", mode_name(is_dark))

    def restore_original_palette(self, app: Optional[QApplication] = None):
        """
        Restore the original application palette.

        Args:
            app: QApplication instance (uses QApplication.instance() if None)
        """
        if app is None:
            app = QApplication.instance()

        if app is None or self._original_palette is None:
            logger.warning("Cannot restore original palette")
            return

        app.setPalette(self._original_palette)
        logger.debug("Restored original application palette")


class ThemeManager:
    """
    High-level theme management for the entire application.

    Owns the ThemeContext and keeps the application palette and stylesheet in
    sync with it: switching mode or applying new role colors re-themes the
    running QApplication.
    """

    def __init__(self, storage: ThemeStorage, surface: Optional[StyleSurface] = None,
                 app: Optional[QApplication] = None):
        """
        Initialize the theme manager.

        Args:
            storage: Durable store for the theme mode
            surface: Style surface (a fresh one if None)
            app: QApplication to theme (uses QApplication.instance() if None)
        """
        self.surface = surface if surface is not None else StyleSurface()
        self.context = ThemeContext(self.surface, storage)
        self.palette_manager = PaletteManager(self.surface)
        self.style_generator = StyleSheetGenerator(self.surface)

        # Import here to avoid circular imports
        from pyqt_brandtheme.services.private_labelling_service import PrivateLabellingService
        self.labelling = PrivateLabellingService(self.context)

        self._app = app
        self._theme_change_callbacks: List[Callable[[bool], None]] = []
        self._apply_pending = False

        self.context.mode_changed.connect(self._on_mode_changed)
        self.surface.properties_changed.connect(self._on_properties_changed)
        self.surface.cleared.connect(self._schedule_apply)

    @property
    def is_dark(self) -> bool:
        return self.context.is_dark

    def start(self) -> bool:
        """
        Apply the built-in schemes for both modes and resume the stored mode.

        Returns:
            bool: The resumed mode (True for dark)
        """
        self.labelling.apply_defaults()
        return self.context.resume_from_storage()

    def switch_to_dark_theme(self):
        """Switch to dark theme variant."""
        self.context.set_mode(True)

    def switch_to_light_theme(self):
        """Switch to light theme variant."""
        self.context.set_mode(False)

    def toggle_theme(self):
        self.context.set_mode(not self.context.is_dark)

    def apply_color_scheme(self, color_scheme: ColorScheme, is_dark: bool):
        """
        Apply a color scheme to one mode.

        Args:
            color_scheme: Role colors to apply
            is_dark: Mode the scheme belongs to
        """
        self.labelling.apply_scheme(color_scheme, is_dark)
        logger.info("Applied %s color scheme", mode_name(is_dark))

    def load_private_labelling(self, policy):
        """
        Apply an organization's branding policy to both modes.

        Args:
            policy: BrandingPolicy, label-policy JSON mapping, or None
        """
        if policy is None or isinstance(policy, Mapping):
            self.labelling.apply_policy_dict(policy)
        else:
            self.labelling.apply_policy(policy)

    def current_color_scheme(self, is_dark: Optional[bool] = None) -> ColorScheme:
        """Return the role colors currently applied for a mode."""
        if is_dark is None:
            is_dark = self.context.is_dark
        mode = mode_name(is_dark)
        defaults = ColorScheme.default_for(is_dark)
        return ColorScheme(
            primary=self.surface.get_property(shade_property(mode, ROLE_PRIMARY, "500"), defaults.primary),
            warn=self.surface.get_property(shade_property(mode, ROLE_WARN, "500"), defaults.warn),
            background=self.surface.get_property(shade_property(mode, ROLE_BACKGROUND, "500"), defaults.background),
            text=self.surface.get_property(text_property(mode), defaults.text),
        )

    def register_theme_change_callback(self, callback: Callable[[bool], None]):
        """
        Register a callback to be called when the mode changes.

        Args:
            callback: Function called with True for dark, False for light
        """
        self._theme_change_callbacks.append(callback)

    def unregister_theme_change_callback(self, callback: Callable[[bool], None]):
        """
        Unregister a theme change callback.

        Args:
            callback: Function to remove from callbacks
        """
        if callback in self._theme_change_callbacks:
            self._theme_change_callbacks.remove(callback)

    def get_current_style_sheet(self) -> str:
        """
        Get the current complete application style sheet.

        Returns:
            str: Complete QStyleSheet for the active mode
        """
        return self.style_generator.generate_complete_application_style(self.context.is_dark)

    def load_theme_from_config(self, config_path: str, is_dark: bool) -> bool:
        """
        Load and apply a color scheme for one mode from a configuration file.

        Args:
            config_path: Path to JSON configuration file
            is_dark: Mode the file's colors are for

        Returns:
            bool: True if successful, False otherwise
        """
        try:
            color_scheme = ColorScheme.load_color_scheme_from_config(config_path, is_dark)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load theme from {config_path}: {e}")
            return False
        self.apply_color_scheme(color_scheme, is_dark)
        return True

    def save_current_theme(self, config_path: str, is_dark: Optional[bool] = None) -> bool:
        """
        Save the applied colors of a mode to a configuration file.

        Args:
            config_path: Path to save JSON configuration file
            is_dark: Mode to save (active mode if None)

        Returns:
            bool: True if successful, False otherwise
        """
        return self.current_color_scheme(is_dark).save_to_json(config_path)

    def _apply_to_application(self):
        app = self._app if self._app is not None else QApplication.instance()
        if app is None:
            logger.debug("No QApplication instance, skipping theme application")
            return
        is_dark = self.context.is_dark
        self.palette_manager.apply_palette_to_application(is_dark, app)
        app.setStyleSheet(self.style_generator.generate_complete_application_style(is_dark))

    def _on_properties_changed(self, names: list):
        active = f"--theme-{mode_name(self.context.is_dark)}-"
        if any(name.startswith(active) for name in names):
            self._schedule_apply()

    def _schedule_apply(self):
        # Collapse the batches of one apply_* sequence into a single restyle
        if self._apply_pending:
            return
        self._apply_pending = True
        QTimer.singleShot(0, self._flush_pending_apply)

    def _flush_pending_apply(self):
        if self._apply_pending:
            self._apply_pending = False
            self._apply_to_application()

    def _on_mode_changed(self, is_dark: bool):
        self._apply_pending = False
        self._apply_to_application()

        # Notify callbacks
        for callback in self._theme_change_callbacks:
            try:
                callback(is_dark)
            except Exception as e:
                logger.warning(f"Theme change callback failed: {e}")

        logger.info("Switched to %s theme", mode_name(is_dark))

    def close(self):
        """Release the context's subscribers and restore the original palette."""
        self._apply_pending = False
        self.surface.properties_changed.disconnect(self._on_properties_changed)
        self.surface.cleared.disconnect(self._schedule_apply)
        self.context.close()
        if self.palette_manager.has_original_palette:
            self.palette_manager.restore_original_palette(self._app)
