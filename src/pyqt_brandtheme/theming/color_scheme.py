"""
Color schemes for the console theme.

A ColorScheme holds the four semantic role colors (primary, warn, background,
text) for one mode. The built-in dark and light schemes are the defaults that
branding overrides are layered on top of.
"""

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Dict, Optional

from .color import Color
from .exceptions import InvalidColorFormat

logger = logging.getLogger(__name__)


@dataclass
class ColorScheme:
    """
    Semantic role colors for one theme mode.

    Defaults are the built-in dark scheme.
    """

    primary: str = "#bbbafa"      # Lavender - buttons, links, selection
    warn: str = "#ff3b5b"         # Coral red - destructive actions, errors
    background: str = "#111827"   # Near-black slate
    text: str = "#ffffff"         # White

    @classmethod
    def create_dark_theme(cls) -> "ColorScheme":
        """
        Create the built-in dark scheme.

        Returns:
            ColorScheme: Default colors for dark mode
        """
        return cls()

    @classmethod
    def create_light_theme(cls) -> "ColorScheme":
        """
        Create the built-in light scheme.

        Returns:
            ColorScheme: Default colors for light mode
        """
        return cls(
            primary="#5469d4",     # Indigo
            warn="#cd3d56",        # Darker red for contrast on light backgrounds
            background="#fafafa",  # Off-white
            text="#000000",        # Black
        )

    @classmethod
    def default_for(cls, is_dark: bool) -> "ColorScheme":
        return cls.create_dark_theme() if is_dark else cls.create_light_theme()

    @classmethod
    def load_color_scheme_from_config(cls, config_path: Optional[str] = None,
                                      is_dark: bool = True) -> "ColorScheme":
        """
        Load a color scheme from a JSON configuration file.

        Keys missing from the file, or holding values that are not colors,
        keep the built-in default for the mode.

        Args:
            config_path: Path to JSON config file (optional)
            is_dark: Mode whose defaults fill missing keys

        Returns:
            ColorScheme: Loaded color scheme or the mode default if not found
        """
        scheme = cls.default_for(is_dark)
        if not config_path or not Path(config_path).exists():
            return scheme

        with open(config_path, "r") as f:
            config = json.load(f)

        if not isinstance(config, dict):
            logger.warning(
                "Expected a JSON object in %s, got %s; using default colors",
                config_path, type(config).__name__,
            )
            return scheme

        for field in fields(cls):
            value = config.get(field.name)
            if value is None:
                continue
            try:
                setattr(scheme, field.name, Color.parse(value).to_hex())
            except InvalidColorFormat:
                logger.warning(
                    "Ignoring invalid %s color %r in %s", field.name, value, config_path
                )
        return scheme

    def get_color_dict(self) -> Dict[str, str]:
        """
        Get all role colors as a dictionary for serialization or inspection.

        Returns:
            Dict[str, str]: Role name to hex color
        """
        return {field.name: getattr(self, field.name) for field in fields(self)}

    def save_to_json(self, config_path: str) -> bool:
        """
        Save color scheme to JSON configuration file.

        Args:
            config_path: Path to save JSON config file

        Returns:
            bool: True if save successful, False otherwise
        """
        try:
            with open(config_path, "w") as f:
                json.dump(self.get_color_dict(), f, indent=2, sort_keys=True)

            logger.info(f"Color scheme saved to {config_path}")
            return True

        except OSError as e:
            logger.error(f"Failed to save color scheme to {config_path}: {e}")
            return False
