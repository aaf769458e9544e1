"""
Private labelling service.

Applies an organization's branding (label) policy on top of the built-in
color schemes. Built-in defaults are applied first so the console is themed
before the policy arrives; each policy color then overrides its default when
it is well-formed and, for background and text, suits its mode.
"""

import logging
from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

from pyqt_brandtheme.theming.color import Color
from pyqt_brandtheme.theming.color_scheme import ColorScheme
from pyqt_brandtheme.theming.exceptions import InvalidColorFormat
from pyqt_brandtheme.theming.theme_context import ThemeContext, mode_name

logger = logging.getLogger(__name__)

# Label policy JSON key -> BrandingPolicy field
_POLICY_KEYS = {
    "primaryColor": "primary_color",
    "primaryColorDark": "primary_color_dark",
    "warnColor": "warn_color",
    "warnColorDark": "warn_color_dark",
    "backgroundColor": "background_color",
    "backgroundColorDark": "background_color_dark",
    "fontColor": "font_color",
    "fontColorDark": "font_color_dark",
}


@dataclass
class BrandingPolicy:
    """
    Color overrides from an organization's label policy.

    Every field is optional; empty strings count as unset.
    """

    primary_color: Optional[str] = None
    primary_color_dark: Optional[str] = None
    warn_color: Optional[str] = None
    warn_color_dark: Optional[str] = None
    background_color: Optional[str] = None
    background_color_dark: Optional[str] = None
    font_color: Optional[str] = None
    font_color_dark: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BrandingPolicy":
        """
        Build a policy from label-policy JSON.

        Accepts both the camelCase policy keys and the field names; other keys
        (logos, fonts, flags) are ignored.
        """
        field_names = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in data.items():
            name = _POLICY_KEYS.get(key, key)
            if name in field_names and value:
                kwargs[name] = str(value)
        return cls(**kwargs)

    def scheme_overrides(self, is_dark: bool) -> ColorScheme:
        """
        Return the policy colors for a mode as a ColorScheme.

        Unset roles are left as empty strings.
        """
        suffix = "_dark" if is_dark else ""
        return ColorScheme(
            primary=getattr(self, f"primary_color{suffix}") or "",
            warn=getattr(self, f"warn_color{suffix}") or "",
            background=getattr(self, f"background_color{suffix}") or "",
            text=getattr(self, f"font_color{suffix}") or "",
        )


class PrivateLabellingService:
    """Applies built-in and policy colors to a ThemeContext."""

    def __init__(self, context: ThemeContext):
        self.context = context

    def apply_defaults(self) -> None:
        """Apply the built-in schemes to both modes."""
        for is_dark in (True, False):
            self.apply_scheme(ColorScheme.default_for(is_dark), is_dark)

    def apply_policy(self, policy: Optional[BrandingPolicy]) -> None:
        """
        Apply the defaults, then the policy's overrides for both modes.

        Args:
            policy: Branding policy, or None when the organization has none
        """
        self.apply_defaults()
        if policy is None:
            logger.debug("No branding policy, keeping default colors")
            return

        for is_dark in (True, False):
            defaults = ColorScheme.default_for(is_dark)
            overrides = policy.scheme_overrides(is_dark)
            self.apply_scheme(
                ColorScheme(
                    primary=self._accept(overrides.primary, defaults.primary, "primary", is_dark),
                    warn=self._accept(overrides.warn, defaults.warn, "warn", is_dark),
                    # Background and text are validated by the context itself
                    background=overrides.background,
                    text=overrides.text,
                ),
                is_dark,
            )
        logger.info("Applied branding policy")

    def apply_policy_dict(self, data: Optional[Mapping[str, Any]]) -> None:
        """Apply label-policy JSON as returned by the management API."""
        self.apply_policy(BrandingPolicy.from_dict(data) if data else None)

    def _accept(self, color: str, default: str, role: str, is_dark: bool) -> str:
        if not color:
            return default
        try:
            return Color.parse(color).to_hex()
        except InvalidColorFormat:
            logger.warning(
                "Ignoring invalid %s %s color %r, using default %s",
                mode_name(is_dark), role, color, default,
            )
            return default

    def apply_scheme(self, scheme: ColorScheme, is_dark: bool) -> None:
        """Apply all four role colors of a scheme to one mode."""
        self.context.apply_primary(scheme.primary, is_dark)
        self.context.apply_warn(scheme.warn, is_dark)
        self.context.apply_background(scheme.background, is_dark)
        self.context.apply_text(scheme.text, is_dark)
