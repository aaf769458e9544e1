"""
Color value type and color math primitives.

Immutable RGBA color with HSL-based lighten/darken/saturate operations,
WCAG relative luminance and contrast ratio, and perceived-brightness
light/dark classification. Channels stay unrounded between operations and
are rounded only when serialized, so chained derivations do not accumulate
rounding error.
"""

import colorsys
import logging
import math
import re
from dataclasses import dataclass
from typing import Tuple, Union

from PyQt6.QtGui import QColor

from .exceptions import InvalidColorFormat

logger = logging.getLogger(__name__)

# Perceived brightness below this is dark (YIQ midpoint on a 0-255 scale)
BRIGHTNESS_THRESHOLD = 128.0

_NUMBER = r"[-+]?(?:\d+\.?\d*|\.\d+)%?"
_HEX_RE = re.compile(r"^#?([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$")
_RGB_RE = re.compile(
    rf"^rgba?\(\s*({_NUMBER})\s*,\s*({_NUMBER})\s*,\s*({_NUMBER})\s*(?:,\s*({_NUMBER})\s*)?\)$"
)
_HSL_RE = re.compile(
    rf"^hsla?\(\s*({_NUMBER})\s*,\s*({_NUMBER})\s*,\s*({_NUMBER})\s*(?:,\s*({_NUMBER})\s*)?\)$"
)


def _clamp(value: float, low: float, high: float) -> float:
    return min(high, max(low, value))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _truncate_fraction(value: float) -> float:
    """Truncate a 0-1 fraction to hundredths of a percent."""
    return int(value * 100 * 100) / 10000


def _parse_channel(token: str) -> float:
    if token.endswith("%"):
        return _clamp(float(token[:-1]), 0.0, 100.0) * 255.0 / 100.0
    return _clamp(float(token), 0.0, 255.0)


def _parse_alpha(token: str) -> float:
    if token is None:
        return 1.0
    if token.endswith("%"):
        return _clamp(float(token[:-1]) / 100.0, 0.0, 1.0)
    return _clamp(float(token), 0.0, 1.0)


def _parse_percent(token: str) -> float:
    return _clamp(float(token.rstrip("%")), 0.0, 100.0) / 100.0


@dataclass(frozen=True)
class Color:
    """
    Immutable RGBA color.

    Attributes:
        r, g, b: Channels as floats in [0, 255]
        a: Alpha in [0, 1]
    """

    r: float
    g: float
    b: float
    a: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, "r", _clamp(float(self.r), 0.0, 255.0))
        object.__setattr__(self, "g", _clamp(float(self.g), 0.0, 255.0))
        object.__setattr__(self, "b", _clamp(float(self.b), 0.0, 255.0))
        alpha = float(self.a)
        if not 0.0 <= alpha <= 1.0:
            alpha = 1.0
        object.__setattr__(self, "a", alpha)

    # ========== CONSTRUCTION ==========

    @classmethod
    def parse(cls, value: Union[str, "Color"]) -> "Color":
        """
        Parse a hex, rgb()/rgba() or hsl()/hsla() string.

        Args:
            value: Color string or an existing Color

        Returns:
            Color: Parsed color

        Raises:
            InvalidColorFormat: If value is not a recognizable color
        """
        if isinstance(value, Color):
            return value
        if not isinstance(value, str):
            raise InvalidColorFormat(value)

        text = value.strip().lower()

        match = _HEX_RE.match(text)
        if match:
            digits = match.group(1)
            if len(digits) in (3, 4):
                digits = "".join(ch * 2 for ch in digits)
            r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
            a = int(digits[6:8], 16) / 255.0 if len(digits) == 8 else 1.0
            return cls(r, g, b, a)

        match = _RGB_RE.match(text)
        if match:
            r, g, b = (_parse_channel(match.group(i)) for i in (1, 2, 3))
            return cls(r, g, b, _parse_alpha(match.group(4)))

        match = _HSL_RE.match(text)
        if match:
            h = float(match.group(1).rstrip("%"))
            s = _parse_percent(match.group(2))
            l = _parse_percent(match.group(3))
            return cls.from_hsl(h, s, l, _parse_alpha(match.group(4)))

        raise InvalidColorFormat(value)

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float, a: float = 1.0) -> "Color":
        """Create a color from 0-255 channels."""
        return cls(r, g, b, a)

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float, a: float = 1.0) -> "Color":
        """
        Create a color from HSL components.

        Args:
            h: Hue in degrees
            s: Saturation in [0, 1]
            l: Lightness in [0, 1]
            a: Alpha in [0, 1]
        """
        hue = (_clamp(h, 0.0, 360.0) % 360.0) / 360.0
        sat = _truncate_fraction(_clamp(s, 0.0, 1.0))
        light = _truncate_fraction(_clamp(l, 0.0, 1.0))
        r, g, b = colorsys.hls_to_rgb(hue, light, sat)
        return cls(r * 255.0, g * 255.0, b * 255.0, a)

    # ========== DERIVED COLORS ==========

    def to_hsl(self) -> Tuple[float, float, float]:
        """Return (hue in degrees, saturation 0-1, lightness 0-1)."""
        h, l, s = colorsys.rgb_to_hls(self.r / 255.0, self.g / 255.0, self.b / 255.0)
        return h * 360.0, s, l

    def lighten(self, amount: float = 10) -> "Color":
        """Move lightness toward white by amount percentage points."""
        h, s, l = self.to_hsl()
        return Color.from_hsl(h, s, _clamp(l + amount / 100.0, 0.0, 1.0), self.a)

    def darken(self, amount: float = 10) -> "Color":
        """Move lightness toward black by amount percentage points."""
        h, s, l = self.to_hsl()
        return Color.from_hsl(h, s, _clamp(l - amount / 100.0, 0.0, 1.0), self.a)

    def saturate(self, amount: float = 10) -> "Color":
        """Increase saturation by amount percentage points."""
        h, s, l = self.to_hsl()
        return Color.from_hsl(h, _clamp(s + amount / 100.0, 0.0, 1.0), l, self.a)

    def set_alpha(self, alpha: float) -> "Color":
        """Return a copy with a new alpha; values outside [0, 1] mean opaque."""
        return Color(self.r, self.g, self.b, alpha)

    # ========== SERIALIZATION ==========

    def to_rgb(self) -> Tuple[int, int, int]:
        """Return rounded (r, g, b) integers."""
        return (
            _round_half_up(self.r),
            _round_half_up(self.g),
            _round_half_up(self.b),
        )

    def to_hex(self) -> str:
        """Return '#rrggbb'."""
        r, g, b = self.to_rgb()
        return f"#{r:02x}{g:02x}{b:02x}"

    def to_hex8(self) -> str:
        """Return '#rrggbbaa'."""
        return f"{self.to_hex()}{_round_half_up(self.a * 255.0):02x}"

    def to_rgb_string(self) -> str:
        """Return 'rgb(r, g, b)', or 'rgba(r, g, b, a)' when translucent."""
        r, g, b = self.to_rgb()
        if self.a == 1.0:
            return f"rgb({r}, {g}, {b})"
        alpha = _round_half_up(self.a * 100.0) / 100.0
        return f"rgba({r}, {g}, {b}, {alpha:g})"

    def to_qcolor(self) -> QColor:
        """
        Convert to a QColor.

        Returns:
            QColor: Qt color object with alpha
        """
        r, g, b = self.to_rgb()
        return QColor(r, g, b, _round_half_up(self.a * 255.0))

    # ========== LUMINANCE ==========

    def relative_luminance(self) -> float:
        """Calculate WCAG relative luminance."""
        def gamma_correct(c):
            c = c / 255.0
            return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

        r, g, b = map(gamma_correct, (self.r, self.g, self.b))
        return 0.2126 * r + 0.7152 * g + 0.0722 * b

    def brightness(self) -> float:
        """Perceived brightness on a 0-255 scale."""
        return (self.r * 299 + self.g * 587 + self.b * 114) / 1000.0

    def is_dark(self) -> bool:
        return self.brightness() < BRIGHTNESS_THRESHOLD

    def is_light(self) -> bool:
        return not self.is_dark()

    def __str__(self) -> str:
        return self.to_hex() if self.a == 1.0 else self.to_hex8()


ColorLike = Union[str, Color]


def contrast_ratio(first: ColorLike, second: ColorLike) -> float:
    """
    Calculate the WCAG contrast ratio between two colors.

    Args:
        first: Color or color string
        second: Color or color string

    Returns:
        float: Ratio in [1, 21], independent of argument order
    """
    l1 = Color.parse(first).relative_luminance()
    l2 = Color.parse(second).relative_luminance()

    # Ensure l1 is the lighter color
    if l1 < l2:
        l1, l2 = l2, l1

    return (l1 + 0.05) / (l2 + 0.05)
