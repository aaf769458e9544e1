"""
Tonal palette generation.

Derives the fixed 14-shade palette (50-900 plus the A100-A700 accents) from a
single base color and picks a legible overlay color for every shade.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Iterator, Tuple

from .color import Color, ColorLike, contrast_ratio

logger = logging.getLogger(__name__)

# Overlay text colors; every shade gets exactly one of these
CONTRAST_DARK = "hsla(0,0%,0%,0.87)"
CONTRAST_LIGHT = "#ffffff"

SHADE_LABELS: Tuple[str, ...] = (
    "50", "100", "200", "300", "400", "500", "600", "700", "800", "900",
    "A100", "A200", "A400", "A700",
)

_SHADE_DERIVATIONS: Dict[str, Callable[[Color], Color]] = {
    "50": lambda c: c.lighten(52),
    "100": lambda c: c.lighten(37),
    "200": lambda c: c.lighten(26),
    "300": lambda c: c.lighten(12),
    "400": lambda c: c.lighten(6),
    "500": lambda c: c,
    "600": lambda c: c.darken(6),
    "700": lambda c: c.darken(12),
    "800": lambda c: c.darken(18),
    "900": lambda c: c.darken(24),
    "A100": lambda c: c.lighten(50).saturate(30),
    "A200": lambda c: c.lighten(30).saturate(30),
    "A400": lambda c: c.lighten(10).saturate(15),
    "A700": lambda c: c.lighten(5).saturate(5),
}


@dataclass(frozen=True)
class PaletteEntry:
    """One named shade of a palette."""

    name: str
    hex: str
    rgb: str
    contrast_color: str


class Palette:
    """Ordered, immutable set of the 14 shades derived from one base color."""

    __slots__ = ("_entries", "_by_name")

    def __init__(self, entries: Iterable[PaletteEntry]):
        entries = tuple(entries)
        names = tuple(entry.name for entry in entries)
        if names != SHADE_LABELS:
            raise ValueError(f"Palette requires shades {SHADE_LABELS}, got {names}")
        self._entries = entries
        self._by_name = {entry.name: entry for entry in entries}

    def __iter__(self) -> Iterator[PaletteEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, name: str) -> PaletteEntry:
        return self._by_name[name]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Palette):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"Palette(base={self.base.hex!r})"

    @property
    def base(self) -> PaletteEntry:
        """The unmodified base color (shade 500)."""
        return self._by_name["500"]

    def to_dict(self) -> Dict[str, str]:
        """Map shade name to hex."""
        return {entry.name: entry.hex for entry in self._entries}


def get_contrast(color: ColorLike) -> str:
    """
    Pick the overlay color that reads best on top of color.

    Args:
        color: Background shade

    Returns:
        str: CONTRAST_DARK if black contrasts more than white, else CONTRAST_LIGHT
    """
    on_black = contrast_ratio("#000", color)
    on_white = contrast_ratio("#fff", color)
    if on_black > on_white:
        return CONTRAST_DARK
    return CONTRAST_LIGHT


def _make_entry(color: Color, name: str) -> PaletteEntry:
    hex_value = color.to_hex()
    return PaletteEntry(
        name=name,
        hex=hex_value,
        rgb=color.to_rgb_string(),
        contrast_color=get_contrast(hex_value),
    )


def compute_palette(base: ColorLike) -> Palette:
    """
    Derive the 14-shade palette for a base color.

    Args:
        base: Base color; becomes shade 500

    Returns:
        Palette: Deterministic palette for the base color

    Raises:
        InvalidColorFormat: If base cannot be parsed
    """
    color = Color.parse(base)
    palette = Palette(
        _make_entry(_SHADE_DERIVATIONS[name](color), name) for name in SHADE_LABELS
    )
    logger.debug("Computed palette for %s", palette.base.hex)
    return palette
