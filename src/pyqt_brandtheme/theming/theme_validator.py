"""Light/dark suitability checks for externally supplied colors."""

import logging
from typing import Optional

from .color import Color, ColorLike
from .exceptions import InvalidColorFormat

logger = logging.getLogger(__name__)


def _classify(color: Optional[ColorLike]) -> Optional[Color]:
    """Return the parsed color, or None when it is empty or malformed."""
    if not color:
        return None
    try:
        return Color.parse(color)
    except InvalidColorFormat:
        logger.debug("Unparseable color %r treated as unsuitable", color)
        return None


def is_suitable_dark_background(color: ColorLike) -> bool:
    parsed = _classify(color)
    return parsed is not None and parsed.is_dark()


def is_suitable_light_background(color: ColorLike) -> bool:
    parsed = _classify(color)
    return parsed is not None and parsed.is_light()


def is_suitable_dark_text(color: ColorLike) -> bool:
    # Dark-mode text sits on a dark background, so it must read as light
    parsed = _classify(color)
    return parsed is not None and parsed.is_light()


def is_suitable_light_text(color: ColorLike) -> bool:
    parsed = _classify(color)
    return parsed is not None and parsed.is_dark()


def is_suitable_background(color: ColorLike, is_dark: bool) -> bool:
    """Check a background color against the given mode."""
    if is_dark:
        return is_suitable_dark_background(color)
    return is_suitable_light_background(color)


def is_suitable_text(color: ColorLike, is_dark: bool) -> bool:
    """Check a text color against the given mode."""
    if is_dark:
        return is_suitable_dark_text(color)
    return is_suitable_light_text(color)
