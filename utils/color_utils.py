"""
Color token resolution.

Accepts named web colors ("red", "CornflowerBlue") and hex colors with or
without a leading '#' ("#fff", "72962e").
"""
import re
from typing import Optional, Tuple

from PIL import ImageColor

from core.constants import NAMED_COLORS

HEX_COLOR_PATTERN = re.compile(r'[0-9a-fA-F]{3}|[0-9a-fA-F]{6}')


def resolve_color(raw: str) -> Optional[str]:
    """
    Resolve a color token to a '#'-prefixed hex string.

    Named colors resolve to their uppercase #RRGGBB value. Hex colors keep
    the caller's digits and case unchanged.

    Args:
        raw: Color name or hex string

    Returns:
        Resolved color, or None if the token is not a valid color
    """
    named = NAMED_COLORS.get(raw.lower())
    if named is not None:
        return named

    digits = raw[1:] if raw.startswith('#') else raw
    if HEX_COLOR_PATTERN.fullmatch(digits):
        return f"#{digits}"

    return None


def to_rgb(color: str) -> Tuple[int, int, int]:
    """
    Convert a resolved color to an (r, g, b) tuple.

    Args:
        color: Resolved color such as "#0000FF" or "#abc"

    Returns:
        Tuple of (red, green, blue)
    """
    return ImageColor.getrgb(color)[:3]
