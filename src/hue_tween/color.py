"""
Color utilities.

Provides color name resolution, hex conversion and HSV blending.
"""

import colorsys

from .core.types import HSV


def hsv_to_hex(color: HSV) -> str:
    """
    Convert HSV color to hex string.

    Args:
        color: HSV color tuple

    Returns:
        Hex string like "#FF6B00"
    """
    r, g, b = colorsys.hsv_to_rgb(color.hue % 1.0, color.saturation, color.value)
    return f"#{round(r * 255):02X}{round(g * 255):02X}{round(b * 255):02X}"


HEXDIGITS = set("0123456789abcdefABCDEF")

# Colors usable by name in config files (hue, saturation, value)
NAMED_COLORS: dict[str, HSV] = {
    "red": HSV(0.0, 1.0, 1.0),
    "amber": HSV(0.1, 1.0, 1.0),
    "teal": HSV(0.45, 1.0, 1.0),
    "blue": HSV(0.6, 1.0, 1.0),
    "violet": HSV(0.7, 1.0, 1.0),
    "white": HSV(0.0, 0.0, 1.0),
    "black": HSV(0.0, 0.0, 0.0),
}


def hex_to_hsv(hex_color: str) -> HSV:
    """
    Parse "#RRGGBB" or "#RGB" (leading # optional) into HSV.

    Raises:
        ValueError: If hex format is invalid
    """
    digits = hex_color[1:] if hex_color.startswith("#") else hex_color
    if len(digits) == 3:
        digits = digits[0] * 2 + digits[1] * 2 + digits[2] * 2
    if len(digits) != 6 or not set(digits) <= HEXDIGITS:
        raise ValueError(f"Invalid hex color: {hex_color}")

    channels = [int(digits[i:i + 2], 16) / 255.0 for i in (0, 2, 4)]
    return HSV(*colorsys.rgb_to_hsv(*channels))


def color_from_name(name: str) -> HSV:
    """Look up a color from NAMED_COLORS; raises ValueError if unknown."""
    try:
        return NAMED_COLORS[name.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown color name: {name}") from None


def resolve_color(color: HSV | str | list | tuple) -> HSV:
    """
    Resolve a color that may be a name, a hex string or an (h, s, v) sequence.

    Args:
        color: "red", "#FF0000", HSV(0, 1, 1) or [0.0, 1.0, 1.0]

    Returns:
        HSV color

    Raises:
        ValueError: If the color cannot be interpreted
    """
    if isinstance(color, str):
        if color.startswith("#"):
            return hex_to_hsv(color)
        return color_from_name(color)
    if isinstance(color, (list, tuple)) and len(color) == 3:
        try:
            h, s, v = (float(c) for c in color)
        except (TypeError, ValueError):
            raise ValueError(f"Invalid HSV color: {color!r}")
        return HSV(h % 1.0, max(0.0, min(1.0, s)), max(0.0, min(1.0, v)))
    raise ValueError(f"Invalid color: {color!r}")


def lerp_hsv(c1: HSV, c2: HSV, t: float) -> HSV:
    """
    Linearly interpolate between two HSV colors.

    Args:
        c1: Start color
        c2: End color
        t: Interpolation factor (0.0 = c1, 1.0 = c2)

    Returns:
        Interpolated HSV color
    """
    t = max(0.0, min(1.0, t))

    # A gray or black endpoint has no meaningful hue; borrow the other one's
    # so fades to and from black don't sweep around the wheel.
    h1, h2 = c1.hue, c2.hue
    if c1.saturation == 0 or c1.value == 0:
        h1 = h2
    elif c2.saturation == 0 or c2.value == 0:
        h2 = h1

    # Take the shortest path around the color wheel
    if abs(h2 - h1) > 0.5:
        if h1 < h2:
            h1 += 1.0
        else:
            h2 += 1.0

    hue = (h1 + (h2 - h1) * t) % 1.0
    sat = c1.saturation + (c2.saturation - c1.saturation) * t
    val = c1.value + (c2.value - c1.value) * t

    return HSV(hue, sat, val)
