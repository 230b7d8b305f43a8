"""
Color utilities for light characteristics.

Provides color token resolution and the conversions a renderer needs
to turn a token ("W", "Am", "W/R") into something it can draw.
"""

import colorsys
from typing import NamedTuple

from .dsl.parser import parse_light_code


class HSV(NamedTuple):
    """
    HSV color representation.

    All values are in the range 0.0-1.0.
    """
    hue: float
    saturation: float = 1.0
    value: float = 1.0


# Single color tokens, in chart order
COLOR_TOKENS: tuple[str, ...] = ("W", "R", "G", "Y", "Am")

# Token -> renderable color (CSS name or hex)
COLOR_MAP: dict[str, str] = {
    "W": "white",
    "R": "red",
    "G": "green",
    "Y": "yellow",
    "Am": "#FFBF00",
    # Simultaneous multi-color flashes
    "W/R": "orange",
    "W/G": "#88ffcc",
    "R/G": "#ffaa44",
    "W/R/G": "yellow",
}

# Named colors a renderable value may use (hue, saturation, value)
NAMED_COLORS: dict[str, HSV] = {
    "white": HSV(0.0, 0.0, 1.0),
    "red": HSV(0.0, 1.0, 1.0),
    "orange": HSV(0.108, 1.0, 1.0),
    "yellow": HSV(0.167, 1.0, 1.0),
    "green": HSV(0.333, 1.0, 0.5),
    "gray": HSV(0.0, 0.0, 0.5),
    "black": HSV(0.0, 0.0, 0.0),
}


def composite_token(colors) -> str:
    """Join colors into one token for a simultaneous flash ("W/R")."""
    return "/".join(colors)


def extract_color(code: str) -> str:
    """
    Representative color token for a light code.

    Used by collaborators (marker tinting, overlays) that need one
    color rather than a full timeline.

    Returns:
        First color for single-color codes, a "/"-joined composite for
        multi-color codes, or "W" if the code does not parse.
    """
    parsed = parse_light_code(code)
    if parsed is None or not parsed.colors:
        return "W"
    if len(parsed.colors) > 1:
        return composite_token(parsed.colors)
    return parsed.colors[0]


def resolve_color(
    token: str,
    color_map: dict[str, str] | None = None,
    default: str = "white",
) -> str:
    """Look up the renderable value for a token, falling back to default."""
    table = COLOR_MAP if color_map is None else color_map
    return table.get(token, default)


def hsv_to_hex(color: HSV) -> str:
    """
    Convert HSV color to hex string.

    Args:
        color: HSV color tuple

    Returns:
        Hex string like "#FFBF00"
    """
    r, g, b = colorsys.hsv_to_rgb(color.hue, color.saturation, color.value)
    return f"#{round(r * 255):02X}{round(g * 255):02X}{round(b * 255):02X}"


def hex_to_hsv(hex_color: str) -> HSV:
    """
    Convert hex color string to HSV.

    Args:
        hex_color: Hex string like "#FFBF00", "#8FC", "FFBF00"

    Raises:
        ValueError: If hex format is invalid
    """
    hex_str = hex_color.lstrip("#")

    # Expand shorthand (#RGB -> #RRGGBB)
    if len(hex_str) == 3:
        hex_str = "".join(c * 2 for c in hex_str)

    if len(hex_str) != 6:
        raise ValueError(f"Invalid hex color: {hex_color}")

    try:
        r = int(hex_str[0:2], 16) / 255.0
        g = int(hex_str[2:4], 16) / 255.0
        b = int(hex_str[4:6], 16) / 255.0
    except ValueError:
        raise ValueError(f"Invalid hex color: {hex_color}")

    h, s, v = colorsys.rgb_to_hsv(r, g, b)
    return HSV(h, s, v)


def color_to_hsv(value: str) -> HSV:
    """
    Convert a renderable color value (name or hex) to HSV.

    Raises:
        ValueError: If the color name is not recognized
    """
    if value.startswith("#"):
        return hex_to_hsv(value)
    name = value.lower().strip()
    if name in NAMED_COLORS:
        return NAMED_COLORS[name]
    raise ValueError(f"Unknown color name: {value}")


def dim(color: HSV, factor: float) -> HSV:
    """Dim a color by scaling its value (0.0 = black, 1.0 = original)."""
    return HSV(color.hue, color.saturation, max(0.0, min(1.0, color.value * factor)))
