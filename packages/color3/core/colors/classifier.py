"""Deterministic hex color → color family classification.

Colors are converted to HSL (hue in whole degrees, saturation and lightness in
whole percent) and bucketed:

1. Low saturation (S < 10) is achromatic: black, white or gray by lightness.
2. Very dark colors (L < 15) are black; very light, weakly saturated colors
   (L > 90 and S < 20) are white, whatever their hue.
3. Everything else is bucketed by hue band.
"""

from __future__ import annotations

import math
import re

from color3.core.colors.enum import ColorFamily
from color3.core.errors import InvalidInput

# Six hex digits, optional leading '#'.
_HEX_RE = re.compile(r"^#?([0-9A-Fa-f]{6})$")

# Strict form used by the submission boundary: '#' is required.
_STRICT_HEX_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")

_ACHROMATIC_SATURATION = 10
_ACHROMATIC_BLACK_LIGHTNESS = 20
_ACHROMATIC_WHITE_LIGHTNESS = 85

_DARK_LIGHTNESS = 15
_LIGHT_LIGHTNESS = 90
_LIGHT_SATURATION = 20

# Half-open hue bands in degrees. Red wraps around 360.
_HUE_BANDS: tuple[tuple[ColorFamily, int, int], ...] = (
    (ColorFamily.RED, 345, 361),
    (ColorFamily.RED, 0, 15),
    (ColorFamily.ORANGE, 15, 45),
    (ColorFamily.YELLOW, 45, 70),
    (ColorFamily.GREEN, 70, 160),
    (ColorFamily.CYAN, 160, 200),
    (ColorFamily.BLUE, 200, 260),
    (ColorFamily.PURPLE, 260, 300),
    (ColorFamily.PINK, 300, 345),
)


def _round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 rounding up."""
    return math.floor(value + 0.5)


def parse_hex(hex_color: str) -> tuple[int, int, int]:
    """Parse a 6-digit hex color into RGB channels.

    Args:
        hex_color: Hex string, with or without a leading '#'

    Returns:
        (r, g, b) tuple, each 0-255

    Raises:
        InvalidInput: If the string is not exactly 6 hex digits
    """
    if not isinstance(hex_color, str):
        raise InvalidInput(f"Hex color must be a string, got {type(hex_color).__name__}")
    match = _HEX_RE.match(hex_color)
    if match is None:
        raise InvalidInput(f"Invalid hex color: {hex_color!r}")
    digits = match.group(1)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def normalize_hex(hex_color: str) -> str:
    """Normalize a hex color to '#RRGGBB' uppercase.

    Raises:
        InvalidInput: If the string is not a valid hex color
    """
    r, g, b = parse_hex(hex_color)
    return f"#{r:02X}{g:02X}{b:02X}"


def is_valid_hex(value: object) -> bool:
    """Check if a value is a '#'-prefixed 6-digit hex color string."""
    return isinstance(value, str) and bool(_STRICT_HEX_RE.match(value))


def hex_to_hsl(hex_color: str) -> tuple[int, int, int]:
    """Convert a hex color to HSL.

    Args:
        hex_color: Hex color string

    Returns:
        (hue_degrees, saturation_pct, lightness_pct), hue in 0-360 and
        saturation/lightness in 0-100, all rounded to integers
    """
    red, green, blue = parse_hex(hex_color)
    r, g, b = red / 255, green / 255, blue / 255

    high = max(r, g, b)
    low = min(r, g, b)
    delta = high - low
    lightness = (high + low) / 2

    hue = 0.0
    saturation = 0.0
    if delta != 0:
        if lightness > 0.5:
            saturation = delta / (2 - high - low)
        else:
            saturation = delta / (high + low)

        # The hue sector follows the first channel equal to the maximum.
        if high == r:
            hue = ((g - b) / delta + (6 if g < b else 0)) / 6
        elif high == g:
            hue = ((b - r) / delta + 2) / 6
        else:
            hue = ((r - g) / delta + 4) / 6

    return (
        _round_half_up(hue * 360),
        _round_half_up(saturation * 100),
        _round_half_up(lightness * 100),
    )


def classify(hex_color: str) -> ColorFamily:
    """Classify a hex color into its color family.

    Args:
        hex_color: 6-digit hex color, optionally prefixed with '#'

    Returns:
        The ColorFamily the color belongs to

    Raises:
        InvalidInput: If the hex string is malformed

    Example:
        >>> classify("#DC2626")
        <ColorFamily.RED: 'red'>
        >>> classify("808080")
        <ColorFamily.GRAY: 'gray'>
    """
    hue, saturation, lightness = hex_to_hsl(hex_color)

    if saturation < _ACHROMATIC_SATURATION:
        if lightness < _ACHROMATIC_BLACK_LIGHTNESS:
            return ColorFamily.BLACK
        if lightness > _ACHROMATIC_WHITE_LIGHTNESS:
            return ColorFamily.WHITE
        return ColorFamily.GRAY

    if lightness < _DARK_LIGHTNESS:
        return ColorFamily.BLACK
    if lightness > _LIGHT_LIGHTNESS and saturation < _LIGHT_SATURATION:
        return ColorFamily.WHITE

    for family, low, high in _HUE_BANDS:
        if low <= hue < high:
            return family

    # Fallback (should not happen with 0-360 coverage).
    return ColorFamily.GRAY
