"""Conversions between hex color strings, RGB and HSL.

All channels are floats in [0, 1]. Conversion functions accept ``None`` and
return ``None`` so that a failed step can be chained without raising; use
:func:`parse_color` where malformed input is a user error.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from .exceptions import InvalidColorFormat

HEX_COLOR_FULL_LENGTH = 6  # Length of full hex colors (#RRGGBB)
HSL_LIGHTNESS_MIDPOINT = 0.5  # HSL lightness midpoint for saturation/chroma branches
_HEX_DIGITS = re.compile(r"[0-9a-fA-F]{6}")


@dataclass(frozen=True, slots=True)
class RGB:
    """Red, green and blue channels in [0, 1]."""

    r: float
    g: float
    b: float


@dataclass(frozen=True, slots=True)
class HSL:
    """Hue, saturation and lightness, each in [0, 1]."""

    h: float
    s: float
    l: float  # noqa: E741


def hex_to_rgb(hex_color: str | None) -> RGB | None:
    """Convert a hex color to RGB.

    Args:
        hex_color: Color like '#1e1e2e' or '1e1e2e'

    Returns:
        RGB with channels in [0, 1], or None if the input is not exactly six hex digits
    """
    if not isinstance(hex_color, str):
        return None

    digits = hex_color.removeprefix("#")
    if len(digits) != HEX_COLOR_FULL_LENGTH or not _HEX_DIGITS.fullmatch(digits):
        return None

    return RGB(
        r=int(digits[0:2], 16) / 255,
        g=int(digits[2:4], 16) / 255,
        b=int(digits[4:6], 16) / 255,
    )


def rgb_to_hsl(rgb: RGB | None) -> HSL | None:
    """Convert RGB to HSL using the min/max channel decomposition."""
    if rgb is None:
        return None

    r, g, b = rgb.r, rgb.g, rgb.b
    high = max(r, g, b)
    low = min(r, g, b)
    lightness = (high + low) / 2

    if high == low:
        # Achromatic
        return HSL(h=0.0, s=0.0, l=lightness)

    d = high - low
    s = d / (2 - high - low) if lightness > HSL_LIGHTNESS_MIDPOINT else d / (high + low)

    if high == r:
        h = (g - b) / d + (6 if g < b else 0)
    elif high == g:
        h = (b - r) / d + 2
    else:
        h = (r - g) / d + 4

    return HSL(h=h / 6, s=s, l=lightness)


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(hsl: HSL | None) -> RGB | None:
    """Convert HSL back to RGB."""
    if hsl is None:
        return None

    h, s, lightness = hsl.h, hsl.s, hsl.l

    if s == 0:
        return RGB(r=lightness, g=lightness, b=lightness)

    q = (
        lightness * (1 + s)
        if lightness < HSL_LIGHTNESS_MIDPOINT
        else lightness + s - lightness * s
    )
    p = 2 * lightness - q
    return RGB(
        r=_hue_to_rgb(p, q, h + 1 / 3),
        g=_hue_to_rgb(p, q, h),
        b=_hue_to_rgb(p, q, h - 1 / 3),
    )


def _channel_to_hex(c: float) -> str:
    value = math.floor(c * 255 + 0.5)
    value = max(0, min(255, value))
    return f"{value:02x}"


def rgb_to_hex(rgb: RGB | None) -> str | None:
    """Convert RGB to a lowercase '#rrggbb' string.

    Channels are rounded to the nearest integer and clamped to [0, 255], so
    floating point overshoot never raises.
    """
    if rgb is None:
        return None
    return "#" + _channel_to_hex(rgb.r) + _channel_to_hex(rgb.g) + _channel_to_hex(rgb.b)


def normalize_hex(value: str | None) -> str | None:
    """Return the canonical lowercase '#rrggbb' form of a color, or None if malformed."""
    if value is None or hex_to_rgb(value) is None:
        return None
    return "#" + value.removeprefix("#").lower()


def parse_color(value: str) -> str:
    """Parse a user-supplied color into canonical '#rrggbb' form.

    Raises:
        InvalidColorFormat: If the value is not a 6-digit hex color
    """
    color = normalize_hex(value)
    if color is None:
        raise InvalidColorFormat(f"Invalid color {value!r}: expected '#rrggbb'")
    return color
