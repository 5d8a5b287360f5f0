"""
Color conversion utilities

Pure functions for hex / RGB / HSL / HSV conversions.

Every parser is total: malformed input returns None ("no conversion")
instead of raising, and callers treat None as "leave the value unchanged".
Rounding is half-up on every channel so results match the editor
pixel-for-pixel.
"""

import math
import re
from typing import Optional, Tuple

from asciifx.models.cell import TRANSPARENT

RGB = Tuple[int, int, int]

_HEX_RE = re.compile(r"^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$", re.IGNORECASE)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positives (Python's round() is banker's)"""
    return int(math.floor(value + 0.5))


def clamp_channel(value: float) -> int:
    """Round and clamp a channel to 0-255"""
    return round_half_up(max(0.0, min(255.0, value)))


def is_transparent(color: Optional[str]) -> bool:
    return color == TRANSPARENT


def hex_to_rgb(color: str) -> Optional[RGB]:
    """
    Convert hex color to RGB

    Accepts 6 hex digits, case-insensitive, with or without leading '#'.

    Returns:
        (r, g, b) tuple with values 0-255, or None if unparsable

    Example:
        hex_to_rgb("#FF8000")  # (255, 128, 0)
        hex_to_rgb("ff8000")   # (255, 128, 0)
        hex_to_rgb("red")      # None
    """
    if not isinstance(color, str):
        return None
    match = _HEX_RE.match(color)
    if not match:
        return None
    return tuple(int(part, 16) for part in match.groups())


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """
    Convert RGB to '#rrggbb'

    Channels are rounded and clamped to 0-255 first.

    Example:
        rgb_to_hex(255, 128, 0)    # "#ff8000"
        rgb_to_hex(300, -4, 12.6)  # "#ff000d"
    """
    return "#" + "".join(f"{clamp_channel(c):02x}" for c in (r, g, b))


def normalize_hex(color: str) -> Optional[str]:
    """'#FFF000' / 'fff000' → '#fff000', None if unparsable"""
    rgb = hex_to_rgb(color)
    if rgb is None:
        return None
    return rgb_to_hex(*rgb)


# === HSL ===

def rgb_to_hsl(r: int, g: int, b: int) -> Tuple[int, int, int]:
    """
    Convert RGB (0-255) to HSL

    Standard max/min/delta formula. Achromatic (max == min) gives H=S=0.

    Returns:
        (h, s, l) with h in degrees 0-359 (rounded, 360 wraps to 0), s and l 0-100
    """
    r_n, g_n, b_n = r / 255.0, g / 255.0, b / 255.0
    max_c = max(r_n, g_n, b_n)
    min_c = min(r_n, g_n, b_n)
    lightness = (max_c + min_c) / 2

    if max_c == min_c:
        return 0, 0, round_half_up(lightness * 100)

    delta = max_c - min_c
    if lightness > 0.5:
        saturation = delta / (2 - max_c - min_c)
    else:
        saturation = delta / (max_c + min_c)

    hue = _hue_from_components(r_n, g_n, b_n, max_c, delta)
    return (
        round_half_up(hue * 360) % 360,
        round_half_up(saturation * 100),
        round_half_up(lightness * 100),
    )


def _hue_from_components(r: float, g: float, b: float, max_c: float, delta: float) -> float:
    """Hue as a 0-1 fraction of the color wheel"""
    if max_c == r:
        hue = (g - b) / delta + (6 if g < b else 0)
    elif max_c == g:
        hue = (b - r) / delta + 2
    else:
        hue = (r - g) / delta + 4
    return hue / 6


def _hue_to_channel(p: float, q: float, t: float) -> float:
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


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """
    Convert HSL (h degrees, s/l 0-100) to RGB (0-255)
    """
    h = (h % 360) / 360.0
    s = max(0.0, min(100.0, s)) / 100.0
    l = max(0.0, min(100.0, l)) / 100.0

    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)

    return clamp_channel(r * 255), clamp_channel(g * 255), clamp_channel(b * 255)


def hex_to_hsl(color: str) -> Optional[Tuple[int, int, int]]:
    rgb = hex_to_rgb(color)
    if rgb is None:
        return None
    return rgb_to_hsl(*rgb)


def hsl_to_hex(h: float, s: float, l: float) -> str:
    return rgb_to_hex(*hsl_to_rgb(h, s, l))


# === HSV ===

def rgb_to_hsv(r: int, g: int, b: int) -> Tuple[int, int, int]:
    """
    Convert RGB (0-255) to HSV

    Returns:
        (h, s, v) with h in degrees 0-359, s and v 0-100, each rounded
    """
    r_n, g_n, b_n = r / 255.0, g / 255.0, b / 255.0
    max_c = max(r_n, g_n, b_n)
    min_c = min(r_n, g_n, b_n)
    delta = max_c - min_c

    saturation = 0.0 if max_c == 0 else delta / max_c
    if delta == 0:
        hue = 0.0
    else:
        hue = _hue_from_components(r_n, g_n, b_n, max_c, delta)

    return (
        round_half_up(hue * 360) % 360,
        round_half_up(saturation * 100),
        round_half_up(max_c * 100),
    )


def hsv_to_rgb(h: float, s: float, v: float) -> RGB:
    """
    Convert HSV (h degrees, s/v 0-100) to RGB (0-255)
    """
    h = (h % 360) / 60.0
    s = max(0.0, min(100.0, s)) / 100.0
    v = max(0.0, min(100.0, v)) / 100.0

    sector = int(math.floor(h)) % 6
    fraction = h - math.floor(h)
    p = v * (1 - s)
    q = v * (1 - fraction * s)
    t = v * (1 - (1 - fraction) * s)

    r, g, b = (
        (v, t, p),
        (q, v, p),
        (p, v, t),
        (p, q, v),
        (t, p, v),
        (v, p, q),
    )[sector]
    return clamp_channel(r * 255), clamp_channel(g * 255), clamp_channel(b * 255)


def hex_to_hsv(color: str) -> Optional[Tuple[int, int, int]]:
    rgb = hex_to_rgb(color)
    if rgb is None:
        return None
    return rgb_to_hsv(*rgb)


def hsv_to_hex(h: float, s: float, v: float) -> str:
    return rgb_to_hex(*hsv_to_rgb(h, s, v))


# === BLENDING ===

def interpolate_hex(color1: str, color2: str, fraction: float) -> Optional[str]:
    """
    Component-wise RGB blend of two hex colors

    Returns:
        Blended '#rrggbb', or None if either color is unparsable
    """
    rgb1 = hex_to_rgb(color1)
    rgb2 = hex_to_rgb(color2)
    if rgb1 is None or rgb2 is None:
        return None

    return rgb_to_hex(*(
        c1 + fraction * (c2 - c1) for c1, c2 in zip(rgb1, rgb2)
    ))
