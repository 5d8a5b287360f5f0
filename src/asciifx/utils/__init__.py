"""
Utility functions - color math and logging
"""

from .colors import (
    hex_to_hsl,
    hex_to_hsv,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    hsv_to_hex,
    hsv_to_rgb,
    interpolate_hex,
    is_transparent,
    normalize_hex,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_hsv,
    round_half_up,
)
from .logger import configure_logger, get_logger

__all__ = [
    'hex_to_hsl',
    'hex_to_hsv',
    'hex_to_rgb',
    'hsl_to_hex',
    'hsl_to_rgb',
    'hsv_to_hex',
    'hsv_to_rgb',
    'interpolate_hex',
    'is_transparent',
    'normalize_hex',
    'rgb_to_hex',
    'rgb_to_hsl',
    'rgb_to_hsv',
    'round_half_up',
    'configure_logger',
    'get_logger',
]
