"""
Effects package - per-cell tone and remap effects
"""

from .base import BaseEffect, ColorEffect
from .levels import LevelsEffect, apply_levels_to_channel, apply_levels_to_color
from .hue_saturation import HueSaturationEffect, apply_hsl_adjustments
from .remap_colors import RemapColorsEffect, find_color_mapping, sync_color_mappings
from .remap_characters import RemapCharactersEffect, sync_character_mappings

__all__ = [
    'BaseEffect',
    'ColorEffect',
    'LevelsEffect',
    'HueSaturationEffect',
    'RemapColorsEffect',
    'RemapCharactersEffect',
    'apply_levels_to_channel',
    'apply_levels_to_color',
    'apply_hsl_adjustments',
    'find_color_mapping',
    'sync_color_mappings',
    'sync_character_mappings',
]
