"""
Levels effect

Per-channel tone curve: clip to [shadows, highlights], gamma-correct the
midtones, stretch into [output_min, output_max].
"""

from typing import Optional

from asciifx.effects.base import ColorEffect
from asciifx.models.effects import LevelsSettings
from asciifx.models.enums import EffectKind
from asciifx.utils.colors import clamp_channel, hex_to_rgb, rgb_to_hex


def apply_levels_to_channel(
    value: float,
    shadows_input: float,
    midtones_input: float,
    highlights_input: float,
    output_min: float,
    output_max: float,
) -> int:
    """
    Apply levels to one channel value (0-255)

    If highlights_input <= shadows_input the range is empty and the value
    passes through (only rounded/clamped). The two bounds are never swapped.

    Example:
        apply_levels_to_channel(125, 50, 1.0, 200, 0, 255)  # 128
        apply_levels_to_channel(50, 50, 1.0, 200, 0, 255)   # 0
    """
    if highlights_input <= shadows_input:
        return clamp_channel(value)

    if value <= shadows_input:
        return clamp_channel(output_min)
    if value >= highlights_input:
        return clamp_channel(output_max)

    normalized = (value - shadows_input) / (highlights_input - shadows_input)
    gamma_adjusted = normalized ** (1.0 / midtones_input)
    result = output_min + gamma_adjusted * (output_max - output_min)
    return clamp_channel(result)


def apply_levels_to_color(color: str, settings: LevelsSettings) -> Optional[str]:
    """
    Apply levels to a hex color

    Returns:
        New '#rrggbb', or None if the color is unparsable
    """
    rgb = hex_to_rgb(color)
    if rgb is None:
        return None

    return rgb_to_hex(*(
        apply_levels_to_channel(
            channel,
            settings.shadows_input,
            settings.midtones_input,
            settings.highlights_input,
            settings.output_min,
            settings.output_max,
        )
        for channel in rgb
    ))


class LevelsEffect(ColorEffect[LevelsSettings]):
    KIND = EffectKind.LEVELS

    def transform_color(self, color: str) -> Optional[str]:
        return apply_levels_to_color(color, self.settings)
