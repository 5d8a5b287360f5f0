"""
Hue / Saturation / Lightness effect
"""

from typing import Optional

from asciifx.effects.base import ColorEffect
from asciifx.models.effects import HueSaturationSettings
from asciifx.models.enums import EffectKind
from asciifx.utils.colors import hex_to_hsl, hsl_to_hex


def apply_hsl_adjustments(color: str, hue_shift: float, saturation_shift: float,
                          lightness_shift: float) -> Optional[str]:
    """
    Shift a hex color in HSL space

    Hue wraps into [0, 360); saturation and lightness clamp into [0, 100].

    Returns:
        New '#rrggbb', or None if the color is unparsable

    Example:
        apply_hsl_adjustments("#ff0000", 120, 0, 0)   # "#00ff00"
        apply_hsl_adjustments("#ff0000", -120, 0, 0)  # "#0000ff"
    """
    hsl = hex_to_hsl(color)
    if hsl is None:
        return None

    h, s, l = hsl
    new_hue = (h + hue_shift) % 360
    new_saturation = max(0, min(100, s + saturation_shift))
    new_lightness = max(0, min(100, l + lightness_shift))

    return hsl_to_hex(new_hue, new_saturation, new_lightness)


class HueSaturationEffect(ColorEffect[HueSaturationSettings]):
    KIND = EffectKind.HUE_SATURATION

    def transform_color(self, color: str) -> Optional[str]:
        s = self.settings
        return apply_hsl_adjustments(color, s.hue, s.saturation, s.lightness)
