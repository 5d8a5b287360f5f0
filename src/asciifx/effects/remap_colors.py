"""
Remap Colors effect

Substitutes colors through a source → target table. With match_exact off
the lookup also tries a case-insensitive key, then the key with/without a
leading '#'.
"""

from typing import Dict, Mapping, Optional, Sequence

from asciifx.effects.base import ColorEffect
from asciifx.analysis.canvas_analysis import analyze_canvas
from asciifx.models.cell import CellGrid, Frame
from asciifx.models.effects import RemapColorsSettings
from asciifx.models.enums import EffectKind
from asciifx.utils.colors import is_transparent


def find_color_mapping(color: str, mappings: Mapping[str, str], match_exact: bool) -> Optional[str]:
    """
    Find the target color for a source color

    Priority: exact key → case-insensitive key → key with/without '#'.
    The last two are only tried when match_exact is False.

    Returns:
        Target color, or None when nothing matches
    """
    target = mappings.get(color)
    if target:
        return target

    if match_exact:
        return None

    lower_color = color.lower()
    for key, value in mappings.items():
        if key.lower() == lower_color:
            return value

    if color.startswith("#"):
        alternate = color[1:]
    else:
        alternate = "#" + color
    return mappings.get(alternate) or None


class RemapColorsEffect(ColorEffect[RemapColorsSettings]):
    KIND = EffectKind.REMAP_COLORS

    def transform_color(self, color: str) -> Optional[str]:
        s = self.settings
        return find_color_mapping(color, s.color_mappings, s.match_exact)

    def _background_eligible(self, bg_color: str) -> bool:
        if is_transparent(bg_color):
            return self.settings.include_transparent
        return bool(bg_color)


def sync_color_mappings(existing: Mapping[str, str], cells: CellGrid,
                        frames: Optional[Sequence[Frame]] = None) -> Dict[str, str]:
    """
    Rebuild a color mapping table for the colors currently on the canvas

    Every color present gets an identity entry unless it already had a
    target, which is kept. Colors no longer present are dropped.
    """
    colors = analyze_canvas(cells, frames).unique_colors
    return {color: existing.get(color, color) for color in colors}
