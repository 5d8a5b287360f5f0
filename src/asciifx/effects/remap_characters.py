"""
Remap Characters effect

Exact glyph → glyph substitution. Unmapped glyphs pass through.
"""

from typing import Dict, Mapping, Optional, Sequence

from asciifx.analysis.canvas_analysis import analyze_canvas
from asciifx.effects.base import BaseEffect
from asciifx.models.cell import Cell, CellGrid, Frame
from asciifx.models.effects import RemapCharactersSettings
from asciifx.models.enums import EffectKind


class RemapCharactersEffect(BaseEffect[RemapCharactersSettings]):
    KIND = EffectKind.REMAP_CHARACTERS

    def transform_cell(self, cell: Cell) -> Cell:
        if not cell.char:
            return cell
        if self.settings.preserve_spacing and cell.char == " ":
            return cell

        mapped = self.settings.character_mappings.get(cell.char)
        if not mapped or mapped == cell.char:
            return cell
        return cell.with_values(char=mapped)


def sync_character_mappings(existing: Mapping[str, str], cells: CellGrid,
                            frames: Optional[Sequence[Frame]] = None) -> Dict[str, str]:
    """
    Rebuild the character mapping table for the glyphs on the canvas

    Recompute whenever the canvas changes:
    - every glyph present gets an identity entry (glyph → glyph)
    - a glyph that already mapped elsewhere keeps its target
    - glyphs no longer present are dropped

    Example:
        sync_character_mappings({"A": "Z", "Q": "R"}, grid_with_A_and_B)
        # {"A": "Z", "B": "B"}
    """
    glyphs = analyze_canvas(cells, frames).unique_characters
    return {glyph: existing.get(glyph, glyph) for glyph in glyphs}
