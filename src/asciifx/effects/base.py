"""
Base Effect Class

All effects inherit from BaseEffect and implement transform_cell().
"""

import time
from typing import Generic, Optional, TypeVar

from asciifx.models.cell import Cell, CellGrid
from asciifx.models.effects import ColorRange
from asciifx.models.enums import ColorRangeType, EffectKind
from asciifx.models.results import EffectResult
from asciifx.utils.colors import is_transparent

S = TypeVar("S")


class BaseEffect(Generic[S]):
    """
    Base class for all cell effects

    One instance = one settings snapshot. apply() walks the grid once and
    builds a new grid; cells are copied only when transform_cell() returns
    a different Cell, the input grid is never modified.

    Subclasses MUST set KIND and implement transform_cell(cell) which
    returns the new Cell (or the same object when nothing changes).
    """
    KIND: EffectKind

    def __init__(self, settings: S):
        self.settings = settings

    # ------------------------------------------------------------
    # Per-cell hook
    # ------------------------------------------------------------

    def transform_cell(self, cell: Cell) -> Cell:
        raise NotImplementedError

    # ------------------------------------------------------------
    # Grid walk
    # ------------------------------------------------------------

    def apply(self, cells: CellGrid) -> EffectResult:
        """
        Apply to every cell of a grid

        Returns:
            EffectResult with the new grid, number of cells whose value
            actually changed, and elapsed wall time in ms
        """
        start = time.perf_counter()
        processed: CellGrid = {}
        affected = 0

        for key, cell in cells.items():
            new_cell = self.transform_cell(cell)
            if new_cell != cell:
                affected += 1
            processed[key] = new_cell

        elapsed_ms = (time.perf_counter() - start) * 1000
        return EffectResult(cells=processed, affected_cells=affected, elapsed_ms=elapsed_ms)


class ColorEffect(BaseEffect[S]):
    """
    Base for effects that rewrite a cell's colors one color at a time

    Subclasses implement transform_color(color) -> Optional[str]; None
    means "no conversion" and the color stays as it is. Transparent
    backgrounds are never passed in.
    """

    @property
    def color_range(self) -> Optional[ColorRange]:
        return getattr(self.settings, "color_range", None)

    def transform_color(self, color: str) -> Optional[str]:
        raise NotImplementedError

    def should_process(self, color: str, is_background: bool) -> bool:
        """Check if a color is eligible under the settings' color range"""
        color_range = self.color_range
        if color_range is None or color_range.type == ColorRangeType.ALL:
            return True
        if color_range.type == ColorRangeType.CUSTOM:
            return color in color_range.custom_colors
        if color_range.type == ColorRangeType.TEXT:
            return not is_background
        return is_background

    def transform_cell(self, cell: Cell) -> Cell:
        changes = {}

        if cell.color and self.should_process(cell.color, is_background=False):
            new_color = self.transform_color(cell.color)
            if new_color is not None and new_color != cell.color:
                changes["color"] = new_color

        if self._background_eligible(cell.bg_color) and self.should_process(cell.bg_color, is_background=True):
            new_bg = self.transform_color(cell.bg_color)
            if new_bg is not None and new_bg != cell.bg_color:
                changes["bg_color"] = new_bg

        return cell.with_values(**changes) if changes else cell

    def _background_eligible(self, bg_color: str) -> bool:
        return bool(bg_color) and not is_transparent(bg_color)
