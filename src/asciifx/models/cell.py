"""
Cell and frame models

A canvas is a sparse grid: Dict["x,y", Cell]. A missing key is an empty
cell. Cells are immutable - effects build new Cell objects with
dataclasses.replace() and never touch the input grid.
"""

from dataclasses import dataclass, field, replace
from typing import Dict, Optional, Tuple

TRANSPARENT = "transparent"


@dataclass(frozen=True)
class Cell:
    """One grid position: glyph + foreground + background"""
    char: str = " "
    color: str = "#FFFFFF"
    bg_color: str = TRANSPARENT

    def with_values(self, **changes) -> 'Cell':
        """Copy with some attributes replaced"""
        return replace(self, **changes)

    def is_empty(self) -> bool:
        """True for the blank default cell (dropped from grids on write)"""
        return self == EMPTY_CELL


EMPTY_CELL = Cell()

CellGrid = Dict[str, Cell]


def cell_key(x: int, y: int) -> str:
    """Grid position → "x,y" key"""
    return f"{x},{y}"


def parse_cell_key(key: str) -> Tuple[int, int]:
    """
    "x,y" key → (x, y)

    Raises:
        ValueError: If the key is not two comma separated integers
    """
    x_str, y_str = key.split(",")
    return int(x_str), int(y_str)


def get_cell(grid: CellGrid, x: int, y: int) -> Cell:
    """Cell at (x, y), EMPTY_CELL when absent"""
    return grid.get(cell_key(x, y), EMPTY_CELL)


@dataclass(frozen=True)
class Frame:
    """
    One animation frame as handed over by the timeline.

    The engine reads frames for the duration of a single batch call and
    returns new Frame objects; it never keeps them.
    """
    data: CellGrid = field(default_factory=dict)
    duration: int = 100     # ms
    name: Optional[str] = None

    def with_data(self, data: CellGrid) -> 'Frame':
        return replace(self, data=data)
