"""
Area Matcher

Decides which cells a gradient fill covers, starting from one cell:

- contiguous: 4-connected region growth from the start cell
- global: every cell on the canvas, wherever it is

In both modes a cell qualifies when each enabled attribute (char, color,
background) equals the START cell's attribute. Growth never compares a
cell with the neighbour it was reached from.
"""

from collections import deque
from dataclasses import dataclass
from typing import Set

from asciifx.models.cell import Cell, CellGrid, cell_key, get_cell
from asciifx.models.enums import LogCategory
from asciifx.models.gradient import GridPoint
from asciifx.utils.logger import get_logger

log = get_logger().for_category(LogCategory.AREA)


@dataclass(frozen=True)
class FillCriteria:
    """Fill area configuration (all flags off = match everything)"""
    contiguous: bool = True
    match_char: bool = True
    match_color: bool = True
    match_bg_color: bool = True


def cell_matches(cell: Cell, target: Cell, criteria: FillCriteria) -> bool:
    """Check the enabled attributes of cell against the target cell"""
    if criteria.match_char and cell.char != target.char:
        return False
    if criteria.match_color and cell.color != target.color:
        return False
    if criteria.match_bg_color and cell.bg_color != target.bg_color:
        return False
    return True


def find_fill_area(cells: CellGrid, width: int, height: int, start: GridPoint,
                   criteria: FillCriteria) -> Set[str]:
    """
    Find the cells a fill starting at `start` covers

    Missing grid keys count as empty cells, so blank canvas regions can be
    filled too.

    Args:
        cells: Sparse grid
        width, height: Canvas dimensions (positions outside are never included)
        start: Start cell
        criteria: Contiguity and match flags

    Returns:
        Set of "x,y" keys (empty when start is off the canvas)
    """
    if not (0 <= start.x < width and 0 <= start.y < height):
        return set()

    target = get_cell(cells, start.x, start.y)

    if criteria.contiguous:
        area = _grow_region(cells, width, height, start, target, criteria)
    else:
        area = {
            cell_key(x, y)
            for y in range(height)
            for x in range(width)
            if cell_matches(get_cell(cells, x, y), target, criteria)
        }

    log.debug(
        "Fill area resolved",
        start=f"{start.x},{start.y}",
        contiguous=criteria.contiguous,
        size=len(area),
    )
    return area


def _grow_region(cells: CellGrid, width: int, height: int, start: GridPoint,
                 target: Cell, criteria: FillCriteria) -> Set[str]:
    """Breadth-first 4-connected growth; each position is visited once"""
    area: Set[str] = set()
    visited: Set[str] = set()
    queue = deque([(start.x, start.y)])

    while queue:
        x, y = queue.popleft()
        key = cell_key(x, y)
        if x < 0 or x >= width or y < 0 or y >= height or key in visited:
            continue
        visited.add(key)

        if not cell_matches(get_cell(cells, x, y), target, criteria):
            continue

        area.add(key)
        queue.extend(((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)))

    return area
