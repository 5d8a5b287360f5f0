"""
Canvas analysis

Unique colors / characters and their frequencies over the current canvas
(optionally together with every timeline frame). Feeds the remap effects'
mapping tables.
"""

import hashlib
import time
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from asciifx.models.cell import CellGrid, Frame
from asciifx.models.enums import LogCategory
from asciifx.utils.colors import is_transparent
from asciifx.utils.logger import get_logger

log = get_logger().for_category(LogCategory.ANALYSIS)

MAX_UNIQUE_ITEMS = 256


@dataclass(frozen=True)
class CanvasAnalysis:
    unique_colors: List[str]
    unique_characters: List[str]
    color_frequency: Dict[str, int]
    character_frequency: Dict[str, int]
    total_cells: int
    canvas_hash: str
    frame_count: int = 0
    analysis_timestamp: float = field(default_factory=time.time)

    @property
    def colors_by_frequency(self) -> List[Tuple[str, int]]:
        """(color, count), most frequent first"""
        return _by_frequency(self.color_frequency)

    @property
    def characters_by_frequency(self) -> List[Tuple[str, int]]:
        """(char, count), most frequent first"""
        return _by_frequency(self.character_frequency)

    @property
    def color_distribution(self) -> List[Tuple[str, int, float]]:
        """(color, count, percentage of current canvas cells)"""
        return [(c, n, self._percentage(n)) for c, n in self.colors_by_frequency]

    @property
    def character_distribution(self) -> List[Tuple[str, int, float]]:
        """(char, count, percentage of current canvas cells)"""
        return [(c, n, self._percentage(n)) for c, n in self.characters_by_frequency]

    def _percentage(self, count: int) -> float:
        return count / self.total_cells * 100 if self.total_cells > 0 else 0.0


def _by_frequency(frequency: Dict[str, int]) -> List[Tuple[str, int]]:
    # sorted() is stable, so ties keep first-seen order
    return sorted(frequency.items(), key=lambda item: item[1], reverse=True)


def iter_colors(cells: CellGrid) -> Iterable[str]:
    """Every non-transparent foreground and background color, with repeats"""
    for cell in cells.values():
        if cell.color and not is_transparent(cell.color):
            yield cell.color
        if cell.bg_color and not is_transparent(cell.bg_color):
            yield cell.bg_color


def iter_characters(cells: CellGrid) -> Iterable[str]:
    """Every non-blank glyph, with repeats"""
    for cell in cells.values():
        if cell.char and cell.char.strip():
            yield cell.char


def canvas_hash(cells: CellGrid, frame_count: int = 0) -> str:
    """Stable content hash (independent of key insertion order)"""
    digest = hashlib.sha1()
    for key in sorted(cells):
        cell = cells[key]
        digest.update(f"{key}|{cell.char}|{cell.color}|{cell.bg_color};".encode("utf-8"))
    digest.update(f"frames={frame_count}".encode("utf-8"))
    return digest.hexdigest()


def analyze_canvas(cells: CellGrid, frames: Optional[Sequence[Frame]] = None) -> CanvasAnalysis:
    """
    Analyze a canvas for unique colors and characters

    Args:
        cells: Current canvas grid
        frames: When given, every frame's cells are counted as well
                (timeline-wide application)

    Returns:
        CanvasAnalysis; unique lists are capped at MAX_UNIQUE_ITEMS
    """
    grids = [cells] + [frame.data for frame in (frames or [])]

    color_frequency: Dict[str, int] = {}
    character_frequency: Dict[str, int] = {}
    for grid in grids:
        for color in iter_colors(grid):
            color_frequency[color] = color_frequency.get(color, 0) + 1
        for char in iter_characters(grid):
            character_frequency[char] = character_frequency.get(char, 0) + 1

    analysis = CanvasAnalysis(
        unique_colors=list(color_frequency)[:MAX_UNIQUE_ITEMS],
        unique_characters=list(character_frequency)[:MAX_UNIQUE_ITEMS],
        color_frequency=color_frequency,
        character_frequency=character_frequency,
        total_cells=len(cells),
        canvas_hash=canvas_hash(cells, len(frames or [])),
        frame_count=len(frames or []),
    )

    log.debug(
        "Canvas analyzed",
        cells=len(cells),
        colors=len(analysis.unique_colors),
        characters=len(analysis.unique_characters),
    )
    return analysis
