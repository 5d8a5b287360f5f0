"""Result models returned by the engine"""

from dataclasses import dataclass, field
from typing import List, Set

from asciifx.models.cell import CellGrid, Frame


@dataclass(frozen=True)
class EffectResult:
    """One effect applied to one grid"""
    cells: CellGrid
    affected_cells: int
    elapsed_ms: float


@dataclass(frozen=True)
class GradientResult:
    """
    One gradient fill applied to one grid

    area holds every filled position; affected_cells counts only the
    positions whose cell changed.
    """
    cells: CellGrid
    area: Set[str]
    affected_cells: int
    elapsed_ms: float


@dataclass(frozen=True)
class FrameError:
    """A frame that failed during a batch; the original frame was kept"""
    frame_index: int
    message: str
    error_type: str = "Exception"

    def __str__(self) -> str:
        return f"Frame {self.frame_index}: {self.message}"


@dataclass(frozen=True)
class BatchResult:
    """Operation applied across a frame sequence"""
    frames: List[Frame]
    total_affected: int
    elapsed_ms: float
    errors: List[FrameError] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.errors
