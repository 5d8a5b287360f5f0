"""
Batch Runner

Applies a single-frame operation (effect or gradient fill) across an
ordered frame sequence.

• Frames are processed in order, one at a time
• After each frame the runner yields to the event loop (asyncio.sleep(0))
• A frame that raises keeps its original data and is reported in
  BatchResult.errors - the batch never stops early
• Cancelling the awaiting task stops the sweep; nothing needs releasing
"""

import asyncio
import inspect
import time
from typing import Awaitable, Callable, List, Optional, Sequence, Tuple, Union

from asciifx.engine.effect_engine import apply_effect
from asciifx.gradient.area_matcher import FillCriteria
from asciifx.gradient.engine import fill_gradient
from asciifx.models.cell import CellGrid, Frame
from asciifx.models.effects import EffectSettings
from asciifx.models.enums import LogCategory
from asciifx.models.gradient import GradientDefinition
from asciifx.models.results import BatchResult, FrameError
from asciifx.utils.logger import get_logger

log = get_logger().for_category(LogCategory.BATCH)

ProgressCallback = Callable[[int, int], Union[None, Awaitable[None]]]

# grid → (new grid, affected cell count)
FrameOperation = Callable[[CellGrid], Tuple[CellGrid, int]]


class BatchRunner:
    """
    Timeline-wide application of effects and gradient fills

    Example:
        runner = BatchRunner()
        result = await runner.apply_effect_to_frames(
            LevelsSettings(output_min=20),
            frames,
            on_progress=lambda i, total: print(f"{i + 1}/{total}")
        )
        # result.frames, result.total_affected, result.errors
    """

    def __init__(self, yield_between_frames: bool = True):
        """
        Args:
            yield_between_frames: Await asyncio.sleep(0) after every frame
                so the host loop stays responsive during long timelines
        """
        self.yield_between_frames = yield_between_frames

    # ------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------

    async def apply_effect_to_frames(
        self,
        settings: EffectSettings,
        frames: Sequence[Frame],
        on_progress: Optional[ProgressCallback] = None,
    ) -> BatchResult:
        """Apply one effect to every frame"""
        def operation(cells: CellGrid) -> Tuple[CellGrid, int]:
            result = apply_effect(settings, cells)
            return result.cells, result.affected_cells

        return await self.run(operation, frames, on_progress, label=settings.kind.name)

    async def apply_gradient_to_frames(
        self,
        definition: GradientDefinition,
        criteria: FillCriteria,
        frames: Sequence[Frame],
        width: int,
        height: int,
        on_progress: Optional[ProgressCallback] = None,
    ) -> BatchResult:
        """
        Apply one gradient fill to every frame

        The fill area is recomputed per frame from the definition's start
        point, since each frame has its own cell contents.
        """
        def operation(cells: CellGrid) -> Tuple[CellGrid, int]:
            result = fill_gradient(definition, criteria, cells, width, height)
            return result.cells, result.affected_cells

        return await self.run(operation, frames, on_progress, label="GRADIENT")

    # ------------------------------------------------------------
    # Core loop
    # ------------------------------------------------------------

    async def run(
        self,
        operation: FrameOperation,
        frames: Sequence[Frame],
        on_progress: Optional[ProgressCallback] = None,
        label: str = "operation",
    ) -> BatchResult:
        """
        Run a single-frame operation over all frames

        Returns:
            BatchResult with one output frame per input frame (same order)
        """
        started = time.perf_counter()
        processed: List[Frame] = []
        errors: List[FrameError] = []
        total_affected = 0
        total = len(frames)

        for index, frame in enumerate(frames):
            if on_progress is not None:
                await self._notify(on_progress, index, total)

            try:
                new_cells, affected = operation(frame.data)
            except Exception as e:
                processed.append(frame)
                errors.append(FrameError(frame_index=index, message=str(e), error_type=type(e).__name__))
                log.warn("Frame failed, original kept", frame_index=index, error=f"{type(e).__name__}: {e}")
            else:
                processed.append(frame.with_data(new_cells))
                total_affected += affected

            if self.yield_between_frames:
                await asyncio.sleep(0)

        elapsed_ms = (time.perf_counter() - started) * 1000
        log.info(
            f"Batch {label} finished",
            frames=total,
            affected=total_affected,
            errors=len(errors),
            elapsed_ms=f"{elapsed_ms:.1f}",
        )
        return BatchResult(
            frames=processed,
            total_affected=total_affected,
            elapsed_ms=elapsed_ms,
            errors=errors,
        )

    @staticmethod
    async def _notify(on_progress: ProgressCallback, index: int, total: int):
        outcome = on_progress(index, total)
        if inspect.isawaitable(outcome):
            await outcome


_default_runner = BatchRunner()


async def apply_effect_to_frames(settings: EffectSettings, frames: Sequence[Frame],
                                 on_progress: Optional[ProgressCallback] = None) -> BatchResult:
    return await _default_runner.apply_effect_to_frames(settings, frames, on_progress)


async def apply_gradient_to_frames(definition: GradientDefinition, criteria: FillCriteria,
                                   frames: Sequence[Frame], width: int, height: int,
                                   on_progress: Optional[ProgressCallback] = None) -> BatchResult:
    return await _default_runner.apply_gradient_to_frames(
        definition, criteria, frames, width, height, on_progress
    )
