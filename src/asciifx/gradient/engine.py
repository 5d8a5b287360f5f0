"""
Gradient Engine

Maps each cell of a fill area to a position t in [0, 1] along the
gradient geometry, then resolves every enabled lane at that t.
"""

import math
import time
from typing import Iterable, Optional

from asciifx.gradient.area_matcher import FillCriteria, find_fill_area
from asciifx.gradient.dithering import effective_strength, strategy_for
from asciifx.models.cell import EMPTY_CELL, Cell, CellGrid, parse_cell_key
from asciifx.models.enums import GradientLane, GradientType, InterpolationKind, LogCategory
from asciifx.models.gradient import GradientDefinition, GradientProperty, GradientStop, GridPoint
from asciifx.models.results import GradientResult
from asciifx.utils.colors import interpolate_hex, normalize_hex
from asciifx.utils.logger import get_logger

log = get_logger().for_category(LogCategory.GRADIENT)

_COLOR_LANES = (GradientLane.TEXT_COLOR, GradientLane.BACKGROUND_COLOR)


# ============================================================
# Geometry
# ============================================================

def gradient_position(x: float, y: float, start: GridPoint, end: GridPoint,
                      gradient_type: GradientType = GradientType.LINEAR) -> Optional[float]:
    """
    Position (0-1) of a cell along the gradient

    LINEAR: projection of (x, y) onto start → end, divided by the squared
        length, clamped to [0, 1]
    RADIAL: distance from start divided by |end - start|, capped at 1

    Returns:
        t in [0, 1], or None when start == end (no direction, no fill)

    Example:
        gradient_position(5, 0, GridPoint(0, 0), GridPoint(10, 0))  # 0.5
        gradient_position(5, 9, GridPoint(0, 0), GridPoint(10, 0))  # 0.5
    """
    dx = end.x - start.x
    dy = end.y - start.y
    length_sq = dx * dx + dy * dy
    if length_sq == 0:
        return None

    if gradient_type == GradientType.RADIAL:
        distance = math.hypot(x - start.x, y - start.y)
        return min(1.0, distance / math.sqrt(length_sq))

    dot = (x - start.x) * dx + (y - start.y) * dy
    return max(0.0, min(1.0, dot / length_sq))


# ============================================================
# Lane sampling
# ============================================================

def _bracketing_stops(t: float, stops) -> tuple:
    for left, right in zip(stops, stops[1:]):
        if left.position <= t <= right.position:
            return left, right
    return stops[0], stops[-1]


def _discrete_choice(fraction: float, left: GradientStop, right: GradientStop,
                     lane: GradientProperty, x: int, y: int, seed: int) -> str:
    strategy = strategy_for(lane.interpolation, lane.dither_strength)
    strength = effective_strength(lane.interpolation, lane.dither_strength)
    cutoff = strategy.cutoff(x, y, strength, seed)
    return left.value if fraction < cutoff else right.value


def _normalized(value: str, lane_id: GradientLane) -> str:
    if lane_id in _COLOR_LANES:
        return normalize_hex(value) or value
    return value


def sample_property(t: float, lane: GradientProperty, lane_id: GradientLane = GradientLane.CHARACTER,
                    x: int = 0, y: int = 0, seed: int = 0) -> Optional[str]:
    """
    Resolve a lane's value at position t

    - t outside the stop range (or a single stop) → nearest end stop
    - CONSTANT → left stop value
    - color lane + LINEAR → RGB blend of the bracketing stops
    - character lane, or any dithered kind → left when the local fraction
      is below the (dithered) cutoff, else right
    - color values come out as lowercase '#rrggbb' ("transparent" as is)

    Args:
        t: Gradient position (0-1)
        lane: The lane to sample
        lane_id: Which lane it is (character lanes never blend)
        x, y: Cell position, used by ordered/noise dithering
        seed: Noise dithering seed

    Returns:
        Value string, or None if the lane has no stops
    """
    stops = lane.stops
    if not stops:
        return None
    if len(stops) == 1 or t <= stops[0].position:
        return _normalized(stops[0].value, lane_id)
    if t >= stops[-1].position:
        return _normalized(stops[-1].value, lane_id)

    left, right = _bracketing_stops(t, stops)
    span = right.position - left.position
    fraction = (t - left.position) / span if span > 0 else 0.0

    if lane.interpolation == InterpolationKind.CONSTANT:
        return _normalized(left.value, lane_id)

    if lane_id in _COLOR_LANES and lane.interpolation == InterpolationKind.LINEAR:
        blended = interpolate_hex(left.value, right.value, fraction)
        if blended is not None:
            return blended

    return _normalized(_discrete_choice(fraction, left, right, lane, x, y, seed), lane_id)


# ============================================================
# Fill
# ============================================================

def calculate_gradient_cell(definition: GradientDefinition, x: int, y: int,
                            base: Cell = EMPTY_CELL) -> Optional[Cell]:
    """
    Gradient cell for one position

    Disabled (or stop-less) lanes keep the base cell's attribute.

    Returns:
        New Cell, or None when the gradient has no direction
    """
    t = gradient_position(x, y, definition.start_point, definition.end_point, definition.type)
    if t is None:
        return None

    seed = definition.dither_seed
    changes = {}
    if definition.character.is_active:
        changes["char"] = sample_property(t, definition.character, GradientLane.CHARACTER, x, y, seed)
    if definition.text_color.is_active:
        changes["color"] = sample_property(t, definition.text_color, GradientLane.TEXT_COLOR, x, y, seed)
    if definition.background_color.is_active:
        changes["bg_color"] = sample_property(t, definition.background_color, GradientLane.BACKGROUND_COLOR, x, y, seed)

    return base.with_values(**changes) if changes else base


def apply_gradient(definition: GradientDefinition, area: Iterable[str], cells: CellGrid) -> CellGrid:
    """
    Apply a gradient to the cells of an area

    Args:
        definition: Gradient snapshot
        area: "x,y" keys to fill (see find_fill_area)
        cells: Current grid (not modified)

    Returns:
        New grid. Cells that come out blank are removed. When the
        gradient is degenerate (start == end) an unchanged copy is returned.
    """
    result = dict(cells)
    if definition.is_degenerate:
        log.debug("Gradient has zero length, nothing filled",
                  start=definition.start_point, end=definition.end_point)
        return result

    for key in area:
        x, y = parse_cell_key(key)
        new_cell = calculate_gradient_cell(definition, x, y, cells.get(key, EMPTY_CELL))
        if new_cell is None:
            continue
        if new_cell.is_empty():
            result.pop(key, None)
        else:
            result[key] = new_cell

    return result


def fill_gradient(definition: GradientDefinition, criteria: FillCriteria, cells: CellGrid,
                  width: int, height: int) -> GradientResult:
    """
    Gradient fill tool: find the area around the start point, then fill it

    Returns:
        GradientResult(cells, area, affected_cells, elapsed_ms); empty area when the
        gradient is degenerate or the start point is off the canvas
    """
    started = time.perf_counter()

    if definition.is_degenerate:
        area = set()
    else:
        area = find_fill_area(cells, width, height, definition.start_point, criteria)

    new_cells = apply_gradient(definition, area, cells) if area else dict(cells)
    affected = sum(1 for key in area if new_cells.get(key) != cells.get(key))
    elapsed_ms = (time.perf_counter() - started) * 1000

    log.debug(f"Gradient fill ({definition.type.name.lower()})",
              cells=len(area), affected=affected, elapsed_ms=f"{elapsed_ms:.2f}")
    return GradientResult(cells=new_cells, area=area, affected_cells=affected, elapsed_ms=elapsed_ms)
