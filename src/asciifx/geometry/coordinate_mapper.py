"""
Coordinate Mapper

Pure pixel ⇄ grid geometry under zoom, pan and font-derived cell metrics,
plus hit testing and stop projection for the interactive gradient handles.

No state: every function depends only on its arguments.
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from asciifx.models.enums import GradientLane, HandleType
from asciifx.models.gradient import GradientDefinition, GridPoint

Point = Tuple[float, float]

# Interactive handle geometry (pixels)
HANDLE_HIT_RADIUS = 8
STOP_LANE_OFFSET = 20


@dataclass(frozen=True)
class CanvasMetrics:
    """
    Canvas view parameters

    cell_width / cell_height: unzoomed cell size in pixels (from the font)
    zoom: view scale factor
    pan_offset: (x, y) pan in pixels
    """
    cell_width: float
    cell_height: float
    zoom: float = 1.0
    pan_offset: Point = (0.0, 0.0)

    @property
    def effective_cell_width(self) -> float:
        return self.cell_width * self.zoom

    @property
    def effective_cell_height(self) -> float:
        return self.cell_height * self.zoom


@dataclass(frozen=True)
class HandleHit:
    """Result of hit testing the gradient overlay"""
    type: HandleType
    lane: Optional[GradientLane] = None
    stop_index: Optional[int] = None


def _floor_cell(mouse_x: float, mouse_y: float, canvas_origin: Point,
                metrics: CanvasMetrics) -> Tuple[int, int]:
    adjusted_x = mouse_x - canvas_origin[0] - metrics.pan_offset[0]
    adjusted_y = mouse_y - canvas_origin[1] - metrics.pan_offset[1]
    return (
        math.floor(adjusted_x / metrics.effective_cell_width),
        math.floor(adjusted_y / metrics.effective_cell_height),
    )


def pixel_to_grid(mouse_x: float, mouse_y: float, canvas_origin: Point, metrics: CanvasMetrics,
                  grid_width: int, grid_height: int) -> Tuple[int, int]:
    """
    Pointer position → grid cell

    floor((mouse - canvas_origin - pan) / (cell_size * zoom)), clamped to
    [0, dimension - 1] on each axis.

    Example:
        m = CanvasMetrics(cell_width=10, cell_height=20, zoom=2.0)
        pixel_to_grid(45, 45, (0, 0), m, 80, 24)  # (2, 1)
    """
    x, y = _floor_cell(mouse_x, mouse_y, canvas_origin, metrics)
    return (
        max(0, min(x, grid_width - 1)),
        max(0, min(y, grid_height - 1)),
    )


def pixel_to_grid_centered(mouse_x: float, mouse_y: float, canvas_origin: Point, metrics: CanvasMetrics,
                           grid_width: int, grid_height: int) -> Point:
    """
    Like pixel_to_grid but returns the cell center (+0.5), for anchor points

    Result lies in [0.5, dimension - 0.5].
    """
    x, y = _floor_cell(mouse_x, mouse_y, canvas_origin, metrics)
    return (
        max(0.5, min(x + 0.5, grid_width - 0.5)),
        max(0.5, min(y + 0.5, grid_height - 0.5)),
    )


def grid_to_pixel(x: float, y: float, metrics: CanvasMetrics, centered: bool = True) -> Point:
    """
    Grid cell → pixel position relative to the canvas origin

    With centered=True returns the cell center (where handles are drawn),
    otherwise the cell's top-left corner.
    """
    px = x * metrics.effective_cell_width + metrics.pan_offset[0]
    py = y * metrics.effective_cell_height + metrics.pan_offset[1]
    if centered:
        px += metrics.effective_cell_width / 2
        py += metrics.effective_cell_height / 2
    return px, py


# ============================================================
# Gradient handles
# ============================================================

def stop_handle_position(start_px: Point, end_px: Point, position: float, lane_index: int) -> Point:
    """
    Where a stop handle is drawn

    On the start → end line at `position`, pushed perpendicular by
    STOP_LANE_OFFSET pixels per lane so lanes don't overlap.
    """
    line_x = start_px[0] + (end_px[0] - start_px[0]) * position
    line_y = start_px[1] + (end_px[1] - start_px[1]) * position

    line_angle = math.atan2(end_px[1] - start_px[1], end_px[0] - start_px[0])
    perp_angle = line_angle + math.pi / 2
    offset = lane_index * STOP_LANE_OFFSET
    return line_x + math.cos(perp_angle) * offset, line_y + math.sin(perp_angle) * offset


def hit_test_handles(mouse_x: float, mouse_y: float, definition: GradientDefinition,
                     metrics: CanvasMetrics, has_end_point: bool = True) -> Optional[HandleHit]:
    """
    Which gradient handle (if any) is under the pointer

    Precedence: stops of enabled lanes, then the end point, then the start
    point. Coordinates are relative to the canvas origin.
    """
    start_px = grid_to_pixel(definition.start_point.x, definition.start_point.y, metrics)

    if has_end_point:
        end_px = grid_to_pixel(definition.end_point.x, definition.end_point.y, metrics)

        for lane_index, lane_id in enumerate(definition.enabled_lanes()):
            for stop_index, stop in enumerate(definition.lane(lane_id).stops):
                if stop.position < 0 or stop.position > 1:
                    continue
                stop_x, stop_y = stop_handle_position(start_px, end_px, stop.position, lane_index)
                if math.hypot(mouse_x - stop_x, mouse_y - stop_y) <= HANDLE_HIT_RADIUS:
                    return HandleHit(HandleType.STOP, lane=lane_id, stop_index=stop_index)

        if math.hypot(mouse_x - end_px[0], mouse_y - end_px[1]) <= HANDLE_HIT_RADIUS:
            return HandleHit(HandleType.END)

    if math.hypot(mouse_x - start_px[0], mouse_y - start_px[1]) <= HANDLE_HIT_RADIUS:
        return HandleHit(HandleType.START)

    return None


def project_to_stop_position(mouse_x: float, mouse_y: float, start: GridPoint, end: GridPoint,
                             metrics: CanvasMetrics) -> Optional[float]:
    """
    Stop position (0-1) for a pointer dragged along the gradient line

    Returns:
        Projection of the pointer onto start → end in pixel space, clamped
        to [0, 1]; None when the line has zero length
    """
    sx, sy = grid_to_pixel(start.x, start.y, metrics)
    ex, ey = grid_to_pixel(end.x, end.y, metrics)
    dx, dy = ex - sx, ey - sy
    length_sq = dx * dx + dy * dy
    if length_sq == 0:
        return None
    dot = (mouse_x - sx) * dx + (mouse_y - sy) * dy
    return max(0.0, min(1.0, dot / length_sq))
