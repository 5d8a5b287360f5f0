"""
Geometry package - pixel/grid mapping for interactive handlers
"""

from .coordinate_mapper import (
    CanvasMetrics,
    HandleHit,
    grid_to_pixel,
    hit_test_handles,
    pixel_to_grid,
    pixel_to_grid_centered,
    project_to_stop_position,
    stop_handle_position,
)

__all__ = [
    'CanvasMetrics',
    'HandleHit',
    'grid_to_pixel',
    'hit_test_handles',
    'pixel_to_grid',
    'pixel_to_grid_centered',
    'project_to_stop_position',
    'stop_handle_position',
]
