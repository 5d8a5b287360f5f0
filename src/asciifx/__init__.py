"""
asciifx - effect and gradient engine for ASCII-art canvases

Canvases are sparse grids of cells (glyph + text color + background color)
keyed "x,y". All operations are pure: they return new grids and never
mutate their inputs.

Example:
    from asciifx import LevelsSettings, apply_effect

    result = apply_effect(LevelsSettings(output_min=20), cells)
    result.cells, result.affected_cells
"""

from asciifx.models import (
    Cell,
    ColorRange,
    Frame,
    GradientDefinition,
    GradientProperty,
    GradientStop,
    GridPoint,
    HueSaturationSettings,
    LevelsSettings,
    RemapCharactersSettings,
    RemapColorsSettings,
)
from asciifx.engine import BatchRunner, apply_effect, apply_effect_to_frames, apply_gradient_to_frames
from asciifx.gradient import FillCriteria, apply_gradient, fill_gradient, find_fill_area
from asciifx.geometry import CanvasMetrics, grid_to_pixel, pixel_to_grid, pixel_to_grid_centered
from asciifx.analysis import analyze_canvas
from asciifx.managers import ConfigManager

__version__ = "1.0.0"

__all__ = [
    'Cell',
    'ColorRange',
    'Frame',
    'GradientDefinition',
    'GradientProperty',
    'GradientStop',
    'GridPoint',
    'HueSaturationSettings',
    'LevelsSettings',
    'RemapCharactersSettings',
    'RemapColorsSettings',
    'BatchRunner',
    'apply_effect',
    'apply_effect_to_frames',
    'apply_gradient_to_frames',
    'FillCriteria',
    'apply_gradient',
    'fill_gradient',
    'find_fill_area',
    'CanvasMetrics',
    'grid_to_pixel',
    'pixel_to_grid',
    'pixel_to_grid_centered',
    'analyze_canvas',
    'ConfigManager',
]
