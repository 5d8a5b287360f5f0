"""
Gradient package - fill area matching, lane sampling and dithering
"""

from .area_matcher import FillCriteria, cell_matches, find_fill_area
from .dithering import DEFAULT_STRATEGY, DitherStrategy, effective_strength, strategy_for
from .engine import (
    apply_gradient,
    calculate_gradient_cell,
    fill_gradient,
    gradient_position,
    sample_property,
)

__all__ = [
    'FillCriteria',
    'cell_matches',
    'find_fill_area',
    'DEFAULT_STRATEGY',
    'DitherStrategy',
    'effective_strength',
    'strategy_for',
    'apply_gradient',
    'calculate_gradient_cell',
    'fill_gradient',
    'gradient_position',
    'sample_property',
]
