"""
Domain models - cells, frames, effect settings, gradients, results
"""

from .enums import (
    ColorRangeType,
    EffectKind,
    GradientLane,
    GradientType,
    HandleType,
    InterpolationKind,
    LogCategory,
    LogLevel,
)
from .errors import AsciiFxError, ConfigError, UnknownEffectError
from .cell import EMPTY_CELL, TRANSPARENT, Cell, CellGrid, Frame, cell_key, get_cell, parse_cell_key
from .effects import (
    ColorRange,
    EffectSettings,
    HueSaturationSettings,
    LevelsSettings,
    RemapCharactersSettings,
    RemapColorsSettings,
)
from .gradient import (
    MAX_STOPS,
    MIN_STOPS,
    GradientDefinition,
    GradientProperty,
    GradientStop,
    GridPoint,
    two_stop_lane,
)
from .results import BatchResult, EffectResult, FrameError, GradientResult

__all__ = [
    'ColorRangeType',
    'EffectKind',
    'GradientLane',
    'GradientType',
    'HandleType',
    'InterpolationKind',
    'LogCategory',
    'LogLevel',
    'AsciiFxError',
    'ConfigError',
    'UnknownEffectError',
    'EMPTY_CELL',
    'TRANSPARENT',
    'Cell',
    'CellGrid',
    'Frame',
    'cell_key',
    'get_cell',
    'parse_cell_key',
    'ColorRange',
    'EffectSettings',
    'HueSaturationSettings',
    'LevelsSettings',
    'RemapCharactersSettings',
    'RemapColorsSettings',
    'MAX_STOPS',
    'MIN_STOPS',
    'GradientDefinition',
    'GradientProperty',
    'GradientStop',
    'GridPoint',
    'two_stop_lane',
    'BatchResult',
    'EffectResult',
    'FrameError',
    'GradientResult',
]
