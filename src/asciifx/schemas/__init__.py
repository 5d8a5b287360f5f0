"""
Boundary schemas - pydantic validation for data entering the engine
"""

from .effects import (
    SETTINGS_REQUESTS,
    ColorRangeRequest,
    HueSaturationSettingsRequest,
    LevelsSettingsRequest,
    RemapCharactersSettingsRequest,
    RemapColorsSettingsRequest,
)
from .gradient import (
    GradientDefinitionRequest,
    GradientPropertyRequest,
    GradientStopRequest,
    GridPointRequest,
)
from .config import EngineConfigSchema, LoggingConfigSchema

__all__ = [
    'SETTINGS_REQUESTS',
    'ColorRangeRequest',
    'HueSaturationSettingsRequest',
    'LevelsSettingsRequest',
    'RemapCharactersSettingsRequest',
    'RemapColorsSettingsRequest',
    'GradientDefinitionRequest',
    'GradientPropertyRequest',
    'GradientStopRequest',
    'GridPointRequest',
    'EngineConfigSchema',
    'LoggingConfigSchema',
]
