"""
Serialization utilities - Central enum and model serialization

Provides bidirectional conversion between:
- Enums ↔ Strings (EffectKind, InterpolationKind, GradientType, ...)
- Domain models ↔ Dicts (settings, gradient definitions, cells, frames)

Inbound dicts are validated through the pydantic schemas before they become
domain objects.
"""

from dataclasses import fields
from enum import Enum
from typing import Any, Dict, Optional, Type, TypeVar

from asciifx.models.cell import Cell, CellGrid, Frame
from asciifx.models.effects import ColorRange, EffectSettings
from asciifx.models.enums import EffectKind, LogCategory
from asciifx.models.gradient import GradientDefinition, GradientProperty
from asciifx.schemas.effects import SETTINGS_REQUESTS
from asciifx.schemas.gradient import GradientDefinitionRequest
from asciifx.utils.logger import get_logger

log = get_logger().for_category(LogCategory.GENERAL)

T = TypeVar('T', bound=Enum)


class Serializer:
    """Central enum and model serialization"""

    # ========================================================================
    # ENUM SERIALIZATION
    # ========================================================================

    @staticmethod
    def enum_to_str(value: Optional[Enum]) -> Optional[str]:
        """Convert any enum to string name"""
        return value.name if value else None

    @staticmethod
    def str_to_enum(value: str, enum_type: Type[T]) -> T:
        """Convert string to enum, raise ValueError if invalid"""
        try:
            return enum_type[value]
        except KeyError:
            raise ValueError(f"Invalid {enum_type.__name__}: {value}")

    # ========================================================================
    # EFFECT SETTINGS
    # ========================================================================

    @staticmethod
    def color_range_to_dict(color_range: ColorRange) -> Dict[str, Any]:
        return {
            "type": color_range.type.name,
            "custom_colors": list(color_range.custom_colors),
        }

    @staticmethod
    def settings_to_dict(settings: EffectSettings) -> Dict[str, Any]:
        """
        Serialize effect settings

        Returns:
            {"kind": "LEVELS", "params": {...}}
        """
        params: Dict[str, Any] = {}
        for f in fields(settings):
            value = getattr(settings, f.name)
            if isinstance(value, ColorRange):
                value = Serializer.color_range_to_dict(value)
            elif f.name in ("color_mappings", "character_mappings"):
                value = dict(value)
            params[f.name] = value
        return {"kind": settings.kind.name, "params": params}

    @staticmethod
    def dict_to_settings(data: Dict[str, Any]) -> EffectSettings:
        """
        Deserialize {"kind": ..., "params": {...}} to effect settings

        Raises:
            ValueError: Unknown kind
            pydantic.ValidationError: Params out of range
        """
        kind = Serializer.str_to_enum(data["kind"], EffectKind)
        try:
            return SETTINGS_REQUESTS[kind](**data.get("params", {})).to_settings()
        except (TypeError, ValueError) as e:
            log.error(f"Failed to deserialize {kind.name} settings: {e}")
            raise

    # ========================================================================
    # GRADIENT
    # ========================================================================

    @staticmethod
    def property_to_dict(prop: GradientProperty) -> Dict[str, Any]:
        return {
            "enabled": prop.enabled,
            "stops": [{"position": s.position, "value": s.value} for s in prop.stops],
            "interpolation": prop.interpolation.name,
            "dither_strength": prop.dither_strength,
        }

    @staticmethod
    def gradient_to_dict(definition: GradientDefinition) -> Dict[str, Any]:
        return {
            "type": definition.type.name,
            "start_point": {"x": definition.start_point.x, "y": definition.start_point.y},
            "end_point": {"x": definition.end_point.x, "y": definition.end_point.y},
            "character": Serializer.property_to_dict(definition.character),
            "text_color": Serializer.property_to_dict(definition.text_color),
            "background_color": Serializer.property_to_dict(definition.background_color),
            "dither_seed": definition.dither_seed,
        }

    @staticmethod
    def dict_to_gradient(data: Dict[str, Any]) -> GradientDefinition:
        return GradientDefinitionRequest(**data).to_definition()

    # ========================================================================
    # CELLS / FRAMES
    # ========================================================================

    @staticmethod
    def cell_to_dict(cell: Cell) -> Dict[str, str]:
        return {"char": cell.char, "color": cell.color, "bgColor": cell.bg_color}

    @staticmethod
    def dict_to_cell(data: Dict[str, str]) -> Cell:
        return Cell(
            char=data.get("char", " "),
            color=data.get("color", "#FFFFFF"),
            bg_color=data.get("bgColor", data.get("bg_color", Cell().bg_color)),
        )

    @staticmethod
    def grid_to_dict(cells: CellGrid) -> Dict[str, Dict[str, str]]:
        return {key: Serializer.cell_to_dict(cell) for key, cell in cells.items()}

    @staticmethod
    def dict_to_grid(data: Dict[str, Dict[str, str]]) -> CellGrid:
        return {key: Serializer.dict_to_cell(cell) for key, cell in data.items()}

    @staticmethod
    def frame_to_dict(frame: Frame) -> Dict[str, Any]:
        return {
            "name": frame.name,
            "duration": frame.duration,
            "data": Serializer.grid_to_dict(frame.data),
        }

    @staticmethod
    def dict_to_frame(data: Dict[str, Any]) -> Frame:
        return Frame(
            data=Serializer.dict_to_grid(data.get("data", {})),
            duration=data.get("duration", 100),
            name=data.get("name"),
        )
