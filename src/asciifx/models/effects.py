"""
Effect settings models

Immutable settings snapshots. The UI edits its own copy and hands a snapshot
to the engine at apply time; the engine never keeps a reference.

Each settings class carries its EffectKind, so a settings object alone is
enough to dispatch (see engine.effect_engine).
"""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import ClassVar, Mapping, Tuple, Union

from asciifx.models.enums import ColorRangeType, EffectKind


def _frozen_mapping(values: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(values))


@dataclass(frozen=True)
class ColorRange:
    """Color targeting for tone effects"""
    type: ColorRangeType = ColorRangeType.ALL
    custom_colors: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "custom_colors", tuple(self.custom_colors))

    @classmethod
    def custom(cls, *colors: str) -> 'ColorRange':
        return cls(type=ColorRangeType.CUSTOM, custom_colors=colors)


@dataclass(frozen=True)
class LevelsSettings:
    """
    Levels (tone curve) settings

    shadows_input / highlights_input: input clip points (0-255)
    midtones_input: gamma (0.1-3.0, 1.0 = linear)
    output_min / output_max: output range (0-255)
    """
    KIND: ClassVar[EffectKind] = EffectKind.LEVELS

    shadows_input: int = 0
    midtones_input: float = 1.0
    highlights_input: int = 255
    output_min: int = 0
    output_max: int = 255
    color_range: ColorRange = field(default_factory=ColorRange)

    @property
    def kind(self) -> EffectKind:
        return self.KIND

    def with_values(self, **changes) -> 'LevelsSettings':
        return replace(self, **changes)


@dataclass(frozen=True)
class HueSaturationSettings:
    """
    Hue/Saturation/Lightness shift

    hue: -180..180 degrees, saturation / lightness: -100..100 percent points
    """
    KIND: ClassVar[EffectKind] = EffectKind.HUE_SATURATION

    hue: int = 0
    saturation: int = 0
    lightness: int = 0
    color_range: ColorRange = field(default_factory=ColorRange)

    @property
    def kind(self) -> EffectKind:
        return self.KIND

    def with_values(self, **changes) -> 'HueSaturationSettings':
        return replace(self, **changes)


@dataclass(frozen=True)
class RemapColorsSettings:
    """Source color → target color substitution"""
    KIND: ClassVar[EffectKind] = EffectKind.REMAP_COLORS

    color_mappings: Mapping[str, str] = field(default_factory=dict)
    match_exact: bool = True
    include_transparent: bool = False

    def __post_init__(self):
        object.__setattr__(self, "color_mappings", _frozen_mapping(self.color_mappings))

    @property
    def kind(self) -> EffectKind:
        return self.KIND

    def with_values(self, **changes) -> 'RemapColorsSettings':
        return replace(self, **changes)


@dataclass(frozen=True)
class RemapCharactersSettings:
    """Source glyph → target glyph substitution (exact match only)"""
    KIND: ClassVar[EffectKind] = EffectKind.REMAP_CHARACTERS

    character_mappings: Mapping[str, str] = field(default_factory=dict)
    preserve_spacing: bool = True

    def __post_init__(self):
        object.__setattr__(self, "character_mappings", _frozen_mapping(self.character_mappings))

    @property
    def kind(self) -> EffectKind:
        return self.KIND

    def with_values(self, **changes) -> 'RemapCharactersSettings':
        return replace(self, **changes)


EffectSettings = Union[
    LevelsSettings,
    HueSaturationSettings,
    RemapColorsSettings,
    RemapCharactersSettings,
]

SETTINGS_TYPES = {
    LevelsSettings.KIND: LevelsSettings,
    HueSaturationSettings.KIND: HueSaturationSettings,
    RemapColorsSettings.KIND: RemapColorsSettings,
    RemapCharactersSettings.KIND: RemapCharactersSettings,
}
