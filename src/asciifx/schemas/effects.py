"""
Effect schemas - Pydantic models for effect settings coming from outside
(YAML config, persisted sessions, host applications)

Each request validates ranges and converts to the frozen domain settings
via to_settings().
"""

from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Dict, List, Literal

from asciifx.models.cell import TRANSPARENT
from asciifx.models.effects import (
    ColorRange,
    HueSaturationSettings,
    LevelsSettings,
    RemapCharactersSettings,
    RemapColorsSettings,
)
from asciifx.models.enums import ColorRangeType, EffectKind
from asciifx.utils.colors import hex_to_rgb


def _check_color(value: str) -> str:
    if value != TRANSPARENT and hex_to_rgb(value) is None:
        raise ValueError(f"Invalid color: {value!r} (expected #RRGGBB or 'transparent')")
    return value


class ColorRangeRequest(BaseModel):
    """Which colors a tone effect may touch"""
    type: Literal["ALL", "TEXT", "BACKGROUND", "CUSTOM"] = Field(
        "ALL",
        description="ALL, TEXT (foreground only), BACKGROUND (background only) or CUSTOM (listed colors)"
    )
    custom_colors: List[str] = Field(
        default_factory=list,
        description="Colors affected when type is CUSTOM"
    )

    @field_validator("custom_colors")
    @classmethod
    def validate_colors(cls, colors: List[str]) -> List[str]:
        return [_check_color(c) for c in colors]

    def to_color_range(self) -> ColorRange:
        return ColorRange(type=ColorRangeType[self.type], custom_colors=tuple(self.custom_colors))


class LevelsSettingsRequest(BaseModel):
    """Levels (tone curve) parameters"""
    shadows_input: int = Field(0, ge=0, le=255, description="Input black point")
    midtones_input: float = Field(1.0, ge=0.1, le=3.0, description="Gamma, 1.0 = linear")
    highlights_input: int = Field(255, ge=0, le=255, description="Input white point")
    output_min: int = Field(0, ge=0, le=255, description="Output black point")
    output_max: int = Field(255, ge=0, le=255, description="Output white point")
    color_range: ColorRangeRequest = Field(default_factory=ColorRangeRequest)

    def to_settings(self) -> LevelsSettings:
        return LevelsSettings(
            shadows_input=self.shadows_input,
            midtones_input=self.midtones_input,
            highlights_input=self.highlights_input,
            output_min=self.output_min,
            output_max=self.output_max,
            color_range=self.color_range.to_color_range(),
        )


class HueSaturationSettingsRequest(BaseModel):
    """Hue / saturation / lightness shift"""
    hue: int = Field(0, ge=-180, le=180, description="Hue rotation in degrees")
    saturation: int = Field(0, ge=-100, le=100, description="Saturation shift in percent points")
    lightness: int = Field(0, ge=-100, le=100, description="Lightness shift in percent points")
    color_range: ColorRangeRequest = Field(default_factory=ColorRangeRequest)

    def to_settings(self) -> HueSaturationSettings:
        return HueSaturationSettings(
            hue=self.hue,
            saturation=self.saturation,
            lightness=self.lightness,
            color_range=self.color_range.to_color_range(),
        )


class RemapColorsSettingsRequest(BaseModel):
    """Color substitution table"""
    color_mappings: Dict[str, str] = Field(
        default_factory=dict,
        description="Source color → target color"
    )
    match_exact: bool = Field(True, description="Disable case and '#' tolerant matching")
    include_transparent: bool = Field(False, description="Allow remapping a transparent background")

    @model_validator(mode="after")
    def validate_targets(self):
        for target in self.color_mappings.values():
            _check_color(target)
        return self

    def to_settings(self) -> RemapColorsSettings:
        return RemapColorsSettings(
            color_mappings=self.color_mappings,
            match_exact=self.match_exact,
            include_transparent=self.include_transparent,
        )


class RemapCharactersSettingsRequest(BaseModel):
    """Glyph substitution table"""
    character_mappings: Dict[str, str] = Field(
        default_factory=dict,
        description="Source glyph → target glyph"
    )
    preserve_spacing: bool = Field(True, description="Never remap space cells")

    def to_settings(self) -> RemapCharactersSettings:
        return RemapCharactersSettings(
            character_mappings=self.character_mappings,
            preserve_spacing=self.preserve_spacing,
        )


SETTINGS_REQUESTS = {
    EffectKind.LEVELS: LevelsSettingsRequest,
    EffectKind.HUE_SATURATION: HueSaturationSettingsRequest,
    EffectKind.REMAP_COLORS: RemapColorsSettingsRequest,
    EffectKind.REMAP_CHARACTERS: RemapCharactersSettingsRequest,
}
