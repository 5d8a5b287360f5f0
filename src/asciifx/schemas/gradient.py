"""
Gradient schemas - Pydantic models for gradient definitions
"""

from pydantic import BaseModel, Field, model_validator
from typing import List, Literal, Optional

from asciifx.models.enums import GradientLane, GradientType, InterpolationKind
from asciifx.models.gradient import (
    DEFAULT_STOP_VALUES,
    MAX_STOPS,
    GradientDefinition,
    GradientProperty,
    GradientStop,
    GridPoint,
)

InterpolationName = Literal["CONSTANT", "LINEAR", "BAYER_2X2", "BAYER_4X4", "NOISE"]


class GradientStopRequest(BaseModel):
    position: float = Field(ge=0, le=1, description="Position along the gradient 0-1")
    value: str = Field(min_length=1, description="Glyph or #RRGGBB color")


class GradientPropertyRequest(BaseModel):
    """One gradient lane"""
    enabled: bool = True
    stops: List[GradientStopRequest] = Field(default_factory=list, max_length=MAX_STOPS)
    interpolation: InterpolationName = "LINEAR"
    dither_strength: float = Field(0.0, ge=0, le=1)

    @model_validator(mode="after")
    def validate_stops(self):
        if self.enabled and not self.stops:
            raise ValueError("enabled lane needs at least one stop")
        return self

    def to_property(self, lane: GradientLane) -> GradientProperty:
        return GradientProperty(
            enabled=self.enabled,
            stops=tuple(GradientStop(s.position, s.value) for s in self.stops),
            interpolation=InterpolationKind[self.interpolation],
            dither_strength=self.dither_strength,
            default_value=DEFAULT_STOP_VALUES[lane],
        )


class GridPointRequest(BaseModel):
    x: int = Field(ge=0)
    y: int = Field(ge=0)

    def to_point(self) -> GridPoint:
        return GridPoint(self.x, self.y)


class GradientDefinitionRequest(BaseModel):
    """
    Complete gradient definition

    Lanes left out keep the editor defaults.
    """
    type: Literal["LINEAR", "RADIAL"] = "LINEAR"
    start_point: GridPointRequest = Field(default_factory=lambda: GridPointRequest(x=0, y=0))
    end_point: GridPointRequest = Field(default_factory=lambda: GridPointRequest(x=0, y=0))
    character: Optional[GradientPropertyRequest] = None
    text_color: Optional[GradientPropertyRequest] = None
    background_color: Optional[GradientPropertyRequest] = None
    dither_seed: int = 0

    def to_definition(self) -> GradientDefinition:
        definition = GradientDefinition(
            type=GradientType[self.type],
            start_point=self.start_point.to_point(),
            end_point=self.end_point.to_point(),
            dither_seed=self.dither_seed,
        )
        lanes = (
            (GradientLane.CHARACTER, self.character),
            (GradientLane.TEXT_COLOR, self.text_color),
            (GradientLane.BACKGROUND_COLOR, self.background_color),
        )
        for lane, request in lanes:
            if request is not None:
                definition = definition.with_lane(lane, request.to_property(lane))
        return definition
