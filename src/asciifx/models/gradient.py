"""
Gradient models

GradientDefinition = three independent lanes (character, text color,
background color) + geometry (type, start/end point).

All models are frozen. Stop edits (add/remove/update) return a new lane with
stops re-sorted by position, so an index obtained before an edit is only
valid until that edit. Requests the UI should never send (removing the last
stop, exceeding MAX_STOPS) are silent no-ops returning the same lane.
"""

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from asciifx.models.cell import TRANSPARENT
from asciifx.models.enums import GradientLane, GradientType, InterpolationKind

MAX_STOPS = 8
MIN_STOPS = 1

# Value given to a stop created by add_stop(), per lane
DEFAULT_STOP_VALUES = {
    GradientLane.CHARACTER: "*",
    GradientLane.TEXT_COLOR: "#808080",
    GradientLane.BACKGROUND_COLOR: "#C0C0C0",
}


@dataclass(frozen=True)
class GridPoint:
    """Integer grid coordinate"""
    x: int
    y: int


@dataclass(frozen=True)
class GradientStop:
    position: float
    value: str


def _sorted_stops(stops) -> Tuple[GradientStop, ...]:
    # sorted() is stable: stops sharing a position keep their relative order
    return tuple(sorted(stops, key=lambda stop: stop.position))


@dataclass(frozen=True)
class GradientProperty:
    """
    One gradient lane

    Attributes:
        enabled: Lane participates in the fill
        stops: Stops sorted by position (1..MAX_STOPS while enabled)
        interpolation: How values between two stops resolve
        dither_strength: 0-1, how much dithering perturbs the stop boundary
        default_value: Value for stops created by add_stop()
    """
    enabled: bool = True
    stops: Tuple[GradientStop, ...] = ()
    interpolation: InterpolationKind = InterpolationKind.LINEAR
    dither_strength: float = 0.0
    default_value: str = "*"

    def __post_init__(self):
        object.__setattr__(self, "stops", _sorted_stops(self.stops))
        object.__setattr__(self, "dither_strength", max(0.0, min(1.0, float(self.dither_strength))))

    @property
    def is_active(self) -> bool:
        """Enabled and has at least one stop"""
        return self.enabled and len(self.stops) > 0

    # ------------------------------------------------------------
    # Stop editing
    # ------------------------------------------------------------

    def add_stop(self, value: Optional[str] = None) -> 'GradientProperty':
        """
        Insert a stop at the middle of the largest gap between neighbours

        Ties go to the first gap found. With fewer than two stops there is
        no gap and the stop lands at 0.5.

        Returns:
            New lane, or self when MAX_STOPS is already reached
        """
        if len(self.stops) >= MAX_STOPS:
            return self

        new_position = 0.5
        max_gap = 0.0
        for left, right in zip(self.stops, self.stops[1:]):
            gap = right.position - left.position
            if gap > max_gap:
                max_gap = gap
                new_position = (left.position + right.position) / 2

        new_stop = GradientStop(position=new_position, value=value if value is not None else self.default_value)
        return replace(self, stops=self.stops + (new_stop,))

    def remove_stop(self, index: int) -> 'GradientProperty':
        """
        Remove the stop at index

        Returns:
            New lane, or self when only MIN_STOPS remain or index is invalid
        """
        if len(self.stops) <= MIN_STOPS or not 0 <= index < len(self.stops):
            return self
        return replace(self, stops=self.stops[:index] + self.stops[index + 1:])

    def update_stop(self, index: int, position: Optional[float] = None,
                    value: Optional[str] = None) -> 'GradientProperty':
        """
        Change a stop's position and/or value, then re-sort

        Position is clamped into [0, 1].
        """
        if not 0 <= index < len(self.stops):
            return self

        stop = self.stops[index]
        if position is not None:
            stop = replace(stop, position=max(0.0, min(1.0, float(position))))
        if value is not None:
            stop = replace(stop, value=value)

        stops = list(self.stops)
        stops[index] = stop
        return replace(self, stops=tuple(stops))

    def with_values(self, **changes) -> 'GradientProperty':
        return replace(self, **changes)


def two_stop_lane(lane: GradientLane, first: str, last: str, enabled: bool = True,
                  interpolation: InterpolationKind = InterpolationKind.LINEAR) -> GradientProperty:
    """Lane with stops at 0 and 1 (no stops when disabled)"""
    stops = (GradientStop(0.0, first), GradientStop(1.0, last)) if enabled else ()
    return GradientProperty(
        enabled=enabled,
        stops=stops,
        interpolation=interpolation,
        default_value=DEFAULT_STOP_VALUES[lane],
    )


@dataclass(frozen=True)
class GradientDefinition:
    """
    Complete gradient: three lanes + geometry

    start_point / end_point are grid coordinates. A definition whose start
    equals its end has no direction and fills nothing.
    """
    character: GradientProperty = field(
        default_factory=lambda: two_stop_lane(GradientLane.CHARACTER, "#", "@"))
    text_color: GradientProperty = field(
        default_factory=lambda: two_stop_lane(GradientLane.TEXT_COLOR, "#FFFFFF", "#FFFFFF"))
    background_color: GradientProperty = field(
        default_factory=lambda: two_stop_lane(GradientLane.BACKGROUND_COLOR, "#808080", "#FFFFFF"))
    type: GradientType = GradientType.LINEAR
    start_point: GridPoint = GridPoint(0, 0)
    end_point: GridPoint = GridPoint(0, 0)
    dither_seed: int = 0

    @classmethod
    def from_tool_values(cls, char: str, color: str, bg_color: str, **kwargs) -> 'GradientDefinition':
        """
        Default gradient seeded from the active drawing tool values

        Each lane runs from the tool value to its fixed end value; a
        transparent background starts from mid grey instead.
        """
        bg_start = "#808080" if bg_color == TRANSPARENT else bg_color
        return cls(
            character=two_stop_lane(GradientLane.CHARACTER, char, "@"),
            text_color=two_stop_lane(GradientLane.TEXT_COLOR, color, "#FFFFFF"),
            background_color=two_stop_lane(GradientLane.BACKGROUND_COLOR, bg_start, "#FFFFFF"),
            **kwargs
        )

    def lane(self, lane: GradientLane) -> GradientProperty:
        if lane == GradientLane.CHARACTER:
            return self.character
        elif lane == GradientLane.TEXT_COLOR:
            return self.text_color
        else:
            return self.background_color

    def with_lane(self, lane: GradientLane, prop: GradientProperty) -> 'GradientDefinition':
        """Copy with one lane replaced"""
        if lane == GradientLane.CHARACTER:
            return replace(self, character=prop)
        elif lane == GradientLane.TEXT_COLOR:
            return replace(self, text_color=prop)
        else:
            return replace(self, background_color=prop)

    def with_points(self, start: GridPoint, end: GridPoint) -> 'GradientDefinition':
        return replace(self, start_point=start, end_point=end)

    def enabled_lanes(self) -> Tuple[GradientLane, ...]:
        """Enabled lanes in display order (character, text, background)"""
        return tuple(lane for lane in GradientLane if self.lane(lane).enabled)

    @property
    def is_degenerate(self) -> bool:
        """True when start and end coincide"""
        return self.start_point == self.end_point
