import pytest
from pydantic import ValidationError

from asciifx.models.cell import Cell, Frame
from asciifx.models.effects import (
    ColorRange,
    HueSaturationSettings,
    LevelsSettings,
    RemapColorsSettings,
)
from asciifx.models.enums import ColorRangeType, GradientType, InterpolationKind
from asciifx.models.gradient import GradientDefinition, GridPoint
from asciifx.schemas import (
    GradientDefinitionRequest,
    HueSaturationSettingsRequest,
    LevelsSettingsRequest,
    RemapColorsSettingsRequest,
)
from asciifx.utils.serialization import Serializer


def test_levels_request_ranges():
    with pytest.raises(ValidationError):
        LevelsSettingsRequest(midtones_input=0.05)
    with pytest.raises(ValidationError):
        LevelsSettingsRequest(output_max=300)


def test_levels_request_to_settings():
    settings = LevelsSettingsRequest(
        shadows_input=10,
        color_range={"type": "CUSTOM", "custom_colors": ["#FF0000"]},
    ).to_settings()

    assert settings == LevelsSettings(shadows_input=10, color_range=ColorRange.custom("#FF0000"))


def test_hue_request_ranges():
    assert HueSaturationSettingsRequest(hue=-180).to_settings() == HueSaturationSettings(hue=-180)
    with pytest.raises(ValidationError):
        HueSaturationSettingsRequest(saturation=101)


def test_color_range_rejects_bad_colors():
    with pytest.raises(ValidationError):
        LevelsSettingsRequest(color_range={"type": "CUSTOM", "custom_colors": ["red"]})


def test_remap_colors_request_validates_targets():
    with pytest.raises(ValidationError):
        RemapColorsSettingsRequest(color_mappings={"#000000": "blue"})

    settings = RemapColorsSettingsRequest(color_mappings={"#000000": "#0000FF"}).to_settings()
    assert dict(settings.color_mappings) == {"#000000": "#0000FF"}


def test_gradient_request_enabled_lane_needs_stops():
    with pytest.raises(ValidationError):
        GradientDefinitionRequest(character={"enabled": True, "stops": []})


def test_gradient_request_too_many_stops():
    stops = [{"position": i / 10, "value": "x"} for i in range(9)]
    with pytest.raises(ValidationError):
        GradientDefinitionRequest(character={"stops": stops})


def test_gradient_request_to_definition():
    definition = GradientDefinitionRequest(
        type="RADIAL",
        start_point={"x": 1, "y": 2},
        end_point={"x": 5, "y": 2},
        text_color={"enabled": False},
        background_color={
            "interpolation": "NOISE",
            "dither_strength": 0.4,
            "stops": [{"position": 1, "value": "#000000"}, {"position": 0, "value": "#FFFFFF"}],
        },
    ).to_definition()

    assert definition.type == GradientType.RADIAL
    assert definition.start_point == GridPoint(1, 2)
    assert not definition.text_color.enabled
    assert definition.background_color.interpolation == InterpolationKind.NOISE
    assert [s.value for s in definition.background_color.stops] == ["#FFFFFF", "#000000"]
    assert definition.character == GradientDefinition().character


# ===== Serializer =====

def test_settings_roundtrip():
    settings = RemapColorsSettings(color_mappings={"#000000": "#FFFFFF"}, match_exact=False)

    data = Serializer.settings_to_dict(settings)

    assert data == {
        "kind": "REMAP_COLORS",
        "params": {
            "color_mappings": {"#000000": "#FFFFFF"},
            "match_exact": False,
            "include_transparent": False,
        },
    }
    assert Serializer.dict_to_settings(data) == settings


def test_levels_settings_dict_has_color_range():
    data = Serializer.settings_to_dict(LevelsSettings(color_range=ColorRange(type=ColorRangeType.TEXT)))

    assert data["params"]["color_range"] == {"type": "TEXT", "custom_colors": []}
    assert Serializer.dict_to_settings(data).color_range.type == ColorRangeType.TEXT


def test_dict_to_settings_unknown_kind():
    with pytest.raises(ValueError):
        Serializer.dict_to_settings({"kind": "BLUR", "params": {}})


def test_gradient_roundtrip():
    definition = GradientDefinition(start_point=GridPoint(0, 0), end_point=GridPoint(3, 4), dither_seed=9)

    assert Serializer.dict_to_gradient(Serializer.gradient_to_dict(definition)) == definition


def test_frame_serialization():
    frame = Frame(data={"0,0": Cell(char="x", color="#123456", bg_color="transparent")}, duration=80, name="a")

    data = Serializer.frame_to_dict(frame)

    assert data["data"]["0,0"] == {"char": "x", "color": "#123456", "bgColor": "transparent"}
    assert Serializer.dict_to_frame(data) == frame
