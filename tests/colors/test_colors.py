import pytest

from asciifx.utils.colors import (
    hex_to_hsl,
    hex_to_hsv,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    hsv_to_hex,
    hsv_to_rgb,
    interpolate_hex,
    normalize_hex,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_hsv,
    round_half_up,
)


def hue_distance(a, b):
    d = abs(a - b) % 360
    return min(d, 360 - d)


@pytest.mark.parametrize("text,expected", [
    ("#FF8000", (255, 128, 0)),
    ("ff8000", (255, 128, 0)),
    ("#aBcDeF", (171, 205, 239)),
    ("#000000", (0, 0, 0)),
])
def test_hex_to_rgb_parses(text, expected):
    assert hex_to_rgb(text) == expected


@pytest.mark.parametrize("text", ["red", "#FFF", "#GG0000", "", "transparent", "#FF00001", None])
def test_hex_to_rgb_malformed_returns_none(text):
    assert hex_to_rgb(text) is None


def test_rgb_to_hex_rounds_and_clamps():
    assert rgb_to_hex(255, 128, 0) == "#ff8000"
    assert rgb_to_hex(300, -4, 12.5) == "#ff000d"


def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(127.5) == 128
    assert round_half_up(2.4999) == 2


def test_normalize_hex():
    assert normalize_hex("FFAA00") == "#ffaa00"
    assert normalize_hex("nope") is None


def test_hex_roundtrip_is_lossless():
    for value in ("#000000", "#ffffff", "#123456", "#abcdef", "#7f7f7f"):
        assert rgb_to_hex(*hex_to_rgb(value)) == value


@pytest.mark.parametrize("rgb,hsl", [
    ((255, 0, 0), (0, 100, 50)),
    ((0, 255, 0), (120, 100, 50)),
    ((0, 0, 255), (240, 100, 50)),
    ((255, 255, 255), (0, 0, 100)),
    ((0, 0, 0), (0, 0, 0)),
    ((128, 128, 128), (0, 0, 50)),
])
def test_rgb_to_hsl_known_values(rgb, hsl):
    assert rgb_to_hsl(*rgb) == hsl


def test_hsl_to_rgb_primaries():
    assert hsl_to_rgb(0, 100, 50) == (255, 0, 0)
    assert hsl_to_rgb(120, 100, 50) == (0, 255, 0)
    assert hsl_to_rgb(240, 100, 50) == (0, 0, 255)
    assert hsl_to_rgb(0, 0, 50) == (128, 128, 128)


@pytest.mark.parametrize("hue", range(0, 360, 30))
@pytest.mark.parametrize("saturation", [50, 100])
@pytest.mark.parametrize("lightness", [40, 50, 60])
def test_hsl_roundtrip_within_one_unit(hue, saturation, lightness):
    h, s, l = hex_to_hsl(hsl_to_hex(hue, saturation, lightness))

    assert hue_distance(h, hue) <= 1
    assert abs(s - saturation) <= 1
    assert abs(l - lightness) <= 1


def test_hsl_hue_wraps():
    assert hsl_to_rgb(360, 100, 50) == hsl_to_rgb(0, 100, 50)
    assert hsl_to_rgb(-120, 100, 50) == hsl_to_rgb(240, 100, 50)


def test_hex_to_hsl_malformed():
    assert hex_to_hsl("nope") is None


@pytest.mark.parametrize("rgb,hsv", [
    ((255, 0, 0), (0, 100, 100)),
    ((0, 128, 0), (120, 100, 50)),
    ((255, 255, 255), (0, 0, 100)),
    ((0, 0, 0), (0, 0, 0)),
])
def test_rgb_to_hsv_known_values(rgb, hsv):
    assert rgb_to_hsv(*rgb) == hsv


def test_hsv_to_rgb_primaries():
    assert hsv_to_rgb(0, 100, 100) == (255, 0, 0)
    assert hsv_to_rgb(120, 100, 100) == (0, 255, 0)
    assert hsv_to_rgb(240, 100, 100) == (0, 0, 255)
    assert hsv_to_rgb(0, 0, 100) == (255, 255, 255)


# low value/saturation loses precision in 8-bit RGB
@pytest.mark.parametrize("hue", range(0, 360, 30))
@pytest.mark.parametrize("saturation", [80, 100])
@pytest.mark.parametrize("value", [60, 80, 100])
def test_hsv_roundtrip_within_one_unit(hue, saturation, value):
    h, s, v = hex_to_hsv(hsv_to_hex(hue, saturation, value))

    assert hue_distance(h, hue) <= 1
    assert abs(s - saturation) <= 1
    assert abs(v - value) <= 1


def test_hex_to_hsv():
    assert hex_to_hsv("#ff0000") == (0, 100, 100)
    assert hex_to_hsv("bad") is None


def test_interpolate_hex():
    assert interpolate_hex("#000000", "#ffffff", 0) == "#000000"
    assert interpolate_hex("#000000", "#ffffff", 1) == "#ffffff"
    assert interpolate_hex("#000000", "#ffffff", 0.5) == "#808080"
    assert interpolate_hex("#000000", "oops", 0.5) is None
