import pytest

from asciifx.gradient.dithering import (
    BAYER_2X2,
    BAYER_4X4,
    DEFAULT_STRATEGY,
    DitherStrategy,
    effective_strength,
    strategy_for,
)
from asciifx.models.enums import InterpolationKind


def test_bayer_tables_are_permutations():
    assert sorted(v for row in BAYER_2X2 for v in row) == list(range(4))
    assert sorted(v for row in BAYER_4X4 for v in row) == list(range(16))


def test_bayer_2x2_thresholds():
    s = DitherStrategy.BAYER_2X2
    assert [s.threshold(x, 0) for x in range(4)] == [0.0, 0.5, 0.0, 0.5]
    assert [s.threshold(x, 1) for x in range(2)] == [0.75, 0.25]


def test_bayer_4x4_tiles():
    s = DitherStrategy.BAYER_4X4
    assert s.threshold(1, 0) == 8 / 16
    assert s.threshold(5, 4) == s.threshold(1, 0)


def test_noise_threshold_reproducible_and_in_range():
    s = DitherStrategy.NOISE
    values = [s.threshold(x, y, seed=3) for x in range(8) for y in range(8)]

    assert values == [s.threshold(x, y, seed=3) for x in range(8) for y in range(8)]
    assert all(0 <= v < 1 for v in values)
    assert values != [s.threshold(x, y, seed=4) for x in range(8) for y in range(8)]


def test_cutoff_neutral_without_strength():
    for strategy in DitherStrategy:
        assert strategy.cutoff(3, 1, 0.0) == 0.5


@pytest.mark.parametrize("strength", [0.25, 0.5, 1.0])
def test_cutoff_moves_with_strength(strength):
    # threshold at (0,1) in 2x2 is 0.75
    assert DitherStrategy.BAYER_2X2.cutoff(0, 1, strength) == pytest.approx(0.5 + 0.25 * strength)


def test_strategy_for_interpolation():
    assert strategy_for(InterpolationKind.BAYER_2X2) == DitherStrategy.BAYER_2X2
    assert strategy_for(InterpolationKind.BAYER_4X4) == DitherStrategy.BAYER_4X4
    assert strategy_for(InterpolationKind.NOISE) == DitherStrategy.NOISE
    assert strategy_for(InterpolationKind.LINEAR) == DitherStrategy.NONE
    assert strategy_for(InterpolationKind.CONSTANT) == DitherStrategy.NONE


def test_strength_turns_on_default_strategy():
    assert strategy_for(InterpolationKind.LINEAR, 0.5) == DEFAULT_STRATEGY
    assert strategy_for(InterpolationKind.NOISE, 0.5) == DitherStrategy.NOISE


@pytest.mark.parametrize("kind, strength, expected", [
    (InterpolationKind.BAYER_2X2, 0.0, 1.0),
    (InterpolationKind.NOISE, 0.3, 0.3),
    (InterpolationKind.LINEAR, 0.0, 0.0),
    (InterpolationKind.LINEAR, 0.7, 0.7),
])
def test_effective_strength(kind, strength, expected):
    assert effective_strength(kind, strength) == expected
