"""
Dithering strategies for discrete gradient lanes

Each strategy yields a per-cell threshold in [0, 1). The gradient sampler
turns it into a cutoff around 0.5, scaled by the lane's dither strength.
"""

import random
from enum import Enum, auto
from typing import Dict, Tuple

from asciifx.models.enums import InterpolationKind

BAYER_2X2: Tuple[Tuple[int, ...], ...] = (
    (0, 2),
    (3, 1),
)

BAYER_4X4: Tuple[Tuple[int, ...], ...] = (
    (0, 8, 2, 10),
    (12, 4, 14, 6),
    (3, 11, 1, 9),
    (15, 7, 13, 5),
)


def _bayer_threshold(matrix, x: int, y: int) -> float:
    size = len(matrix)
    return matrix[y % size][x % size] / (size * size)


class DitherStrategy(Enum):
    """
    Closed set of dithering strategies

    NONE: neutral threshold (0.5) - plain 0.5 cutoff
    BAYER_2X2 / BAYER_4X4: ordered dithering, fixed tables indexed by
        (y mod n, x mod n)
    NOISE: pseudo-random, reproducible for the same (seed, x, y)
    """
    NONE = auto()
    BAYER_2X2 = auto()
    BAYER_4X4 = auto()
    NOISE = auto()

    def threshold(self, x: int, y: int, seed: int = 0) -> float:
        """Threshold in [0, 1) for the cell at (x, y)"""
        if self == DitherStrategy.BAYER_2X2:
            return _bayer_threshold(BAYER_2X2, x, y)
        elif self == DitherStrategy.BAYER_4X4:
            return _bayer_threshold(BAYER_4X4, x, y)
        elif self == DitherStrategy.NOISE:
            return random.Random(f"{seed}:{x}:{y}").random()
        else:
            return 0.5

    def cutoff(self, x: int, y: int, strength: float, seed: int = 0) -> float:
        """
        Fraction at which a discrete lane flips from left to right stop

        0.5 at strength 0; moves by up to ±0.5 at strength 1.
        """
        if strength <= 0:
            return 0.5
        return 0.5 + (self.threshold(x, y, seed) - 0.5) * strength


_STRATEGY_FOR_INTERPOLATION: Dict[InterpolationKind, DitherStrategy] = {
    InterpolationKind.BAYER_2X2: DitherStrategy.BAYER_2X2,
    InterpolationKind.BAYER_4X4: DitherStrategy.BAYER_4X4,
    InterpolationKind.NOISE: DitherStrategy.NOISE,
}

# Used when a plain lane is given a dither strength
DEFAULT_STRATEGY = DitherStrategy.BAYER_4X4


def strategy_for(interpolation: InterpolationKind, strength: float = 0.0) -> DitherStrategy:
    """
    Dither strategy for a discrete lane

    Dithered kinds map to their own strategy. Other kinds dither with
    DEFAULT_STRATEGY once strength > 0, and not at all otherwise.
    """
    strategy = _STRATEGY_FOR_INTERPOLATION.get(interpolation)
    if strategy is not None:
        return strategy
    return DEFAULT_STRATEGY if strength > 0 else DitherStrategy.NONE


def effective_strength(interpolation: InterpolationKind, strength: float) -> float:
    """Dithered kinds left at strength 0 dither at full strength"""
    if strength <= 0 and interpolation in _STRATEGY_FOR_INTERPOLATION:
        return 1.0
    return strength
