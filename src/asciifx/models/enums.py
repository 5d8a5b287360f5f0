"""
Enums for the cell transformation engine
"""

from enum import Enum, auto


class EffectKind(Enum):
    """Effect identifiers (closed set, one settings type per kind)"""
    LEVELS = auto()
    HUE_SATURATION = auto()
    REMAP_COLORS = auto()
    REMAP_CHARACTERS = auto()


class ColorRangeType(Enum):
    """
    Which colors of a cell an effect may touch

    ALL: foreground and background
    TEXT: foreground only
    BACKGROUND: background only
    CUSTOM: only colors listed in ColorRange.custom_colors (exact match)
    """
    ALL = auto()
    TEXT = auto()
    BACKGROUND = auto()
    CUSTOM = auto()


class GradientType(Enum):
    """Gradient geometry"""
    LINEAR = auto()    # Projection onto start → end line
    RADIAL = auto()    # Distance from start, normalized by |end - start|


class InterpolationKind(Enum):
    """How a lane resolves values between two stops"""
    CONSTANT = auto()   # Left stop value
    LINEAR = auto()     # RGB blend for colors, 0.5 cutoff for characters
    BAYER_2X2 = auto()  # Ordered dither, 2x2 matrix
    BAYER_4X4 = auto()  # Ordered dither, 4x4 matrix
    NOISE = auto()      # Seeded pseudo-random dither


class GradientLane(Enum):
    """The three gradient channels"""
    CHARACTER = auto()
    TEXT_COLOR = auto()
    BACKGROUND_COLOR = auto()


class HandleType(Enum):
    """Interactive gradient handles"""
    START = auto()
    END = auto()
    STOP = auto()


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()      # Configuration loading, validation
    COLOR = auto()       # Color conversions
    EFFECT = auto()      # Effect application
    GRADIENT = auto()    # Gradient sampling and fills
    AREA = auto()        # Fill area matching
    BATCH = auto()       # Timeline-wide application
    GEOMETRY = auto()    # Pixel/grid mapping, handles
    ANALYSIS = auto()    # Canvas analysis

    GENERAL = auto()    # Default general category
