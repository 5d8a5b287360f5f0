"""Engine exceptions (raised at configuration and registry boundaries only)"""


class AsciiFxError(Exception):
    """Base class for all engine errors"""


class ConfigError(AsciiFxError):
    """Configuration file missing, unreadable or invalid"""


class UnknownEffectError(AsciiFxError):
    """Settings object does not belong to a registered effect"""
