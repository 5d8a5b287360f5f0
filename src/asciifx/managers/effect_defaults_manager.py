"""
Effect Defaults Manager - default settings per effect kind

Parses the 'effects' config section (map format, keyed by EffectKind name).
Kinds missing from config get the settings class defaults.
"""

from typing import Any, Dict

from asciifx.models.effects import SETTINGS_TYPES, EffectSettings
from asciifx.models.enums import EffectKind, LogCategory
from asciifx.schemas.effects import SETTINGS_REQUESTS
from asciifx.utils.logger import get_logger

log = get_logger().for_category(LogCategory.CONFIG)


class EffectDefaultsManager:
    """
    Default effect settings

    Example:
        defaults = EffectDefaultsManager({'LEVELS': {'midtones_input': 1.2}})
        levels = defaults.get(EffectKind.LEVELS)  # LevelsSettings(midtones_input=1.2, ...)
    """

    def __init__(self, data: Dict[str, Dict[str, Any]]):
        """
        Args:
            data: {'LEVELS': {...fields...}, 'HUE_SATURATION': {...}, ...}
        """
        self.defaults: Dict[EffectKind, EffectSettings] = {}
        self._process_data(data)

    def _process_data(self, data: Dict[str, Dict[str, Any]]):
        for kind in EffectKind:
            params = data.get(kind.name)
            if params is None:
                self.defaults[kind] = SETTINGS_TYPES[kind]()
                continue
            self.defaults[kind] = SETTINGS_REQUESTS[kind](**params).to_settings()
            log.debug(f"Loaded {kind.name} defaults", params=len(params))

    def get(self, kind: EffectKind) -> EffectSettings:
        return self.defaults[kind]

    def get_all(self) -> Dict[EffectKind, EffectSettings]:
        return dict(self.defaults)
