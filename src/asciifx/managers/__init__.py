"""
Managers for configuration
"""

from .config_manager import ConfigManager
from .effect_defaults_manager import EffectDefaultsManager

__all__ = ['ConfigManager', 'EffectDefaultsManager']
