"""
Config Manager

Main configuration manager with include system support.
Loads modular YAML files, validates them and initializes sub-managers.
"""

import yaml
from dataclasses import replace
from pathlib import Path
from typing import Dict, List, Optional, Union

from asciifx.managers.effect_defaults_manager import EffectDefaultsManager
from asciifx.models.enums import LogCategory, LogLevel
from asciifx.models.errors import ConfigError
from asciifx.models.gradient import GradientDefinition
from asciifx.schemas.config import EngineConfigSchema
from asciifx.utils.logger import configure_logger, get_logger

log = get_logger().for_category(LogCategory.CONFIG)

FACTORY_DEFAULTS_PATH = Path(__file__).parent.parent / "config" / "factory_defaults.yaml"


class ConfigManager:
    """
    Main configuration manager with include system support

    Loads a config YAML and processes its include: directive to load modular
    YAML files. Falls back to the packaged factory defaults when the config
    is missing, unreadable or invalid.

    Example:
        config = ConfigManager("asciifx.yaml")
        config.load()

        levels = config.effect_defaults.get(EffectKind.LEVELS)
        gradient = config.gradient_defaults
        seed = config.dither_seed
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None,
                 defaults_path: Union[str, Path] = FACTORY_DEFAULTS_PATH,
                 apply_logging: bool = True):
        """
        Args:
            config_path: Path to the main config YAML (None = factory defaults only)
            defaults_path: Path to factory defaults fallback
            apply_logging: Push the 'logging' section into the logger singleton
        """
        self.config_path = Path(config_path) if config_path is not None else None
        self.factory_defaults_path = Path(defaults_path)
        self.apply_logging = apply_logging
        self.data: Dict = {}
        self.schema = EngineConfigSchema()

        # Initialized in load()
        self.effect_defaults: EffectDefaultsManager
        self.gradient_defaults: GradientDefinition
        self.dither_seed: int = 0

    def load(self) -> Dict:
        """
        Load YAML configuration with include system support

        Process:
        1. Load main config
        2. If it has 'include:' list, load and merge those files
        3. Validate the merged data
        4. Fallback to factory defaults on any failure
        5. Initialize sub-managers

        Returns:
            Merged config data dict

        Raises:
            ConfigError: Factory defaults themselves failed to load
        """
        if self.config_path is None:
            log.info("No config given, using factory defaults")
            self._load_factory_defaults()
        else:
            try:
                self.data = self._read_config(self.config_path)
                self.schema = EngineConfigSchema(**self.data)
            except Exception as ex:
                log.error(f"Failed to load {self.config_path.name}", error=str(ex), error_type=type(ex).__name__)
                log.warn("Falling back to factory defaults")
                self._load_factory_defaults()

        self._initialize_managers()
        return self.data

    def _read_config(self, path: Path) -> Dict:
        with open(path, "r", encoding="utf-8") as f:
            main_config = yaml.safe_load(f) or {}

        if not isinstance(main_config, dict):
            raise ConfigError(f"{path.name}: top level must be a mapping")

        if 'include' in main_config:
            log.info("Using include-based configuration")
            merged = self._load_with_includes(main_config['include'], path.parent)
            # Keys in the main file win over included ones
            merged.update({k: v for k, v in main_config.items() if k != 'include'})
            return merged

        log.info("Using monolithic configuration")
        return main_config

    def _load_with_includes(self, include_list: List[str], config_dir: Path) -> Dict:
        """
        Load and merge multiple YAML files from include list

        Args:
            include_list: List of filenames to load (e.g., ["effects.yaml", "gradient.yaml"])
            config_dir: Directory containing config files

        Returns:
            Merged config dict
        """
        merged = {}

        for filename in include_list:
            filepath = config_dir / filename
            try:
                with open(filepath, 'r', encoding='utf-8') as f:
                    file_data = yaml.safe_load(f)
                    if file_data:
                        merged.update(file_data)
                        log.info(f"Loaded {filename}", keys=str(list(file_data.keys())))
            except FileNotFoundError:
                log.error(f"File not found: {filename}")
                raise
            except Exception as ex:
                log.error(f"Error loading {filename}", error=str(ex))
                raise

        log.info("Config merge complete", total_keys=len(merged), keys=str(list(merged.keys())[:10]))
        return merged

    def _load_factory_defaults(self):
        try:
            with open(self.factory_defaults_path, "r", encoding="utf-8") as f:
                self.data = yaml.safe_load(f) or {}
            self.schema = EngineConfigSchema(**self.data)
        except Exception as ex:
            raise ConfigError(f"Factory defaults unusable: {ex}") from ex

    def _initialize_managers(self):
        """
        Initialize sub-managers with validated config

        Creates:
        - EffectDefaultsManager: default settings per effect kind
        - gradient_defaults: default GradientDefinition
        """
        if self.apply_logging:
            configure_logger(
                min_level=LogLevel[self.schema.logging.level],
                use_colors=self.schema.logging.use_colors,
            )

        self.dither_seed = self.schema.dither_seed
        self.effect_defaults = EffectDefaultsManager(self.schema.effects)

        if self.schema.gradient is not None:
            gradient = self.schema.gradient.to_definition()
        else:
            gradient = GradientDefinition()
        if gradient.dither_seed == 0:
            gradient = replace(gradient, dither_seed=self.dither_seed)
        self.gradient_defaults = gradient

        log.info(
            "Config initialized",
            effects=len(self.effect_defaults.get_all()),
            dither_seed=self.dither_seed,
        )
