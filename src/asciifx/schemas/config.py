"""
Engine config schema - validates the merged YAML configuration
"""

from pydantic import BaseModel, Field, ValidationError, field_validator
from typing import Any, Dict, Literal, Optional

from asciifx.models.enums import EffectKind
from asciifx.schemas.effects import SETTINGS_REQUESTS
from asciifx.schemas.gradient import GradientDefinitionRequest


class LoggingConfigSchema(BaseModel):
    level: Literal["DEBUG", "INFO", "WARN", "ERROR"] = "INFO"
    use_colors: bool = True


class EngineConfigSchema(BaseModel):
    """
    Top-level config

    effects: map of effect kind name → settings fields, e.g.
        effects:
          LEVELS:
            midtones_input: 1.2
    """
    logging: LoggingConfigSchema = Field(default_factory=LoggingConfigSchema)
    dither_seed: int = Field(0, description="Default seed for NOISE dithering")
    effects: Dict[str, Dict[str, Any]] = Field(default_factory=dict)
    gradient: Optional[GradientDefinitionRequest] = None

    @field_validator("effects")
    @classmethod
    def validate_effects(cls, effects: Dict[str, Dict[str, Any]]) -> Dict[str, Dict[str, Any]]:
        unknown = [name for name in effects if name not in EffectKind.__members__]
        if unknown:
            raise ValueError(f"Unknown effect kinds: {unknown}")
        for name, params in effects.items():
            try:
                SETTINGS_REQUESTS[EffectKind[name]](**params)
            except ValidationError as e:
                raise ValueError(f"{name}: {e}") from e
        return effects
