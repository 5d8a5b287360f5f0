"""
Effect Engine

Single-frame entry point: resolves the effect class for a settings snapshot
and applies it to one grid.
"""

from typing import Dict, Type

from asciifx.effects import (
    BaseEffect,
    HueSaturationEffect,
    LevelsEffect,
    RemapCharactersEffect,
    RemapColorsEffect,
)
from asciifx.models.cell import CellGrid
from asciifx.models.effects import SETTINGS_TYPES, EffectSettings
from asciifx.models.enums import EffectKind, LogCategory
from asciifx.models.errors import UnknownEffectError
from asciifx.models.results import EffectResult
from asciifx.utils.logger import get_logger

log = get_logger().for_category(LogCategory.EFFECT)


def _build_effect_registry() -> Dict[EffectKind, Type[BaseEffect]]:
    """Build effect registry and check it covers every EffectKind"""
    class_map = {
        EffectKind.LEVELS: LevelsEffect,
        EffectKind.HUE_SATURATION: HueSaturationEffect,
        EffectKind.REMAP_COLORS: RemapColorsEffect,
        EffectKind.REMAP_CHARACTERS: RemapCharactersEffect,
    }

    missing = set(EffectKind) - set(class_map)
    if missing:
        raise RuntimeError(f"Effects not registered: {sorted(k.name for k in missing)}")
    return class_map


EFFECTS: Dict[EffectKind, Type[BaseEffect]] = _build_effect_registry()


def create_effect(settings: EffectSettings) -> BaseEffect:
    """
    Build the effect instance for a settings snapshot

    Raises:
        UnknownEffectError: If settings is not one of the four settings types
    """
    kind = getattr(settings, "kind", None)
    if kind not in EFFECTS or not isinstance(settings, SETTINGS_TYPES[kind]):
        raise UnknownEffectError(f"Not an effect settings object: {type(settings).__name__}")
    return EFFECTS[kind](settings)


def apply_effect(settings: EffectSettings, cells: CellGrid) -> EffectResult:
    """
    Apply one effect to one grid

    The input grid is not modified; the caller swaps the returned grid into
    its data model. Exceptions from the effect propagate to the caller.

    Returns:
        EffectResult(cells, affected_cells, elapsed_ms)
    """
    effect = create_effect(settings)
    result = effect.apply(cells)

    log.debug(
        f"Applied {effect.KIND.name}",
        cells=len(cells),
        affected=result.affected_cells,
        elapsed_ms=f"{result.elapsed_ms:.2f}",
    )
    return result
