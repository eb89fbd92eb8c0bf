"""Physical and magical damage formulas."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any


@dataclass
class DamageResult:
    damage: float = 0.0
    was_critical: bool = False


def _source(rng: Any) -> Any:
    return rng if rng is not None else random


def apply_damage_variance(base_damage: float, rng: Any = None) -> float:
    """Scale damage by a random factor between 0.85 and 1.15."""
    return base_damage * _source(rng).uniform(0.85, 1.15)


def calculate_physical_damage(caster: Any, target: Any, ad_ratio: float, rng: Any = None) -> DamageResult:
    """Strength-based damage that may crit (0.5% per agility, x1.5)."""
    rng = _source(rng)
    caster_attrs = caster.attributes
    target_attrs = target.attributes
    result = DamageResult()

    base = caster_attrs.strength * ad_ratio
    if rng.uniform(0.0, 100.0) < caster_attrs.agility * 0.5:
        result.was_critical = True
        base *= 1.5

    final = max(1.0, base - target_attrs.defence)
    if target_attrs.is_defending:
        final *= 0.3

    result.damage = apply_damage_variance(final, rng)
    return result


def calculate_magical_damage(caster: Any, target: Any, ap_ratio: float, rng: Any = None) -> DamageResult:
    """Intelligence-based damage; never critical."""
    rng = _source(rng)
    caster_attrs = caster.attributes
    target_attrs = target.attributes

    final = max(1.0, caster_attrs.intelligence * ap_ratio - target_attrs.magic_resistance)
    if target_attrs.is_defending:
        final *= 0.15

    return DamageResult(damage=apply_damage_variance(final, rng))