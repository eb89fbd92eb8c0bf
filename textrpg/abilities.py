"""Abilities that characters can activate in battle."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from textrpg.damage import calculate_physical_damage


class GameplayAbility(ABC):
    """A named skill with physical (AD) and magical (AP) scaling ratios."""

    def __init__(self, name: str, ad_ratio: float = 0.0, ap_ratio: float = 0.0) -> None:
        self.name = name
        self.ad_ratio = ad_ratio
        self.ap_ratio = ap_ratio

    @abstractmethod
    def activate(self, caster: Any, target: Any) -> str:
        """Perform the ability and return the message describing it."""


class BasicAttack(GameplayAbility):
    """A plain physical strike."""

    def __init__(self, rng: Any = None) -> None:
        super().__init__("기본 공격", 1.2, 0.0)
        self.rng = rng

    def activate(self, caster: Any, target: Any) -> str:
        if caster is None or target is None:
            return ""

        result = calculate_physical_damage(caster, target, self.ad_ratio, self.rng)
        target_attrs = target.attributes
        target_attrs.hp -= result.damage

        message = f"▶ {caster.name}의 {self.name}!\n"
        if result.was_critical:
            message += "   ★★ CRITICAL HIT! ★★\n"
        message += f"   {target.name}에게 {int(result.damage)}의 물리 데미지!"

        if target_attrs.hp <= 0:
            target_attrs.hp = 0
            message += f"\n   {target.name}을(를) 쓰러트렸다!"
        return message