"""Owner of a character's attributes and granted abilities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from textrpg.attributes import AttributeSet


class AttributeOperation(Enum):
    ADD = auto()


@dataclass
class GameplayEffect:
    """A change to apply to a target's attributes."""

    target: AttributeSet | None
    operation: AttributeOperation
    magnitude: float


class AbilitySystemComponent:
    """Holds one attribute set and the list of granted abilities."""

    def __init__(self, attribute_set: AttributeSet | None = None) -> None:
        self.attribute_set = attribute_set if attribute_set is not None else AttributeSet()
        self.granted_abilities: list[Any] = []

    def grant_ability(self, ability: Any) -> None:
        if ability is not None:
            self.granted_abilities.append(ability)

    def apply_gameplay_effect(self, effect: GameplayEffect | None) -> None:
        """Apply an effect to its target; additions to HP stop at max HP."""
        if effect is None or effect.target is None:
            return
        if effect.operation is AttributeOperation.ADD:
            target = effect.target
            target.hp = min(target.hp + effect.magnitude, target.max_hp)