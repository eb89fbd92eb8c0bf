"""Characters that live on the field and fight in battles."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any, ClassVar

from textrpg.ability_system import AbilitySystemComponent
from textrpg.attributes import AttributeSet
from textrpg.items import Inventory


class Actor:
    """A named character with an ability system and a field position."""

    _stats: ClassVar[dict[str, Any]] = {}

    def __init__(self, name: str) -> None:
        self.name = name
        self.ability_system = AbilitySystemComponent(AttributeSet(**self._stats))
        self.x = 0
        self.y = 0

    @property
    def attributes(self) -> AttributeSet:
        return self.ability_system.attribute_set

    def set_position(self, x: int, y: int) -> None:
        self.x = x
        self.y = y


class Enemy(Actor):
    """A hostile actor whose attributes carry its name."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.attributes.owner_name = name


class Goblin(Enemy):
    _stats = dict(
        strength=7.0, agility=10.0, intelligence=2.0, defence=5.0,
        magic_resistance=2.0, base_hp=30.0, base_mp=10.0,
    )

    def __init__(self) -> None:
        super().__init__("고블린")


class Boss(Enemy):
    _stats = dict(
        strength=55.0, agility=55.0, intelligence=30.0, defence=10.0,
        magic_resistance=10.0, base_hp=75.0, base_mp=55.0, level=10,
    )

    def __init__(self) -> None:
        super().__init__("보스")


class Direction(Enum):
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


class Player(Actor):
    """The hero: carries an inventory and faces a direction on the field."""

    _stats = dict(
        strength=10.0, agility=30.0, intelligence=7.0, defence=10.0,
        magic_resistance=5.0, base_hp=100.0, base_mp=50.0,
    )

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.attributes.owner_name = name
        self.inventory = Inventory()
        self.x = 5
        self.y = 5
        self.direction = Direction.DOWN