"""Usable items and the inventory that holds them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterator

from textrpg.ability_system import AttributeOperation, GameplayEffect


class ItemBase(ABC):
    """An item with a name and a description."""

    def __init__(self, name: str, description: str) -> None:
        self.name = name
        self.description = description

    @abstractmethod
    def use(self, user: Any) -> None:
        """Apply the item to the given character."""


class HealthPotion(ItemBase):
    """Restores 50 HP."""

    def __init__(self) -> None:
        super().__init__("체력 포션", "HP를 50만큼 회복합니다.")

    def use(self, user: Any) -> None:
        if user is None:
            return
        asc = user.ability_system
        asc.apply_gameplay_effect(
            GameplayEffect(asc.attribute_set, AttributeOperation.ADD, 50.0)
        )
        print(f"\n{self.name}을(를) 사용했습니다. {self.description}")


class Inventory:
    """An ordered bag of items."""

    def __init__(self) -> None:
        self._items: list[ItemBase] = []

    @property
    def items(self) -> tuple[ItemBase, ...]:
        return tuple(self._items)

    def add_item(self, item: ItemBase | None) -> None:
        if item is not None:
            self._items.append(item)

    def remove_item(self, index: int) -> None:
        """Drop the item at index; an index out of range is ignored."""
        if 0 <= index < len(self._items):
            del self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ItemBase]:
        return iter(self._items)

    def __getitem__(self, index: int) -> ItemBase:
        return self._items[index]