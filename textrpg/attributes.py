"""Character statistics and levelling."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class AttributeSet:
    """Base stats, derived maxima, current resources and experience."""

    strength: float = 5.0
    agility: float = 5.0
    intelligence: float = 5.0
    defence: float = 5.0
    magic_resistance: float = 5.0
    base_hp: float = 50.0
    base_mp: float = 30.0
    level: int = 1
    experience: int = 0
    exp_to_next_level: int = 100
    owner_name: str = ""
    is_defending: bool = False
    max_hp: float = field(init=False, default=0.0)
    max_mp: float = field(init=False, default=0.0)
    hp: float = field(init=False, default=0.0)
    mp: float = field(init=False, default=0.0)

    def __post_init__(self) -> None:
        self.update_derived_attributes()
        self.hp = self.max_hp
        self.mp = self.max_mp

    def update_derived_attributes(self) -> None:
        """Recompute maxima: 2 HP per strength, 5 MP per intelligence."""
        self.max_hp = self.base_hp + self.strength * 2.0
        self.max_mp = self.base_mp + self.intelligence * 5.0

    def add_experience(self, amount: int) -> None:
        """Gain experience, levelling up as many times as it covers."""
        self.experience += amount
        print(f"{self.owner_name}이(가) 경험치 {amount}을(를) 획득했습니다!")
        while self.experience >= self.exp_to_next_level:
            self.experience -= self.exp_to_next_level
            self._level_up()

    def _level_up(self) -> None:
        self.level += 1
        print("★★★★★ 레벨 업! ★★★★★")
        print(f"{self.owner_name}의 레벨이 {self.level}이(가) 되었습니다!")
        self.exp_to_next_level = int(self.exp_to_next_level * 1.5)
        self.strength += 2.0
        self.agility += 2.0
        self.intelligence += 1.0
        self.base_hp += 10.0
        self.update_derived_attributes()
        self.hp = self.max_hp
        self.mp = self.max_mp