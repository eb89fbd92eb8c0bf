"""Non-player characters found on the field."""

from __future__ import annotations

from enum import Enum, auto

from textrpg.actors import Actor, Player
from textrpg.console import Console


class NPCType(Enum):
    HEALER = auto()
    SHOP_ITEM = auto()
    SHOP_SKILL = auto()
    BOSS = auto()


_MESSAGES = {
    NPCType.HEALER: "지친 용사여, 상처를 치료해 드리겠습니다.",
    NPCType.SHOP_ITEM: "필요한 물건이 있나? 한번 둘러보게.",
    NPCType.SHOP_SKILL: "새로운 기술을 가르쳐주지.",
    NPCType.BOSS: "BOSS",
}


class NPC(Actor):
    """A character standing at a fixed spot who reacts when talked to."""

    def __init__(self, name: str, npc_type: NPCType, x: int, y: int) -> None:
        super().__init__(name)
        self.npc_type = npc_type
        self.x = x
        self.y = y

    def interaction_message(self) -> str:
        """The greeting this kind of NPC gives."""
        return _MESSAGES.get(self.npc_type, "…….")

    def interact(self, player: Player, console: Console) -> None:
        """Talk to the player through dialogue boxes; healers restore HP and MP."""
        if self.npc_type is NPCType.HEALER:
            console.draw_dialogue_box("지친 용사여, 상처를 치료해 드리겠습니다.")
            attrs = player.attributes
            attrs.hp = attrs.max_hp
            attrs.mp = attrs.max_mp
            console.draw_dialogue_box("당신의 모든 상처와 피로가 회복되었습니다.")
        elif self.npc_type is NPCType.SHOP_ITEM:
            console.draw_dialogue_box("필요한 물건이 있나? (상점 기능 미구현)")
        elif self.npc_type is NPCType.SHOP_SKILL:
            console.draw_dialogue_box("새로운 기술을 가르쳐주지. (상점 기능 미구현)")