"""Screens the game switches between: main menu, field and inventory.

Each state is bound to a game object that provides ``console``, ``player``,
``field``, ``rng``, ``change_state(state_id)`` and ``start_battle(enemy)``.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Any

from textrpg.actors import Boss, Direction, Goblin
from textrpg.console import Key
from textrpg.field import TileType
from textrpg.npc import NPCType


class GameStateID(Enum):
    NONE = auto()
    MAIN_MENU = auto()
    FIELD = auto()
    INVENTORY = auto()
    BATTLE = auto()
    EXIT_GAME = auto()


class GameState(ABC):
    """One screen of the game: reads input, updates, draws."""

    def __init__(self, game: Any) -> None:
        self.game = game

    @abstractmethod
    def process_input(self) -> None:
        """Read a key and react to it."""

    def update(self) -> None:
        """Advance the state by one frame; most states have nothing to do."""

    @abstractmethod
    def draw(self) -> None:
        """Render the screen."""


_TITLE = (
    "████████╗███████╗██╗  ██╗████████╗     ██████╗  ██████╗   ██████╗ ",
    "╚══██╔══╝██╔════╝╚██╗██╔╝╚══██╔══╝     ██╔══██╗ ██╔══██╗ ██╔════╝ ",
    "   ██║   █████╗   ╚███╔╝    ██║        ██████╔╝ ██████╔╝ ██║  ███╗",
    "   ██║   ██╔══╝   ██╔██╗    ██║        ██╔══██╗ ██╔══╝   ██║   ██║",
    "   ██║   ███████╗██╔╝╚██╗   ██║        ██║  ██╗ ██║      ╚██████╔╝",
    "   ╚═╝   ╚══════╝╚═╝  ╚═╝   ╚═╝        ╚═╝  ╚═╝ ╚═╝       ╚═════╝ ",
)

_MENU_OPTIONS = ("새 게임", "불러오기", "설정", "크레딧", "게임 종료")


class MainMenuState(GameState):
    """The title screen with its five-entry menu."""

    def __init__(self, game: Any) -> None:
        super().__init__(game)
        self.cursor = 0

    def process_input(self) -> None:
        key = self.game.console.read_key()
        last = len(_MENU_OPTIONS) - 1
        if key is Key.UP:
            self.cursor = max(self.cursor - 1, 0)
        elif key is Key.DOWN:
            self.cursor = min(self.cursor + 1, last)
        elif key is Key.ENTER:
            if self.cursor == 0:
                self.game.change_state(GameStateID.FIELD)
            elif self.cursor == last:
                self.game.change_state(GameStateID.EXIT_GAME)

    def draw(self) -> None:
        console = self.game.console
        console.clear()
        for row, line in enumerate(_TITLE, start=2):
            console.move_to(5, row)
            console.write(line)

        box_x, start_y = 30, 10
        for index, option in enumerate(_MENU_OPTIONS):
            top = start_y + index * 3
            padding = " " * (10 - len(option))
            selected = index == self.cursor
            console.move_to(box_x, top)
            console.write("┏━━━━━━━━━━━━━━┓" if selected else "┌──────────────┐")
            console.move_to(box_x, top + 1)
            if selected:
                console.write(f"┃   {option}{padding} ◀ ")
            else:
                console.write(f"│   {option}{padding}   ")
            console.move_to(box_x, top + 2)
            console.write("┗━━━━━━━━━━━━━━┛" if selected else "└──────────────┘")

        console.move_to(22, start_y + len(_MENU_OPTIONS) * 3 + 2)
        console.write("[ ↑ / ↓ 방향키로 이동 | Enter: 선택 ]")


_STEPS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_ARROWS = {
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}

_ENCOUNTER_PERCENT = 10


class FieldState(GameState):
    """Walking around the map, talking to NPCs and stumbling into fights."""

    def __init__(self, game: Any) -> None:
        super().__init__(game)

    def process_input(self) -> None:
        key = self.game.console.read_key()
        if key in ("i", "I"):
            self.game.change_state(GameStateID.INVENTORY)
        elif key in ("z", "Z"):
            self._interact()
        elif key in _ARROWS:
            self._move(_ARROWS[key])

    def _interact(self) -> None:
        player = self.game.player
        dx, dy = _STEPS[player.direction]
        npc = self.game.field.npc_at(player.x + dx, player.y + dy)
        if npc is None:
            return
        if npc.npc_type is NPCType.BOSS:
            self.game.start_battle(Boss())
        else:
            npc.interact(player, self.game.console)

    def _move(self, direction: Direction) -> None:
        player = self.game.player
        field = self.game.field
        player.direction = direction
        dx, dy = _STEPS[direction]
        new_x, new_y = player.x + dx, player.y + dy
        if not field.is_walkable(new_x, new_y):
            return

        player.set_position(new_x, new_y)
        portal = field.portal_at(new_x, new_y)
        if portal is not None:
            field.load_map(portal.dest_map_id)
            player.set_position(portal.dest_x, portal.dest_y)
        elif field.tile_type(new_x, new_y) is TileType.BUSH:
            rng = self.game.rng if self.game.rng is not None else random
            if rng.randint(1, 100) <= _ENCOUNTER_PERCENT:
                self.game.start_battle(Goblin())

    def draw(self) -> None:
        self.game.field.draw(self.game.player, self.game.console)


class InventoryState(GameState):
    """A list of the player's items; Enter uses one, Escape leaves."""

    def __init__(self, game: Any) -> None:
        super().__init__(game)
        self.cursor = 0

    def process_input(self) -> None:
        console = self.game.console
        key = console.read_key()
        player = self.game.player
        inventory = player.inventory

        if key is Key.UP:
            self.cursor = max(self.cursor - 1, 0)
        elif key is Key.DOWN:
            if len(inventory):
                self.cursor = min(self.cursor + 1, len(inventory) - 1)
        elif key is Key.ENTER:
            if len(inventory) and self.cursor < len(inventory):
                inventory[self.cursor].use(player)
                inventory.remove_item(self.cursor)
                if self.cursor >= len(inventory) and self.cursor > 0:
                    self.cursor -= 1
                console.pause(1500)
        elif key is Key.ESCAPE:
            self.game.change_state(GameStateID.FIELD)

    def draw(self) -> None:
        console = self.game.console
        console.clear()
        console.move_to(2, 1)
        console.write("--- 인벤토리 (ESC: 나가기) ---")

        inventory = self.game.player.inventory
        if not len(inventory):
            console.move_to(2, 3)
            console.write("가방이 비어있습니다.")
            return
        for row, item in enumerate(inventory):
            console.move_to(2, 3 + row)
            marker = "▶ " if row == self.cursor else "  "
            console.write(f"{marker}{item.name} : {item.description}")