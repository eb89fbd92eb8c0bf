"""The game object: owns the world, switches screens and starts battles."""

from __future__ import annotations

import argparse
import random
from typing import Any, Sequence

from textrpg.abilities import BasicAttack
from textrpg.actors import Enemy, Player
from textrpg.battle import BattleManager
from textrpg.console import Console
from textrpg.field import Field
from textrpg.items import HealthPotion
from textrpg.states import (
    FieldState,
    GameState,
    GameStateID,
    InventoryState,
    MainMenuState,
)

_FRAME_DELAY_MS = 7
_START_MAP = 0
_START_POSITION = (13, 2)


class Game:
    """Holds the player, the field and every screen, and drives the main loop."""

    def __init__(self, console: Console | None = None, rng: Any = None) -> None:
        self.console = console if console is not None else Console()
        self.rng = rng
        self.console.show_cursor(False)
        self.running = True

        self.player = Player("용사")
        self.field = Field()
        self.player.ability_system.grant_ability(BasicAttack(rng))
        self.player.inventory.add_item(HealthPotion())

        self.field.load_map(_START_MAP)
        self.player.set_position(*_START_POSITION)

        self.states: dict[GameStateID, GameState] = {
            GameStateID.MAIN_MENU: MainMenuState(self),
            GameStateID.FIELD: FieldState(self),
            GameStateID.INVENTORY: InventoryState(self),
        }
        self.current_state: GameState = self.states[GameStateID.MAIN_MENU]

    def run(self) -> None:
        """Draw, read input and update the current screen until the game exits."""
        while self.running:
            state = self.current_state
            state.draw()
            state.process_input()
            state.update()
            self.console.pause(_FRAME_DELAY_MS)

    def change_state(self, state_id: GameStateID) -> None:
        """Switch screens; EXIT_GAME stops the loop and unknown ids are ignored."""
        if state_id is GameStateID.EXIT_GAME:
            self.running = False
            return
        if state_id in self.states:
            self.current_state = self.states[state_id]

    def start_battle(self, enemy: Enemy) -> None:
        """Arm the enemy with a basic attack and fight it to the end."""
        enemy.ability_system.grant_ability(BasicAttack(self.rng))
        BattleManager([self.player], [enemy], self.console).run()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game in the terminal."""
    parser = argparse.ArgumentParser(prog="textrpg", description="A small console role-playing game.")
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible randomness")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed) if args.seed is not None else None
    game = Game(rng=rng)
    try:
        game.run()
    finally:
        game.console.show_cursor(True)
    return 0