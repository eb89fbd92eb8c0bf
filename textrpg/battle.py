"""Turn-based battle screen between the player's party and an enemy party."""

from __future__ import annotations

from enum import Enum, auto
from typing import Sequence

from textrpg.actors import Actor
from textrpg.console import Console, Key, stat_bar

_MAIN_MENU_OPTIONS = ("공격", "방어", "아이템", "도망가기")
_ATTACK_MENU_SIZE = 5  # four skill slots plus "back"
_SKILL_SLOTS = 4


class BattleState(Enum):
    MAIN_MENU = auto()
    ATTACK_MENU = auto()
    BUSY = auto()
    BATTLE_END = auto()


class BattleManager:
    """Runs one battle: menus, the player's action, then the enemy's reply."""

    def __init__(
        self,
        player_party: Sequence[Actor],
        enemy_party: Sequence[Actor],
        console: Console | None = None,
    ) -> None:
        if not player_party or not enemy_party:
            raise ValueError("both parties need at least one member")
        self.player_party = list(player_party)
        self.enemy_party = list(enemy_party)
        self.console = console if console is not None else Console()
        self.state = BattleState.MAIN_MENU
        self.main_menu_selection = 0
        self.attack_menu_selection = 0
        self.status_message = f"야생의 {self.enemy.name}이(가) 나타났다!"

    @property
    def player(self) -> Actor:
        return self.player_party[0]

    @property
    def enemy(self) -> Actor:
        return self.enemy_party[0]

    def run(self) -> None:
        """Play the intro, then loop until the battle ends."""
        console = self.console
        console.show_cursor(False)
        self.play_intro_animation()

        self.draw()
        console.pause(1500)

        while self.state is not BattleState.BATTLE_END:
            self.draw()
            self.process_input()
            self.update()

        self.draw()
        console.pause(2000)
        console.show_cursor(True)

    def process_input(self) -> None:
        """Read one key and act on it while a menu is open."""
        if self.state not in (BattleState.MAIN_MENU, BattleState.ATTACK_MENU):
            return
        key = self.console.read_key()

        if key in (Key.UP, Key.DOWN):
            step = -1 if key is Key.UP else 1
            if self.state is BattleState.MAIN_MENU:
                size = len(_MAIN_MENU_OPTIONS)
                self.main_menu_selection = (self.main_menu_selection + step) % size
            else:
                self.attack_menu_selection = (
                    self.attack_menu_selection + step
                ) % _ATTACK_MENU_SIZE
        elif key is Key.ENTER:
            if self.state is BattleState.MAIN_MENU:
                self._choose_main_menu()
            else:
                self._choose_attack_menu()

    def _choose_main_menu(self) -> None:
        selection = self.main_menu_selection
        if selection == 0:
            self.state = BattleState.ATTACK_MENU
            self.attack_menu_selection = 0
            self.status_message = "사용할 스킬을 선택하세요."
        elif selection == 1:
            self.player.attributes.is_defending = True
            self.status_message = f"{self.player.name}이(가) 방어 태세를 갖춥니다!"
            self.state = BattleState.BUSY
        elif selection == 2:
            self.status_message = "아이템 가방이 비어있습니다!"
        elif selection == 3:
            self.status_message = "성공적으로 도망쳤다!"
            self.state = BattleState.BATTLE_END

    def _choose_attack_menu(self) -> None:
        abilities = self.player.ability_system.granted_abilities
        if self.attack_menu_selection < len(abilities):
            ability = abilities[self.attack_menu_selection]
            self.status_message = ability.activate(self.player, self.enemy)
            self.state = BattleState.BUSY
        else:
            self.state = BattleState.MAIN_MENU
            self.main_menu_selection = 0
            self.status_message = "무엇을 할까?"

    def update(self) -> None:
        """After the player acts, check for victory and let the enemy strike back."""
        if self.state is not BattleState.BUSY:
            return
        console = self.console
        self.draw()
        console.pause(2000)

        if self.enemy.attributes.hp <= 0:
            self.status_message = f"{self.enemy.name}을(를) 물리쳤다!"
            self.state = BattleState.BATTLE_END
            return

        self.player.attributes.is_defending = False
        self.status_message = f"{self.enemy.name}의 공격!"
        self.draw()
        console.pause(1000)

        enemy_abilities = self.enemy.ability_system.granted_abilities
        if enemy_abilities:
            self.status_message = enemy_abilities[0].activate(self.enemy, self.player)
        self.state = BattleState.BUSY
        self.draw()
        console.pause(2000)

        if self.player.attributes.hp <= 0:
            self.status_message = f"{self.player.name}은(는) 쓰러졌다..."
            self.state = BattleState.BATTLE_END
            return

        self.state = BattleState.MAIN_MENU
        self.status_message = "무엇을 할까?"

    def draw(self) -> None:
        """Render both status panels, the message box and the open menu."""
        console = self.console
        console.clear()
        player_attrs = self.player.attributes
        enemy_attrs = self.enemy.attributes

        console.draw_box(45, 2, 30, 6)
        console.move_to(47, 3)
        console.write(f"{self.enemy.name}      Lv. {enemy_attrs.level}")
        console.move_to(47, 4)
        console.write(stat_bar("HP", enemy_attrs.hp, enemy_attrs.max_hp, 15))
        console.move_to(49, 5)
        console.write(f"{int(enemy_attrs.hp)} / {int(enemy_attrs.max_hp)}")

        console.draw_box(2, 12, 30, 7)
        console.move_to(4, 13)
        console.write(f"{self.player.name}      Lv. {player_attrs.level}")
        console.move_to(4, 14)
        console.write(stat_bar("HP", player_attrs.hp, player_attrs.max_hp, 15))
        console.move_to(6, 15)
        console.write(f"{int(player_attrs.hp)} / {int(player_attrs.max_hp)}")
        console.move_to(4, 16)
        console.write(f"MP: {int(player_attrs.mp)} / {int(player_attrs.max_mp)}")

        console.draw_box(2, 20, 52, 8)
        console.draw_box(55, 20, 25, 8)
        console.move_to(4, 22)
        console.write(self.status_message)

        if self.state is BattleState.MAIN_MENU:
            self._draw_menu(_MAIN_MENU_OPTIONS, self.main_menu_selection, 22)
        elif self.state is BattleState.ATTACK_MENU:
            names = [a.name for a in self.player.ability_system.granted_abilities]
            names += ["-"] * (_SKILL_SLOTS - len(names))
            names.append("뒤로가기")
            self._draw_menu(names, self.attack_menu_selection, 21)

    def _draw_menu(self, options: Sequence[str], selected: int, top: int) -> None:
        for row, option in enumerate(options):
            self.console.move_to(57, top + row)
            marker = "> " if row == selected else "  "
            self.console.write(f"{marker}{option}")

    def play_intro_animation(self) -> None:
        """Flash the screen, fill it with blocks, then split it open from the middle."""
        console = self.console
        console.show_cursor(False)
        console.clear()

        for _ in range(3):
            console.set_inverted(True)
            console.pause(60)
            console.set_inverted(False)
            console.pause(60)

        width, height = console.terminal_size()
        for y in range(height):
            console.move_to(0, y)
            console.write("██" * (width // 2))

        center = height // 2
        blank_line = " " * width
        for offset in range(center + 1):
            if center - offset >= 0:
                console.move_to(0, center - offset)
                console.write(blank_line)
            if center + offset < height:
                console.move_to(0, center + offset)
                console.write(blank_line)
            console.pause(25)
        console.clear()