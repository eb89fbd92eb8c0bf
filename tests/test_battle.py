import io
import random

import pytest

from textrpg.abilities import BasicAttack
from textrpg.actors import Goblin, Player
from textrpg.battle import BattleManager, BattleState
from textrpg.console import Console, Key


def make_console(keys=()):
    stream = io.StringIO()
    key_iter = iter(keys)

    def next_key():
        return next(key_iter)

    return Console(stream, next_key, lambda seconds: None), stream


def make_battle(keys=(), seed=1):
    player = Player("용사")
    player.ability_system.grant_ability(BasicAttack(random.Random(seed)))
    goblin = Goblin()
    goblin.ability_system.grant_ability(BasicAttack(random.Random(seed + 1)))
    console, stream = make_console(keys)
    return BattleManager([player], [goblin], console), player, goblin, stream


def test_initial_message_announces_enemy():
    battle, _, _, _ = make_battle()
    assert battle.status_message == "야생의 고블린이(가) 나타났다!"
    assert battle.state is BattleState.MAIN_MENU


def test_empty_enemy_party_rejected():
    console, _ = make_console()
    with pytest.raises(ValueError):
        BattleManager([Player("용사")], [], console)


def test_main_menu_wraps_upwards():
    battle, _, _, _ = make_battle([Key.UP])
    battle.process_input()
    assert battle.main_menu_selection == 3


def test_main_menu_moves_down():
    battle, _, _, _ = make_battle([Key.DOWN, Key.DOWN])
    battle.process_input()
    battle.process_input()
    assert battle.main_menu_selection == 2


def test_defend_sets_flag_and_busy():
    battle, player, _, _ = make_battle([Key.DOWN, Key.ENTER])
    battle.process_input()
    battle.process_input()
    assert player.attributes.is_defending is True
    assert battle.state is BattleState.BUSY
    assert battle.status_message == "용사이(가) 방어 태세를 갖춥니다!"


def test_item_menu_reports_empty_bag():
    battle, _, _, _ = make_battle([Key.DOWN, Key.DOWN, Key.ENTER])
    for _ in range(3):
        battle.process_input()
    assert battle.status_message == "아이템 가방이 비어있습니다!"
    assert battle.state is BattleState.MAIN_MENU


def test_flee_ends_battle():
    battle, _, _, _ = make_battle([Key.UP, Key.ENTER])
    battle.process_input()
    battle.process_input()
    assert battle.state is BattleState.BATTLE_END
    assert battle.status_message == "성공적으로 도망쳤다!"


def test_attack_skill_damages_enemy():
    battle, _, goblin, _ = make_battle([Key.ENTER, Key.ENTER])
    start_hp = goblin.attributes.hp
    battle.process_input()
    assert battle.state is BattleState.ATTACK_MENU
    assert battle.status_message == "사용할 스킬을 선택하세요."
    battle.process_input()
    assert battle.state is BattleState.BUSY
    assert goblin.attributes.hp < start_hp
    assert battle.status_message.startswith("▶ 용사의 기본 공격!")


def test_attack_menu_back_returns_to_main_menu():
    battle, _, goblin, _ = make_battle([Key.ENTER, Key.UP, Key.ENTER])
    start_hp = goblin.attributes.hp
    for _ in range(3):
        battle.process_input()
    assert battle.state is BattleState.MAIN_MENU
    assert battle.main_menu_selection == 0
    assert battle.status_message == "무엇을 할까?"
    assert goblin.attributes.hp == start_hp


def test_empty_skill_slot_acts_as_back():
    battle, _, _, _ = make_battle([Key.ENTER, Key.DOWN, Key.ENTER])
    for _ in range(3):
        battle.process_input()
    assert battle.state is BattleState.MAIN_MENU


def test_no_input_read_while_busy():
    def refuse():
        raise AssertionError("key read while busy")

    player = Player("용사")
    console = Console(io.StringIO(), refuse, lambda seconds: None)
    battle = BattleManager([player], [Goblin()], console)
    battle.state = BattleState.BUSY
    battle.process_input()
    assert battle.state is BattleState.BUSY


def test_update_detects_defeated_enemy():
    battle, _, goblin, _ = make_battle()
    goblin.attributes.hp = 0
    battle.state = BattleState.BUSY
    battle.update()
    assert battle.state is BattleState.BATTLE_END
    assert battle.status_message == "고블린을(를) 물리쳤다!"


def test_update_enemy_turn_hits_player():
    battle, player, _, _ = make_battle()
    player.attributes.is_defending = True
    start_hp = player.attributes.hp
    battle.state = BattleState.BUSY
    battle.update()
    assert player.attributes.is_defending is False
    assert player.attributes.hp < start_hp
    assert battle.state is BattleState.MAIN_MENU
    assert battle.status_message == "무엇을 할까?"


def test_update_player_falls():
    battle, player, _, _ = make_battle()
    player.attributes.hp = 0.5
    battle.state = BattleState.BUSY
    battle.update()
    assert player.attributes.hp == 0
    assert battle.state is BattleState.BATTLE_END
    assert battle.status_message == "용사은(는) 쓰러졌다..."


def test_update_does_nothing_outside_busy():
    battle, player, goblin, _ = make_battle()
    hp = (player.attributes.hp, goblin.attributes.hp)
    battle.update()
    assert (player.attributes.hp, goblin.attributes.hp) == hp
    assert battle.state is BattleState.MAIN_MENU


def test_draw_main_menu():
    battle, _, _, stream = make_battle()
    battle.draw()
    out = stream.getvalue()
    assert "> 공격" in out
    assert "  도망가기" in out
    assert "고블린      Lv. 1" in out
    assert "HP [" in out
    assert battle.status_message in out


def test_draw_attack_menu_pads_slots():
    battle, _, _, stream = make_battle()
    battle.state = BattleState.ATTACK_MENU
    battle.draw()
    out = stream.getvalue()
    assert "> 기본 공격" in out
    assert out.count("  -") == 3
    assert "  뒤로가기" in out


def test_intro_animation_flashes_three_times(monkeypatch):
    monkeypatch.setenv("COLUMNS", "10")
    monkeypatch.setenv("LINES", "4")
    battle, _, _, stream = make_battle()
    battle.play_intro_animation()
    out = stream.getvalue()
    assert out.count("\x1b[?5h") == 3
    assert out.count("\x1b[?5l") == 3
    assert "██" * 5 in out


def test_run_until_flee(monkeypatch):
    monkeypatch.setenv("COLUMNS", "10")
    monkeypatch.setenv("LINES", "4")
    battle, _, _, stream = make_battle([Key.DOWN, Key.DOWN, Key.DOWN, Key.ENTER])
    battle.run()
    out = stream.getvalue()
    assert battle.state is BattleState.BATTLE_END
    assert "성공적으로 도망쳤다!" in out
    assert out.endswith("\x1b[?25h")