import pytest

from textrpg.abilities import BasicAttack, GameplayAbility
from textrpg.actors import Actor


class ScriptedRng:
    def __init__(self, *fractions):
        self._fractions = list(fractions)

    def uniform(self, low, high):
        return low + (high - low) * self._fractions.pop(0)


def duel(strength=20.0, defence=4.0):
    caster, target = Actor("Hero"), Actor("Slime")
    caster.attributes.strength = strength
    target.attributes.defence = defence
    return caster, target


def test_basic_attack_definition():
    attack = BasicAttack()
    assert attack.name == "기본 공격"
    assert attack.ad_ratio == pytest.approx(1.2)
    assert attack.ap_ratio == 0.0


def test_ability_base_is_abstract():
    with pytest.raises(TypeError):
        GameplayAbility("nothing")


def test_missing_participants_give_empty_message():
    caster, _ = duel()
    assert BasicAttack().activate(caster, None) == ""
    assert BasicAttack().activate(None, caster) == ""


def test_hit_reduces_hp_and_reports_damage():
    caster, target = duel()
    before = target.attributes.hp
    message = BasicAttack(ScriptedRng(1.0, 0.5)).activate(caster, target)
    assert target.attributes.hp == pytest.approx(before - 20)
    assert message.startswith("▶ Hero의 기본 공격!\n")
    assert "Slime에게 20의 물리 데미지!" in message
    assert "CRITICAL" not in message


def test_critical_hit_is_announced():
    caster, target = duel()
    message = BasicAttack(ScriptedRng(0.0, 0.5)).activate(caster, target)
    assert "★★ CRITICAL HIT! ★★" in message


def test_knockout_clamps_hp_to_zero():
    caster, target = duel()
    target.attributes.hp = 3
    message = BasicAttack(ScriptedRng(1.0, 0.5)).activate(caster, target)
    assert target.attributes.hp == 0
    assert message.endswith("Slime을(를) 쓰러트렸다!")