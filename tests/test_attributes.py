from textrpg.attributes import AttributeSet


def test_defaults_fill_resources():
    attrs = AttributeSet()
    assert attrs.level == 1
    assert attrs.exp_to_next_level == 100
    assert attrs.max_hp == attrs.base_hp + attrs.strength * 2
    assert attrs.max_mp == attrs.base_mp + attrs.intelligence * 5
    assert attrs.hp == attrs.max_hp
    assert attrs.mp == attrs.max_mp


def test_update_derived_follows_stats():
    attrs = AttributeSet()
    before = attrs.max_hp
    attrs.strength += 3
    attrs.update_derived_attributes()
    assert attrs.max_hp == before + 6


def test_experience_below_threshold(capsys):
    attrs = AttributeSet(owner_name="Hero")
    attrs.add_experience(40)
    assert attrs.level == 1
    assert attrs.experience == 40
    assert "Hero" in capsys.readouterr().out


def test_single_level_up():
    attrs = AttributeSet(owner_name="Hero")
    strength = attrs.strength
    attrs.hp = 1
    attrs.add_experience(100)
    assert attrs.level == 2
    assert attrs.experience == 0
    assert attrs.exp_to_next_level == 150
    assert attrs.strength == strength + 2
    assert attrs.hp == attrs.max_hp


def test_many_levels_leave_remainder_below_threshold(capsys):
    attrs = AttributeSet(owner_name="Hero")
    attrs.add_experience(1000)
    assert attrs.level > 2
    assert 0 <= attrs.experience < attrs.exp_to_next_level
    assert capsys.readouterr().out.count("레벨 업") == attrs.level - 1