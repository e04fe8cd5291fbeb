import pytest

from vampire_hunters.levels import LevelBonus, WeaponKind, level_bonus


@pytest.mark.parametrize("kind", list(WeaponKind))
@pytest.mark.parametrize("level", [0, 1, 9, -1])
def test_levels_outside_table_raise(kind, level):
    with pytest.raises(ValueError):
        level_bonus(kind, level)


@pytest.mark.parametrize("kind", list(WeaponKind))
def test_every_level_from_two_to_eight_has_a_bonus(kind):
    for level in range(2, 9):
        bonus = level_bonus(kind, level)
        assert isinstance(bonus, LevelBonus)
        assert bonus.power >= 0
        assert bonus.speed >= 0
        assert bonus.cooldown >= 0
        assert bonus.range >= 0
        assert bonus.timer >= 0


def test_garlic_never_adds_copies():
    assert not any(level_bonus(WeaponKind.GARLIC, lv).add for lv in range(2, 9))


def test_flame_never_adds_and_power_is_constant():
    bonuses = [level_bonus(WeaponKind.FLAME, lv) for lv in range(2, 9)]
    assert not any(b.add for b in bonuses)
    assert all(b.power == bonuses[0].power for b in bonuses)


def test_whip_adds_a_copy_at_level_two():
    assert level_bonus(WeaponKind.WHIP, 2).add is True
    assert not any(level_bonus(WeaponKind.WHIP, lv).add for lv in range(3, 9))


def test_cross_adds_copies_at_four_and_seven():
    adds = [lv for lv in range(2, 9) if level_bonus(WeaponKind.CROSS, lv).add]
    assert adds == [4, 7]


def test_potion_level_five():
    bonus = level_bonus(WeaponKind.POTION, 5)
    assert bonus.add is True
    assert bonus.timer == 0.3


def test_kind_may_be_given_by_value():
    assert level_bonus("whip", 4) == level_bonus(WeaponKind.WHIP, 4)


def test_unknown_kind_raises():
    with pytest.raises(ValueError):
        level_bonus("sword", 2)