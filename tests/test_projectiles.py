import random

import pytest

from vampire_hunters.collision import CircleCollider, ColliderManager, GameObject
from vampire_hunters.gamedata import skill_data
from vampire_hunters.geometry import Vector2
from vampire_hunters.keyboard import Key, Keyboard
from vampire_hunters.levels import WeaponKind, level_bonus
from vampire_hunters.projectiles import Cross, Flame
from vampire_hunters.weapons import FRAMES_PER_SECOND


def _player(x=300.0, y=200.0):
    player = GameObject()
    player.transform.position = Vector2(x, y)
    return player


def _target(manager):
    return CircleCollider(GameObject(), manager)


def test_flame_default_has_one_child_with_same_status():
    manager = ColliderManager()
    flame = Flame(manager, rng=random.Random(1))
    assert len(flame.children) == 1
    assert flame.children[0].status == flame.status
    assert flame.status.cooldown == skill_data(2).cooldown * FRAMES_PER_SECOND
    assert flame.level == 1


def test_flame_update_moves_within_speed_of_player():
    manager = ColliderManager()
    flame = Flame(manager, rng=random.Random(3))
    flame.start()
    player = _player()
    flame.update(player)
    assert flame.active is True
    pos = flame.transform.position
    assert abs(pos.x - 300.0) <= flame.status.speed + 1e-9
    assert abs(pos.y - 200.0) <= flame.status.speed + 1e-9
    assert 0 <= flame.angle_x <= 6


def test_flame_off_screen_deactivates():
    manager = ColliderManager()
    flame = Flame(manager, rng=random.Random(2))
    flame.start()
    flame.active = True
    flame.counter = 40
    flame.transform.position = Vector2(-500, 0)
    flame.update(_player())
    assert flame.active is False
    assert flame.counter == 0
    assert flame.cool == flame.status.cooldown


def test_flame_scrolls_with_keyboard():
    manager = ColliderManager()
    keyboard = Keyboard()
    keyboard.update([Key.LEFT, Key.UP])
    flame = Flame(manager, keyboard=keyboard, rng=random.Random(0))
    flame.start()
    flame.status.speed = 0
    flame.active = True
    flame.transform.position = Vector2(100, 100)
    flame.update(_player())
    assert flame.transform.position.x == pytest.approx(102)
    assert flame.transform.position.y == pytest.approx(102)


def test_flame_update_before_start_raises():
    manager = ColliderManager()
    flame = Flame(manager, rng=random.Random(0))
    with pytest.raises(RuntimeError):
        flame.update(_player())


def test_flame_level_up_and_cap():
    manager = ColliderManager()
    flame = Flame(manager, rng=random.Random(0))
    power = flame.power
    flame.level_up()
    assert flame.level == 2
    assert flame.power == power + level_bonus(WeaponKind.FLAME, 2).power
    assert flame.children[0].status == flame.status
    for _ in range(10):
        flame.level_up()
    assert flame.level == 8
    assert len(flame.children) == 1


def test_flame_cool_down():
    manager = ColliderManager()
    flame = Flame(manager, rng=random.Random(0))
    flame.cool = 5
    assert flame.cool_down() is False
    assert flame.cool == 4
    flame.cool = 0
    assert flame.cool_down() is True
    assert flame.cool == 0


def test_flame_hit_callback_follows_active():
    manager = ColliderManager()
    flame = Flame(manager, rng=random.Random(0))
    assert flame.hit_callback(_target(manager)) is False
    flame.active = True
    assert flame.hit_callback(_target(manager)) is True


def test_cross_defaults():
    manager = ColliderManager()
    cross = Cross(manager, rng=random.Random(0))
    assert cross.speed == cross.status.speed
    assert cross.direction == Vector2(1, 1)
    assert cross.status.cooldown == skill_data(5).cooldown * FRAMES_PER_SECOND
    assert cross.cool == cross.status.cooldown


def test_cross_waits_at_player_during_cooldown():
    manager = ColliderManager()
    cross = Cross(manager, rng=random.Random(0))
    cross.start()
    cross.update(_player())
    assert cross.transform.position == Vector2(300.0, 200.0)
    assert cross.cool == cross.status.cooldown - 1
    assert cross.visible is False


def test_cross_slows_down_after_launch():
    manager = ColliderManager()
    cross = Cross(manager, rng=random.Random(0))
    cross.start()
    cross.cool = 0
    cross.update(_player())
    assert cross.visible is True
    assert cross.counter == 1
    assert cross.speed == pytest.approx(cross.status.speed - 0.2)


def test_cross_off_screen_resets():
    manager = ColliderManager()
    cross = Cross(manager, rng=random.Random(0))
    cross.start()
    cross.cool = 0
    cross.visible = True
    cross.transform.position = Vector2(-500, 0)
    cross.update(_player())
    assert cross.visible is False
    assert cross.active is False
    assert cross.speed == cross.status.speed
    assert cross.cool == cross.status.cooldown


def test_cross_level_up_spawns_children():
    manager = ColliderManager()
    cross = Cross(manager, rng=random.Random(0))
    cross.start()
    for _ in range(3):
        cross.level_up()
    assert cross.level == 4
    assert len(cross.children) == 1
    assert cross.children[0].level == 4
    for _ in range(3):
        cross.level_up()
    assert len(cross.children) == 2
    assert all(child.status == cross.status for child in cross.children)


def test_cross_add_child_and_hit_callback():
    manager = ColliderManager()
    cross = Cross(manager, rng=random.Random(0))
    other = Cross(manager, rng=random.Random(1))
    cross.add_child(other)
    assert cross.children == [other]
    assert cross.hit_callback(_target(manager)) is False