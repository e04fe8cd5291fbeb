"""The player's weapons: the shared base, the whip, garlic and holy water."""

from __future__ import annotations

import random
from dataclasses import dataclass, replace
from typing import Callable

from .collision import CircleCollider, Collider, ColliderManager, ColliderTag, GameObject
from .gamedata import skill_data
from .keyboard import Key, Keyboard
from .levels import WeaponKind, level_bonus
from .settings import WIN_W, ObjectType

FRAMES_PER_SECOND = 30
MAX_WEAPON_LEVEL = 8


@dataclass
class WeaponStatus:
    """Current statistics of a weapon."""

    power: float = 0.0
    speed: float = 0.0
    cooldown: float = 0.0
    range: float = 0.0
    timer: float = 0.0

    def copy(self) -> WeaponStatus:
        return replace(self)


class Weapon(GameObject):
    """Base of all weapons; by default it does nothing each frame."""

    def __init__(self, manager: ColliderManager, rng: random.Random | None = None) -> None:
        super().__init__()
        self.manager = manager
        self.rng = rng or random.Random()
        self.name = ""
        self.level = 0
        self.image = ""
        self.sec = 0
        self.counter = 0
        self.cool = 0.0
        self.active = False
        self.status = WeaponStatus()
        self.player: GameObject | None = None
        self.children: list[Weapon] = []

    @property
    def power(self) -> float:
        return self.status.power

    @property
    def current_level(self) -> int:
        return self.level

    def start(self) -> None:
        return None

    def update(self, player: GameObject) -> None:
        return None

    def cool_down(self) -> bool:
        return False

    def level_up(self) -> None:
        return None

    def _init_from_skill(self, skill_id: int, status: WeaponStatus | None, level: int) -> None:
        info = skill_data(skill_id)
        self.image = info.images[0]
        self.name = info.name
        if status is None:
            self.status = WeaponStatus(
                power=info.power,
                speed=info.speed,
                cooldown=info.cooldown * FRAMES_PER_SECOND,
                range=info.range,
                timer=info.timer,
            )
        else:
            self.status = status.copy()
        self.cool = self.status.cooldown
        self.level = level

    def _start_as_weapon(self, radius: float) -> None:
        self.object_type = ObjectType.WEAPON
        self.transform.size.radius = radius
        self.setup_collider(CircleCollider, ColliderTag.WEAPON, self.manager)

    def _queue_check(self) -> None:
        if self.collider is None:
            raise RuntimeError("weapon has not been started")
        self.manager.calc_stack(self.collider)

    def _tick(self) -> None:
        self.counter += 1
        self.sec = self.counter // FRAMES_PER_SECOND

    def _raise_level(
        self, kind: WeaponKind, spawn: Callable[[WeaponStatus, int], Weapon] | None
    ) -> None:
        if self.level >= MAX_WEAPON_LEVEL:
            return
        self.level += 1
        bonus = level_bonus(kind, self.level)
        status = self.status
        status.power += bonus.power
        status.speed += bonus.speed
        status.cooldown -= bonus.cooldown
        self.cool = status.cooldown
        status.range += bonus.range
        status.timer += bonus.timer
        for child in self.children:
            child.status = status.copy()
            child.cool = child.status.cooldown
        if bonus.add and spawn is not None:
            child = spawn(status.copy(), self.level)
            child.start()
            self.children.append(child)


class Whip(Weapon):
    """Strikes sideways from the player; extra copies alternate sides."""

    def __init__(
        self,
        manager: ColliderManager,
        status: WeaponStatus | None = None,
        level: int = 1,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(manager, rng)
        self.visible = False
        self._init_from_skill(0, status, level)

    def start(self) -> None:
        self._start_as_weapon(30)

    def update(self, player: GameObject) -> None:
        self.update_children(player)
        if not self.cool_down():
            return
        if not self.active:
            self.direction.x = player.direction.x
            self.transform.position.x = player.transform.position.x + 80 * player.direction.x
            self.transform.position.y = player.transform.position.y + player.direction.y
            self.active = True
        self._tick()
        self._queue_check()
        if self.sec > self.status.timer:
            self.active = False
            self.visible = False
            self.counter = 0
            self.cool = self.status.cooldown

    def update_children(self, player: GameObject) -> None:
        """Place each copy on alternating sides, stacked upwards, and run it."""
        prev_x = self.direction.x
        prev_y = 0.0
        for child in self.children:
            prev_x *= -1
            prev_y += 60
            child.direction.x = prev_x
            child.transform.position.x = player.transform.position.x + 80 * child.direction.x
            child.transform.position.y = player.transform.position.y - prev_y
            child.update(player)

    def cool_down(self) -> bool:
        self.cool -= 1
        if self.cool < 0:
            self.visible = True
            self.cool = 0
            return True
        return False

    def level_up(self) -> None:
        self._raise_level(
            WeaponKind.WHIP, lambda status, level: Whip(self.manager, status, level, self.rng)
        )

    def hit_callback(self, target: Collider) -> bool:
        return self.active


class Garlic(Weapon):
    """An aura that follows the player and hurts what it touches."""

    def __init__(self, manager: ColliderManager, rng: random.Random | None = None) -> None:
        super().__init__(manager, rng)
        self.visible = False
        self._init_from_skill(3, None, 1)

    def start(self) -> None:
        self._start_as_weapon(50)

    def update(self, player: GameObject) -> None:
        self.transform.position = player.transform.position.copy()
        self._tick()
        self._queue_check()
        if self.sec > self.status.timer:
            self.active = False
            self.visible = False
            self.counter = 0
            self.cool = self.status.cooldown
        self.cool_down()

    def cool_down(self) -> bool:
        self.cool -= 1
        if self.cool < 0:
            self.visible = True
            self.cool = 0
            return True
        return False

    def level_up(self) -> None:
        self._raise_level(WeaponKind.GARLIC, None)

    def hit_callback(self, target: Collider) -> bool:
        return self.active


class Potion(Weapon):
    """Holy water: thrown from a random spot, then leaves a damage zone."""

    def __init__(
        self,
        manager: ColliderManager,
        keyboard: Keyboard | None = None,
        status: WeaponStatus | None = None,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(manager, rng)
        self.keyboard = keyboard
        self._init_from_skill(1, status, 1)
        self.images = skill_data(1).images

    def start(self) -> None:
        self._start_as_weapon(20)

    def update(self, player: GameObject) -> None:
        self.update_children(player)
        self._scroll()
        self._tick()
        pos = self.transform.position
        if self.sec < 1:
            self.direction.x = 1 if self.rng.randint(0, 10000) // 10000 % 2 == 0 else -1
            pos.x = self.rng.randint(0, WIN_W // 2) * self.direction.x
            pos.y = 0
        if 1 <= self.sec < 4:
            pos.x += self.status.speed
            pos.y += self.status.speed
        if 5 <= self.sec < 8:
            self._queue_check()
        if self.sec > self.status.timer:
            self.active = False
            self.counter = 0
            self.sec = 0
            self.cool = self.status.cooldown

    def update_children(self, player: GameObject) -> None:
        for child in self.children:
            child.update(player)

    def cool_down(self) -> bool:
        self.cool -= 1
        if self.cool < 0:
            self.cool = 0
            self.active = True
            return True
        return False

    def level_up(self) -> None:
        self._raise_level(
            WeaponKind.POTION,
            lambda status, level: Potion(self.manager, self.keyboard, status, self.rng),
        )

    def hit_callback(self, target: Collider) -> bool:
        return self.active

    def _scroll(self) -> None:
        if self.keyboard is None:
            return
        pos = self.transform.position
        if self.keyboard.get_pressing_count(Key.LEFT) > 0:
            pos.x += 2
        if self.keyboard.get_pressing_count(Key.RIGHT) > 0:
            pos.x -= 2
        if self.keyboard.get_pressing_count(Key.DOWN) > 0:
            pos.y -= 2
        if self.keyboard.get_pressing_count(Key.UP) > 0:
            pos.y += 2