"""Weapons that fly away from the player: the flame staff and the cross."""

from __future__ import annotations

import math
import random

from .collision import Collider, ColliderManager, GameObject
from .keyboard import Key, Keyboard
from .levels import WeaponKind
from .settings import PI, WIN_H, WIN_W
from .weapons import Weapon, WeaponStatus

_MARGIN = 100


def _on_screen(obj: GameObject) -> bool:
    pos = obj.transform.position
    return -_MARGIN < pos.x < WIN_W + _MARGIN and -_MARGIN < pos.y < WIN_H + _MARGIN


class Flame(Weapon):
    """Fires flames from the player at random angles until they leave the screen."""

    def __init__(
        self,
        manager: ColliderManager,
        keyboard: Keyboard | None = None,
        status: WeaponStatus | None = None,
        level: int = 1,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(manager, rng)
        self.keyboard = keyboard
        self.angle_x = 0.0
        self.angle_y = 0.0
        self._init_from_skill(2, status, level)
        if status is None:
            child = Flame(manager, keyboard, self.status.copy(), self.level, self.rng)
            child.start()
            self.children.append(child)
        else:
            self.cool = 0.0

    def start(self) -> None:
        self._start_as_weapon(20)

    def update(self, player: GameObject) -> None:
        self.update_children(player)
        self._scroll()

        pos = self.transform.position
        if not self.active:
            pos.x = player.transform.position.x
            pos.y = player.transform.position.y
            self.active = True

        self._tick()
        if self.sec < 1:
            limit = int(PI * 2)
            self.angle_x = self.rng.randint(0, limit)
            self.angle_y = self.rng.randint(0, limit)

        if _on_screen(self):
            pos.x += math.cos(self.angle_x) * self.status.speed
            pos.y += math.sin(self.angle_y) * self.status.speed
            self._queue_check()
        else:
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
            return True
        return False

    def level_up(self) -> None:
        self._raise_level(WeaponKind.FLAME, None)

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


class Cross(Weapon):
    """Thrown from the player, slowing down over its first three seconds."""

    def __init__(
        self,
        manager: ColliderManager,
        status: WeaponStatus | None = None,
        level: int = 1,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(manager, rng)
        self.angle_x = 0.0
        self.angle_y = 0.0
        self.visible = False
        self._init_from_skill(5, status, level)
        self.speed = self.status.speed
        self.direction.x = 1
        self.direction.y = 1

    def start(self) -> None:
        self._start_as_weapon(30)

    def update(self, player: GameObject) -> None:
        self.update_children(player)
        self._reset(player)
        if not self.cool_down():
            return

        self._tick()
        if self.sec < 3:
            self.speed -= 0.2

        if _on_screen(self):
            pos = self.transform.position
            pos.x += math.cos(self.angle_x) * self.speed * self.direction.x
            pos.y += math.sin(self.angle_y) * self.speed * self.direction.y
            self._queue_check()
        else:
            self.active = False
            self.visible = False
            self.counter = 0
            self.sec = 0
            self.speed = self.status.speed
            self.cool = self.status.cooldown

    def _reset(self, player: GameObject) -> None:
        if self.active or self.visible:
            return
        self.transform.position.x = player.transform.position.x
        self.transform.position.y = player.transform.position.y
        if self.sec < 1:
            self.angle_x = self.rng.randint(0, 360)
            self.angle_y = self.rng.randint(0, 360)

    def update_children(self, player: GameObject) -> None:
        for child in self.children:
            child.update(player)

    def cool_down(self) -> bool:
        self.cool -= 1
        if self.cool < 0:
            self.cool = 0
            self.visible = True
            return True
        return False

    def level_up(self) -> None:
        self._raise_level(
            WeaponKind.CROSS, lambda status, level: Cross(self.manager, status, level, self.rng)
        )

    def add_child(self, cross: Cross) -> None:
        self.children.append(cross)

    def hit_callback(self, target: Collider) -> bool:
        return False