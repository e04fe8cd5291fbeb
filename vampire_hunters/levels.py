"""Per-level stat bonuses for every weapon kind."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class WeaponKind(Enum):
    """The weapons that have level-up tables."""

    WHIP = "whip"
    GARLIC = "garlic"
    POTION = "potion"
    FLAME = "flame"
    CROSS = "cross"
    MAGIC_BALL = "magic_ball"


@dataclass(frozen=True)
class LevelBonus:
    """What a weapon gains on reaching a level; ``add`` spawns an extra copy."""

    add: bool = False
    power: float = 0.0
    speed: float = 0.0
    cooldown: float = 0.0
    range: float = 0.0
    timer: float = 0.0


_B = LevelBonus

_TABLES: dict[WeaponKind, dict[int, LevelBonus]] = {
    WeaponKind.WHIP: {
        2: _B(add=True),
        3: _B(power=5),
        4: _B(power=5, range=0.1),
        5: _B(power=5),
        6: _B(power=5, range=0.1),
        7: _B(power=5),
        8: _B(power=5),
    },
    WeaponKind.GARLIC: {
        2: _B(power=2, range=0.4),
        3: _B(power=1, cooldown=0.1),
        4: _B(power=1, range=0.2),
        5: _B(power=2, cooldown=0.1),
        6: _B(power=1, cooldown=0.2),
        7: _B(power=1, cooldown=0.1),
        8: _B(power=2, cooldown=0.2),
    },
    WeaponKind.POTION: {
        2: _B(range=0.2),
        3: _B(add=True, power=5),
        4: _B(range=0.2),
        5: _B(add=True, power=10, timer=0.3),
        6: _B(range=0.2),
        7: _B(add=True, power=5, timer=0.3),
        8: _B(power=5, range=0.2),
    },
    WeaponKind.FLAME: {
        2: _B(power=10),
        3: _B(power=10, speed=0.2),
        4: _B(power=10),
        5: _B(power=10, speed=0.2),
        6: _B(power=10),
        7: _B(power=10, speed=0.2),
        8: _B(power=10),
    },
    WeaponKind.CROSS: {
        2: _B(power=10),
        3: _B(speed=0.25, range=0.1),
        4: _B(add=True),
        5: _B(power=10),
        6: _B(speed=0.25, range=0.1),
        7: _B(add=True),
        8: _B(power=10),
    },
    WeaponKind.MAGIC_BALL: {
        2: _B(power=5, speed=0.2),
        3: _B(power=5, speed=0.2, timer=0.3),
        4: _B(add=True),
        5: _B(power=5, speed=0.2),
        6: _B(add=True, power=5, timer=0.3),
        7: _B(add=True),
        8: _B(timer=0.5),
    },
}


def level_bonus(kind: WeaponKind, level: int) -> LevelBonus:
    """The bonus ``kind`` gains on reaching ``level`` (2 to 8)."""
    table = _TABLES[WeaponKind(kind)]
    try:
        return table[level]
    except KeyError:
        raise ValueError(f"no level bonus for {WeaponKind(kind).value} level {level}") from None