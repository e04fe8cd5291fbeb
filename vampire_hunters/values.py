"""Small numeric value types: coins, experience, health and friends."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass
class _Amount:
    value: int = 0

    def __add__(self, other):
        return type(self)(self.value + other.value)

    def __iadd__(self, other):
        self.value += other.value
        return self

    def __sub__(self, other):
        return type(self)(self.value - other.value)

    def __isub__(self, other):
        self.value -= other.value
        return self

    def __mul__(self, other):
        return type(self)(self.value * other.value)


@dataclass
class Coin(_Amount):
    """An amount of money."""


@dataclass
class Exp(_Amount):
    """An amount of experience points."""

    def __mul__(self, factor: float) -> Exp:
        return Exp(int(self.value * factor))


@dataclass
class Health(_Amount):
    """An amount of hit points."""

    value: float = 0.0


@dataclass
class Defence(_Amount):
    """A defence rating."""


@dataclass
class Power(_Amount):
    """An attack power."""


@dataclass
class Speed(_Amount):
    """A movement speed."""


@dataclass
class Level:
    """A level between 1 and 99."""

    MAX_LEVEL: ClassVar[int] = 99
    level: int = 1

    def __post_init__(self) -> None:
        if self.level > self.MAX_LEVEL:
            raise ValueError(f"level {self.level} exceeds {self.MAX_LEVEL}")

    def add_level(self) -> None:
        self.level += 1