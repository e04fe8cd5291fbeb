"""2D vectors, transforms and rounding helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


def round_point(val: float, point: int) -> float:
    """Round ``val`` half-up at the ``point``-th decimal place."""
    scaled = val * 10.0 ** (point - 1)
    scaled = float(int(scaled + 0.5))
    return scaled * 10.0 ** (1 - point)


@dataclass
class Vector2:
    """A 2D vector; ``w`` and ``radius`` alias ``x``, ``h`` aliases ``y``."""

    x: float = 0.0
    y: float = 0.0

    @property
    def w(self) -> float:
        return self.x

    @w.setter
    def w(self, value: float) -> None:
        self.x = value

    @property
    def h(self) -> float:
        return self.y

    @h.setter
    def h(self, value: float) -> None:
        self.y = value

    @property
    def radius(self) -> float:
        return self.x

    @radius.setter
    def radius(self, value: float) -> None:
        self.x = value

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __iadd__(self, other: Vector2) -> Vector2:
        self.x += other.x
        self.y += other.y
        return self

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __isub__(self, other: Vector2) -> Vector2:
        self.x -= other.x
        self.y -= other.y
        return self

    def __mul__(self, factor: float) -> Vector2:
        return Vector2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def normalize(self) -> None:
        """Scale this vector in place to unit length."""
        length = math.hypot(self.x, self.y)
        self.x = self.x / length
        self.y = self.y / length

    def copy(self) -> Vector2:
        return Vector2(self.x, self.y)


@dataclass
class Vector3:
    """A 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class Transform2D:
    """Position, rotation and size of an object in 2D."""

    position: Vector2 = field(default_factory=Vector2)
    rotation: Vector2 = field(default_factory=Vector2)
    size: Vector2 = field(default_factory=Vector2)
    reverse: bool = False

    def set_position(self, pos: Vector2) -> None:
        self.position = pos.copy()

    def set_rotation(self, rot: Vector2) -> None:
        self.rotation = rot.copy()

    def copy(self) -> Transform2D:
        return Transform2D(
            self.position.copy(), self.rotation.copy(), self.size.copy(), self.reverse
        )