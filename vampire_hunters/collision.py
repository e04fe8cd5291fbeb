"""Circle and box colliders, the collider manager and the base game object."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, IntEnum
from typing import Callable

from .geometry import Transform2D, Vector2
from .settings import ObjectType


class ColliderType(Enum):
    INVALID = 0
    CIRCLE = 1
    RECT = 2


class ColliderTag(IntEnum):
    INVALID = 0
    PLAYER = 1
    ENEMY = 2
    WEAPON = 3
    ITEM = 4


# Which tag lists a moving collider of a given tag is tested against.
_TARGETS = {
    ColliderTag.WEAPON: (ColliderTag.ENEMY, ColliderTag.INVALID),
    ColliderTag.PLAYER: (ColliderTag.ENEMY, ColliderTag.ITEM),
    ColliderTag.ENEMY: (ColliderTag.ENEMY, ColliderTag.WEAPON),
    ColliderTag.ITEM: (ColliderTag.PLAYER,),
    ColliderTag.INVALID: (ColliderTag.ITEM, ColliderTag.WEAPON),
}


def is_hit_circle(a: Vector2, b: Vector2, r: float) -> bool:
    """True if points ``a`` and ``b`` are closer than ``r``."""
    dx = a.x - b.x
    dy = a.y - b.y
    return dx * dx + dy * dy < r * r


def _bounds(obj: GameObject) -> tuple[float, float, float, float]:
    pos, size = obj.transform.position, obj.transform.size
    return (
        pos.x - size.x / 2,
        pos.x + size.x / 2,
        pos.y - size.y / 2,
        pos.y + size.y / 2,
    )


def is_hit_circle_to_rect(circle: Collider, rect: Collider) -> bool:
    """True if the circle collider's owner overlaps the box collider's owner."""
    centre = circle.owner.transform.position
    x, y = centre.x, centre.y
    r = circle.owner.transform.size.radius
    x1, x2, y1, y2 = _bounds(rect.owner)

    if x1 - r < x < x2 + r and y1 < y < y2:
        return True
    if x1 < x < x2 and y1 - r < y < y2 + r:
        return True
    corners = ((x1, y1), (x2, y1), (x1, y2), (x2, y2))
    return any(is_hit_circle(Vector2(cx, cy), centre, r) for cx, cy in corners)


class Collider(ABC):
    """A shape attached to a game object that reports hits to a callback."""

    def __init__(
        self, collider_type: ColliderType, owner: GameObject, manager: ColliderManager
    ) -> None:
        self.type = collider_type
        self.tag = ColliderTag.INVALID
        self.owner = owner
        self.manager = manager
        self._callback: Callable[[Collider], bool] | None = None

    def update_tag(self, tag: ColliderTag) -> None:
        """Set the tag; a real tag also queues this collider for checking."""
        self.tag = ColliderTag(tag)
        if self.tag > ColliderTag.INVALID:
            self.manager.calc_stack(self)

    def set_callback(self, callback: Callable[[Collider], bool]) -> None:
        self._callback = callback

    def _notify(self, other: Collider) -> bool:
        if self._callback is None:
            return False
        return self._callback(other)

    @abstractmethod
    def is_hit(self, target: Collider) -> bool:
        """Whether this collider overlaps ``target``."""


class CircleCollider(Collider):
    """A circle whose radius is the owner's ``size.radius``."""

    def __init__(self, owner: GameObject, manager: ColliderManager) -> None:
        super().__init__(ColliderType.CIRCLE, owner, manager)

    def is_hit(self, target: Collider) -> bool:
        if target.type is ColliderType.CIRCLE:
            return is_hit_circle(
                target.owner.transform.position,
                self.owner.transform.position,
                target.owner.transform.size.radius + self.owner.transform.size.radius,
            )
        if target.type is ColliderType.RECT:
            return is_hit_circle_to_rect(self, target)
        return False


class RectCollider(Collider):
    """An axis-aligned box centred on the owner's position."""

    def __init__(self, owner: GameObject, manager: ColliderManager) -> None:
        super().__init__(ColliderType.RECT, owner, manager)

    def is_hit(self, target: Collider) -> bool:
        if target.type is ColliderType.RECT:
            xa1, xa2, ya1, ya2 = _bounds(target.owner)
            xb1, xb2, yb1, yb2 = _bounds(self.owner)
            return xa1 <= xb2 and xa2 >= xb1 and ya1 <= yb2 and ya2 >= yb1
        if target.type is ColliderType.CIRCLE:
            return is_hit_circle_to_rect(target, self)
        return False


class ColliderManager:
    """Holds colliders by tag and checks the ones that moved each frame."""

    def __init__(self) -> None:
        self._colliders: dict[ColliderTag, list[Collider]] = {
            tag: [] for tag in ColliderTag
        }
        self._calc_stack: list[Collider] = []
        self._remove_list: list[tuple[Collider, ColliderTag]] = []

    def register(self, collider: Collider, tag: ColliderTag) -> None:
        self._colliders[ColliderTag(tag)].append(collider)

    def remove(self, collider: Collider, tag: ColliderTag) -> None:
        """Schedule removal; it takes effect at the next ``run``."""
        self._remove_list.append((collider, ColliderTag(tag)))

    def calc_stack(self, collider: Collider) -> None:
        """Queue a collider that moved this frame."""
        self._calc_stack.append(collider)

    def hit_to_all(self, collider: Collider, tag: ColliderTag) -> None:
        """Test ``collider`` against every collider under ``tag``."""
        for other in list(self._colliders[ColliderTag(tag)]):
            if collider.is_hit(other):
                collider._notify(other)
                other._notify(collider)

    def run(self) -> None:
        """Apply pending removals, then check every queued collider."""
        for collider, tag in self._remove_list:
            members = self._colliders[tag]
            for position, member in enumerate(members):
                if member is collider:
                    del members[position]
                    break
        self._remove_list.clear()

        for collider in list(self._calc_stack):
            for tag in _TARGETS[collider.tag]:
                self.hit_to_all(collider, tag)
        self._calc_stack.clear()


class GameObject:
    """Something in the world with a transform and, optionally, a collider."""

    def __init__(self) -> None:
        self.object_type = ObjectType.INVALID
        self.name = ""
        self.collider: Collider | None = None
        self.transform = Transform2D()
        self.direction = Vector2()

    def setup_collider(
        self,
        collider_cls: type[Collider],
        tag: ColliderTag,
        manager: ColliderManager,
    ) -> None:
        """Create a collider of ``collider_cls``, tag it and register it."""
        self.collider = collider_cls(self, manager)
        self.collider.update_tag(tag)
        self.collider.set_callback(self.hit_callback)
        manager.register(self.collider, tag)

    def hit_callback(self, target: Collider) -> bool:
        """Called when this object's collider hits ``target``."""
        return True

    def destroy(self) -> None:
        """Schedule this object's collider for removal."""
        if self.collider is None:
            raise RuntimeError("object has no collider")
        self.collider.manager.remove(self.collider, self.collider.tag)