"""Static tables of skills, enemies and items."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SkillInfo:
    """Base statistics of a weapon skill."""

    id: int
    power: float
    speed: float
    cooldown: float
    range: float
    timer: float
    penetration: bool
    images: tuple[str, ...]
    name: str
    description: str


@dataclass(frozen=True)
class EnemyInfo:
    """Base statistics of an enemy kind."""

    id: int
    name: str
    atk: float
    defence: float
    hp: float
    speed: float
    image: str


@dataclass(frozen=True)
class ItemInfo:
    """An item kind and its picture."""

    id: int
    name: str
    image: str


_SKILLS = (
    SkillInfo(1, 10, 5, 3, 0.3, 0.5, True, ("EffectWhip.png",),
              "鞭", "横方向に攻撃を繰り出す。"),
    SkillInfo(2, 5, 5, 3, 0.3, 9, True, ("Potion.png", "download (2).png"),
              "聖水", "ダメージゾーンを生成する。"),
    SkillInfo(3, 20, 5, 0.5, 0.3, 10, False, ("ShotFlame.png",),
              "炎の杖", "大ダメージ。\n狙う敵はランダムに決定。"),
    SkillInfo(4, 10, 5, 3, 0.5, 10, True, ("Garlic.png",),
              "ニンニク", "近くの敵にダメージを与える。"),
    SkillInfo(5, 10, 5, 3, 0.2, 10, True, ("Sprite-0001.png",),
              "軌跡の魔弾", "跳ね返りながら敵を通り抜ける。"),
    SkillInfo(6, 10, 6, 3, 0.2, 10, True, ("Cross.png",),
              "十字架", "最も近い敵めがけて発射。\nブーメランのように機能する。"),
)

_ENEMIES = (
    EnemyInfo(1, "NormalCreature", 8, 3, 10, 2, "Skelton.png"),
    EnemyInfo(2, "BigCreature", 10, 5, 20, 5, "WareWolf.png"),
    EnemyInfo(3, "SmallCreature", 5, 1, 5, 2, "Bat.png"),
    EnemyInfo(4, "Reaper", 10, 1, 999, 30, "Reaper.png"),
)

_ITEMS = (
    ItemInfo(1, "Coin", "coin.png"),
    ItemInfo(2, "Exp", "kouseki.png"),
    ItemInfo(3, "Heal", "manga-niku.png"),
)


def _lookup(table: tuple, num: int, what: str):
    if not 0 <= num < len(table):
        raise ValueError(f"invalid {what} number: {num}")
    return table[num]


def skill_data(num: int) -> SkillInfo:
    """The skill at index ``num`` (0 to 5)."""
    return _lookup(_SKILLS, num, "skill")


def enemy_data(num: int) -> EnemyInfo:
    """The enemy kind at index ``num`` (0 to 3)."""
    return _lookup(_ENEMIES, num, "enemy")


def item_data(num: int) -> ItemInfo:
    """The item kind at index ``num`` (0 to 2)."""
    return _lookup(_ITEMS, num, "item")


class WeaponCard:
    """What the level-up screen shows for one weapon."""

    def __init__(self, skill_id: int) -> None:
        info = skill_data(skill_id)
        self.image = info.images[0]
        self.level = 1
        self.name = info.name
        self.description = info.description

    def add_level(self) -> None:
        self.level += 1