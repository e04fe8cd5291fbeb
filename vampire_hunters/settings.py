"""Screen geometry and the enumerations shared across the game."""

from enum import Enum, IntEnum

WIN_W = 1280
WIN_H = 720

OUT_W = 1300
OUT_H = 960
IN_W = 770
IN_H = 680
CENTER_X = OUT_W // 2
CENTER_Y = OUT_H // 2
IN_X = (OUT_W - IN_W) // 2
IN_Y = (OUT_H - IN_H) // 2

PI = 3.141592654


class Difficulty(IntEnum):
    """Game difficulty passed between scenes."""

    EASY = 0
    NORMAL = 1


class SceneKind(Enum):
    """The scenes the game can switch between."""

    TITLE = 0
    GAME = 1
    GAMEOVER = 2
    RESULT = 3


class ObjectType(Enum):
    """What kind of thing a game object is, used by hit callbacks."""

    INVALID = 0
    PLAYER = 1
    ENEMY = 2
    WEAPON = 3
    ITEM = 4