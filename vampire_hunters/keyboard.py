"""Per-key counters of frames pressed and frames released."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable

KEY_NUM = 256


class Key(IntEnum):
    """Key codes the game reads."""

    ESCAPE = 0x01
    RETURN = 0x1C
    UP = 0xC8
    LEFT = 0xCB
    RIGHT = 0xCD
    DOWN = 0xD0


class Keyboard:
    """Tracks how many frames each key has been held or released."""

    def __init__(self) -> None:
        self._pressing = [0] * KEY_NUM
        self._releasing = [0] * KEY_NUM

    def update(self, pressed: Iterable[int]) -> bool:
        """Advance one frame given the key codes currently held down."""
        down = set(pressed)
        for code in down:
            if not self.is_available_code(code):
                raise ValueError(f"invalid key code: {code}")
        for code in range(KEY_NUM):
            if code in down:
                self._releasing[code] = 0
                self._pressing[code] += 1
            else:
                self._pressing[code] = 0
                self._releasing[code] += 1
        return True

    def get_pressing_count(self, keycode: int) -> int:
        """Frames for which the key has been held."""
        self._check(keycode)
        return self._pressing[keycode]

    def get_releasing_count(self, keycode: int) -> int:
        """Frames for which the key has been released."""
        self._check(keycode)
        return self._releasing[keycode]

    def is_available_code(self, keycode: int) -> bool:
        return 0 <= keycode < KEY_NUM

    def _check(self, keycode: int) -> None:
        if not self.is_available_code(keycode):
            raise ValueError(f"invalid key code: {keycode}")