"""The player's health, experience level, money and level-up bookkeeping."""

from __future__ import annotations

from .values import Coin, Exp, Health

HP_BAR_WIDTH = 40
EXP_BAR_WIDTH = 1280
MAX_LEVEL = 99


class PlayerHealth:
    """Current and maximum hit points of the player."""

    MAX_HP = 999.0

    def __init__(self, hp: float) -> None:
        if hp > self.MAX_HP:
            raise ValueError(f"hit points {hp} exceed {self.MAX_HP}")
        self._current = Health(float(hp))
        self.max_hp = float(hp)

    def heal_hp(self, health: Health) -> None:
        """Restore hit points, never going above the maximum."""
        if health.value + self._current.value >= self.max_hp:
            self._current.value = self.max_hp
        else:
            self._current.value += health.value

    def damage_hp(self, damage: float) -> None:
        """Lose hit points; nothing happens once health is below zero."""
        if self._current.value < 0:
            return
        self._current.value -= damage

    @property
    def current_hp(self) -> int:
        """Current hit points, truncated to a whole number."""
        return int(self._current.value)

    @property
    def bar_width(self) -> float:
        """Width in pixels of the filled part of the health bar."""
        return HP_BAR_WIDTH * self._current.value / self.max_hp


class PlayerLevel:
    """The player's level and the experience gathered towards the next one."""

    def __init__(self) -> None:
        self.level = 1
        self.exp = Exp(0)

    def add_exp(self, exp: Exp) -> None:
        self.exp.value += exp.value

    def level_up(self) -> None:
        """Go up one level, stopping at the maximum."""
        if self.level >= MAX_LEVEL:
            return
        self.level += 1

    @property
    def current_level(self) -> int:
        return self.level

    @property
    def current_exp(self) -> Exp:
        return self.exp


class PlayerMoney:
    """The coins the player is carrying."""

    def __init__(self) -> None:
        self.coin = Coin(0)

    def add_money(self, coin: Coin) -> None:
        self.coin.value += coin.value

    @property
    def current_money(self) -> Coin:
        return self.coin


class ExpAdministrator:
    """Decides when the player has earned enough experience to level up."""

    def __init__(self, player: PlayerLevel) -> None:
        self.player = player
        self._exp_table = [level * 3 for level in range(1, MAX_LEVEL + 1)]

    def add_exp(self, exp: Exp) -> None:
        self.player.add_exp(exp)

    def required_exp(self, level: int) -> int:
        """Experience needed to leave ``level``."""
        if not 0 <= level < MAX_LEVEL:
            raise ValueError(f"no experience requirement for level {level}")
        return self._exp_table[level]

    def update(self) -> bool:
        """Level the player up if the requirement is met; report whether it was."""
        player = self.player
        if player.current_level < MAX_LEVEL:
            if self.required_exp(player.current_level) <= player.current_exp.value:
                player.level_up()
                player.current_exp.value = 0
                return True
        return False

    @property
    def bar_width(self) -> float:
        """Width in pixels of the filled part of the experience bar."""
        level = self.player.current_level
        if level >= MAX_LEVEL:
            return float(EXP_BAR_WIDTH)
        return EXP_BAR_WIDTH * self.player.current_exp.value / self.required_exp(level)