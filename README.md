# vampire_hunters

Building blocks for a top-down survival arcade game. The player's weapons
fire by themselves, collide with whatever is around them, and grow stronger
level by level. Experience gathered by the player raises the player's level.

The package holds game rules only. It has no window, renderer or sound code,
and it needs nothing outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `vampire_hunters.settings`: screen sizes (`WIN_W`, `WIN_H`, `CENTER_X`,
  `CENTER_Y` and others), `PI`, and the enums `Difficulty`, `SceneKind` and
  `ObjectType`.
- `vampire_hunters.geometry`: `Vector2` (with `w`/`radius` aliasing `x` and
  `h` aliasing `y`), `Vector3`, `Transform2D`, and `round_point(val, point)`,
  which rounds half-up at the given decimal place.
- `vampire_hunters.keyboard`: `Keyboard` counts, for each of 256 key codes,
  how many frames it has been held or released. Call `update(pressed)` once
  per frame with the codes held down. `Key` names the codes the game reads.
  An out-of-range key code raises `ValueError`.
- `vampire_hunters.parameter`: `Parameter`, a mapping of string keys to
  integers. `get` raises `KeyError` for a key that was never set.
- `vampire_hunters.fps`: `Fps` paces a loop to 60 frames per second and, once
  it has recorded 120 frames, keeps a rounded average in `fps`. The clock and
  the sleep function can be passed in.
- `vampire_hunters.values`: the value types `Coin`, `Exp`, `Health`,
  `Defence`, `Power` and `Speed`, which support `+`, `-`, `*` and the
  in-place forms, and `Level`, which refuses values above 99.
- `vampire_hunters.collision`: `CircleCollider` and `RectCollider`, the
  helpers `is_hit_circle` and `is_hit_circle_to_rect`, the tag-based
  `ColliderManager`, and `GameObject`, the base for everything that collides.
  Colliders that moved are queued with `calc_stack`. `run()` first applies
  the removals scheduled by `remove`, then tests each queued collider against
  the tags it interacts with and calls both sides' hit callbacks.
- `vampire_hunters.player_stats`: `PlayerHealth` (capped at 999, healing never
  exceeds the maximum), `PlayerLevel` (up to level 99), `PlayerMoney`, and
  `ExpAdministrator`. It applies the experience table, in which leaving level
  *n* takes `3 * (n + 1)` points.
- `vampire_hunters.gamedata`: the fixed skill, enemy and item tables through
  `skill_data`, `enemy_data` and `item_data`, each raising `ValueError` for an
  unknown index, and `WeaponCard`, the data the upgrade screen shows.
- `vampire_hunters.levels`: `level_bonus(kind, level)` gives the `LevelBonus`
  a `WeaponKind` gains on reaching levels 2 to 8.
- `vampire_hunters.weapons`: `WeaponStatus`, the `Weapon` base, and `Whip`,
  `Garlic` and `Potion`.
- `vampire_hunters.projectiles`: `Flame` and `Cross`.

Weapons level up to 8. A bonus marked `add` spawns an extra copy that follows
its parent's statistics.

## Example

```python
from vampire_hunters.collision import ColliderManager, GameObject
from vampire_hunters.geometry import Vector2
from vampire_hunters.player_stats import ExpAdministrator, PlayerLevel
from vampire_hunters.values import Exp
from vampire_hunters.weapons import Whip

manager = ColliderManager()

player = GameObject()
player.transform.position = Vector2(640, 360)
player.direction.x = 1

whip = Whip(manager)
whip.start()
for _ in range(120):
    whip.update(player)
    manager.run()

whip.level_up()            # level 2 adds a second whip
print(whip.current_level, len(whip.children))   # 2 1

levels = PlayerLevel()
admin = ExpAdministrator(levels)
admin.add_exp(Exp(6))
print(admin.update(), levels.current_level)      # True 2
```

## What this package does not do

It contains no enemies, pickups, pause handling or player controller. It has
no scenes, game loop, drawing or saved data, and no command to start a game.
A front end has to supply these. It also has to feed `Keyboard` and call
`update` on the weapons and `run` on the `ColliderManager` each frame.