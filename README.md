# minigames

This package holds the game logic for a few small games. It does not depend on
any rendering or input library. Each game reports what to draw as plain data:
sprite regions, screen positions and lines of text. Any toolkit can display
that data.

## Geometry (`minigames.geometry`)

The games share these small immutable types:

- `Vec2` is a 2D vector. It supports `+`, `-`, `*` by a number, unary `-`, `normalized()` and `clamp(low, high)`. Calling `normalized()` on a zero vector raises `ValueError`.
- `Rect` is a rectangle, given as its top-left `pos` and its `size`.
- `Collider` is a box. Its `pos` is the centre, relative to the sprite centre, and `half_size` is half its width and height.
- `Sprite` is a quad to draw. It has `dest` (where on screen), `uv` (which part of the spritesheet) and a `color` tint, which defaults to `0xFFFFFFFF`.
- `is_overlap(a_pos, a_collider, b_pos, b_collider)` tells whether two placed colliders overlap. Edges that only touch do not count.

## 15 puzzle (`minigames.puzzle`, `minigames.puzzle_view`)

This is the classic sliding puzzle on a 4×4 board. `PuzzleLogic` holds the tiles. The value `0` marks the hole.

`new_game()` starts from the solved board and moves the hole 1000 times in random directions. Because the board is only ever changed by legal moves, every shuffled board can be solved. Pass a `random.Random` to get boards you can reproduce.

```python
import random

from minigames.geometry import Vec2
from minigames.puzzle import PuzzleLogic
from minigames.puzzle_view import PuzzleController

logic = PuzzleLogic(random.Random(42))
logic.move((3, 2))     # slide the tile at column 3, row 2 into an adjacent hole; returns a bool
print(logic[(0, 0)])   # number on the top-left tile (IndexError off the board)
print(logic.tiles())   # all 16 values, row by row
print(logic.is_solved())

controller = PuzzleController(logic)
result = controller.on_click(Vec2(250.0, 300.0))  # ClickResult.NOTHING, NEW_GAME or MOVED
for sprite in controller.sprites():               # box, 16 tiles, "new game" button
    print(sprite.dest, sprite.uv)
print(controller.status_text())                   # ("Победа!", Vec2(200, 340)) once solved, else None
```

`minigames.puzzle.is_valid_position(pos)` tells whether a (column, row) pair lies on the board.

`puzzle_view` also provides these layout helpers:

- `tile_uv(value)` gives where a tile (0 to 15) lies in the spritesheet. Any other value raises `ValueError`.
- `tile_position(column, row)` gives the top-left screen corner of a board cell.
- `cell_at(mouse_pos)` gives the (column, row) under the mouse. The result may be off the board. A click on a gap between tiles counts for the cell to the left of it or above it.
- `hits_new_game_button(pos)` tells whether a click lands on the "new game" button.

## Clicker (`minigames.clicker`)

`Clicker.mine()` adds the current `power` to `gold` and returns the new amount of gold.

`Clicker.upgrade()` costs as much gold as the current power and raises the power by one. If there is not enough gold, it changes nothing and returns `False`.

The amounts are Python integers, so they never overflow.

```python
from minigames.clicker import Clicker

game = Clicker()
game.mine()
game.upgrade()
for text, pos in game.status_lines():
    print(pos, text)
```

## Shooter building blocks (`minigames.letalka`)

These modules are parts of a vertical space shooter:

- `world`: `Registry` is a small entity-component store. Its methods are `create`, `emplace`, `get`, `has`, `destroy`, and `view(*types, exclude=...)`, which yields `(entity, component, ...)`. `World` bundles a registry, a random generator and the `god_mode` and `debug_draw` switches. The module also defines `decrease_delay`, `NS_PER_SECOND`, `FBO_WIDTH` and `FBO_HEIGHT` (the 900×700 play field).
- `components`: the dataclasses attached to entities. They are `Body`, `Velocity`, `Destroyed`, `Enemy`, `Drone`, `Fighter`, `Gunship`, `Player`, `EnemyProjectile`, `PlayerLaser`, `EnemyLaser`, `EnemyPlasma`, `Gun`, `Guns` and `SpawnDelay`.
- `physics`:
  - `apply_velocities(world, ns)` moves bodies. Any body that ends up more than 500 px outside the play field is marked `Destroyed`.
  - `bodies_overlap` and `body_overlaps` test collisions.
  - `collider_rects` returns debug rectangles.
- `spawner`:
  - `create_drone`, `create_fighter` and `create_gunship` create single enemies.
  - `spawn_drones`, `spawn_fighters` and `spawn_gunships` create waves.
  - `create_enemy_spawner` and `reset_enemy_spawner` set up the wave timer.
  - `spawn_enemy(world, ns)` counts down the timer. When it runs out, it spawns a random wave and returns the new entities. The first wave comes after one second and later waves every two seconds.

```python
import random

from minigames.letalka.components import Body, Destroyed
from minigames.letalka.physics import apply_velocities
from minigames.letalka.spawner import create_enemy_spawner, spawn_enemy
from minigames.letalka.world import NS_PER_SECOND, World

world = World(random.Random(7))
create_enemy_spawner(world)
spawned = spawn_enemy(world, NS_PER_SECOND)  # the first wave
apply_velocities(world, 16_000_000)          # one 16 ms step
for entity, body in world.registry.view(Body, exclude=Destroyed):
    print(entity, body.pos)
```

### What is not included

The shooter is not a playable game. Several parts are missing:

- the player's ship
- shooting
- drone steering
- projectile creation
- collision handling
- restarting after a hit
- a game loop that ties the systems together

None of the games opens a window, plays sound or reads input devices. You provide those and feed the events to the classes above.

## Running the tests

The tests use pytest, which is listed under the `test` extra:

```
pip install -e .[test]
pytest
```