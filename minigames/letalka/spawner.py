"""Creation of enemy waves."""

from __future__ import annotations

from minigames.geometry import Collider, Rect, Vec2
from minigames.letalka.components import (
    Body,
    Drone,
    Enemy,
    Fighter,
    Gun,
    Guns,
    Gunship,
    SpawnDelay,
    Velocity,
)
from minigames.letalka.world import FBO_WIDTH, NS_PER_SECOND, Entity, World, decrease_delay

DRONE_UV = Rect(Vec2(108.0, 2.0), Vec2(64.0, 64.0))
FIGHTER_UV = Rect(Vec2(182.0, 6.0), Vec2(74.0, 64.0))
GUNSHIP_UV = Rect(Vec2(269.0, 7.0), Vec2(64.0, 64.0))

DRONE_COLLIDER = Collider(Vec2(0.0, 0.0), Vec2(25.0, 25.0))
DRONE_HITBOX = Collider(Vec2(0.0, 0.0), Vec2(30.0, 30.0))
FIGHTER_COLLIDER = Collider(Vec2(0.0, -6.0), Vec2(16.0, 25.0))
FIGHTER_HITBOX = Collider(Vec2(0.0, 0.0), Vec2(37.0, 32.0))
GUNSHIP_COLLIDER = Collider(Vec2(0.0, 0.0), Vec2(25.0, 25.0))
GUNSHIP_HITBOX = Collider(Vec2(0.0, 0.0), Vec2(30.0, 30.0))

DRONE_SPAWN_Y = 130.0
FIGHTER_SPEED = 200.0
GUNSHIP_SPEED = 300.0
GUNSHIP_MIN_Y = 100
GUNSHIP_MAX_Y = 600

FIRST_WAVE_DELAY = NS_PER_SECOND
WAVE_DELAY = NS_PER_SECOND * 2


def create_drone(world: World, pos: Vec2) -> Entity:
    """Create a kamikaze drone at ``pos``."""
    reg = world.registry
    entity = reg.create()
    reg.emplace(entity, Body(pos, DRONE_UV, DRONE_COLLIDER))
    reg.emplace(entity, Enemy(DRONE_HITBOX))
    reg.emplace(entity, Drone(0))
    reg.emplace(entity, Velocity(Vec2(0.0, 0.0)))
    return entity


def spawn_drones(world: World) -> list[Entity]:
    """Spawn one drone beyond the left edge and one beyond the right edge."""
    offset = DRONE_UV.size.y / 2
    return [
        create_drone(world, Vec2(-offset, DRONE_SPAWN_Y)),
        create_drone(world, Vec2(FBO_WIDTH + offset, DRONE_SPAWN_Y)),
    ]


def create_fighter(world: World, pos: Vec2) -> Entity:
    """Create a fighter at ``pos`` flying down with one laser."""
    reg = world.registry
    entity = reg.create()
    reg.emplace(entity, Body(pos, FIGHTER_UV, FIGHTER_COLLIDER))
    reg.emplace(entity, Enemy(FIGHTER_HITBOX))
    reg.emplace(entity, Fighter())
    reg.emplace(entity, Velocity(Vec2(0.0, FIGHTER_SPEED)))
    reg.emplace(entity, Guns([Gun(0, Vec2(0.0, 32.0))]))
    return entity


def _fighter_x(world: World) -> float:
    half_width = FIGHTER_UV.size.x / 2
    return float(world.rng.randint(int(half_width), int(FBO_WIDTH - half_width)))


def spawn_fighters(world: World) -> list[Entity]:
    """Spawn two fighters above the screen, the second higher so it arrives later."""
    first = create_fighter(world, Vec2(_fighter_x(world), -FIGHTER_UV.size.y / 2))
    second = create_fighter(world, Vec2(_fighter_x(world), -FIGHTER_UV.size.y * 2.5))
    return [first, second]


def create_gunship(world: World, pos: Vec2) -> Entity:
    """Create a gunship at ``pos`` flying across the screen, away from its side."""
    reg = world.registry
    entity = reg.create()
    reg.emplace(entity, Body(pos, GUNSHIP_UV, GUNSHIP_COLLIDER))
    reg.emplace(entity, Enemy(GUNSHIP_HITBOX))
    reg.emplace(entity, Gunship())
    speed = GUNSHIP_SPEED if pos.x < FBO_WIDTH // 2 else -GUNSHIP_SPEED
    reg.emplace(entity, Velocity(Vec2(speed, 0.0)))
    reg.emplace(entity, Guns([Gun(0, Vec2(0.0, 0.0))]))
    return entity


def spawn_gunships(world: World) -> list[Entity]:
    """Spawn a gunship beyond each side edge at a random height."""
    offset = GUNSHIP_UV.size.x / 2
    left_y = float(world.rng.randint(GUNSHIP_MIN_Y, GUNSHIP_MAX_Y))
    left = create_gunship(world, Vec2(-offset, left_y))
    right_y = float(world.rng.randint(GUNSHIP_MIN_Y, GUNSHIP_MAX_Y))
    right = create_gunship(world, Vec2(FBO_WIDTH + offset, right_y))
    return [left, right]


def _spawn_delay(world: World) -> SpawnDelay:
    for _, delay in world.registry.view(SpawnDelay):
        return delay
    raise LookupError("there is no enemy spawner")


def create_enemy_spawner(world: World) -> Entity:
    """Create the spawner; the first wave comes after one second."""
    reg = world.registry
    entity = reg.create()
    reg.emplace(entity, SpawnDelay(FIRST_WAVE_DELAY))
    return entity


def reset_enemy_spawner(world: World) -> None:
    """Make the next wave come after one second."""
    _spawn_delay(world).value = FIRST_WAVE_DELAY


def spawn_enemy(world: World, ns: int) -> list[Entity]:
    """Count down the spawn delay and spawn a random wave when it runs out.

    Return the entities spawned, if any.
    """
    delay = _spawn_delay(world)
    delay.value = decrease_delay(delay.value, ns)
    if delay.value != 0:
        return []
    kind = world.rng.randint(0, 2)
    if kind == 0:
        spawned = spawn_drones(world)
    elif kind == 1:
        spawned = spawn_fighters(world)
    else:
        spawned = spawn_gunships(world)
    delay.value = WAVE_DELAY
    return spawned