"""Movement and collision helpers of the shooter."""

from __future__ import annotations

from minigames.geometry import Collider, Rect, Vec2, is_overlap
from minigames.letalka.components import Body, Destroyed, Velocity
from minigames.letalka.world import FBO_HEIGHT, FBO_WIDTH, NS_PER_SECOND, World

# Enemies spawn beyond the screen edge, so only objects far from it are removed.
SAFE_MARGIN = 500.0
DEBUG_SHAPE_COLOR = 0x60FFFFFF


def bodies_overlap(a: Body, b: Body) -> bool:
    """Tell whether the colliders of two bodies overlap."""
    return is_overlap(a.pos, a.collider, b.pos, b.collider)


def body_overlaps(a: Body, pos: Vec2, collider: Collider) -> bool:
    """Tell whether the collider of ``a`` overlaps ``collider`` placed at ``pos``."""
    return is_overlap(a.pos, a.collider, pos, collider)


def apply_velocities(world: World, ns: int) -> None:
    """Move every live body with a velocity, destroying those far off screen."""
    reg = world.registry
    seconds = ns / NS_PER_SECOND
    for entity, body, velocity in reg.view(Body, Velocity, exclude=Destroyed):
        body.pos = body.pos + velocity.value * seconds
        x, y = body.pos.x, body.pos.y
        if (
            x < -SAFE_MARGIN
            or x > FBO_WIDTH + SAFE_MARGIN
            or y < -SAFE_MARGIN
            or y > FBO_HEIGHT + SAFE_MARGIN
        ):
            reg.emplace(entity, Destroyed())


def collider_rects(world: World) -> list[Rect]:
    """Return the screen rectangles of all colliders, for debug drawing."""
    return [
        Rect(
            body.pos + body.collider.pos - body.collider.half_size,
            body.collider.half_size * 2.0,
        )
        for _, body in world.registry.view(Body)
    ]