"""Small 2D geometry primitives shared by the games."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Vec2:
    """An immutable two-component vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def normalized(self) -> Vec2:
        """Return the unit vector pointing the same way."""
        length = math.hypot(self.x, self.y)
        if length == 0:
            raise ValueError("cannot normalize a zero vector")
        return Vec2(self.x / length, self.y / length)

    def clamp(self, low: Vec2, high: Vec2) -> Vec2:
        """Clamp each component into the range given by ``low`` and ``high``."""
        return Vec2(
            min(max(self.x, low.x), high.x),
            min(max(self.y, low.y), high.y),
        )


@dataclass(frozen=True, slots=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    pos: Vec2 = field(default_factory=Vec2)
    size: Vec2 = field(default_factory=Vec2)


@dataclass(frozen=True, slots=True)
class Collider:
    """A box collider: centre relative to the sprite centre, and half size."""

    pos: Vec2 = field(default_factory=Vec2)
    half_size: Vec2 = field(default_factory=Vec2)


@dataclass(frozen=True, slots=True)
class Sprite:
    """A textured quad to draw: where on screen, which part of the texture, and tint."""

    dest: Rect
    uv: Rect
    color: int = 0xFFFFFFFF


def is_overlap(a_pos: Vec2, a_collider: Collider, b_pos: Vec2, b_collider: Collider) -> bool:
    """Tell whether two colliders placed at the given origins overlap.

    Touching edges do not count as an overlap.
    """
    a = a_pos + a_collider.pos
    b = b_pos + b_collider.pos
    ah, bh = a_collider.half_size, b_collider.half_size
    separated = (
        a.x + ah.x <= b.x - bh.x
        or b.x + bh.x <= a.x - ah.x
        or a.y + ah.y <= b.y - bh.y
        or b.y + bh.y <= a.y - ah.y
    )
    return not separated