"""Components attached to the shooter's entities."""

from __future__ import annotations

from dataclasses import dataclass, field

from minigames.geometry import Collider, Rect, Vec2


@dataclass
class Body:
    """A sprite-centred object: screen position, texture area and collider."""

    pos: Vec2 = field(default_factory=Vec2)
    uv: Rect = field(default_factory=Rect)
    collider: Collider = field(default_factory=Collider)


@dataclass
class Velocity:
    """Movement in pixels per second."""

    value: Vec2 = field(default_factory=Vec2)


@dataclass
class Destroyed:
    """Marks an object that is neither updated nor drawn and is removed at the end of an update."""


@dataclass
class Enemy:
    """An enemy ship; its hitbox is larger than its collider so it is easier to hit."""

    hitbox: Collider = field(default_factory=Collider)


@dataclass
class Drone:
    """A kamikaze drone; its lifetime in nanoseconds steers its behaviour."""

    lifetime: int = 0


@dataclass
class Fighter:
    """A fighter firing lasers downwards."""


@dataclass
class Gunship:
    """A gunship firing plasma towards the player."""


@dataclass
class Player:
    """The player's ship and the number of enemies it has killed."""

    score: int = 0


@dataclass
class EnemyProjectile:
    """Any projectile fired by an enemy."""


@dataclass
class PlayerLaser:
    """A player's laser flying upwards."""


@dataclass
class EnemyLaser:
    """An enemy laser flying downwards."""


@dataclass
class EnemyPlasma:
    """Enemy plasma flying towards the player."""


@dataclass
class Gun:
    """A gun: time left until the next shot (ns) and muzzle offset from the ship centre."""

    shoot_delay: int = 0
    muzzle_pos: Vec2 = field(default_factory=Vec2)


@dataclass
class Guns:
    """All guns mounted on a ship."""

    guns: list[Gun] = field(default_factory=list)


@dataclass
class SpawnDelay:
    """Time in nanoseconds left before the next wave of enemies."""

    value: int = 0