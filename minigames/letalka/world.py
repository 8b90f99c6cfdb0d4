"""Shared state of the shooter: the entity registry and global switches."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator
from typing import Any

NS_PER_SECOND = 1_000_000_000
FBO_WIDTH = 900
FBO_HEIGHT = 700

Entity = int


def decrease_delay(delay: int, time_step: int) -> int:
    """Return ``delay`` reduced by ``time_step``, never going below zero."""
    return delay - time_step if delay >= time_step else 0


class Registry:
    """A minimal entity-component store keyed by component type."""

    def __init__(self) -> None:
        self._next_id: Entity = 0
        self._entities: dict[Entity, dict[type, Any]] = {}

    def __contains__(self, entity: object) -> bool:
        return entity in self._entities

    def __len__(self) -> int:
        return len(self._entities)

    def _components(self, entity: Entity) -> dict[type, Any]:
        try:
            return self._entities[entity]
        except KeyError:
            raise KeyError(f"unknown entity {entity!r}") from None

    def create(self) -> Entity:
        """Create a new entity with no components and return it."""
        entity = self._next_id
        self._next_id += 1
        self._entities[entity] = {}
        return entity

    def emplace(self, entity: Entity, component: Any) -> Any:
        """Attach ``component`` to ``entity``; each type may be attached once."""
        components = self._components(entity)
        kind = type(component)
        if kind in components:
            raise ValueError(f"entity {entity} already has a {kind.__name__}")
        components[kind] = component
        return component

    def get(self, entity: Entity, kind: type) -> Any:
        """Return the component of type ``kind`` attached to ``entity``."""
        components = self._components(entity)
        try:
            return components[kind]
        except KeyError:
            raise KeyError(f"entity {entity} has no {kind.__name__}") from None

    def has(self, entity: Entity, kind: type) -> bool:
        """Tell whether ``entity`` exists and carries a component of type ``kind``."""
        components = self._entities.get(entity)
        return components is not None and kind in components

    def view(self, *args: type, exclude: type | Iterable[type] = ()) -> Iterator[tuple]:
        """Yield ``(entity, component, ...)`` for entities holding all ``args``.

        Entities holding any type in ``exclude`` are skipped. Each entity is
        checked when it is reached, so changes made while iterating are seen.
        """
        excluded = (exclude,) if isinstance(exclude, type) else tuple(exclude)
        for entity in list(self._entities):
            components = self._entities.get(entity)
            if components is None:
                continue
            if all(kind in components for kind in args) and not any(
                kind in components for kind in excluded
            ):
                yield (entity, *(components[kind] for kind in args))

    def destroy(self, entity: Entity) -> None:
        """Remove ``entity`` and all its components."""
        self._components(entity)
        del self._entities[entity]


class World:
    """Everything the game systems share."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.registry = Registry()
        # Invulnerability of the player's ship
        self.god_mode = False
        # Whether to draw colliders and hitboxes
        self.debug_draw = False