import random

import pytest

from minigames.letalka.world import (
    NS_PER_SECOND,
    Registry,
    World,
    decrease_delay,
)


class Alpha:
    pass


class Beta:
    pass


def test_decrease_delay_subtracts():
    assert decrease_delay(NS_PER_SECOND, NS_PER_SECOND // 4) == NS_PER_SECOND * 3 // 4


def test_decrease_delay_never_negative():
    assert decrease_delay(3, 5) == 0
    assert decrease_delay(5, 5) == 0


def test_decrease_delay_by_zero_keeps_value():
    assert decrease_delay(NS_PER_SECOND, 0) == 1000000000


def test_create_gives_distinct_entities():
    reg = Registry()
    ents = [reg.create() for _ in range(5)]
    assert len(set(ents)) == 5
    assert len(reg) == 5


def test_emplace_and_get():
    reg = Registry()
    ent = reg.create()
    comp = Alpha()
    assert reg.emplace(ent, comp) is comp
    assert reg.get(ent, Alpha) is comp
    assert reg.has(ent, Alpha)
    assert not reg.has(ent, Beta)


def test_emplace_twice_raises():
    reg = Registry()
    ent = reg.create()
    reg.emplace(ent, Alpha())
    with pytest.raises(ValueError):
        reg.emplace(ent, Alpha())


def test_get_missing_component_raises():
    reg = Registry()
    ent = reg.create()
    with pytest.raises(KeyError):
        reg.get(ent, Alpha)


def test_view_filters_and_excludes():
    reg = Registry()
    a = reg.create()
    b = reg.create()
    c = reg.create()
    reg.emplace(a, Alpha())
    reg.emplace(b, Alpha())
    reg.emplace(b, Beta())
    reg.emplace(c, Beta())
    assert [row[0] for row in reg.view(Alpha)] == [a, b]
    assert [row[0] for row in reg.view(Alpha, exclude=Beta)] == [a]
    assert [row[0] for row in reg.view(Alpha, Beta)] == [b]


def test_view_yields_components():
    reg = Registry()
    ent = reg.create()
    alpha, beta = Alpha(), Beta()
    reg.emplace(ent, alpha)
    reg.emplace(ent, beta)
    assert list(reg.view(Beta, Alpha)) == [(ent, beta, alpha)]


def test_view_sees_changes_during_iteration():
    reg = Registry()
    first = reg.create()
    second = reg.create()
    reg.emplace(first, Alpha())
    reg.emplace(second, Alpha())
    seen = []
    for ent, _ in reg.view(Alpha, exclude=(Beta,)):
        seen.append(ent)
        if ent == first:
            reg.emplace(second, Beta())
    assert seen == [first]


def test_destroy_removes_entity():
    reg = Registry()
    ent = reg.create()
    reg.emplace(ent, Alpha())
    reg.destroy(ent)
    assert ent not in reg
    assert list(reg.view(Alpha)) == []
    with pytest.raises(KeyError):
        reg.get(ent, Alpha)
    with pytest.raises(KeyError):
        reg.destroy(ent)


def test_world_defaults():
    rng = random.Random(1)
    world = World(rng)
    assert world.rng is rng
    assert world.god_mode is False
    assert world.debug_draw is False
    assert len(world.registry) == 0