import math

import pytest

from minigames.geometry import Collider, Rect, Sprite, Vec2, is_overlap


def test_add_then_subtract_round_trip():
    a = Vec2(1.5, -2.0)
    b = Vec2(3.0, 4.25)
    assert (a + b) - b == a


def test_multiply_matches_repeated_addition():
    a = Vec2(2.5, -7.0)
    assert a * 2 == a + a


def test_negation_cancels():
    a = Vec2(3.0, -9.0)
    assert -a + a == Vec2()
    assert -(-a) == a


def test_normalized_has_unit_length():
    n = Vec2(3.0, 4.0).normalized()
    assert math.hypot(n.x, n.y) == pytest.approx(1.0)
    assert n.x / n.y == pytest.approx(3.0 / 4.0)


def test_normalize_zero_vector_raises():
    with pytest.raises(ValueError):
        Vec2().normalized()


def test_clamp_keeps_inside_point_and_bounds_outside():
    low, high = Vec2(0.0, 0.0), Vec2(10.0, 20.0)
    inside = Vec2(5.0, 6.0)
    assert inside.clamp(low, high) == inside
    assert Vec2(-5.0, 50.0).clamp(low, high) == Vec2(low.x, high.y)


def test_rect_and_collider_defaults_are_zero():
    assert Rect() == Rect(Vec2(), Vec2())
    assert Collider() == Collider(Vec2(), Vec2())


def test_sprite_default_color_is_opaque_white():
    sprite = Sprite(Rect(), Rect())
    assert sprite.color == 0xFFFFFFFF


def test_same_position_overlaps():
    c = Collider(Vec2(), Vec2(1.0, 1.0))
    assert is_overlap(Vec2(5.0, 5.0), c, Vec2(5.0, 5.0), c) is True


def test_touching_is_not_overlap():
    c = Collider(Vec2(), Vec2(1.0, 1.0))
    assert is_overlap(Vec2(0.0, 0.0), c, Vec2(2.0, 0.0), c) is False
    assert is_overlap(Vec2(0.0, 0.0), c, Vec2(0.0, 2.0), c) is False


def test_collider_offset_is_applied():
    plain = Collider(Vec2(), Vec2(1.0, 1.0))
    shifted = Collider(Vec2(2.0, 0.0), Vec2(1.0, 1.0))
    assert is_overlap(Vec2(0.0, 0.0), shifted, Vec2(2.0, 0.0), plain) is True
    assert is_overlap(Vec2(0.0, 0.0), plain, Vec2(2.0, 0.0), plain) is False


@pytest.mark.parametrize(
    "a_pos, b_pos",
    [
        (Vec2(0.0, 0.0), Vec2(1.0, 1.0)),
        (Vec2(0.0, 0.0), Vec2(5.0, 0.0)),
        (Vec2(-3.0, 2.0), Vec2(-2.5, 2.5)),
    ],
)
def test_overlap_is_symmetric(a_pos, b_pos):
    a = Collider(Vec2(0.5, 0.0), Vec2(1.0, 2.0))
    b = Collider(Vec2(0.0, -0.5), Vec2(2.0, 1.0))
    assert is_overlap(a_pos, a, b_pos, b) == is_overlap(b_pos, b, a_pos, a)