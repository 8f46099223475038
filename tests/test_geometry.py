import math

import pytest

from georelax import DegenerateGeometryError, GeoRelaxError
from georelax.geometry import (
    Vec2,
    add,
    angle_at_vertex,
    angle_between,
    cross,
    distance,
    dot,
    grid_key,
    norm,
    norm_sq,
    normalize,
    round_coordinate,
    round_vec,
    vec_from_key,
    vector,
)


def test_basic_vector_arithmetic():
    a = Vec2(1.0, 2.0)
    b = Vec2(4.0, 6.0)

    assert vector(a, b) == Vec2(3.0, 4.0)
    assert add(a, b) == Vec2(5.0, 8.0)
    assert norm_sq(vector(a, b)) == pytest.approx(25.0)
    assert norm(vector(a, b)) == pytest.approx(5.0)
    assert distance(a, b) == pytest.approx(5.0)
    assert dot((1.0, 0.0), (0.0, 1.0)) == 0.0
    assert cross((1.0, 0.0), (0.0, 1.0)) == 1.0
    assert cross((0.0, 1.0), (1.0, 0.0)) == -1.0


def test_vec2_is_a_value_type():
    assert Vec2(1.0, 2.0) == Vec2(1.0, 2.0)
    assert Vec2(1.0, 2.0) == (1.0, 2.0)
    assert len({Vec2(1.0, 2.0), Vec2(1.0, 2.0)}) == 1
    with pytest.raises(AttributeError):
        Vec2(1.0, 2.0).x = 3.0  # type: ignore[misc]


def test_normalize_unit_length_and_zero_vector():
    unit = normalize((3.0, 4.0))
    assert unit.x == pytest.approx(0.6)
    assert unit.y == pytest.approx(0.8)

    with pytest.raises(DegenerateGeometryError):
        normalize((0.0, 0.0))


def test_angle_between_is_signed():
    assert angle_between((1.0, 0.0), (0.0, 1.0)) == pytest.approx(math.pi / 2)
    assert angle_between((0.0, 1.0), (1.0, 0.0)) == pytest.approx(-math.pi / 2)
    assert angle_between((2.0, 0.0), (5.0, 5.0)) == pytest.approx(math.pi / 4)
    # opposite directions land on +pi, the closed end of (-pi, pi]
    assert angle_between((1.0, 0.0), (-1.0, 0.0)) == pytest.approx(math.pi)


def test_angle_at_vertex_and_degenerate_vertex():
    assert angle_at_vertex((1.0, 0.0), (0.0, 0.0), (0.0, 1.0)) == pytest.approx(math.pi / 2)
    assert angle_at_vertex((0.0, 1.0), (0.0, 0.0), (1.0, 0.0)) == pytest.approx(-math.pi / 2)

    with pytest.raises(GeoRelaxError):
        angle_at_vertex((0.0, 0.0), (0.0, 0.0), (1.0, 0.0))


def test_round_coordinate_rounds_half_up():
    assert round_coordinate(0.125) == 0.13
    assert round_coordinate(-0.125) == -0.12
    assert round_coordinate(1.234) == 1.23
    assert round_coordinate(1.5, decimals=0) == 2.0


def test_grid_key_round_trip():
    key = grid_key((1.234, -5.678))
    assert key == (123, -568)
    assert vec_from_key(key) == Vec2(1.23, -5.68)

    rounded = round_vec((1.234, -5.678))
    assert round_vec(rounded) == rounded
    assert grid_key(rounded) == key
    assert Vec2(1.234, -5.678).rounded(1) == Vec2(1.2, -5.7)
