import math

import pytest

from georelax import DegenerateGeometryError, Vec2
from georelax.constraints import (
    aligned_with,
    at_angle,
    at_distance_equal,
    at_middle_of,
    at_position,
    closer_to_than,
    combine,
    is_equal,
    is_greater,
    is_highest_abs,
    is_lowest_abs,
    on_circle,
    translated_by_segment,
    translated_by_vector,
)


def test_scalar_helpers():
    assert is_greater(5.0, 3.0) == 2.0
    assert is_lowest_abs(-4.0) == -4.0
    assert is_highest_abs(-4.0) == 4.0
    assert is_equal(2.0, 2.0) == 0.0
    assert is_equal(2.0, 5.0) == -3.0


def test_at_position_and_on_circle():
    assert at_position((3.0, 4.0), 0.0, 0.0) == pytest.approx(-5.0)
    assert at_position((10.0, 0.0), 10.0, 0.0) == 0.0
    assert on_circle((3.0, 4.0), (0.0, 0.0), 5.0) == pytest.approx(0.0)
    assert on_circle((6.0, 8.0), (0.0, 0.0), 5.0) == pytest.approx(-5.0)
    assert on_circle((0.0, 1.0), (0.0, 0.0), 5.0) == pytest.approx(-4.0)


def test_at_distance_equal():
    assert at_distance_equal(2.0, 5.0) == -3.0
    assert at_distance_equal(5.0, 2.0) == -3.0


def test_at_angle_scores_signed_angle():
    assert at_angle(math.pi / 2, (1.0, 0.0), (0.0, 0.0), (0.0, 1.0)) == pytest.approx(0.0)
    assert at_angle(math.pi / 2, (0.0, 1.0), (0.0, 0.0), (1.0, 0.0)) == pytest.approx(-math.pi)
    with pytest.raises(DegenerateGeometryError):
        at_angle(math.pi / 2, (0.0, 0.0), (0.0, 0.0), (1.0, 0.0))


def test_translations():
    assert translated_by_vector((3.0, 3.0), (1.0, 1.0), (2.0, 2.0)) == pytest.approx(0.0)
    assert translated_by_vector((0.0, 0.0), (1.0, 1.0), (2.0, 2.0)) == pytest.approx(-math.hypot(3.0, 3.0))
    assert translated_by_segment((3.0, 3.0), (1.0, 1.0), (5.0, 5.0), (7.0, 7.0)) == pytest.approx(0.0)


def test_at_middle_of_minimises_worst_distance_not_centroid():
    points = [(0.0, 0.0), (0.0, 0.0), (10.0, 0.0)]
    middle = at_middle_of((5.0, 0.0), *points)
    centroid = at_middle_of((10.0 / 3.0, 0.0), *points)

    assert middle == pytest.approx(-5.0)
    assert centroid == pytest.approx(-20.0 / 3.0)
    assert middle > centroid

    with pytest.raises(ValueError):
        at_middle_of((0.0, 0.0))


def test_closer_to_than_is_positive_when_satisfied():
    assert closer_to_than((1.0, 0.0), (0.0, 0.0), (10.0, 0.0)) == pytest.approx(8.0)
    assert closer_to_than((9.0, 0.0), (0.0, 0.0), (10.0, 0.0)) == pytest.approx(-8.0)


def test_aligned_with_measures_perpendicular_distance():
    assert aligned_with((5.0, 3.0), (0.0, 0.0), (10.0, 0.0)) == pytest.approx(-3.0)
    assert aligned_with((5.0, -3.0), (0.0, 0.0), (10.0, 0.0)) == pytest.approx(-3.0)
    assert aligned_with((42.0, 0.0), (0.0, 0.0), (10.0, 0.0)) == 0.0
    with pytest.raises(DegenerateGeometryError):
        aligned_with((1.0, 1.0), (2.0, 2.0), (2.0, 2.0))


def test_combine_sums_rules():
    rule = combine(
        lambda p, pts: at_position(p, 0.0, 0.0),
        lambda p, pts: on_circle(p, pts["O"], 1.0),
    )
    assert rule(Vec2(3.0, 4.0), {"O": Vec2(0.0, 0.0)}) == pytest.approx(-5.0 - 4.0)

    with pytest.raises(ValueError):
        combine()
