"""Composable scoring primitives.

Every primitive scores a trial ``position`` of the point being solved against
the stored positions of other points. Scores follow a single convention:
higher is better, and ``0`` means exactly satisfied for the ``-|error|`` family.
Composite rules add primitives together, so several soft relations can be
satisfied at the same time instead of optimising only the worst one.

Example::

    scene.register(
        "B3",
        lambda p, pts: at_angle(math.pi / 4, pts["A2"], pts["P"], p)
        + on_circle(p, pts["P"], distance(pts["P"], pts["A2"])),
    )
"""

from __future__ import annotations

from typing import Mapping, Tuple

from .geometry import (
    Vec2,
    add,
    angle_at_vertex,
    cross,
    distance,
    normalize,
    vector,
)
from .types import PointName, ScoringRule

Coord = Tuple[float, float]


def is_greater(a: float, b: float) -> float:
    return a - b


def is_lowest(value: float) -> float:
    return -value


def is_lowest_abs(value: float) -> float:
    return is_lowest(abs(value))


def is_highest(value: float) -> float:
    return value


def is_highest_abs(value: float) -> float:
    return is_highest(abs(value))


def is_equal(a: float, b: float) -> float:
    return is_lowest_abs(a - b)


def at_position(position: Coord, x: float, y: float) -> float:
    return -distance(position, (x, y))


def on_circle(position: Coord, center: Coord, radius: float) -> float:
    return is_equal(radius, distance(position, center))


def at_distance_equal(a: float, b: float) -> float:
    return is_equal(a, b)


def at_angle(angle: float, a: Coord, vertex: Coord, c: Coord) -> float:
    """Score the signed angle ``a-vertex-c`` against ``angle`` (radians).

    Any of the three arguments may be the trial position.
    """

    return is_equal(angle_at_vertex(a, vertex, c), angle)


def translated_by_vector(position: Coord, origin: Coord, offset: Coord) -> float:
    return -distance(position, add(origin, offset))


def translated_by_segment(position: Coord, origin: Coord, start: Coord, end: Coord) -> float:
    return translated_by_vector(position, origin, vector(start, end))


def at_middle_of(position: Coord, *points: Coord) -> float:
    """Penalise the largest distance to ``points``.

    This minimises the enclosing radius rather than pulling toward the
    centroid.
    """

    if not points:
        raise ValueError("at_middle_of requires at least one point")
    return is_lowest(max(distance(position, other) for other in points))


def closer_to_than(position: Coord, near: Coord, far: Coord) -> float:
    return is_greater(distance(position, far), distance(position, near))


def aligned_with(position: Coord, a: Coord, b: Coord) -> float:
    """Penalise the perpendicular distance from ``position`` to line ``a-b``."""

    return is_lowest_abs(cross(normalize(vector(a, b)), vector(a, position)))


def combine(*rules: ScoringRule) -> ScoringRule:
    """Return a rule scoring the sum of ``rules``."""

    if not rules:
        raise ValueError("combine requires at least one rule")

    def composite(position: Vec2, points: Mapping[PointName, Vec2]) -> float:
        return sum(rule(position, points) for rule in rules)

    return composite


__all__ = [
    "aligned_with",
    "at_angle",
    "at_distance_equal",
    "at_middle_of",
    "at_position",
    "closer_to_than",
    "combine",
    "is_equal",
    "is_greater",
    "is_highest",
    "is_highest_abs",
    "is_lowest",
    "is_lowest_abs",
    "on_circle",
    "translated_by_segment",
    "translated_by_vector",
]
