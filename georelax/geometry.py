"""Plane vector kernel shared by every constraint primitive."""

from __future__ import annotations

import math
from typing import NamedTuple, Tuple

from .types import DegenerateGeometryError, GridKey

_DENOM_EPS = 1e-12

DEFAULT_DECIMALS = 2


class Vec2(NamedTuple):
    """Immutable pair of plane coordinates."""

    x: float
    y: float

    def rounded(self, decimals: int = DEFAULT_DECIMALS) -> "Vec2":
        return round_vec(self, decimals)


def vector(a: Tuple[float, float], b: Tuple[float, float]) -> Vec2:
    """Return the vector from ``a`` to ``b``."""

    return Vec2(b[0] - a[0], b[1] - a[1])


def add(a: Tuple[float, float], b: Tuple[float, float]) -> Vec2:
    return Vec2(a[0] + b[0], a[1] + b[1])


def dot(a: Tuple[float, float], b: Tuple[float, float]) -> float:
    return a[0] * b[0] + a[1] * b[1]


def cross(a: Tuple[float, float], b: Tuple[float, float]) -> float:
    return a[0] * b[1] - a[1] * b[0]


def norm_sq(v: Tuple[float, float]) -> float:
    return dot(v, v)


def norm(v: Tuple[float, float]) -> float:
    return math.sqrt(norm_sq(v))


def normalize(v: Tuple[float, float]) -> Vec2:
    """Return ``v`` scaled to unit length.

    Raises :class:`DegenerateGeometryError` for a zero-length vector, which has
    no direction.
    """

    length = norm(v)
    if length <= _DENOM_EPS:
        raise DegenerateGeometryError(f"cannot normalize zero-length vector {tuple(v)!r}")
    return Vec2(v[0] / length, v[1] / length)


def distance(a: Tuple[float, float], b: Tuple[float, float]) -> float:
    return norm(vector(a, b))


def angle_between(u: Tuple[float, float], v: Tuple[float, float]) -> float:
    """Signed angle from ``u`` to ``v`` in ``(-pi, pi]``."""

    u_unit = normalize(u)
    v_unit = normalize(v)
    return math.atan2(cross(u_unit, v_unit), dot(u_unit, v_unit))


def angle_at_vertex(
    a: Tuple[float, float], vertex: Tuple[float, float], c: Tuple[float, float]
) -> float:
    """Signed angle ``a-vertex-c`` measured from ray ``vertex->a`` to ray ``vertex->c``."""

    return angle_between(vector(vertex, a), vector(vertex, c))


def _scale(decimals: int) -> int:
    return 10 ** decimals


def round_coordinate(value: float, decimals: int = DEFAULT_DECIMALS) -> float:
    """Round half up to ``decimals`` digits."""

    scale = _scale(decimals)
    return math.floor(value * scale + 0.5) / scale


def round_vec(v: Tuple[float, float], decimals: int = DEFAULT_DECIMALS) -> Vec2:
    return vec_from_key(grid_key(v, decimals), decimals)


def grid_key(v: Tuple[float, float], decimals: int = DEFAULT_DECIMALS) -> GridKey:
    """Integer grid cell holding ``v`` at the given precision."""

    scale = _scale(decimals)
    return (math.floor(v[0] * scale + 0.5), math.floor(v[1] * scale + 0.5))


def vec_from_key(key: GridKey, decimals: int = DEFAULT_DECIMALS) -> Vec2:
    scale = _scale(decimals)
    return Vec2(key[0] / scale, key[1] / scale)


__all__ = [
    "DEFAULT_DECIMALS",
    "Vec2",
    "add",
    "angle_at_vertex",
    "angle_between",
    "cross",
    "distance",
    "dot",
    "grid_key",
    "norm",
    "norm_sq",
    "normalize",
    "round_coordinate",
    "round_vec",
    "vec_from_key",
    "vector",
]
