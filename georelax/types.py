from __future__ import annotations

import re
from typing import TYPE_CHECKING, Callable, Mapping, Tuple

if TYPE_CHECKING:  # pragma: no cover - import cycle guard
    from .geometry import Vec2

PointName = str
GridKey = Tuple[int, int]
ScoringRule = Callable[["Vec2", Mapping[PointName, "Vec2"]], float]


class GeoRelaxError(Exception):
    """Base class for errors raised by the relaxation solver."""


class UnknownPointError(GeoRelaxError, KeyError):
    """Raised when a point name cannot be resolved against the scene."""

    def __init__(self, name: PointName):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"no point named {self.name!r}"


class DuplicatePointError(GeoRelaxError, ValueError):
    """Raised when a point name is registered twice."""

    def __init__(self, name: PointName):
        super().__init__(f"point {name!r} is already registered")
        self.name = name


class DegenerateGeometryError(GeoRelaxError, ArithmeticError):
    """Raised when a direction or angle is requested from a zero-length vector."""


_POINT_NAME_RE = re.compile(r"^\S+$")


def is_point_name(value: object) -> bool:
    """Return ``True`` when *value* is a usable point identifier."""

    if not isinstance(value, str):
        return False
    if not value:
        return False
    return bool(_POINT_NAME_RE.match(value))


__all__ = [
    "DegenerateGeometryError",
    "DuplicatePointError",
    "GeoRelaxError",
    "GridKey",
    "PointName",
    "ScoringRule",
    "UnknownPointError",
    "is_point_name",
]
