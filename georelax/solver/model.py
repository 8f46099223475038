"""Core data structures for the relaxation solver."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from ..geometry import DEFAULT_DECIMALS, Vec2, distance, grid_key, round_vec, vec_from_key
from ..types import (
    DuplicatePointError,
    GridKey,
    PointName,
    ScoringRule,
    UnknownPointError,
    is_point_name,
)


@dataclass(repr=False, eq=False)
class Point:
    """A named point positioned by its own scoring rule."""

    name: PointName
    rule: ScoringRule
    position: Vec2 = Vec2(0.0, 0.0)
    score: float = -math.inf
    # candidate grid key -> score; ``None`` marks a sampled, not yet evaluated cell
    scores: Dict[GridKey, Optional[float]] = field(default_factory=dict)
    stable: bool = False
    degenerate: int = 0
    decimals: int = DEFAULT_DECIMALS

    def __post_init__(self) -> None:
        self.position = round_vec(self.position, self.decimals)

    def __repr__(self) -> str:
        return (
            f"Point(name={self.name!r}, position=({self.position.x:.{self.decimals}f}, "
            f"{self.position.y:.{self.decimals}f}), score={self.score:.6g}, stable={self.stable})"
        )

    @property
    def key(self) -> GridKey:
        return grid_key(self.position, self.decimals)

    def candidates(self) -> Iterator[Tuple[Vec2, Optional[float]]]:
        """Yield ``(position, score)`` for the most recent candidate cloud."""

        for key, score in self.scores.items():
            yield vec_from_key(key, self.decimals), score


class PositionView(Mapping[PointName, Vec2]):
    """Read-only name to position lookup handed to scoring rules.

    A live view reads positions as they are updated during a pass; a frozen
    view copies every position once when it is created.
    """

    def __init__(self, points: Mapping[PointName, Point], *, frozen: bool = False) -> None:
        self._points = points
        self._frozen: Optional[Dict[PointName, Vec2]] = None
        if frozen:
            self._frozen = {name: point.position for name, point in points.items()}

    @property
    def frozen(self) -> bool:
        return self._frozen is not None

    def __getitem__(self, name: PointName) -> Vec2:
        try:
            if self._frozen is not None:
                return self._frozen[name]
            return self._points[name].position
        except KeyError:
            raise UnknownPointError(name) from None

    def __iter__(self) -> Iterator[PointName]:
        return iter(self._points)

    def __len__(self) -> int:
        return len(self._points)


@dataclass(eq=False)
class Measure:
    """Distance read-out between two points."""

    a: Point
    b: Point
    label: Optional[str] = None

    @property
    def title(self) -> str:
        if self.label is not None:
            return self.label
        return f"[ {self.a.name} ; {self.b.name} ]"

    @property
    def length(self) -> float:
        return distance(self.a.position, self.b.position)


class Scene:
    """Point registry plus the lines, segments, polygons and measures declared over it.

    Points are kept in registration order, which is also the order in which a
    relaxation pass visits them.
    """

    def __init__(self, decimals: int = DEFAULT_DECIMALS) -> None:
        if decimals < 0:
            raise ValueError("decimals must be non-negative")
        self.decimals = decimals
        self._points: Dict[PointName, Point] = {}
        self.lines: List[Tuple[Point, Point]] = []
        self.segments: List[Tuple[Point, Point]] = []
        self.polygons: List[Tuple[Point, ...]] = []
        self.measures: List[Optional[Measure]] = []

    def __repr__(self) -> str:
        return f"Scene(points={len(self._points)}, decimals={self.decimals})"

    def __iter__(self) -> Iterator[Point]:
        return iter(list(self._points.values()))

    def __len__(self) -> int:
        return len(self._points)

    def __contains__(self, name: object) -> bool:
        return name in self._points

    @property
    def points(self) -> List[Point]:
        return list(self._points.values())

    @property
    def names(self) -> List[PointName]:
        return list(self._points)

    def new_name(self) -> PointName:
        return f"P{len(self._points)}"

    def register(
        self,
        name: Optional[PointName],
        rule: ScoringRule,
        *,
        position: Tuple[float, float] = (0.0, 0.0),
    ) -> Point:
        """Add a point scored by ``rule``; ``name=None`` picks ``P<n>``."""

        if name is None:
            name = self.new_name()
        if not is_point_name(name):
            raise ValueError(f"invalid point name {name!r}")
        if name in self._points:
            raise DuplicatePointError(name)
        if not callable(rule):
            raise TypeError(f"scoring rule for {name!r} must be callable")
        point = Point(name=name, rule=rule, position=Vec2(*position), decimals=self.decimals)
        self._points[name] = point
        return point

    def resolve(self, name: PointName) -> Point:
        try:
            return self._points[name]
        except KeyError:
            raise UnknownPointError(name) from None

    def positions(self, *, frozen: bool = False) -> PositionView:
        return PositionView(self._points, frozen=frozen)

    def all_stable(self) -> bool:
        return all(point.stable for point in self._points.values())

    def invalidate(self) -> None:
        """Mark every point unstable so the next pass re-solves the scene."""

        for point in self._points.values():
            point.stable = False

    def add_line(self, a: PointName, b: PointName) -> Tuple[Point, Point]:
        line = (self.resolve(a), self.resolve(b))
        self.lines.append(line)
        return line

    def add_segment(self, a: PointName, b: PointName) -> Tuple[Point, Point]:
        segment = (self.resolve(a), self.resolve(b))
        self.segments.append(segment)
        return segment

    def add_polygon(self, *names: PointName) -> Tuple[Point, ...]:
        """Declare a closed polygon; its edges are added as segments too."""

        if len(names) < 3:
            raise ValueError("a polygon needs at least three points")
        polygon = tuple(self.resolve(name) for name in names)
        for idx, name in enumerate(names):
            self.add_segment(name, names[(idx + 1) % len(names)])
        self.polygons.append(polygon)
        return polygon

    def add_measure(self, a: PointName, b: PointName, label: Optional[str] = None) -> Measure:
        measure = Measure(self.resolve(a), self.resolve(b), label)
        self.measures.append(measure)
        return measure

    def add_measure_break(self) -> None:
        self.measures.append(None)


@dataclass
class SolveOptions:
    """Relaxation options."""

    samples: int = 10_000
    radius: float = 100.0
    random_seed: Optional[int] = None
    snapshot: bool = False
    skip_stable: bool = False
    max_passes: int = 1_000

    def __post_init__(self) -> None:
        if self.samples < 1:
            raise ValueError("samples must be at least 1")
        if not self.radius > 0.0:
            raise ValueError("radius must be positive")
        if self.max_passes < 0:
            raise ValueError("max_passes must be non-negative")


@dataclass
class PassReport:
    """Outcome of a single relaxation pass."""

    index: int
    idle: bool = False
    evaluated: List[PointName] = field(default_factory=list)
    moved: List[PointName] = field(default_factory=list)
    unstable: List[PointName] = field(default_factory=list)
    degenerate: Dict[PointName, int] = field(default_factory=dict)

    @property
    def all_stable(self) -> bool:
        return self.idle or not self.unstable


@dataclass
class Solution:
    point_coords: Dict[PointName, Tuple[float, float]]
    scores: Dict[PointName, float]
    stable: Dict[PointName, bool]
    success: bool
    passes: int
    warnings: List[str] = field(default_factory=list)


__all__ = [
    "Measure",
    "PassReport",
    "Point",
    "PositionView",
    "Scene",
    "Solution",
    "SolveOptions",
]
