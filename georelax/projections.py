"""Read-only views of a scene for renderers and reports."""

from __future__ import annotations

import math
from typing import Dict, List, Tuple

from .geometry import Vec2
from .solver.model import Point, Scene
from .types import PointName


def point_coords(scene: Scene) -> Dict[PointName, Tuple[float, float]]:
    return {point.name: (point.position.x, point.position.y) for point in scene}


def stability(scene: Scene) -> Dict[PointName, bool]:
    return {point.name: point.stable for point in scene}


def heatmap(point: Point, keep: float = 0.1) -> List[Tuple[Vec2, float]]:
    """Return the best ``keep`` fraction of the latest candidate cloud, best first.

    Unevaluated and degenerate cells are left out.
    """

    if not 0.0 <= keep <= 1.0:
        raise ValueError("keep must lie in [0, 1]")
    scored = [
        (position, score)
        for position, score in point.candidates()
        if score is not None and math.isfinite(score)
    ]
    scored.sort(key=lambda item: item[1], reverse=True)
    count = len(scored) - int(len(scored) * (1.0 - keep))
    return scored[:count]


def measure_rows(scene: Scene) -> List[Tuple[str, float]]:
    return [(measure.title, measure.length) for measure in scene.measures if measure is not None]


def measure_report(scene: Scene, unit: str = "cm") -> str:
    """One line per declared measure, blank lines for breaks."""

    lines: List[str] = []
    for measure in scene.measures:
        if measure is None:
            lines.append("")
            continue
        lines.append(f"{measure.title} = {measure.length:.2f} {unit}")
    return "\n".join(lines)


__all__ = ["heatmap", "measure_report", "measure_rows", "point_coords", "stability"]
