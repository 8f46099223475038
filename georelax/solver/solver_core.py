from __future__ import annotations

import logging
import math
from typing import Dict, List, Mapping, Optional, Tuple

import numpy as np

from ..geometry import Vec2, vec_from_key
from ..logging_utils import apply_debug_logging
from ..types import DegenerateGeometryError, GridKey, PointName
from .config import get_default_options
from .model import PassReport, Point, Scene, Solution, SolveOptions
from .sampling import seed_candidates

logger = logging.getLogger(__name__)


def _evaluate(point: Point, trial: Vec2, positions: Mapping[PointName, Vec2]) -> Tuple[float, bool]:
    try:
        score = float(point.rule(trial, positions))
    except (DegenerateGeometryError, ZeroDivisionError):
        return -math.inf, True
    if math.isnan(score):
        return -math.inf, True
    return score, False


def evaluate_candidates(point: Point, positions: Mapping[PointName, Vec2]) -> int:
    """Score every cell of ``point.scores`` in place and return the degenerate count.

    Degenerate candidates (zero-length directions, division by zero, NaN
    results) score ``-inf`` so they can never win selection. Unknown point
    names propagate; the map is then left partly unevaluated and
    ``point.degenerate`` counts only the cells scored before the failure.
    """

    point.degenerate = 0
    for key in point.scores:
        score, failed = _evaluate(point, vec_from_key(key, point.decimals), positions)
        point.scores[key] = score
        if failed:
            point.degenerate += 1
    return point.degenerate


def find_best_candidate(scores: Mapping[GridKey, Optional[float]]) -> Tuple[GridKey, float]:
    """Return the highest scoring candidate; ties keep the earliest inserted one."""

    items = iter(scores.items())
    try:
        best_key, best_score = next(items)
    except StopIteration:
        raise ValueError("cannot select from an empty candidate map") from None
    if best_score is None:
        raise ValueError(f"candidate {best_key} was never evaluated")
    for key, score in items:
        if score is None:
            raise ValueError(f"candidate {key} was never evaluated")
        if best_score >= score:
            continue
        best_key, best_score = key, score
    return best_key, best_score


def update_with_best_score(point: Point) -> bool:
    """Settle ``point`` from its evaluated candidate map; return whether it moved.

    The baseline is the score recorded for the exact current cell in this
    pass. When that cell was not sampled there is no baseline, and the point
    moves to the best candidate even if that is worse than where it stood.
    """

    current = point.scores.get(point.key)
    best_key, best_score = find_best_candidate(point.scores)
    point.stable = current is not None and best_score <= current
    if point.stable:
        point.score = current
        return False
    point.position = vec_from_key(best_key, point.decimals)
    point.score = best_score
    return True


class Relaxation:
    """Drives relaxation passes over a scene.

    The caller decides when to stop; once every point is stable a pass does
    nothing until :meth:`Scene.invalidate` is called. Keep one relaxation per
    scene: it owns the random generator and the pass counter, so consecutive
    passes draw fresh candidate clouds.
    """

    def __init__(
        self,
        scene: Scene,
        options: Optional[SolveOptions] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.scene = scene
        self.options = options if options is not None else get_default_options()
        self.rng = rng if rng is not None else np.random.default_rng(self.options.random_seed)
        self.passes = 0

    @property
    def idle(self) -> bool:
        return self.scene.all_stable()

    def run_pass(self) -> PassReport:
        report = PassReport(index=self.passes)
        if self.idle:
            report.idle = True
            logger.debug("run_pass: scene is stable, pass %d skipped", report.index)
            return report

        options = self.options
        positions = self.scene.positions(frozen=options.snapshot)
        for point in self.scene:
            if options.skip_stable and point.stable:
                continue
            point.scores = seed_candidates(
                point.position,
                self.rng,
                samples=options.samples,
                radius=options.radius,
                decimals=point.decimals,
            )
            degenerate = evaluate_candidates(point, positions)
            moved = update_with_best_score(point)
            report.evaluated.append(point.name)
            if moved:
                report.moved.append(point.name)
            if not point.stable:
                report.unstable.append(point.name)
            if degenerate:
                report.degenerate[point.name] = degenerate
                logger.warning(
                    "Point %s: %d of %d candidates hit degenerate geometry",
                    point.name,
                    degenerate,
                    len(point.scores),
                )
            logger.debug(
                "run_pass: pass=%d point=%s candidates=%d score=%.6g stable=%s",
                report.index,
                point.name,
                len(point.scores),
                point.score,
                point.stable,
            )

        self.passes += 1
        logger.info(
            "Pass %d: evaluated=%d moved=%d unstable=%d",
            report.index,
            len(report.evaluated),
            len(report.moved),
            len(report.unstable),
        )
        return report


def solve(scene: Scene, options: Optional[SolveOptions] = None) -> Solution:
    """Run passes until every point is stable or ``options.max_passes`` is spent."""

    relaxation = Relaxation(scene, options)
    limit = relaxation.options.max_passes
    last: Optional[PassReport] = None
    while not relaxation.idle and relaxation.passes < limit:
        last = relaxation.run_pass()

    success = scene.all_stable()
    warnings: List[str] = []
    if last is not None:
        for name, count in last.degenerate.items():
            warnings.append(f"point {name}: {count} degenerate candidate(s) in the final pass")
    if not success:
        unstable = [point.name for point in scene if not point.stable]
        warnings.append(
            f"scene did not stabilise within {limit} pass(es); unstable points: {', '.join(unstable)}"
        )

    logger.info(
        "Solve finished after %d pass(es): success=%s warnings=%d",
        relaxation.passes,
        success,
        len(warnings),
    )
    return Solution(
        point_coords={point.name: (point.position.x, point.position.y) for point in scene},
        scores={point.name: point.score for point in scene},
        stable={point.name: point.stable for point in scene},
        success=success,
        passes=relaxation.passes,
        warnings=warnings,
    )


def score_solution(solution: Solution) -> Tuple[int, float]:
    """Ranking key for solutions: fewer unstable points first, then higher total score."""

    unstable = sum(1 for flag in solution.stable.values() if not flag)
    finite = [score for score in solution.scores.values() if math.isfinite(score)]
    return unstable, -float(sum(finite))


apply_debug_logging(globals(), logger=logger, skip={"_evaluate"})


__all__ = [
    "Relaxation",
    "evaluate_candidates",
    "find_best_candidate",
    "score_solution",
    "solve",
    "update_with_best_score",
]
