"""Solver façade: stochastic relaxation of point scenes."""

from __future__ import annotations

from .config import get_default_options, set_default_options
from .model import (
    Measure,
    PassReport,
    Point,
    PositionView,
    Scene,
    Solution,
    SolveOptions,
)
from .sampling import sample_offsets, seed_candidates
from .solver_core import (
    Relaxation,
    evaluate_candidates,
    find_best_candidate,
    score_solution,
    solve,
    update_with_best_score,
)

__all__ = [
    "Measure",
    "PassReport",
    "Point",
    "PositionView",
    "Relaxation",
    "Scene",
    "Solution",
    "SolveOptions",
    "evaluate_candidates",
    "find_best_candidate",
    "get_default_options",
    "sample_offsets",
    "score_solution",
    "seed_candidates",
    "set_default_options",
    "solve",
    "update_with_best_score",
]
