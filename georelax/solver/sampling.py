"""Candidate cloud generation around a point's current position."""

from __future__ import annotations

import math
from typing import Dict, Optional, Tuple

import numpy as np

from ..types import GridKey


def sample_offsets(rng: np.random.Generator, samples: int, radius: float) -> Tuple[np.ndarray, np.ndarray]:
    """Draw ``samples`` isotropic offsets with radius ``U**2 * radius``.

    Squaring the uniform draw packs most candidates close to the centre while
    still proposing the occasional long jump.
    """

    angles = rng.random(samples) * 2.0 * math.pi
    radii = rng.random(samples) ** 2 * radius
    return np.cos(angles) * radii, np.sin(angles) * radii


def seed_candidates(
    center: Tuple[float, float],
    rng: np.random.Generator,
    *,
    samples: int,
    radius: float,
    decimals: int,
) -> Dict[GridKey, Optional[float]]:
    """Return a fresh, unevaluated candidate map around ``center``.

    Candidates are snapped to the precision grid, so duplicates collapse into
    one entry; the map keeps first-drawn order.
    """

    dx, dy = sample_offsets(rng, samples, radius)
    scale = 10 ** decimals
    xs = np.floor((center[0] + dx) * scale + 0.5).astype(np.int64)
    ys = np.floor((center[1] + dy) * scale + 0.5).astype(np.int64)
    return dict.fromkeys(zip(xs.tolist(), ys.tolist()))


__all__ = ["sample_offsets", "seed_candidates"]
