"""Ready-made scenes."""

from __future__ import annotations

import math
from typing import Optional

from .constraints import (
    aligned_with,
    at_angle,
    at_middle_of,
    at_position,
    closer_to_than,
    is_equal,
    on_circle,
    translated_by_segment,
)
from .geometry import angle_at_vertex, distance
from .solver.model import Scene


def build_folding_table(
    *,
    plank_length: float = 90.0,
    large_plank_width: float = 6.2,
    small_plank_width: float = 3.8,
    plank_angle: float = math.pi / 4,
    top_width: float = 40.0,
    top_height: float = 2.0,
    table_top_width: float = 45.0,
    scene: Optional[Scene] = None,
) -> Scene:
    """Side view of a scissor-leg folding table.

    ``A*`` is the large plank lying on the floor axis, ``B*`` the small plank
    crossing it at ``P``; ``C*`` are the cut points where the planks leave the
    floor and top lines, ``T*`` the top frame and ``TT*`` the table top.
    """

    scene = scene if scene is not None else Scene()
    half = plank_length / 2
    register = scene.register

    register("A1", lambda p, pts: at_position(p, -half, 0.0))
    register("A2", lambda p, pts: at_position(p, half, 0.0))
    register(
        "A3",
        lambda p, pts: on_circle(p, pts["A2"], large_plank_width)
        + is_equal(angle_at_vertex(pts["A1"], pts["A2"], p), -math.pi / 2),
    )
    register(
        "A4",
        lambda p, pts: on_circle(p, pts["A3"], plank_length)
        + translated_by_segment(p, pts["A1"], pts["A2"], pts["A3"]),
    )
    register("P", lambda p, pts: at_middle_of(p, pts["A1"], pts["A2"]))
    register(
        "B3",
        lambda p, pts: at_angle(plank_angle, pts["A2"], pts["P"], p)
        + on_circle(p, pts["P"], distance(pts["P"], pts["A2"])),
    )
    register(
        "B2",
        lambda p, pts: at_angle(math.pi / 2, pts["P"], pts["B3"], p)
        + on_circle(p, pts["B3"], small_plank_width),
    )
    register(
        "B4",
        lambda p, pts: at_angle(math.pi / 2, p, pts["B3"], pts["B2"])
        + on_circle(p, pts["B3"], plank_length),
    )
    register("B1", lambda p, pts: translated_by_segment(p, pts["B4"], pts["B3"], pts["B2"]))

    def crossing(first: tuple, second: tuple):
        def rule(p, pts):
            return aligned_with(p, pts[first[0]], pts[first[1]]) + aligned_with(
                p, pts[second[0]], pts[second[1]]
            )

        return rule

    register("C1", crossing(("B3", "B4"), ("A4", "B1")))
    register("C2", crossing(("A2", "B3"), ("A3", "A4")))
    register("C3", crossing(("A2", "B3"), ("B1", "B2")))
    register("C4", crossing(("A1", "A2"), ("A4", "B1")))
    register("P2", crossing(("A3", "A4"), ("B1", "B2")))
    register("M", lambda p, pts: at_middle_of(p, pts["A2"], pts["B3"]))

    def top_corner(near: str, far: str):
        def rule(p, pts):
            return (
                aligned_with(p, pts["A2"], pts["B3"])
                + on_circle(p, pts["M"], top_width / 2)
                + closer_to_than(p, pts[near], pts[far])
            )

        return rule

    register("T1", top_corner("C2", "C3"))
    register("T4", top_corner("C3", "C2"))
    register(
        "T2",
        lambda p, pts: on_circle(p, pts["T1"], top_height)
        + at_angle(math.pi / 2, p, pts["T1"], pts["M"]),
    )
    register("T3", lambda p, pts: translated_by_segment(p, pts["T4"], pts["T1"], pts["T2"]))
    register("M2", lambda p, pts: at_middle_of(p, pts["T2"], pts["T3"]))
    register(
        "TT1",
        lambda p, pts: aligned_with(p, pts["T2"], pts["T3"])
        + on_circle(p, pts["M"], table_top_width / 2)
        + closer_to_than(p, pts["T2"], pts["T3"]),
    )
    register("TT2", lambda p, pts: translated_by_segment(p, pts["TT1"], pts["T1"], pts["T2"]))
    register("TT4", lambda p, pts: translated_by_segment(p, pts["M2"], pts["TT1"], pts["M2"]))
    register("TT3", lambda p, pts: translated_by_segment(p, pts["TT4"], pts["TT1"], pts["TT2"]))

    scene.add_line("A4", "B1")
    scene.add_polygon("A1", "A2", "A3", "A4")
    scene.add_polygon("B1", "B2", "B3", "B4")
    scene.add_polygon("T1", "T2", "T3", "T4")
    scene.add_polygon("TT1", "TT2", "TT3", "TT4")

    scene.add_measure("A2", "B3", "top plank footprint")
    scene.add_measure("A4", "B1", "floor footprint")
    scene.add_measure("P", "P2", "middle overlap height")
    scene.add_measure_break()
    scene.add_measure("A3", "C2", "large plank top cut")
    scene.add_measure("A1", "C4", "large plank bottom cut")
    scene.add_measure_break()
    scene.add_measure("B2", "C3", "small plank top cut")
    scene.add_measure("B4", "C1", "small plank bottom cut")
    return scene


__all__ = ["build_folding_table"]
