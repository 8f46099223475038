from __future__ import annotations

import pytest

from georelax import Relaxation, SolveOptions, build_folding_table, distance, measure_report


def test_folding_table_declarations():
    scene = build_folding_table()

    assert len(scene) == 24
    assert scene.names[:4] == ["A1", "A2", "A3", "A4"]
    assert scene.names[-4:] == ["TT1", "TT2", "TT4", "TT3"]
    assert len(scene.polygons) == 4
    assert len(scene.segments) == 16
    assert [(a.name, b.name) for a, b in scene.lines] == [("A4", "B1")]
    assert sum(1 for measure in scene.measures if measure is None) == 2
    assert [m.title for m in scene.measures if m is not None][:2] == [
        "top plank footprint",
        "floor footprint",
    ]


def test_folding_table_dimensions_are_parameters():
    scene = build_folding_table(plank_length=60.0)
    a1 = scene.resolve("A1")
    positions = scene.positions()

    assert a1.rule((-30.0, 0.0), positions) == 0.0


@pytest.mark.slow
def test_folding_table_floor_plank_settles():
    scene = build_folding_table()
    relaxation = Relaxation(scene, SolveOptions(random_seed=2024, samples=2000))

    for _ in range(20):
        relaxation.run_pass()

    a1 = scene.resolve("A1").position
    a2 = scene.resolve("A2").position
    assert distance(a1, (-45.0, 0.0)) == pytest.approx(0.0, abs=0.05)
    assert distance(a2, (45.0, 0.0)) == pytest.approx(0.0, abs=0.05)
    assert distance(scene.resolve("P").position, (0.0, 0.0)) < 1.0
    assert distance(a2, scene.resolve("A3").position) == pytest.approx(6.2, abs=0.5)

    lines = measure_report(scene).splitlines()
    assert [line.split(" = ")[0] for line in lines] == [
        "top plank footprint",
        "floor footprint",
        "middle overlap height",
        "",
        "large plank top cut",
        "large plank bottom cut",
        "",
        "small plank top cut",
        "small plank bottom cut",
    ]
    assert all(line.endswith(" cm") for line in lines if line)
