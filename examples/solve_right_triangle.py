"""Example: a 3-4-5 right triangle.

Also usable from the command line::

    python -m georelax examples/solve_right_triangle.py --seed 7
"""

import math

from georelax import Scene, SolveOptions, at_angle, at_position, on_circle, solve


def build_scene() -> Scene:
    scene = Scene()
    scene.register("A", lambda p, pts: at_position(p, 0.0, 0.0))
    scene.register("B", lambda p, pts: at_position(p, 4.0, 0.0))
    scene.register(
        "C",
        lambda p, pts: on_circle(p, pts["A"], 3.0) + at_angle(math.pi / 2, pts["B"], pts["A"], p),
    )
    scene.add_polygon("A", "B", "C")
    scene.add_measure("B", "C", "hypotenuse")
    return scene


def main() -> None:
    scene = build_scene()
    solution = solve(scene, SolveOptions(random_seed=123, max_passes=100))
    print("Success:", solution.success)
    for name, (x, y) in solution.point_coords.items():
        print(f"{name}: ({x:.2f}, {y:.2f})")


if __name__ == "__main__":
    main()
