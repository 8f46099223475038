"""Example: a fixed centre and a point kept on a circle around it."""

from georelax import Scene, SolveOptions, at_position, distance, on_circle, solve


def build_scene() -> Scene:
    scene = Scene()
    scene.register("O", lambda p, pts: at_position(p, 0.0, 0.0))
    scene.register("A", lambda p, pts: on_circle(p, pts["O"], 5.0), position=(20.0, 0.0))
    scene.add_segment("O", "A")
    scene.add_measure("O", "A", "radius")
    return scene


def main() -> None:
    scene = build_scene()
    solution = solve(scene, SolveOptions(random_seed=123, max_passes=100))
    print("Success:", solution.success, "passes:", solution.passes)
    for name, (x, y) in solution.point_coords.items():
        print(f"{name}: ({x:.2f}, {y:.2f})")
    print("Radius:", round(distance(scene.resolve("O").position, scene.resolve("A").position), 2))


if __name__ == "__main__":
    main()
