from georelax import Scene, Vec2, at_position
from georelax.tikz import generate_tikz_code, generate_tikz_document, latex_escape


def _scene() -> Scene:
    scene = Scene()
    for name, (x, y) in {"A": (0.0, 0.0), "B": (4.0, 0.0), "C_1": (0.0, 3.0)}.items():
        point = scene.register(name, lambda p, pts: at_position(p, 0.0, 0.0))
        point.position = Vec2(x, y)
        point.stable = True
    scene.add_polygon("A", "B", "C_1")
    scene.add_line("A", "B")
    scene.add_measure("B", "C_1", "hypotenuse")
    return scene


def test_generate_tikz_code_draws_declared_items():
    scene = _scene()

    tikz = generate_tikz_code(scene)

    assert tikz.startswith("\\begin{tikzpicture}[scale=0.1]")
    assert tikz.endswith("\\end{tikzpicture}")
    assert "\\coordinate (pA) at (0, 0);" in tikz
    assert "\\coordinate (pB) at (4, 0);" in tikz
    assert "\\coordinate (pC1) at (0, 3);" in tikz
    assert "\\fill[polygon] (pA) -- (pB) -- (pC1) -- cycle;" in tikz
    assert "\\draw[segment] (pA) -- (pB);" in tikz
    assert "\\draw[segment] (pC1) -- (pA);" in tikz
    assert "\\draw[line]" in tikz
    assert "{C\\_1}" in tikz
    assert "unstable" not in tikz


def test_unstable_points_are_faded():
    scene = _scene()
    scene.resolve("B").stable = False

    tikz = generate_tikz_code(scene)

    assert "\\fill[polygon, unstable]" in tikz
    assert "\\draw[segment, unstable] (pA) -- (pB);" in tikz
    assert "\\draw[segment] (pC1) -- (pA);" in tikz
    assert "\\fill[unstable] (pB) circle" in tikz
    assert "\\fill (pA) circle" in tikz


def test_generate_tikz_document_includes_measures():
    document = generate_tikz_document(_scene(), unit="cm")

    assert document.startswith("\\documentclass[border=2pt]{standalone}")
    assert "\\begin{tikzpicture}" in document
    assert "hypotenuse & 5.00~cm \\\\" in document
    assert document.rstrip().endswith("\\end{document}")


def test_empty_scene_renders():
    tikz = generate_tikz_code(Scene())
    assert "\\clip" in tikz


def test_latex_escape():
    assert latex_escape("50% & a_b") == "50\\% \\& a\\_b"
