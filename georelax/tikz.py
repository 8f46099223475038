"""Static TikZ rendering of a relaxed scene."""

from __future__ import annotations

import re
from typing import Dict, Iterable, List, Optional, Tuple

from .geometry import Vec2, norm, vector
from .solver.model import Point, Scene

standalone_tpl = r"""\documentclass[border=2pt]{standalone}
\usepackage[utf8]{inputenc}
\usepackage{tikz}
\tikzset{
  gs/dot radius/.store in=\gsDotR,       gs/dot radius=1.4pt,
  gs/line width/.store in=\gsLW,         gs/line width=0.8pt,
  ptlabel/.style={font=\footnotesize, inner sep=1pt},
  segment/.style={line width=\gsLW, draw=gray},
  line/.style={line width=\gsLW, draw=gray, dash pattern=on 3pt off 2pt},
  polygon/.style={fill=gray!30},
  unstable/.style={opacity=0.5},
}
\begin{document}
\begin{minipage}[t]{%s}
%s
%s
\end{minipage}
\end{document}
"""

_UNSAFE_NAME_RE = re.compile(r"[^A-Za-z0-9]")

_LATEX_REPL = {
    "\\": r"\textbackslash{}",
    "&": r"\&",
    "%": r"\%",
    "#": r"\#",
    "_": r"\_",
    "{": r"\{",
    "}": r"\}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
    "$": r"\$",
}


def latex_escape(text: str) -> str:
    return "".join(_LATEX_REPL.get(ch, ch) for ch in text)


def _format_float(value: float) -> str:
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def _node_names(points: Iterable[Point]) -> Dict[str, str]:
    names: Dict[str, str] = {}
    used: set = set()
    for point in points:
        base = "p" + _UNSAFE_NAME_RE.sub("", point.name)
        candidate = base
        suffix = 1
        while candidate in used:
            suffix += 1
            candidate = f"{base}{suffix}"
        used.add(candidate)
        names[point.name] = candidate
    return names


def _bbox(points: Iterable[Vec2]) -> Tuple[float, float, float, float]:
    pts = list(points)
    if not pts:
        return 0.0, 0.0, 0.0, 0.0
    xs = [p.x for p in pts]
    ys = [p.y for p in pts]
    return min(xs), min(ys), max(xs), max(ys)


def _style(tokens: List[str], stable: bool) -> str:
    if not stable:
        tokens = tokens + ["unstable"]
    return ", ".join(tokens)


def generate_tikz_code(scene: Scene, *, scale: float = 0.1) -> str:
    """Draw polygons, segments, lines and labelled points of ``scene``.

    Anything involving an unstable point is drawn with the ``unstable`` style.
    """

    nodes = _node_names(scene)
    min_x, min_y, max_x, max_y = _bbox(point.position for point in scene)
    margin = max(max_x - min_x, max_y - min_y, 1.0) * 0.1
    clip = (min_x - margin, min_y - margin, max_x + margin, max_y + margin)
    reach = (clip[2] - clip[0]) + (clip[3] - clip[1])

    lines: List[str] = [f"\\begin{{tikzpicture}}[scale={_format_float(scale)}]"]
    for point in scene:
        lines.append(
            f"  \\coordinate ({nodes[point.name]}) at "
            f"({_format_float(point.position.x)}, {_format_float(point.position.y)});"
        )
    lines.append(
        f"  \\clip ({_format_float(clip[0])}, {_format_float(clip[1])}) rectangle "
        f"({_format_float(clip[2])}, {_format_float(clip[3])});"
    )

    for polygon in scene.polygons:
        path = " -- ".join(f"({nodes[p.name]})" for p in polygon)
        stable = all(p.stable for p in polygon)
        lines.append(f"  \\fill[{_style(['polygon'], stable)}] {path} -- cycle;")

    for a, b in scene.lines:
        direction = vector(a.position, b.position)
        length = norm(direction)
        if length == 0.0:
            continue
        ux, uy = direction[0] / length * reach, direction[1] / length * reach
        start = (a.position.x - ux, a.position.y - uy)
        end = (a.position.x + ux, a.position.y + uy)
        lines.append(
            f"  \\draw[{_style(['line'], a.stable and b.stable)}] "
            f"({_format_float(start[0])}, {_format_float(start[1])}) -- "
            f"({_format_float(end[0])}, {_format_float(end[1])});"
        )

    for a, b in scene.segments:
        lines.append(
            f"  \\draw[{_style(['segment'], a.stable and b.stable)}] "
            f"({nodes[a.name]}) -- ({nodes[b.name]});"
        )

    for point in scene:
        style = _style([], point.stable)
        options = f"[{style}]" if style else ""
        lines.append(f"  \\fill{options} ({nodes[point.name]}) circle (\\gsDotR);")
        lines.append(
            f"  \\node[{_style(['ptlabel', 'above right'], point.stable)}] "
            f"at ({nodes[point.name]}) {{{latex_escape(point.name)}}};"
        )

    lines.append("\\end{tikzpicture}")
    return "\n".join(lines)


def _measure_table(scene: Scene, unit: str) -> str:
    rows: List[str] = []
    for measure in scene.measures:
        if measure is None:
            rows.append("\\\\[2pt]")
            continue
        rows.append(
            f"{latex_escape(measure.title)} & {measure.length:.2f}~{latex_escape(unit)} \\\\"
        )
    if not rows:
        return ""
    return "\\par\\vspace{4pt}\n\\begin{tabular}{lr}\n" + "\n".join(rows) + "\n\\end{tabular}"


def generate_tikz_document(
    scene: Scene,
    *,
    unit: str = "cm",
    scale: float = 0.1,
    width: Optional[str] = None,
) -> str:
    """Render a standalone document with the picture and the measure table."""

    tikz_code = generate_tikz_code(scene, scale=scale)
    return standalone_tpl % (width or "12cm", tikz_code, _measure_table(scene, unit))


__all__ = ["generate_tikz_code", "generate_tikz_document", "latex_escape"]
