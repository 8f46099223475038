import argparse
import importlib.util
import logging
from pathlib import Path
from typing import Callable, Optional, Sequence

from georelax import (
    Relaxation,
    Scene,
    SolveOptions,
    build_folding_table,
    generate_tikz_document,
    measure_report,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _load_scene_factory(path: str, factory: str) -> Callable[[], Scene]:
    source = Path(path)
    if not source.is_file():
        raise FileNotFoundError(f"scene file {path!r} does not exist")
    spec = importlib.util.spec_from_file_location(f"georelax_scene_{source.stem}", source)
    if spec is None or spec.loader is None:
        raise ImportError(f"cannot load scene file {path!r}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    builder = getattr(module, factory, None)
    if not callable(builder):
        raise AttributeError(f"scene file {path!r} defines no callable {factory!r}")
    return builder


def _format_point_table(scene: Scene) -> str:
    rows = []
    for point in scene:
        flag = "stable" if point.stable else "unstable"
        rows.append(
            f"{point.name:>6}  ({point.position.x:9.2f}, {point.position.y:9.2f})  "
            f"score={point.score:.4g}  {flag}"
        )
    return "\n".join(rows)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Relax a scene of constrained points")
    parser.add_argument(
        "path",
        nargs="?",
        help="Python file defining a scene factory (default: built-in folding table)",
    )
    parser.add_argument(
        "--factory",
        default="build_scene",
        help="Name of the scene factory in the scene file (default: build_scene)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for candidate sampling",
    )
    parser.add_argument(
        "--samples",
        type=int,
        default=10_000,
        help="Candidates drawn per point and pass (default: 10000)",
    )
    parser.add_argument(
        "--radius",
        type=float,
        default=100.0,
        help="Outer sampling radius (default: 100)",
    )
    parser.add_argument(
        "--max-passes",
        type=int,
        default=200,
        help="Stop after this many passes even if points are still moving (default: 200)",
    )
    parser.add_argument(
        "--snapshot",
        action="store_true",
        help="Score against positions frozen at the start of each pass",
    )
    parser.add_argument(
        "--unit",
        default="cm",
        help="Unit printed after measures (default: cm)",
    )
    parser.add_argument(
        "--tikz-output-path",
        help="Write a standalone TikZ document of the relaxed scene to the given path",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    try:
        options = SolveOptions(
            samples=args.samples,
            radius=args.radius,
            random_seed=args.seed,
            snapshot=args.snapshot,
            max_passes=args.max_passes,
        )
    except ValueError as exc:
        parser.error(str(exc))

    if args.path:
        logger.info("Loading scene factory %s from %s", args.factory, args.path)
        try:
            builder = _load_scene_factory(args.path, args.factory)
            scene = builder()
        except (OSError, ImportError, AttributeError) as exc:
            logger.error("Cannot load scene: %s", exc)
            raise SystemExit(1) from exc
    else:
        logger.info("Using built-in folding table scene")
        scene = build_folding_table()

    relaxation = Relaxation(scene, options)
    logger.info("Relaxing %d points", len(scene))
    while not relaxation.idle and relaxation.passes < options.max_passes:
        relaxation.run_pass()

    if relaxation.idle:
        logger.info("Scene stable after %d pass(es)", relaxation.passes)
    else:
        unstable = [point.name for point in scene if not point.stable]
        logger.warning(
            "Scene not stable after %d pass(es); unstable points: %s",
            relaxation.passes,
            ", ".join(unstable),
        )

    print(_format_point_table(scene))
    report_text = measure_report(scene, unit=args.unit)
    if report_text:
        print()
        print(report_text)

    if args.tikz_output_path:
        output_path = Path(args.tikz_output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(generate_tikz_document(scene, unit=args.unit), encoding="utf-8")
        logger.info("Wrote TikZ document to %s", output_path)


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
