"""Example: relax the folding table and print its cut measures."""

from georelax import SolveOptions, build_folding_table, generate_tikz_document, measure_report, solve


def main() -> None:
    scene = build_folding_table()
    solution = solve(scene, SolveOptions(random_seed=123, max_passes=300))
    print("Success:", solution.success, "passes:", solution.passes)
    for warning in solution.warnings:
        print("warning:", warning)
    print(measure_report(scene))
    with open("folding_table.tex", "w", encoding="utf-8") as fout:
        fout.write(generate_tikz_document(scene))


if __name__ == "__main__":
    main()
