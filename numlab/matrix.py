"""A small 2D matrix demonstration: build, print, and time allocation."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from numlab.timers import Timer, repeat

DEFAULT_ROWS = 3
DEFAULT_COLS = 5


def _check_shape(rows: int, cols: int) -> None:
    if rows <= 0 or cols <= 0:
        raise ValueError(f"matrix shape must be positive, got {rows}x{cols}")


def _allocate(rows: int, cols: int) -> list[list[float]]:
    return [[0.0] * cols for _ in range(rows)]


def make_matrix(rows: int, cols: int) -> list[list[float]]:
    """Build a rows x cols matrix with entry i + j/10 and two 999 markers."""
    _check_shape(rows, cols)
    matrix = [[i + j / 10.0 for j in range(cols)] for i in range(rows)]
    for k in (1, 2):
        if k < rows and k < cols:
            matrix[k][k] = 999.0
    return matrix


def format_matrix(matrix: Sequence[Sequence[float]]) -> str:
    """Render a matrix with a size header and tab-separated fields."""
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    lines = [f"The {rows}x{cols} 2D dynamic matrix"]
    lines.extend("".join(f"{value:4.1f}\t" for value in row) for row in matrix)
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Build and print a 2D matrix.")
    parser.add_argument("rows", nargs="?", type=int, default=DEFAULT_ROWS)
    parser.add_argument("cols", nargs="?", type=int, default=DEFAULT_COLS)
    parser.add_argument(
        "--time",
        dest="repeats",
        type=int,
        metavar="REPEATS",
        help="time matrix allocation over REPEATS runs instead of printing",
    )
    args = parser.parse_args(argv)
    try:
        _check_shape(args.rows, args.cols)
    except ValueError as exc:
        parser.error(str(exc))

    sys.stdout.write(f"Simple alloc: rows and columns: {args.rows}, {args.cols}\n")
    if args.repeats is not None:
        if args.repeats <= 0:
            parser.error("REPEATS must be positive")
        timer = Timer("Time", sys.stderr)
        with timer:
            repeat(args.repeats, _allocate, args.rows, args.cols)
        timer.report()
        timer.report_per_iteration(args.repeats)
        timer.reset()
    else:
        sys.stdout.write(format_matrix(make_matrix(args.rows, args.cols)))
    return 0


if __name__ == "__main__":
    sys.exit(main())