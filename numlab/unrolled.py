"""Line fitting whose sums are accumulated two points at a time."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Iterable, Sequence

from numlab.linefit import (
    CALC_REPEATS,
    DATA_REPEATS,
    LinearFit,
    format_result,
    read_points,
)
from numlab.timers import Timer, repeat

_PROG = "numlab-unrolled"

_MESSAGES = {
    "pairwise": "Adds native loop unrolling to the base code. \n",
    "split": "Adds smarter loop unrolling to the base code. \n",
}


def _solve(
    n: int, s_xx: float, s_xy: float, s_x: float, s_y: float
) -> tuple[float, float]:
    denominator = n * s_xx - s_x * s_x
    if denominator == 0:
        raise ValueError("least-squares line is undetermined for this data")
    a = (n * s_xy - s_x * s_y) / denominator
    b = (s_xx * s_y - s_xy * s_x) / denominator
    return a, b


def pairwise_coefficients(fit: LinearFit) -> tuple[float, float]:
    """Return (a, b) of y = a * x + b, adding each pair of points at once.

    Raises ValueError when the fit is undetermined.
    """
    points = fit.points()
    s_xx = s_xy = s_x = s_y = 0.0
    it = iter(points)
    for (x0, y0), (x1, y1) in zip(it, it):
        s_xx += x0 * x0 + x1 * x1
        s_xy += x0 * y0 + x1 * y1
        s_x += x0 + x1
        s_y += y0 + y1
    if len(points) % 2:
        x, y = points[-1]
        s_xx += x * x
        s_xy += x * y
        s_x += x
        s_y += y
    return _solve(len(points), s_xx, s_xy, s_x, s_y)


def _sums(points: Iterable[tuple[float, float]]) -> tuple[float, float, float, float]:
    s_xx = s_xy = s_x = s_y = 0.0
    for x, y in points:
        s_xx += x * x
        s_xy += x * y
        s_x += x
        s_y += y
    return s_xx, s_xy, s_x, s_y


def split_coefficients(fit: LinearFit) -> tuple[float, float]:
    """Return (a, b) of y = a * x + b using two independent sets of sums.

    Even-positioned points feed the first set, odd-positioned points the
    second; the sets are combined at the end. Raises ValueError when the
    fit is undetermined.
    """
    points = fit.points()
    first = _sums(points[0::2])
    second = _sums(points[1::2])
    s_xx, s_xy, s_x, s_y = (p + q for p, q in zip(first, second))
    return _solve(len(points), s_xx, s_xy, s_x, s_y)


_METHODS: dict[str, Callable[[LinearFit], tuple[float, float]]] = {
    "pairwise": pairwise_coefficients,
    "split": split_coefficients,
}


def _read_file(path: str) -> LinearFit:
    with open(path, "r", encoding="utf-8") as handle:
        return read_points(handle)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog=_PROG, description="Fits a line to data points with unrolled sums."
    )
    parser.add_argument("filename", nargs="?")
    parser.add_argument(
        "--method",
        choices=sorted(_METHODS),
        default="pairwise",
        help="how the sums are accumulated",
    )
    parser.add_argument(
        "--time",
        action="store_true",
        help="time reading and fitting over repeated runs",
    )
    args = parser.parse_args(argv)

    if args.filename is None:
        sys.stdout.write("Fits a line to data points\n")
        sys.stdout.write(f"Usage: {_PROG} Filename\n")
        return 0

    try:
        if args.time:
            data_timer = Timer("DataTimer", sys.stderr)
            with data_timer:
                fit = repeat(DATA_REPEATS, _read_file, args.filename)
        else:
            fit = _read_file(args.filename)
    except FileNotFoundError:
        sys.stderr.write(f"Error: Input file '{args.filename}' not found\n")
        return 1
    except ValueError as exc:
        sys.stderr.write(f"Error: {exc}\n")
        return 1

    method = _METHODS[args.method]
    try:
        if args.time:
            calc_timer = Timer("CalcTimer", sys.stderr)
            with calc_timer:
                a, b = repeat(CALC_REPEATS, method, fit)
        else:
            a, b = method(fit)
    except ValueError as exc:
        sys.stderr.write(f"Error: {exc}\n")
        return 1

    if args.time:
        data_timer.report()
        data_timer.report_per_iteration(DATA_REPEATS)
        data_timer.reset()
        calc_timer.report()
        calc_timer.report_per_iteration(CALC_REPEATS)
        calc_timer.reset()

    sys.stdout.write(_MESSAGES[args.method])
    sys.stdout.write(format_result(len(fit), a, b))
    return 0


if __name__ == "__main__":
    sys.exit(main())