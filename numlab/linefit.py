"""Least-squares straight-line fitting of (x, y) points read from a text file."""

from __future__ import annotations

import argparse
import sys
from typing import Iterator, Sequence, TextIO

from numlab.timers import Timer, repeat

DATA_REPEATS = 100
CALC_REPEATS = 20000

_PROG = "numlab-linefit"


class LinearFit:
    """A growable collection of (x, y) points with a batch least-squares fit."""

    def __init__(self) -> None:
        self._xs: list[float] = []
        self._ys: list[float] = []

    def add_point(self, x: float, y: float) -> None:
        """Append one data point."""
        self._xs.append(float(x))
        self._ys.append(float(y))

    def __len__(self) -> int:
        return len(self._xs)

    def __iter__(self) -> Iterator[tuple[float, float]]:
        return zip(self._xs, self._ys)

    def points(self) -> list[tuple[float, float]]:
        """Return the stored points in insertion order."""
        return list(self)

    def coefficients(self) -> tuple[float, float]:
        """Return (a, b) of the least-squares line y = a * x + b.

        Raises ValueError when the fit is undetermined (no points, or all
        x values equal).
        """
        n = len(self)
        s_xx = sum(x * x for x in self._xs)
        s_xy = sum(x * y for x, y in self)
        s_x = sum(self._xs)
        s_y = sum(self._ys)
        denominator = n * s_xx - s_x * s_x
        if denominator == 0:
            raise ValueError("least-squares line is undetermined for this data")
        a = (n * s_xy - s_x * s_y) / denominator
        b = (s_xx * s_y - s_xy * s_x) / denominator
        return a, b


def read_points(stream: TextIO) -> LinearFit:
    """Read whitespace-separated x y pairs from a text stream."""
    tokens = stream.read().split()
    if len(tokens) % 2:
        raise ValueError("data ends with an x value that has no y value")
    fit = LinearFit()
    values = iter(tokens)
    for x_text, y_text in zip(values, values):
        try:
            fit.add_point(float(x_text), float(y_text))
        except ValueError:
            raise ValueError(f"invalid data point: {x_text!r} {y_text!r}") from None
    return fit


def format_result(lines: int, a: float, b: float) -> str:
    """Render the summary line for a fitted data set."""
    return (
        f"{lines} data lines processed, the least square line is : "
        f"Y = {a:g} * X + {b:g}\n"
    )


def _read_file(path: str) -> LinearFit:
    with open(path, "r", encoding="utf-8") as handle:
        return read_points(handle)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog=_PROG, description="Fits a line to data points."
    )
    parser.add_argument("filename", nargs="?")
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

    try:
        if args.time:
            calc_timer = Timer("CalcTimer", sys.stderr)
            with calc_timer:
                a, b = repeat(CALC_REPEATS, fit.coefficients)
        else:
            a, b = fit.coefficients()
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

    sys.stdout.write(format_result(len(fit), a, b))
    return 0


if __name__ == "__main__":
    sys.exit(main())