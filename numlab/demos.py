"""Small demonstrations: polynomial evaluation strategies and complex polynomials."""

from __future__ import annotations

import argparse
import math
import sys
from typing import Callable, Sequence

from numlab.poly import Polynomial, format_complex, format_poly, quadratic_roots
from numlab.timers import Timer, repeat

DEFAULT_REPEATS = 1_000_000
EVAL_POINT = 7.7
SAMPLE_POINT = complex(2.0, 3.0)


def traditional_mult(x: float) -> float:
    """Evaluate 4.4x^4 - 3.3x^3 + 2.2x^2 - 1.1x + 6 with plain products."""
    return 4.4 * x * x * x * x - 3.3 * x * x * x + 2.2 * x * x - 1.1 * x + 6.0


def power_func(x: float) -> float:
    """Evaluate the same polynomial using the power function."""
    return (
        4.4 * math.pow(x, 4)
        - 3.3 * math.pow(x, 3)
        + 2.2 * math.pow(x, 2)
        - 1.1 * x
        + 6.0
    )


def horner(x: float) -> float:
    """Evaluate the same polynomial with Horner's factorization."""
    return (((4.4 * x - 3.3) * x + 2.2) * x - 1.1) * x + 6.0


def _quadratic_section(coefficients: Sequence[float], title: str) -> str:
    first, second = quadratic_roots(Polynomial(coefficients))
    return (
        f"Quadratic equation:\n{title}\n"
        f"Roots: {format_complex(first)} and {format_complex(second)}\n"
    )


def poly_demo() -> str:
    """Return the report of the derivative, evaluation and quadratic demo."""
    p = Polynomial([1.0, 3.0, 7.0, 5.0])
    deriv = p.derivative()
    parts = [
        "Original polynomial:\n",
        format_poly(p),
        "Derivative polynomial:\n",
        format_poly(deriv),
        "Polynomial evaluations:\n",
        f"p(2.0+3.0I) is {format_complex(p.evaluate(SAMPLE_POINT))}\n",
        f"pDeriv(2.0+3.0I) is {format_complex(deriv.evaluate(SAMPLE_POINT))}\n",
        _quadratic_section([1.0, -1.0, 1.0], "P(x) = 1x^2 - 1x^1 + 1x^0"),
        _quadratic_section([1.0, 3.0, 2.0], "P(x) = 1x^2 + 3x^1 + 2x^0"),
    ]
    return "".join(parts)


_EVALUATORS: tuple[tuple[str, str, Callable[[float], float]], ...] = (
    ("MultTimer", "Mult", traditional_mult),
    ("PowTimer", "Pow", power_func),
    ("HornerTimer", "Horner's", horner),
)


def _eval_demo(repeats: int) -> None:
    for timer_name, label, func in _EVALUATORS:
        timer = Timer(timer_name, sys.stderr)
        with timer:
            ans = repeat(repeats, func, EVAL_POINT)
        sys.stdout.write(f"{label} performance, ans {ans:f}\n")
        sys.stdout.flush()
        timer.report()
        timer.report_per_iteration(repeats)
        timer.reset()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Run the polynomial demo or time three evaluation methods."
    )
    parser.add_argument("demo", nargs="?", choices=("poly", "eval"), default="poly")
    parser.add_argument(
        "--repeats",
        type=int,
        default=DEFAULT_REPEATS,
        help="repetitions per evaluation method when timing",
    )
    args = parser.parse_args(argv)
    if args.demo == "poly":
        sys.stdout.write(poly_demo())
        return 0
    if args.repeats <= 0:
        parser.error("--repeats must be positive")
    _eval_demo(args.repeats)
    return 0


if __name__ == "__main__":
    sys.exit(main())