"""Complex polynomials: Horner evaluation, deflation and Laguerre root finding."""

from __future__ import annotations

import cmath
import enum
import sys
from typing import Iterable, Iterator, TextIO

TOLERANCE = 1e-8
MAX_LAGUERRE = 30
MAX_POLY = 256


class ExitCode(enum.IntEnum):
    """Process exit codes used by the polynomial tools."""

    SUCCESS = 0
    FILE_NOT_FOUND = 10
    SYNTAX_ERROR = 20
    INTERNAL_ERROR = 99


class Polynomial:
    """An immutable polynomial with complex coefficients, highest power first."""

    def __init__(self, coefficients: Iterable[complex]) -> None:
        coeffs = tuple(complex(c) for c in coefficients)
        if not coeffs:
            raise ValueError("a polynomial needs at least one coefficient")
        self.coefficients: tuple[complex, ...] = coeffs

    @property
    def degree(self) -> int:
        """The highest power, i.e. the number of terms minus one."""
        return len(self.coefficients) - 1

    def __len__(self) -> int:
        return len(self.coefficients)

    def __iter__(self) -> Iterator[complex]:
        return iter(self.coefficients)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.coefficients == other.coefficients

    def __hash__(self) -> int:
        return hash(self.coefficients)

    def __repr__(self) -> str:
        return f"Polynomial({list(self.coefficients)!r})"

    def evaluate(self, z: complex) -> complex:
        """Evaluate at ``z`` using Horner's factorization."""
        head, *rest = self.coefficients
        result = head
        for c in rest:
            result = result * z + c
        return result

    def derivative(self) -> "Polynomial":
        """Return the first derivative; a constant's derivative is zero."""
        n = self.degree
        if n == 0:
            return Polynomial([0])
        return Polynomial(c * (n - k) for k, c in enumerate(self.coefficients[:-1]))

    def deflate(self, root: complex) -> "Polynomial":
        """Divide out the factor (x - root) by synthetic division."""
        if self.degree == 0:
            raise ValueError("cannot deflate a constant polynomial")
        head, *rest = self.coefficients
        result = [head]
        for c in rest[:-1]:
            result.append(root * result[-1] + c)
        return Polynomial(result)


def quadratic_roots(poly: Polynomial) -> tuple[complex, complex]:
    """Return the two roots of a second-degree polynomial."""
    if poly.degree != 2:
        raise ValueError(f"expected a quadratic, got degree {poly.degree}")
    a, b, c = poly.coefficients
    disc = cmath.sqrt(b * b - 4.0 * a * c)
    return (-b + disc) / (2.0 * a), (-b - disc) / (2.0 * a)


def eval_derivs(poly: Polynomial, point: complex) -> tuple[complex, complex, complex]:
    """Return p(point), p'(point) and p''(point)."""
    first = poly.derivative()
    second = first.derivative()
    return poly.evaluate(point), first.evaluate(point), second.evaluate(point)


def _stream(out: TextIO | None) -> TextIO:
    return out if out is not None else sys.stdout


def laguerre(
    poly: Polynomial,
    tol: float = TOLERANCE,
    verbose: bool = False,
    out: TextIO | None = None,
) -> complex:
    """Find one root with Laguerre's method, starting from zero.

    Returns ``complex(nan, 0)`` when no root is found within
    ``MAX_LAGUERRE`` iterations.
    """
    stream = _stream(out)
    n = poly.degree
    x = 0j
    if verbose:
        stream.write(f"Laguerre's Algorithm( tol = {tol:g} )\n")
    for it in range(MAX_LAGUERRE):
        f, d1, d2 = eval_derivs(poly, x)
        if abs(f) < tol:
            return x
        g = d1 / f
        h = g * g - d2 / f
        sqrt_term = cmath.sqrt((n - 1) * (n * h - g * g))
        plus, minus = g + sqrt_term, g - sqrt_term
        denominator = plus if abs(plus) > abs(minus) else minus
        if denominator == 0:
            break
        alpha = n / denominator
        if abs(alpha) < tol:
            return x
        if verbose:
            stream.write(
                f"      it: {it}   x:{format_complex(x)}"
                f"\n    G(x):{format_complex(g)}"
                f"\n             H(x):{format_complex(h)}"
                f"\n             Alpha:{format_complex(alpha)} \n"
            )
        x -= alpha
    if verbose:
        stream.write(
            f"Laguerre's method did not converge within {MAX_LAGUERRE} iterations.\n"
        )
    return complex(float("nan"), 0.0)


def find_roots(
    poly: Polynomial, verbose: bool = False, out: TextIO | None = None
) -> list[complex]:
    """Return all roots of a polynomial.

    Linear and quadratic remainders are solved directly; higher degrees use
    Laguerre's method with deflation, removing both members of a complex
    conjugate pair at once.
    """
    stream = _stream(out)
    n = poly.degree
    found: list[complex] = []
    p = poly
    while len(found) < n:
        if p.degree == 2:
            found.extend(quadratic_roots(p))
            if verbose:
                stream.write("    Found final two roots through quadratic formula \n")
            return found
        if p.degree == 1:
            found.append(-p.coefficients[1] / p.coefficients[0])
            if verbose:
                stream.write("    Found final root with simple math \n")
            return found
        x = laguerre(p, TOLERANCE, verbose, stream)
        if verbose:
            stream.write(f"    Found root {x.real:g} + {x.imag:g}i \n")
        if abs(x.imag) > TOLERANCE:
            found.append(x.conjugate())
            p = p.deflate(x.conjugate())
            if verbose:
                stream.write("    Found imaginary root, deflating twice \n")
        found.append(x)
        p = p.deflate(x)
        if verbose:
            stream.write("    Deflated: " + format_poly(p))
    return found


def format_complex(x: complex) -> str:
    """Render a complex number, hiding parts smaller than the tolerance."""
    x = complex(x)
    text = " 0.0 " if abs(x.real) < TOLERANCE else f" {x.real:g} "
    if abs(x.imag) > TOLERANCE:
        text += f" {x.imag:g}i " if x.imag < 0.0 else f" +{x.imag:g}i "
    return text


def format_poly(poly: Polynomial) -> str:
    """Render a polynomial as ``P(x) = ...`` terminated by a newline."""
    coeffs = poly.coefficients
    n = poly.degree
    end = next((i for i in range(n, 0, -1) if abs(coeffs[i]) > TOLERANCE), 0)
    head = coeffs[0]
    parts = ["P(x) = "]
    if abs(head.imag) < TOLERANCE:
        parts.append(f" {head.real:g}x^{n} ")
    else:
        parts.append(f" [{head.real:g} + {head.imag:g}i]x^{n} ")
    for i in range(1, end + 1):
        c = coeffs[i]
        if abs(c) <= TOLERANCE:
            continue
        if abs(c.imag) < TOLERANCE:
            if c.real < TOLERANCE:
                parts.append(f"- {abs(c.real):g}x^{n - i} ")
            else:
                parts.append(f"+ {c.real:g}x^{n - i} ")
        else:
            parts.append(f"+ [{c.real:g} + {c.imag:g}i]x^{n - i} ")
    parts.append(" \n")
    return "".join(parts)


def format_roots(
    poly: Polynomial, verbose: bool = False, out: TextIO | None = None
) -> str:
    """Find the roots and render them from largest magnitude to smallest."""
    found = find_roots(poly, verbose, out)
    count = len(found)
    for i in range(count):
        biggest = max(range(i, count), key=lambda j: abs(found[j]))
        found[i], found[biggest] = found[biggest], found[i]
    lines = ["Roots: \n"]
    lines.extend(f"    {format_complex(r)} \n" for r in found)
    lines.append("\n")
    return "".join(lines)