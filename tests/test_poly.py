import cmath
import io

import pytest

from numlab.poly import (
    TOLERANCE,
    Polynomial,
    eval_derivs,
    find_roots,
    format_complex,
    format_poly,
    format_roots,
    laguerre,
    quadratic_roots,
)

CUBIC = Polynomial([1, 3, 7, 5])


def test_empty_polynomial_rejected():
    with pytest.raises(ValueError):
        Polynomial([])


def test_degree_counts_terms_minus_one():
    assert CUBIC.degree == 3
    assert Polynomial([4]).degree == 0


def test_evaluate_at_zero_and_one():
    assert CUBIC.evaluate(0) == 5
    assert CUBIC.evaluate(1) == sum(CUBIC.coefficients)


@pytest.mark.parametrize("z", [0.5, 2 + 3j, -1.25 - 0.5j])
def test_derivative_matches_central_difference(z):
    h = 1e-5
    numeric = (CUBIC.evaluate(z + h) - CUBIC.evaluate(z - h)) / (2 * h)
    assert abs(CUBIC.derivative().evaluate(z) - numeric) < 1e-5


def test_derivative_of_constant_is_zero():
    assert Polynomial([7]).derivative().evaluate(3) == 0


@pytest.mark.parametrize("z", [0.3, 1 + 1j, -2.5])
def test_deflate_by_root_recovers_factor(z):
    p = Polynomial([1, -6, 11, -6])
    q = p.deflate(1)
    assert q.degree == 2
    assert abs(q.evaluate(z) * (z - 1) - p.evaluate(z)) < 1e-9


def test_deflate_constant_raises():
    with pytest.raises(ValueError):
        Polynomial([3]).deflate(1)


def test_quadratic_roots_are_roots_and_obey_vieta():
    p = Polynomial([1, -1, 1])
    r1, r2 = quadratic_roots(p)
    assert abs(p.evaluate(r1)) < 1e-12
    assert abs(p.evaluate(r2)) < 1e-12
    assert abs((r1 + r2) - 1) < 1e-12
    assert abs(r1 - r2.conjugate()) < 1e-12


def test_quadratic_roots_wrong_degree():
    with pytest.raises(ValueError):
        quadratic_roots(CUBIC)


def test_eval_derivs_consistent():
    z = 2 + 3j
    value, first, second = eval_derivs(CUBIC, z)
    assert value == CUBIC.evaluate(z)
    assert first == CUBIC.derivative().evaluate(z)
    assert second == CUBIC.derivative().derivative().evaluate(z)


def test_laguerre_finds_root_and_reports():
    out = io.StringIO()
    x = laguerre(CUBIC, TOLERANCE, True, out)
    assert abs(CUBIC.evaluate(x)) < 1e-6
    assert out.getvalue().startswith("Laguerre's Algorithm( tol = 1e-08 )\n")


def test_laguerre_failure_returns_nan():
    out = io.StringIO()
    x = laguerre(Polynomial([1, 0, 0, 1]), TOLERANCE, True, out)
    assert cmath.isnan(x)
    assert "did not converge" in out.getvalue()


def test_find_roots_cubic_invariants():
    found = find_roots(CUBIC)
    assert len(found) == 3
    for r in found:
        assert abs(CUBIC.evaluate(r)) < 1e-6
    product = found[0] * found[1] * found[2]
    assert abs(product + 5) < 1e-6
    assert abs(sum(found) + 3) < 1e-6


def test_find_roots_linear():
    assert find_roots(Polynomial([2, 4])) == [-2]


def test_find_roots_quadratic_verbose_message():
    out = io.StringIO()
    found = find_roots(Polynomial([1, 3, 2]), True, out)
    assert len(found) == 2
    assert "Found final two roots through quadratic formula" in out.getvalue()


def test_find_roots_constant_has_none():
    assert find_roots(Polynomial([5])) == []


def test_format_complex_cases():
    assert format_complex(0) == " 0.0 "
    assert format_complex(1.5 + 2j) == " 1.5  +2i "
    assert format_complex(1 - 2j) == " 1  -2i "


def test_format_poly_signs():
    assert format_poly(Polynomial([1, -1, 1])) == "P(x) =  1x^2 - 1x^1 + 1x^0  \n"


def test_format_poly_trailing_zeros_omitted():
    assert format_poly(Polynomial([1, 0, 0])) == "P(x) =  1x^2  \n"


def test_format_roots_sorted_by_magnitude():
    text = format_roots(Polynomial([1, 3, 2]))
    assert text == "Roots: \n     -2  \n     -1  \n\n"


def test_format_roots_line_count_matches_degree():
    text = format_roots(CUBIC)
    lines = text.split("\n")
    assert lines[0] == "Roots: "
    assert len([line for line in lines[1:] if line.startswith("    ")]) == 3
    assert text.endswith(" \n\n")