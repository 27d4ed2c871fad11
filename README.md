# numlab

A small set of numerical tools that need nothing outside the standard
library:

- **Line fitting**: batch least-squares fit of `Y = A * X + B` to points read
  from a text file (`numlab.linefit`), plus two variants of the coefficient
  summation that accumulate the sums in a different order (`numlab.unrolled`).
- **Polynomial roots**: complex polynomials stored highest power first,
  evaluated with Horner's rule, differentiated, deflated, and solved with the
  quadratic formula or Laguerre's method (`numlab.poly`, `numlab.polycli`).
- **Floating point**: split a single-precision value into its IEEE sign,
  exponent and significand, and find the smallest positive value and the
  machine epsilon by repeated halving (`numlab.floats`).
- **CPU timers**: a start/stop/report timer that adds up processor time over
  repeated runs, usable as a context manager (`numlab.timers`).
- Small demonstrations: a 2-D matrix (`numlab.matrix`) and a comparison of
  three ways to evaluate a polynomial, together with a derivative and
  quadratic-formula demo (`numlab.demos`).

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command-line tools

Fit a line to a file of whitespace-separated `x y` pairs:

```
numlab-linefit points.txt
numlab-unrolled points.txt
numlab-unrolled --method split points.txt
```

Run either one without a file name to get its usage message. Add `--time`
to repeat the reading and the fit many times and report the CPU time on
standard error.

Find the roots of every polynomial in a file. Each line holds the
coefficients, highest power first and separated by spaces. Add `-v` to see
each Laguerre iteration:

```
numlab-roots -i polys.txt
numlab-roots -input polys.txt -verbose
```

The other tools:

```
numlab-floats 0.15625      # decode one single-precision value
numlab-floats              # smallest values and machine epsilon
numlab-matrix              # print a 3x5 matrix
numlab-matrix 4 6 --time 1000
numlab-demos               # derivative, evaluation and quadratic demo
numlab-demos eval --repeats 100000
```

## Library use

```python
from numlab.linefit import LinearFit
from numlab.poly import Polynomial, find_roots, format_poly
from numlab.timers import Timer

fit = LinearFit()
for x, y in [(0.0, 1.0), (1.0, 3.0), (2.0, 5.0)]:
    fit.add_point(x, y)
a, b = fit.coefficients()          # slope and intercept

p = Polynomial([1, 3, 7, 5])       # x^3 + 3x^2 + 7x + 5
print(format_poly(p))
print(find_roots(p))

with Timer("work") as timer:
    sum(range(1_000_000))
timer.report()
```

`LinearFit.coefficients` raises `ValueError` when the line is undetermined
(no points, or every x equal). Timer reports go to the stream the timer was
given, or to standard error when none was. The other tools write their
results to standard output.