"""Command line tool that prints polynomials from a file and their roots."""

from __future__ import annotations

import sys
from typing import Sequence

from numlab.poly import (
    TOLERANCE,
    ExitCode,
    Polynomial,
    format_poly,
    format_roots,
)

MAX_TERMS = 100
DATA_READ_ERROR = 98

_LONG_OPTIONS = {"verbose": "v", "verb": "v", "input": "i", "in": "i"}

_USAGE = (
    "Program to test finding the roots of real polynomials\n"
    "usage: hw9  -i[n[pt]] file   <-v[er[bose]]>\n"
    " e.g.  ./hw9 -input poly.txt -ver \n"
)


def parse_poly(line: str) -> Polynomial:
    """Build a polynomial from whitespace-separated coefficients.

    Coefficients are given highest power first. Leading coefficients whose
    magnitude is below the tolerance are dropped; at most ``MAX_TERMS``
    coefficients are read. Raises ValueError for a token that is not a
    number or when no non-zero coefficient is present.
    """
    tokens = line.split()[:MAX_TERMS]
    values = []
    for token in tokens:
        try:
            values.append(float(token))
        except ValueError:
            raise ValueError(f"invalid coefficient: {token!r}") from None
    while values and abs(values[0]) < TOLERANCE:
        values.pop(0)
    if not values:
        raise ValueError("the line holds no non-zero coefficient")
    return Polynomial(values)


def _match_long(name: str) -> str | None:
    if not name:
        return None
    if name in _LONG_OPTIONS:
        return _LONG_OPTIONS[name]
    codes = {code for long, code in _LONG_OPTIONS.items() if long.startswith(name)}
    if len(codes) == 1:
        return codes.pop()
    return None


class _Options:
    def __init__(self) -> None:
        self.verbose = False
        self.in_name: str | None = None
        self.positional: list[str] = []


def _parse_args(argv: Sequence[str]) -> _Options:
    opts = _Options()
    args = list(argv)
    pos = 0

    def take_value(option: str) -> str | None:
        nonlocal pos
        if pos < len(args):
            value = args[pos]
            pos += 1
            return value
        sys.stderr.write(f"option '{option}' requires an argument\n")
        return None

    while pos < len(args):
        arg = args[pos]
        pos += 1
        if arg == "--":
            opts.positional.extend(args[pos:])
            break
        if not arg.startswith("-") or arg == "-":
            opts.positional.append(arg)
            continue
        body = arg.lstrip("-")
        name, has_inline, inline = body.partition("=")
        code = _match_long(name)
        if code is not None:
            if code == "v":
                if has_inline:
                    sys.stderr.write(
                        f"option '{arg.split('=')[0]}' doesn't allow an argument\n"
                    )
                else:
                    opts.verbose = True
            else:
                value = inline if has_inline else take_value(arg)
                if value is not None:
                    opts.in_name = value
            continue
        if arg.startswith("--"):
            sys.stderr.write(f"unrecognized option '{arg}'\n")
            continue
        # Short-option cluster such as -v or -ifile.
        chars = arg[1:]
        for index, char in enumerate(chars):
            if char == "v":
                opts.verbose = True
            elif char == "i":
                rest = chars[index + 1:]
                value = rest if rest else take_value("-i")
                if value is not None:
                    opts.in_name = value
                break
            else:
                sys.stderr.write(f"invalid option -- '{char}'\n")
    return opts


def main(argv: Sequence[str] | None = None) -> int:
    """Run the tool; returns the process exit code."""
    opts = _parse_args(sys.argv[1:] if argv is None else argv)
    if opts.positional or opts.in_name is None:
        sys.stderr.write(_USAGE)
        sys.stderr.flush()
        return int(ExitCode.SYNTAX_ERROR)

    try:
        handle = open(opts.in_name, "r", encoding="utf-8")
    except OSError:
        sys.stderr.write(f"Could not open '{opts.in_name}'\n")
        return int(ExitCode.FILE_NOT_FOUND)

    with handle:
        for line in handle:
            if not line.strip():
                continue
            try:
                poly = parse_poly(line)
            except ValueError as exc:
                sys.stderr.write(f"Error: {exc}\n")
                return DATA_READ_ERROR
            out = sys.stdout
            out.write(format_poly(poly))
            out.write(format_roots(poly, opts.verbose, out))
            out.write(" \n")
    return int(ExitCode.SUCCESS)


if __name__ == "__main__":
    sys.exit(main())