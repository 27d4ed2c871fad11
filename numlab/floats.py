"""IEEE-754 single precision decoding and machine epsilon exploration."""

from __future__ import annotations

import argparse
import math
import struct
import sys
from typing import Iterator, Sequence

SIGN_MASK = 0x80000000
SIGN_SHIFT = 31
EXPONENT_MASK = 0x7F800000
EXPONENT_SHIFT = 23
EXPONENT_BIAS = 127
SIGNIFICAND_MASK = 0x007FFFFF

FLT_EPSILON = 2.0**-23
DBL_EPSILON = sys.float_info.epsilon


def _to_f32_bits(value: float) -> int:
    try:
        packed = struct.pack(">f", value)
    except OverflowError:
        packed = struct.pack(">f", math.copysign(math.inf, value))
    return struct.unpack(">I", packed)[0]


def _f32(value: float) -> float:
    """Round a Python float to the nearest single precision value."""
    return struct.unpack(">f", struct.pack(">I", _to_f32_bits(value)))[0]


def ieee_fields(value: float) -> tuple[int, int, int]:
    """Return (sign, unbiased exponent, significand << 1) of a float32."""
    bits = _to_f32_bits(value)
    sign = (bits & SIGN_MASK) >> SIGN_SHIFT
    exponent = ((bits & EXPONENT_MASK) >> EXPONENT_SHIFT) - EXPONENT_BIAS
    significand = (bits & SIGNIFICAND_MASK) << 1
    return sign, exponent, significand


def format_ieee(value: float) -> str:
    """Describe the single precision fields of ``value`` on one line."""
    sign, exponent, significand = ieee_fields(value)
    number = _f32(value)
    return (
        f"Number {number:f} => Bin sign:{sign} Dec exponent:{exponent}  "
        f"Hex significand .{significand:x}\n"
    )


def smallest_positive(double: bool = True) -> float:
    """Find the smallest positive value by repeated halving of 1.0."""
    rnd = float if double else _f32
    eps = 1.0
    last = eps
    while eps > 0.0:
        last = eps
        eps = rnd(eps / 2.0)
    return last


def _epsilon_steps(double: bool) -> Iterator[float]:
    rnd = float if double else _f32
    eps = 1.0
    while rnd(1.0 + eps) != 1.0:
        yield eps
        eps = rnd(eps / 2.0)


def machine_epsilon(double: bool = True) -> float:
    """Smallest power of two that still changes 1.0 when added to it."""
    last = 1.0
    for eps in _epsilon_steps(double):
        last = eps
    return last


def _report() -> str:
    lines = [
        f"Smallest Non-Zero Single Precision Value: {smallest_positive(False):2.6g}\n",
        "\n",
    ]
    lines.extend(
        f"{eps:10.8g}\t{1.0 + eps:.20f}\n" for eps in _epsilon_steps(False)
    )
    lines += [
        "\n",
        f"Calculated Machine Epsilon: {machine_epsilon(False):2.6g}\n",
        f"Actual Machine Epsilon:     {FLT_EPSILON:2.6g}\n",
        "\n",
        f"Smallest Non-Zero Double Precision Value: {smallest_positive(True):2.6g}\n",
        "\n",
    ]
    lines.extend(f"{eps:10.8g}\t{1.0 + eps:.20f}\n" for eps in _epsilon_steps(True))
    lines += [
        "\n",
        "Calculated Machine Double Precision Epsilon: "
        f"{machine_epsilon(True):2.6g}\n",
        f"Actual Machine Double Precision Epsilon:     {DBL_EPSILON:2.6g}\n",
    ]
    return "".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Decode an IEEE single precision number, or, with no "
        "number, report the smallest values and machine epsilon."
    )
    parser.add_argument("number", nargs="?", type=float)
    args = parser.parse_args(argv)
    if args.number is None:
        sys.stdout.write(_report())
    else:
        sys.stdout.write(format_ieee(args.number))
    return 0


if __name__ == "__main__":
    sys.exit(main())