"""A tiny calculator over 16-bit signed integers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

_SHORT_BITS = 16


def _to_short(value: int) -> int:
    """Wrap an integer into the signed 16-bit range."""
    half = 1 << (_SHORT_BITS - 1)
    return ((value + half) & ((1 << _SHORT_BITS) - 1)) - half


class Calculator:
    """Applies one of the operators '+', '-' or '*' to two shorts."""

    def process(self, x: int, y: int, op: str) -> int:
        """Return ``x op y`` wrapped to 16 bits, or -1 for an unknown operator."""
        if op == "+":
            return _to_short(x + y)
        if op == "-":
            return _to_short(x - y)
        if op == "*":
            return _to_short(x * y)
        return -1


def my_package(calc: Calculator, x: int, y: int, op: str) -> int:
    """Entry point that delegates to :meth:`Calculator.process`."""
    return calc.process(x, y, op)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the results of a few sample calculations."""
    if argv is None:
        argv = sys.argv[1:]
    calc = Calculator()
    for op in ("*", "+", "-"):
        print(calc.process(10, 20, op))
    return 0


if __name__ == "__main__":
    sys.exit(main())