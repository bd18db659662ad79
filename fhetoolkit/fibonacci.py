"""Fibonacci numbers and short Fibonacci sequences for small inputs."""

from __future__ import annotations

import sys
from collections.abc import Sequence

MAX_N = 10
SEQUENCE_LENGTH = 5


def fibonacci_number(n: int) -> int:
    """Return the n-th Fibonacci number, or -1 when n is outside [0, 10]."""
    if n < 0 or n > MAX_N:
        return -1
    prev, cur = 0, 1
    for _ in range(n):
        prev, cur = cur, prev + cur
    return prev


def fibonacci_sequence(n: int) -> list[int]:
    """Return five Fibonacci values starting from the n-th one.

    For n outside [0, 10] nothing is computed and all values are zero.
    """
    if n < 0 or n > MAX_N:
        return [0] * SEQUENCE_LENGTH

    prev, cur = 0, 1
    for _ in range(2, n + 1):
        prev, cur = cur, prev + cur

    output = [0 if n == 0 else cur]
    for _ in range(1, SEQUENCE_LENGTH):
        prev, cur = cur, prev + cur
        output.append(cur)
    return output


def main(argv: Sequence[str] | None = None) -> int:
    """Print sample sequences and numbers."""
    if argv is None:
        argv = sys.argv[1:]
    print("Testing Fibonacci sequence")
    for n in (0, 1, 2, 5, 10, -1, 20):
        print(f"5 numbers of Fibonacci sequence starting from {n}")
        for value in fibonacci_sequence(n):
            print(value)
        print()
    print("Testing Fibonacci number")
    for n in (-1, 0, 1, 2, 3, 4, 10, 30, 40):
        print(f"Fibonacci({n}) : {fibonacci_number(n)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())