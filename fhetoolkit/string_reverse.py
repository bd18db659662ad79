"""Reverse a short, possibly NUL-terminated string in a fixed-size buffer."""

from __future__ import annotations

import sys
from collections.abc import Sequence

MAX_LENGTH = 8


def str_len(text: str) -> int:
    """Return the length up to the first NUL, capped at ``MAX_LENGTH``."""
    end = text.find("\0", 0, MAX_LENGTH)
    if end != -1:
        return end
    return min(len(text), MAX_LENGTH)


def reverse_string(text: str) -> str:
    """Reverse the leading string of ``text``; anything after it is kept."""
    n = str_len(text)
    return text[:n][::-1] + text[n:]


def main(argv: Sequence[str] | None = None) -> int:
    """Reverse a sample string and print it."""
    if argv is None:
        argv = sys.argv[1:]
    print("Result: " + reverse_string("abcd"))
    return 0


if __name__ == "__main__":
    sys.exit(main())