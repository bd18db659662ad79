"""Rock, paper, scissors between two players."""

from __future__ import annotations

import sys
from collections.abc import Sequence

_USAGE = "usage: rock_paper_scissor [R,P,S] [R,P,S]"
_BEATS = {("R", "S"), ("P", "R"), ("S", "P")}


def rock_paper_scissor(player_a: str, player_b: str) -> str:
    """Return 'A' or 'B' for the winning player, or '=' for a tie."""
    if player_a == player_b:
        return "="
    if (player_a, player_b) in _BEATS:
        return "A"
    return "B"


def is_valid_selection(c: str) -> bool:
    """Tell whether ``c`` is one of 'R', 'P' or 'S'."""
    return c in ("R", "P", "S")


def main(argv: Sequence[str] | None = None) -> int:
    """Play one round with the two selections given on the command line."""
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) < 2:
        print(_USAGE, file=sys.stderr)
        return 1
    player_a = argv[0][:1]
    player_b = argv[1][:1]
    if not is_valid_selection(player_a) or not is_valid_selection(player_b):
        print(_USAGE, file=sys.stderr)
        return 1
    print(f"Player A selected {player_a} and Player B selected {player_b}")
    print(f"Result: {rock_paper_scissor(player_a, player_b)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())