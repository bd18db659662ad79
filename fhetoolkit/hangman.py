"""A game of hangman whose server only answers with letter-position bitmasks."""

from __future__ import annotations

import random
import sys
from collections.abc import Sequence

MAX_WORD_LENGTH = 7
MAX_INCORRECT_ATTEMPTS = 6
CORRECT_RESULT = 127
LINE_SEPARATOR = "================================================"

# Bitmasks for the secret word "hangman", most significant bit first.
_MOVES = {
    "h": 64,  # Hangman
    "a": 34,  # hAngmAn
    "n": 17,  # haNgmaN
    "g": 8,  # hanGman
    "m": 4,  # hangMan
}

_GRAPHIC_CHARS = "".join(chr(code) for code in range(33, 127))

_GALLOWS_TOP = (
    "-----CLIENT VIEW ----- | -----SERVER VIEW -----\n"
    "  -------              | ------- \n"
    " |  /  |               | |  /  |\n | / "
)
_GALLOWS_BOTTOM = (
    " |                     | |\n"
    " |----------           | |----------\n"
    " |         |           | |         |\n"
    " |_________|           | |_________|\n\n"
)
# Body parts for each number of incorrect attempts: head line, torso, legs.
_FIGURES = (
    ("                  ", "                     ", "                     "),
    ("  O               ", "                     ", "                     "),
    ("  O               ", "     |               ", "                     "),
    ("  O               ", "    /|               ", "                     "),
    ("  O               ", "    /|\\              ", "                     "),
    ("  O               ", "    /|\\              ", "    /                "),
    ("  O               ", "    /|\\              ", "    / \\              "),
)


def hangman_make_move(letter: str) -> int:
    """Return the bitmask of positions of ``letter`` in the secret word.

    Expects a lowercase letter; a letter not in the word gives 0.
    """
    return _MOVES.get(letter, 0)


def update_current_word(input_letter: str, move_result: int, current_word: str) -> str:
    """Reveal ``input_letter`` at every position set in ``move_result``.

    ``current_word`` holds one letter and one space per position.
    """
    bits = format(move_result & ((1 << MAX_WORD_LENGTH) - 1), f"0{MAX_WORD_LENGTH}b")
    updated = list(current_word)
    for position, bit in enumerate(bits):
        if bit == "1":
            updated[2 * position] = input_letter
    return "".join(updated)


def generate_gibberish(length: int) -> str:
    """Return ``length`` random printable, non-space ASCII characters."""
    return "".join(random.choice(_GRAPHIC_CHARS) for _ in range(max(length, 0)))


def draw_ascii_result(current_word: str, incorrect_attempts_made: int) -> str:
    """Draw the gallows and the current guess as seen by client and server."""
    if not 0 <= incorrect_attempts_made < len(_FIGURES):
        raise ValueError(
            f"incorrect attempts must be between 0 and {len(_FIGURES) - 1}, "
            f"got {incorrect_attempts_made}"
        )
    head, torso, legs = _FIGURES[incorrect_attempts_made]
    figure = (
        f"{head}| | / {generate_gibberish(7)}\n"
        f" |{torso}| |   {generate_gibberish(7)}\n"
        f" |{legs}| |   {generate_gibberish(7)}\n"
    )
    server_word = "".join(generate_gibberish(1) + " " for _ in range(MAX_WORD_LENGTH))
    return (
        LINE_SEPARATOR
        + "\n"
        + _GALLOWS_TOP
        + figure
        + _GALLOWS_BOTTOM
        + LINE_SEPARATOR
        + "\n"
        + "Current guess:         |  Current guess:\n"
        + current_word
        + "         |  "
        + server_word
        + "\n"
        + LINE_SEPARATOR
        + "\n"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Play hangman interactively on standard input and output."""
    if argv is None:
        argv = sys.argv[1:]
    print("Welcome to a game of hangman.")
    result = 0
    current_word = "_ " * MAX_WORD_LENGTH
    incorrect_attempts_made = 0
    print(draw_ascii_result(current_word, incorrect_attempts_made))

    while incorrect_attempts_made < MAX_INCORRECT_ATTEMPTS and result != CORRECT_RESULT:
        print("Type a letter to make a move: ", end="", flush=True)
        line = sys.stdin.readline()
        if not line:
            break
        letter = line.rstrip("\n")
        if len(letter) != 1:
            print("Please only enter one letter.")
            continue
        move_result = hangman_make_move(letter)
        if move_result == 0:
            incorrect_attempts_made += 1
        else:
            current_word = update_current_word(letter, move_result, current_word)
        result |= move_result
        print(draw_ascii_result(current_word, incorrect_attempts_made))

    if result == CORRECT_RESULT:
        print("CONGRATULATIONS!\n")
    else:
        print("SORRY, NOT THIS TIME.\n")
    print("GAME OVER.")
    return 0


if __name__ == "__main__":
    sys.exit(main())