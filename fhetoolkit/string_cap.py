"""Capitalise the first letter of each word in a fixed-size string."""

from __future__ import annotations

MAX_LENGTH = 32


def capitalize_string(text: str) -> str:
    """Upper-case every lowercase ASCII letter that follows a space or starts the text.

    Only the first ``MAX_LENGTH`` characters are examined; the rest are kept as is.
    """
    head, tail = text[:MAX_LENGTH], text[MAX_LENGTH:]
    result = []
    last_was_space = True
    for c in head:
        if last_was_space and "a" <= c <= "z":
            result.append(c.upper())
        else:
            result.append(c)
        last_was_space = c == " "
    return "".join(result) + tail