"""Character-at-a-time capitalisation with explicit carried state."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class State:
    """Remembers whether the previous character was a space."""

    last_was_space: bool = True

    def process(self, c: str) -> str:
        """Return ``c``, upper-cased if it begins a word, and update the state."""
        result = c.upper() if self.last_was_space and "a" <= c <= "z" else c
        self.last_was_space = c == " "
        return result


def my_package(st: State, c: str) -> str:
    """Entry point that delegates to :meth:`State.process`."""
    return st.process(c)


def capitalize(text: str) -> str:
    """Run a fresh :class:`State` over every character of ``text``."""
    st = State()
    return "".join(st.process(c) for c in text)