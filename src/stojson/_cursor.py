"""Forward-only character cursor over decoded JSON text."""

from __future__ import annotations

import unicodedata
from typing import Final


def is_insignificant(char: str) -> bool:
    """Returns True for whitespace and control characters skipped between tokens."""
    return char.isspace() or unicodedata.category(char) == "Cc"


class Cursor:
    """Position marker over a text buffer with bounded lookahead.

    Parsers share one cursor and advance it as they consume characters, so
    container parsers can recurse without copying the remaining input.
    Exhaustion is signalled by ``None`` rather than an exception; callers
    decide whether running out of input is an error.
    """

    def __init__(self, text: str) -> None:
        """Initialize cursor at the start of the text.

        Args:
            text: Decoded JSON document
        """
        self.text: Final = text
        self.length: Final = len(text)
        self.pos = 0

    def __iter__(self) -> Cursor:
        return self

    def __next__(self) -> str:
        char = self.advance()
        if char is None:
            raise StopIteration
        return char

    def __repr__(self) -> str:
        return f"Cursor(pos={self.pos}, length={self.length})"

    @property
    def exhausted(self) -> bool:
        return self.pos >= self.length

    def peek(self) -> str | None:
        """Returns current character without advancing."""
        return self.text[self.pos] if self.pos < self.length else None

    def advance(self) -> str | None:
        """Returns current character and advances position."""
        if self.pos >= self.length:
            return None
        char = self.text[self.pos]
        self.pos += 1
        return char

    def take(self, count: int) -> str:
        """Consumes up to ``count`` characters and returns them.

        Fewer characters are returned when the input runs out first.
        """
        chunk = self.text[self.pos : self.pos + count]
        self.pos += len(chunk)
        return chunk

    def skip_insignificant(self) -> None:
        """Skips whitespace and control characters."""
        while self.pos < self.length and is_insignificant(self.text[self.pos]):
            self.pos += 1

    def rewind(self, pos: int) -> None:
        """Moves the cursor back to a previously observed position.

        Args:
            pos: Offset no greater than the current position

        Raises:
            ValueError: If ``pos`` lies ahead of the cursor or before the start
        """
        if not 0 <= pos <= self.pos:
            raise ValueError(
                f"cannot rewind to {pos}: cursor is at {self.pos}"
            )
        self.pos = pos
