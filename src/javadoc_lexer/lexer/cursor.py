"""Forward-only character cursor over a comment body.

The cursor records everything consumed since the last call to
``take_recorded`` so the lexer can try several rules and then
take the matched span as the token text in one step.
"""
from __future__ import annotations

import re


class CharCursor:
    """Scanner over a string that only ever moves forward.

    Parameters
    ----------
    text:
        The text to scan.
    """

    __slots__ = ("_text", "_pos", "_mark")

    def __init__(self, text: str) -> None:
        self._text: str = text
        self._pos: int = 0
        self._mark: int = 0

    def __repr__(self) -> str:
        return f"<CharCursor @{self._pos} {self._text[self._pos:self._pos + 20]!r}>"

    @property
    def position(self) -> int:
        """0-based offset of the next unconsumed character."""
        return self._pos

    def is_exhausted(self) -> bool:
        """Return True once every character has been consumed."""
        return self._pos >= len(self._text)

    def try_consume_literal(self, literal: str) -> bool:
        """Consume ``literal`` if the text continues with it exactly."""
        if self._text.startswith(literal, self._pos):
            self._pos += len(literal)
            return True
        return False

    def try_consume_pattern(self, pattern: re.Pattern[str]) -> bool:
        """Consume the match of ``pattern`` anchored at the current position."""
        mo = pattern.match(self._text, self._pos)
        if mo is None:
            return False
        self._pos = mo.end()
        return True

    def take_recorded(self) -> str:
        """Return the text consumed since the previous call and start a new record."""
        recorded = self._text[self._mark : self._pos]
        self._mark = self._pos
        return recorded
