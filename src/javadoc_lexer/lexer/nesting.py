"""Non-negative nesting counter used for brace, ``<pre>`` and ``<table>`` depth."""
from __future__ import annotations


class NestingCounter:
    """A depth counter that never goes below zero.

    ``increment_if_positive`` is what makes a bare ``{`` outside an
    inline tag inert: it only deepens an existing nesting level and
    never starts one.
    """

    __slots__ = ("_value",)

    def __init__(self) -> None:
        self._value: int = 0

    def __repr__(self) -> str:
        return f"NestingCounter({self._value})"

    @property
    def value(self) -> int:
        return self._value

    def increment(self) -> None:
        self._value += 1

    def increment_if_positive(self) -> None:
        if self._value > 0:
            self._value += 1

    def decrement_if_positive(self) -> None:
        if self._value > 0:
            self._value -= 1

    def is_positive(self) -> bool:
        return self._value > 0
