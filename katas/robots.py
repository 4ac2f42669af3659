"""Robots with random, never repeated factory names."""

from __future__ import annotations

import random
import threading

_LETTERS = 26
_NUMBERS = 1000
_NAMESPACE = _LETTERS * _LETTERS * _NUMBERS


class NameExhaustedError(RuntimeError):
    """Raised when every possible robot name has been handed out."""

    def __init__(self) -> None:
        super().__init__("namespace is exhausted")


def _format_name(number: int) -> str:
    letters, digits = divmod(number, _NUMBERS)
    first, second = divmod(letters, _LETTERS)
    return f"{chr(ord('A') + first)}{chr(ord('A') + second)}{digits:03d}"


class NamePool:
    """Hands out names of the form 'AB123' at random, each at most once."""

    def __init__(self, seed: int | None = None) -> None:
        self._random = random.Random(seed)
        self._remaining: list[int] | None = None
        self._lock = threading.Lock()

    def draw(self) -> str:
        """Take a random unused name out of the pool."""
        with self._lock:
            if self._remaining is None:
                self._remaining = list(range(_NAMESPACE))
            remaining = self._remaining
            if not remaining:
                raise NameExhaustedError()
            index = self._random.randrange(len(remaining))
            number = remaining[index]
            remaining[index] = remaining[-1]
            remaining.pop()
        return _format_name(number)

    def __len__(self) -> int:
        """Number of names still available."""
        if self._remaining is None:
            return _NAMESPACE
        return len(self._remaining)


_shared_pool = NamePool()


class Robot:
    """A robot that gets a name the first time it is asked for one."""

    def __init__(self, pool: NamePool | None = None) -> None:
        self._pool = pool if pool is not None else _shared_pool
        self._name: str | None = None

    def name(self) -> str:
        """The robot's name, drawing a new one if it has none."""
        if self._name is None:
            self._name = self._pool.draw()
        return self._name

    def reset(self) -> None:
        """Wipe the name; the next call to name() draws a fresh one."""
        self._name = None