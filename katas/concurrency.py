"""Small exercises in splitting work across threads and pipelines."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor


def add_range(start: int, end: int) -> int:
    """Sum the integers from ``start`` to ``end`` inclusive."""
    return sum(range(start, end + 1))


def _chunks(start: int, end: int, skip: int) -> Iterator[tuple[int, int]]:
    low = start
    while low <= end:
        high = min(low + skip, end)
        yield low, high
        low = high + 1


def add_concurrent(start: int, end: int, skip: int) -> int:
    """Sum ``start``..``end`` inclusive, in chunks of ``skip + 1`` run on threads."""
    if skip < 0:
        raise ValueError("skip must not be negative")
    with ThreadPoolExecutor() as pool:
        partials = pool.map(lambda bounds: add_range(*bounds), _chunks(start, end, skip))
        return sum(partials)


def generate(*args: int) -> Iterator[int]:
    """Yield the given values in order."""
    yield from args


def square(values: Iterable[int]) -> Iterator[int]:
    """Yield the square of each value."""
    for value in values:
        yield value * value


def consume(values: Iterable[int]) -> list[int]:
    """Collect a stream of values into a list."""
    return list(values)


def frequency(text: str) -> Counter[str]:
    """Count how often each character occurs in ``text``."""
    return Counter(text)


def concurrent_frequency(texts: Iterable[str]) -> Counter[str]:
    """Count characters across all ``texts``, one thread per text."""
    total: Counter[str] = Counter()
    with ThreadPoolExecutor() as pool:
        for counts in pool.map(frequency, texts):
            total.update(counts)
    return total