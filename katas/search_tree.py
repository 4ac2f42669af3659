"""A binary search tree of integers."""

from __future__ import annotations

from collections.abc import Callable, Iterator


class SearchTree:
    """A binary search tree; equal values go to the left."""

    __slots__ = ("data", "left", "right")

    def __init__(self, data: int) -> None:
        self.data = data
        self.left: SearchTree | None = None
        self.right: SearchTree | None = None

    def insert(self, data: int) -> None:
        """Insert ``data`` in its sorted place."""
        node = self
        while True:
            if data <= node.data:
                if node.left is None:
                    node.left = SearchTree(data)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = SearchTree(data)
                    return
                node = node.right

    def __iter__(self) -> Iterator[int]:
        """Yield the values in ascending order."""
        stack: list[SearchTree] = []
        node: SearchTree | None = self
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def map_string(self, func: Callable[[int], str]) -> list[str]:
        """Apply ``func`` to each value in ascending order."""
        return [func(value) for value in self]

    def map_int(self, func: Callable[[int], int]) -> list[int]:
        """Apply ``func`` to each value in ascending order."""
        return [func(value) for value in self]