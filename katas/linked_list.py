"""A doubly linked list with access to its nodes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


class EmptyListError(IndexError):
    """Raised when popping from an empty list."""

    def __init__(self) -> None:
        super().__init__("error empty list")


@dataclass(eq=False)
class Node:
    """One element of a LinkedList, linked to its neighbours."""

    val: Any
    next: Node | None = field(default=None, repr=False)
    prev: Node | None = field(default=None, repr=False)

    def first(self) -> Node:
        """Walk back to the first node of the chain."""
        node = self
        while node.prev is not None:
            node = node.prev
        return node

    def last(self) -> Node:
        """Walk forward to the last node of the chain."""
        node = self
        while node.next is not None:
            node = node.next
        return node


class LinkedList:
    """A doubly linked list that can grow and shrink at both ends."""

    def __init__(self, *args: Any) -> None:
        self._first: Node | None = None
        self._last: Node | None = None
        for value in args:
            self.push_back(value)

    def first(self) -> Node | None:
        """The first node, or None when empty."""
        return self._first

    def last(self) -> Node | None:
        """The last node, or None when empty."""
        return self._last

    def push_back(self, value: Any) -> None:
        """Append ``value`` at the end."""
        node = Node(value, prev=self._last)
        if self._last is None:
            self._first = node
        else:
            self._last.next = node
        self._last = node

    def pop_back(self) -> Any:
        """Remove the last element and return its value."""
        node = self._last
        if node is None:
            raise EmptyListError()
        self._last = node.prev
        if self._last is None:
            self._first = None
        else:
            self._last.next = None
        node.prev = None
        return node.val

    def push_front(self, value: Any) -> None:
        """Insert ``value`` at the beginning."""
        node = Node(value, next=self._first)
        if self._first is None:
            self._last = node
        else:
            self._first.prev = node
        self._first = node

    def pop_front(self) -> Any:
        """Remove the first element and return its value."""
        node = self._first
        if node is None:
            raise EmptyListError()
        self._first = node.next
        if self._first is None:
            self._last = None
        else:
            self._first.prev = None
        node.next = None
        return node.val

    def reverse(self) -> None:
        """Reverse the list in place."""
        node = self._first
        self._first, self._last = self._last, self._first
        while node is not None:
            following = node.next
            node.next, node.prev = node.prev, node.next
            node = following

    def __iter__(self) -> Iterator[Any]:
        node = self._first
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({', '.join(map(repr, self))})"