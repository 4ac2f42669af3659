"""Build a tree out of (id, parent) records."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Record:
    """A flat record naming a node and its parent."""

    id: int
    parent: int = 0


@dataclass
class Node:
    """A tree node with its children in ascending id order."""

    id: int
    children: list[Node] = field(default_factory=list)


def build(records: Iterable[Record]) -> Node | None:
    """Assemble records into a tree and return its root.

    Ids must run from 0 without gaps, and every parent id must be lower
    than the child's; only the root may be its own parent. Returns None
    when there are no records, and raises ValueError for invalid input.
    """
    nodes: list[Node] = []
    for index, record in enumerate(sorted(records, key=lambda r: r.id)):
        if (
            index != record.id
            or record.id < record.parent
            or (record.id != 0 and record.id == record.parent)
        ):
            raise ValueError(f"invalid node {record}")
        node = Node(record.id)
        nodes.append(node)
        if record.id != 0:
            nodes[record.parent].children.append(node)
    return nodes[0] if nodes else None