"""A set of integers kept in a 2-3 tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .delete import delete as _delete
from .insert import insert as _insert
from .node import Node, find_node


def _in_order(node: Node) -> Iterator[int]:
    if node.is_leaf():
        yield from node.keys
        return
    for child, key in zip(node.children, node.keys):
        yield from _in_order(child)
        yield key
    yield from _in_order(node.children[-1])


class TwoThreeTree:
    """An ordered set of integers stored in a balanced 2-3 tree."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Node | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        """Add ``value``; a value already present is left alone."""
        self.root = _insert(self.root, value)

    def delete(self, key: int) -> None:
        """Remove ``key``; a missing key is ignored."""
        self.root = _delete(self.root, key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        return find_node(self.root, key) is not None

    def __iter__(self) -> Iterator[int]:
        if self.root is None:
            return iter(())
        return _in_order(self.root)