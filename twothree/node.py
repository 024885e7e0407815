"""Nodes of a 2-3 tree and helpers for moving around in it."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field


@dataclass(eq=False)
class Node:
    """A 2-3 tree node holding one or two sorted keys.

    A leaf has no children. An inner node has one child more than it has keys.
    Building a node with children makes it their parent.
    """

    keys: list[int] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)
    parent: Node | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        for child in self.children:
            child.parent = self

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return not self.children


def child_index(node: Node | None) -> int | None:
    """Return the position of ``node`` among its parent's children, or None."""
    if node is None or node.parent is None:
        return None
    for index, child in enumerate(node.parent.children):
        if child is node:
            return index
    return None


def left_sibling(parent: Node | None, index: int | None) -> Node | None:
    """Return the sibling to the left of the child at ``index``, or None."""
    if parent is None or index is None or not 0 < index < len(parent.children):
        return None
    return parent.children[index - 1]


def right_sibling(parent: Node | None, index: int | None) -> Node | None:
    """Return the sibling to the right of the child at ``index``, or None."""
    if parent is None or index is None or not 0 <= index < len(parent.children) - 1:
        return None
    return parent.children[index + 1]


def find_node(root: Node | None, key: int) -> Node | None:
    """Return the node that holds ``key``, or None if the tree lacks it."""
    current = root
    while current is not None:
        if key in current.keys:
            return current
        if current.is_leaf():
            return None
        current = current.children[bisect_right(current.keys, key)]
    return None


def find_min_leaf(node: Node | None) -> Node | None:
    """Return the leftmost leaf under ``node``, or None for an empty subtree."""
    if node is None:
        return None
    current = node
    while not current.is_leaf():
        current = current.children[0]
    return current


def root_of(node: Node | None) -> Node | None:
    """Return the topmost ancestor of ``node``."""
    if node is None:
        return None
    current = node
    while current.parent is not None:
        current = current.parent
    return current