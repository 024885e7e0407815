"""Insertion into a 2-3 tree, splitting full nodes on the way up."""

from __future__ import annotations

from bisect import bisect_right, insort

from .node import Node, root_of
from .node import child_index as _position


def has_key(node: Node | None, value: int) -> bool:
    """Return True if ``node`` holds ``value`` among its own keys."""
    return node is not None and value in node.keys


def _attach(node: Node, promote_key: int, left: Node, right: Node) -> Node:
    """Replace ``node`` by ``left`` and ``right``, pushing ``promote_key`` up.

    Returns the root of the tree afterwards.
    """
    parent = node.parent
    if parent is None:
        return Node([promote_key], [left, right])
    index = _position(node)
    if index is None:
        raise ValueError("node is not among its parent's children")
    node.parent = None
    if len(parent.keys) == 1:
        parent.keys.insert(index, promote_key)
        parent.children[index:index + 1] = [left, right]
        left.parent = right.parent = parent
        return root_of(parent)
    return split_parent(parent, promote_key, index, left, right)


def split_leaf(leaf: Node, value: int) -> Node:
    """Split a full leaf around ``value`` and return the tree's root."""
    if len(leaf.keys) != 2:
        raise ValueError("only a leaf with two keys can be split")
    low, middle, high = sorted([*leaf.keys, value])
    return _attach(leaf, middle, Node([low]), Node([high]))


def split_parent(
    node: Node,
    promote_key: int,
    child_index: int,
    left_child: Node,
    right_child: Node,
) -> Node:
    """Split a full inner node whose child at ``child_index`` became two.

    ``promote_key`` is the key coming up from that child. Returns the root.
    """
    if len(node.keys) != 2:
        raise ValueError("only a node with two keys can be split")
    if not 0 <= child_index < len(node.children):
        raise ValueError(f"child index {child_index} out of range")
    children = list(node.children)
    children[child_index:child_index + 1] = [left_child, right_child]
    low, middle, high = sorted([*node.keys, promote_key])
    return _attach(node, middle, Node([low], children[:2]), Node([high], children[2:]))


def insert(root: Node | None, value: int) -> Node:
    """Insert ``value`` into the tree and return its root; duplicates are ignored."""
    if root is None:
        return Node([value])
    current = root
    while not current.is_leaf():
        if has_key(current, value):
            return root
        current = current.children[bisect_right(current.keys, value)]
    if has_key(current, value):
        return root
    if len(current.keys) < 2:
        insort(current.keys, value)
        return root
    return split_leaf(current, value)