"""Deletion from a 2-3 tree, borrowing from or merging with siblings."""

from __future__ import annotations

from .node import Node, child_index, find_min_leaf, find_node, left_sibling, right_sibling


def remove_from_parent(parent: Node | None, key_index: int, child_index: int) -> None:
    """Drop the key at ``key_index`` and the child at ``child_index`` from ``parent``."""
    if parent is None:
        return
    del parent.keys[key_index]
    del parent.children[child_index]


def _adopt(node: Node, children: list[Node]) -> None:
    for child in children:
        child.parent = node


def handle_underflow(node: Node, root: Node | None) -> Node | None:
    """Repair ``node`` after it lost its last key and return the tree's root.

    The node borrows a key from a sibling with two keys, left first, or is
    merged with a sibling, which may leave the parent to be repaired in turn.
    """
    parent = node.parent
    if parent is None:
        if node.keys:
            return node
        if node.is_leaf():
            return None
        new_root = node.children[0]
        new_root.parent = None
        node.children.clear()
        return new_root

    if node.keys:
        return root

    index = child_index(node)
    if index is None:
        raise ValueError("node is not among its parent's children")

    left = left_sibling(parent, index)
    right = right_sibling(parent, index)

    if left is not None and len(left.keys) == 2:
        key_index = index - 1
        node.keys = [parent.keys[key_index]]
        parent.keys[key_index] = left.keys.pop()
        if not left.is_leaf():
            moved = left.children.pop()
            node.children.insert(0, moved)
            moved.parent = node
        return root

    if right is not None and len(right.keys) == 2:
        node.keys = [parent.keys[index]]
        parent.keys[index] = right.keys.pop(0)
        if not right.is_leaf():
            moved = right.children.pop(0)
            node.children.append(moved)
            moved.parent = node
        return root

    if left is not None:
        key_index = index - 1
        left.keys.append(parent.keys[key_index])
        left.children.extend(node.children)
        _adopt(left, node.children)
        node.children = []
        remove_from_parent(parent, key_index, index)
        node.parent = None
    elif right is not None:
        node.keys = [parent.keys[index], *right.keys]
        node.children.extend(right.children)
        _adopt(node, right.children)
        right.children = []
        remove_from_parent(parent, index, index + 1)
        right.parent = None
    else:
        raise ValueError("node has no siblings to borrow from or merge with")

    if not parent.keys:
        return handle_underflow(parent, root)
    return root


def delete(root: Node | None, key: int) -> Node | None:
    """Remove ``key`` from the tree and return its root; missing keys are ignored."""
    if root is None:
        return None
    holder = find_node(root, key)
    if holder is None:
        return root

    if holder.is_leaf():
        target, target_key = holder, key
    else:
        position = holder.keys.index(key)
        leaf = find_min_leaf(holder.children[position + 1])
        if leaf is None:
            raise ValueError("inner node has no successor leaf")
        successor = leaf.keys[0]
        holder.keys[position] = successor
        target, target_key = leaf, successor

    target.keys.remove(target_key)
    if target.keys:
        return root
    return handle_underflow(target, root)