import pytest
from hypothesis import given
from hypothesis import strategies as st

from twothree.insert import has_key, insert, split_leaf, split_parent
from twothree.node import Node


def _inorder(node):
    if node is None:
        return []
    if node.is_leaf():
        return list(node.keys)
    out = []
    for index, child in enumerate(node.children):
        out.extend(_inorder(child))
        if index < len(node.keys):
            out.append(node.keys[index])
    return out


def _check(node, low=None, high=None):
    """Assert the 2-3 tree invariants below ``node`` and return its height."""
    assert 1 <= len(node.keys) <= 2
    assert node.keys == sorted(set(node.keys))
    if low is not None:
        assert all(k > low for k in node.keys)
    if high is not None:
        assert all(k < high for k in node.keys)
    if node.is_leaf():
        return 1
    assert len(node.children) == len(node.keys) + 1
    bounds = [low, *node.keys, high]
    heights = set()
    for child, lo, hi in zip(node.children, bounds, bounds[1:]):
        assert child.parent is node
        heights.add(_check(child, lo, hi))
    assert len(heights) == 1
    return heights.pop() + 1


def _build(values):
    root = None
    for value in values:
        root = insert(root, value)
    return root


def test_insert_into_empty():
    root = insert(None, 5)
    assert root.keys == [5]
    assert root.is_leaf()


def test_insert_fills_leaf_in_order():
    root = _build([8, 3])
    assert root.keys == [3, 8]


def test_third_key_splits_root():
    root = _build([1, 2, 3])
    assert root.keys == [2]
    assert [c.keys for c in root.children] == [[1], [3]]
    assert root.parent is None


def test_sequential_cascade_builds_perfect_tree():
    root = _build(range(1, 8))
    assert root.keys == [4]
    assert _check(root) == 3
    assert _inorder(root) == list(range(1, 8))


def test_duplicates_are_ignored():
    root = _build([5, 1, 9, 3, 7])
    before = _inorder(root)
    for value in (5, 1, 9, 3, 7):
        root = insert(root, value)
    assert _inorder(root) == before
    _check(root)


def test_many_sequential_inserts():
    root = _build(range(1, 201))
    assert root.parent is None
    _check(root)
    assert _inorder(root) == list(range(1, 201))


def test_descending_inserts():
    root = _build(range(100, 0, -1))
    _check(root)
    assert _inorder(root) == list(range(1, 101))


@given(st.lists(st.integers(min_value=-1000, max_value=1000), max_size=150))
def test_random_inserts_keep_invariants(values):
    root = _build(values)
    if values:
        assert root.parent is None
        _check(root)
    assert _inorder(root) == sorted(set(values))


def test_has_key():
    node = Node([2, 6])
    assert has_key(node, 6) is True
    assert has_key(node, 4) is False
    assert has_key(None, 2) is False


def test_split_leaf_of_root():
    leaf = Node([10, 30])
    root = split_leaf(leaf, 20)
    assert root.keys == [20]
    assert [c.keys for c in root.children] == [[10], [30]]
    assert all(c.parent is root for c in root.children)


def test_split_leaf_into_two_node_parent():
    full = Node([10, 20])
    parent = Node([30], [full, Node([40])])
    root = split_leaf(full, 15)
    assert root is parent
    assert parent.keys == [15, 30]
    assert [c.keys for c in parent.children] == [[10], [20], [40]]
    _check(root)


def test_split_leaf_requires_full_leaf():
    with pytest.raises(ValueError):
        split_leaf(Node([1]), 2)


def test_split_parent_rejects_bad_index():
    node = Node([10, 20], [Node([5]), Node([15]), Node([25])])
    with pytest.raises(ValueError):
        split_parent(node, 3, 3, Node([1]), Node([4]))


def test_split_parent_requires_full_node():
    node = Node([10], [Node([5]), Node([15])])
    with pytest.raises(ValueError):
        split_parent(node, 3, 0, Node([1]), Node([4]))


def test_split_parent_of_root():
    node = Node([10, 20], [Node([4, 6]), Node([15]), Node([25])])
    root = split_parent(node, 5, 0, Node([4]), Node([6]))
    assert _inorder(root) == [4, 5, 6, 10, 15, 20, 25]
    assert root.keys == [10]
    assert _check(root) == 3