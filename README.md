# twothree

A 2-3 search tree of integer keys. Every node holds one or two keys and
every leaf sits at the same depth. Full nodes are split on insert. On
delete, a node left empty borrows a key from a sibling with two keys,
trying the left sibling first. Failing that, it is merged with a sibling,
and the repair may carry on up to the root. Duplicate keys are ignored,
and so is deleting a key that is not there.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Using the tree

`twothree.tree.TwoThreeTree` is an ordered set of integers. It supports
`insert`, `delete`, membership with `in` and in-order iteration:

```python
from twothree.tree import TwoThreeTree

tree = TwoThreeTree([5, 1, 9])
tree.insert(3)
tree.insert(7)

3 in tree        # True
"3" in tree      # False: only integers are ever members
list(tree)       # [1, 3, 5, 7, 9]

tree.delete(3)
3 in tree        # False
tree.delete(42)  # a key that is not there leaves the tree unchanged
```

The root node is available as `tree.root`. It is `None` when the tree is
empty.

## Working with nodes

`twothree.node.Node` is a dataclass with `keys`, `children` and `parent`.
Building a node with children makes it their parent. `Node.is_leaf()`
tells whether it has no children. The same module has helpers for moving
around the tree: `find_node`, `find_min_leaf`, `root_of`, `child_index`,
`left_sibling` and `right_sibling`.

Insertion and deletion are also plain functions. Each one takes the
current root and returns the new root. `delete` returns `None` once the
tree is empty.

```python
from twothree.insert import insert
from twothree.delete import delete
from twothree.node import find_node

root = None
for key in range(1, 11):
    root = insert(root, key)
root = delete(root, 4)
find_node(root, 4)   # None
```

The steps behind them are public as well. `twothree.insert` provides
`has_key`, `split_leaf` and `split_parent`. `twothree.delete` provides
`remove_from_parent` and `handle_underflow`. They raise `ValueError` when
given a node they cannot work on, such as a leaf to split that does not
hold two keys.

## Benchmark

The `twothree-benchmark` command runs six phases and times each one.

Sequential phases:

1. Insert the keys 1 to N in order.
2. Search for every key from 0.3·N to 1.5·N.
3. Delete the keys 1 to N in order.

Random phases, on a fresh tree:

4. Insert N random keys between 1 and N.
5. Search for N random keys between 1 and 10,000,000.
6. Delete N random keys between 1 and N.

For each phase it writes a file with the mean time of one operation, in
microseconds with ten decimal places, for every full block of operations,
one value per line:

- `insert_times_block.txt`, `search_times_block.txt`, `delete_times_block.txt`
- `insert_times_block_random.txt`, `search_times_block_random.txt`,
  `delete_times_block_random.txt`

It reports its progress and prints `Tree height: <n>` after each fill and
after each emptying.

```
twothree-benchmark
twothree-benchmark --elements 100000 --block-size 500 --output-dir results --seed 1
```

Options:

- `--elements`: N, the number of keys. The default is 1,000,000.
- `--block-size`: the number of operations per timed block. The default is 1000.
- `--output-dir`: the directory for the timing files. It is created if it is
  missing. The default is the current directory.
- `--seed`: the seed for the random keys. By default the keys differ on every run.

The timing helpers can also be used from Python. Both are in
`twothree.benchmark`:

- `measure_blocks(operation, keys, block_size)` calls `operation` on each key
  and returns the mean microseconds per operation for each full block.
- `write_timings(path, timings)` writes those values to a file in the format
  above.

The benchmark writes only these plain text files. It does not draw plots or
summarise the results.