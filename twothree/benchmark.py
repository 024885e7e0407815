"""Timing of insert, search and delete on a 2-3 tree, block by block."""

from __future__ import annotations

import argparse
import os
import random
import time
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

from .tree import TwoThreeTree

TOTAL_ELEMENTS = 1_000_000
BLOCK_SIZE = 1000
RANDOM_SEARCH_SPACE = 10_000_000


def measure_blocks(
    operation: Callable[[int], object],
    keys: Iterable[int],
    block_size: int,
) -> list[float]:
    """Run ``operation`` on every key and time it in blocks.

    Returns the average time of one operation, in microseconds, for each
    complete block of ``block_size`` operations.
    """
    if block_size <= 0:
        raise ValueError("block size must be positive")
    timings: list[float] = []
    start = time.perf_counter_ns()
    for count, key in enumerate(keys, 1):
        operation(key)
        if count % block_size == 0:
            end = time.perf_counter_ns()
            timings.append((end - start) / 1000 / block_size)
            start = end
    return timings


def write_timings(path: str | os.PathLike[str], timings: Iterable[float]) -> None:
    """Write one timing per line with ten decimal places."""
    with open(path, "w", encoding="ascii") as handle:
        handle.writelines(f"{value:.10f}\n" for value in timings)


def _height(tree: TwoThreeTree) -> int:
    height = 0
    node = tree.root
    while node is not None:
        height += 1
        node = node.children[0] if node.children else None
    return height


def _positive(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return value


def _parse(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="twothree-benchmark",
        description="Measure 2-3 tree operations in blocks.",
    )
    parser.add_argument("--elements", type=_positive, default=TOTAL_ELEMENTS)
    parser.add_argument("--block-size", type=_positive, default=BLOCK_SIZE)
    parser.add_argument("--output-dir", type=Path, default=Path("."))
    parser.add_argument("--seed", type=int, default=None)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the sequential and random benchmarks and write the timing files."""
    args = _parse(argv)
    total, block, out = args.elements, args.block_size, args.output_dir
    out.mkdir(parents=True, exist_ok=True)
    rng = random.Random(args.seed)

    def run(name: str, operation: Callable[[int], object], keys: Iterable[int]) -> None:
        write_timings(out / name, measure_blocks(operation, keys, block))

    def report(tree: TwoThreeTree) -> None:
        print(f"Tree height: {_height(tree)}")

    tree = TwoThreeTree()
    print("Phase 1: measuring insert (sequential)...")
    run("insert_times_block.txt", tree.insert, range(1, total + 1))
    print("Sequential insert finished.")
    report(tree)

    print("Phase 2: measuring search (sequential)...")
    search_from = total * 3 // 10
    search_to = total + total // 2
    run("search_times_block.txt", tree.__contains__, range(search_from, search_to + 1))
    print("Sequential search finished.")

    print("Phase 3: measuring delete (sequential)...")
    run("delete_times_block.txt", tree.delete, range(1, total + 1))
    print("Sequential delete finished.")
    print("Sequential measurements finished.")
    report(tree)

    tree = TwoThreeTree()
    print("\nStarting random measurements...")
    print("Phase 4: measuring insert (random)...")
    run(
        "insert_times_block_random.txt",
        tree.insert,
        (rng.randint(1, total) for _ in range(total)),
    )
    print("Random insert finished.")
    report(tree)

    print("Phase 5: measuring search (random)...")
    run(
        "search_times_block_random.txt",
        tree.__contains__,
        (rng.randint(1, RANDOM_SEARCH_SPACE) for _ in range(total)),
    )
    print("Random search finished.")

    print("Phase 6: measuring delete (random)...")
    run(
        "delete_times_block_random.txt",
        tree.delete,
        (rng.randint(1, total) for _ in range(total)),
    )
    print("Random delete finished.")
    print("All measurements finished.")
    report(tree)
    return 0