"""Command-line demos that build a B-tree and print it after each change."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable

from btreedemo.btree import BTree

MIN_DEGREE = 2
INSERT_VALUES = (10, 20, 5, 6, 12, 30, 7, 17)
DELETE_VALUES = (6, 13, 7, 4, 2, 16, 17)


def _insert_all(tree: BTree, values: Iterable[int]) -> Iterable[int]:
    for value in values:
        tree.insert(value)
        yield value


def run_insert_demo() -> str:
    """Insert the demo values one at a time, rendering the tree after each."""
    tree = BTree(MIN_DEGREE)
    return "".join(tree.format() for _ in _insert_all(tree, INSERT_VALUES))


def run_delete_demo() -> str:
    """Insert then remove the demo values, rendering the tree after each step."""
    tree = BTree(MIN_DEGREE)
    parts = []
    for value in _insert_all(tree, INSERT_VALUES):
        parts.append(f"Inserted {value}:\n{tree.format()}\n")
    for value in DELETE_VALUES:
        tree.remove(value)
        parts.append(f"Removing {value}:\n{tree.format()}\n")
    return "".join(parts)


def main(argv: list[str] | None = None) -> int:
    """Run the chosen demo and write its output to standard output."""
    parser = argparse.ArgumentParser(
        prog="btreedemo",
        description="Show a B-tree of minimum degree 2 as keys are inserted and removed.",
    )
    parser.add_argument(
        "demo",
        nargs="?",
        choices=("insert", "delete"),
        default="delete",
        help="which demo to run (default: delete)",
    )
    args = parser.parse_args(argv)
    output = run_insert_demo() if args.demo == "insert" else run_delete_demo()
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())