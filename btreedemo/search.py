"""Key search over a fixed-order B-tree node layout."""

from __future__ import annotations

from dataclasses import dataclass, field

ORDER_M = 10


def _empty_children() -> list[SearchNode | None]:
    return [None] * ORDER_M


@dataclass(eq=False)
class SearchNode:
    """A node with up to ``ORDER_M - 1`` keys and ``ORDER_M`` child slots."""

    is_leaf: bool
    keys: list[int] = field(default_factory=list)
    children: list[SearchNode | None] = field(default_factory=_empty_children)


def build_simple_tree() -> SearchNode:
    """Return the fixed example tree used by the demo.

    The third leaf sits in child slot 3, so slot 2 stays empty.
    """
    root = SearchNode(False, [10, 20])
    root.children[0] = SearchNode(True, [1, 5])
    root.children[1] = SearchNode(True, [11, 15])
    root.children[3] = SearchNode(True, [21, 30])
    return root


def search_key(node: SearchNode | None, value: int) -> SearchNode | None:
    """Return the node holding ``value``, or None when the search finds nothing."""
    while node is not None:
        index = 0
        while index < len(node.keys) and value > node.keys[index]:
            index += 1
        if index < len(node.keys) and node.keys[index] == value:
            return node
        if node.is_leaf:
            return None
        node = node.children[index]
    return None


def _report(root: SearchNode, value: int) -> str:
    if search_key(root, value) is not None:
        return f"Found value: {value}"
    return f"Value: {value} not found"


def main(argv: list[str] | None = None) -> int:
    """Search the example tree for a missing and a present key."""
    root = build_simple_tree()
    for value in (3, 5):
        print(_report(root, value))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())