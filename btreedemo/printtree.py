"""A small hand-built multiway tree and an indented printer for it."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field

INDENT_WIDTH = 4


@dataclass
class Node:
    """A tree node holding a list of keys and any number of children."""

    keys: list[int] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)


def build_simple_tree() -> Node:
    """Return the fixed example tree used by the demo."""
    grandchild = Node([1, 2])
    child1 = Node([3, 5, 6], [grandchild])
    child2 = Node([9, 12])
    child3 = Node([18, 21])
    return Node([7, 16], [child1, child2, child3])


def format_tree(node: Node | None, level: int = 0) -> str:
    """Render ``node`` and its descendants, one node per line, indented by depth."""
    if node is None:
        return ""
    indent = " " * (level * INDENT_WIDTH)
    line = indent + "".join(f"{key} " for key in node.keys) + "\n"
    return line + "".join(format_tree(child, level + 1) for child in node.children)


def print_tree(node: Node | None, level: int = 0) -> None:
    """Write the rendering of ``node`` to standard output."""
    sys.stdout.write(format_tree(node, level))


def main(argv: list[str] | None = None) -> int:
    """Print the example tree."""
    print_tree(build_simple_tree(), 0)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())