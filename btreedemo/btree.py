"""A B-tree of minimum degree ``t`` with insertion, deletion and level printing."""

from __future__ import annotations

from bisect import bisect_left, bisect_right, insort_right
from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class BTreeNode:
    """A B-tree node; ``t`` bounds its key count between ``t - 1`` and ``2t - 1``."""

    t: int
    leaf: bool
    keys: list[int] = field(default_factory=list)
    children: list[BTreeNode] = field(default_factory=list)

    @property
    def is_full(self) -> bool:
        return len(self.keys) == 2 * self.t - 1

    def insert_non_full(self, key: int) -> None:
        """Insert ``key`` into the subtree rooted here, which must not be full."""
        node = self
        while not node.leaf:
            index = bisect_right(node.keys, key)
            if node.children[index].is_full:
                node.split_child(index, node.children[index])
                if node.keys[index] < key:
                    index += 1
            node = node.children[index]
        insort_right(node.keys, key)

    def split_child(self, index: int, child: BTreeNode) -> None:
        """Split the full ``child`` at position ``index``, lifting its median here."""
        t = self.t
        sibling = BTreeNode(child.t, child.leaf)
        sibling.keys = child.keys[t:]
        if not child.leaf:
            sibling.children = child.children[t:]
            del child.children[t:]
        median = child.keys[t - 1]
        del child.keys[t - 1 :]
        self.children.insert(index + 1, sibling)
        self.keys.insert(index, median)

    def find_key(self, key: int) -> int:
        """Return the index of the first key not less than ``key``."""
        return bisect_left(self.keys, key)

    def remove(self, key: int) -> None:
        """Remove one occurrence of ``key`` from this subtree, if present."""
        index = self.find_key(key)
        if index < len(self.keys) and self.keys[index] == key:
            if self.leaf:
                del self.keys[index]
            elif len(self.children[index].keys) >= self.t:
                pred = self.predecessor(index)
                self.keys[index] = pred
                self.children[index].remove(pred)
            elif len(self.children[index + 1].keys) >= self.t:
                succ = self.successor(index)
                self.keys[index] = succ
                self.children[index + 1].remove(succ)
            else:
                self.merge(index)
                self.children[index].remove(key)
            return

        if self.leaf:
            return

        at_last_child = index == len(self.keys)
        if len(self.children[index].keys) < self.t:
            self.fill(index)
        if at_last_child and index > len(self.keys):
            self.children[index - 1].remove(key)
        else:
            self.children[index].remove(key)

    def predecessor(self, index: int) -> int:
        """Return the largest key in the subtree left of ``keys[index]``."""
        node = self.children[index]
        while not node.leaf:
            node = node.children[-1]
        return node.keys[-1]

    def successor(self, index: int) -> int:
        """Return the smallest key in the subtree right of ``keys[index]``."""
        node = self.children[index + 1]
        while not node.leaf:
            node = node.children[0]
        return node.keys[0]

    def merge(self, index: int) -> None:
        """Merge child ``index + 1`` and ``keys[index]`` into child ``index``."""
        child = self.children[index]
        sibling = self.children.pop(index + 1)
        child.keys.append(self.keys.pop(index))
        child.keys.extend(sibling.keys)
        if not child.leaf:
            child.children.extend(sibling.children)

    def fill(self, index: int) -> None:
        """Give child ``index`` at least ``t`` keys by borrowing or merging."""
        if index != 0 and len(self.children[index - 1].keys) >= self.t:
            self.borrow_from_prev(index)
        elif index != len(self.keys) and len(self.children[index + 1].keys) >= self.t:
            self.borrow_from_next(index)
        elif index != len(self.keys):
            self.merge(index)
        else:
            self.merge(index - 1)

    def borrow_from_prev(self, index: int) -> None:
        """Rotate a key from the left sibling through this node into child ``index``."""
        child = self.children[index]
        sibling = self.children[index - 1]
        child.keys.insert(0, self.keys[index - 1])
        if not child.leaf:
            child.children.insert(0, sibling.children.pop())
        self.keys[index - 1] = sibling.keys.pop()

    def borrow_from_next(self, index: int) -> None:
        """Rotate a key from the right sibling through this node into child ``index``."""
        child = self.children[index]
        sibling = self.children[index + 1]
        child.keys.append(self.keys[index])
        if not child.leaf:
            child.children.append(sibling.children.pop(0))
        self.keys[index] = sibling.keys.pop(0)

    def height(self) -> int:
        """Return the number of levels from this node down to the leaves."""
        levels = 1
        node = self
        while not node.leaf:
            node = node.children[0]
            levels += 1
        return levels

    def collect_levels(self) -> list[list[BTreeNode]]:
        """Return the nodes of this subtree grouped by depth, left to right."""
        levels: list[list[BTreeNode]] = []
        current = [self]
        while current:
            levels.append(current)
            current = [child for node in current for child in node.children]
        return levels


def _walk(node: BTreeNode) -> Iterator[int]:
    if node.leaf:
        yield from node.keys
        return
    for child, key in zip(node.children, node.keys):
        yield from _walk(child)
        yield key
    yield from _walk(node.children[-1])


class BTree:
    """A B-tree of minimum degree ``t``."""

    def __init__(self, t: int) -> None:
        if t < 2:
            raise ValueError(f"minimum degree must be at least 2, got {t}")
        self.t = t
        self.root: BTreeNode | None = None

    def insert(self, key: int) -> None:
        """Insert ``key``; duplicates are kept."""
        if self.root is None:
            self.root = BTreeNode(self.t, True, [key])
            return
        if self.root.is_full:
            parent = BTreeNode(self.t, False, children=[self.root])
            parent.split_child(0, self.root)
            index = 1 if parent.keys[0] < key else 0
            parent.children[index].insert_non_full(key)
            self.root = parent
        else:
            self.root.insert_non_full(key)

    def remove(self, key: int) -> None:
        """Remove one occurrence of ``key``; absent keys are ignored."""
        if self.root is None:
            return
        self.root.remove(key)
        if not self.root.keys:
            self.root = None if self.root.leaf else self.root.children[0]

    def height(self) -> int:
        """Return the number of levels, 0 for an empty tree."""
        return 0 if self.root is None else self.root.height()

    def levels(self) -> list[list[BTreeNode]]:
        """Return the nodes grouped by depth, left to right."""
        return [] if self.root is None else self.root.collect_levels()

    def keys(self) -> list[int]:
        """Return all keys in ascending order."""
        return [] if self.root is None else list(_walk(self.root))

    def format(self) -> str:
        """Render the tree level by level, indented with tabs by remaining height."""
        height = self.height()
        lines = []
        for depth, nodes in enumerate(self.levels()):
            body = "".join(
                "[" + ",".join(str(key) for key in node.keys) + "] " for node in nodes
            )
            lines.append("\t" * (height - depth) + body + "\n")
        return "".join(lines)