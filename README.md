# btreedemo

Some small, self-contained B-tree examples:

- `btreedemo.printtree` builds a fixed multi-way tree and prints it. Each
  level is indented by four more spaces than the one above it.
- `btreedemo.search` builds a fixed order-10 tree and searches it for a key.
- `btreedemo.btree` provides `BTree`, a B-tree of integers with a
  configurable minimum degree `t`. Insertion splits full nodes on the way
  down. Deletion borrows keys from siblings or merges nodes.
- `btreedemo.cli` runs the insertion and deletion walkthroughs and prints
  the tree after every step.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Command line

```
btreedemo            # insert 10, 20, 5, 6, 12, 30, 7, 17, then remove 6, 13, 7, 4, 2, 16, 17
btreedemo delete     # the same as above (the default)
btreedemo insert     # only the insertions, printing the tree after each one
btreedemo-print      # print the fixed example tree
btreedemo-search     # search the fixed example tree for 3 and for 5
```

All of these commands use a tree of minimum degree 2.

## Library use

```python
from btreedemo.btree import BTree

tree = BTree(2)   # minimum degree t = 2: each node holds 1 to 3 keys
for value in (10, 20, 5, 6, 12, 30, 7, 17):
    tree.insert(value)

print(tree.format(), end="")   # one line per level, indented by tabs
print(tree.keys())             # all keys in ascending order
print(tree.height())           # number of levels, 0 when empty

tree.remove(6)
tree.remove(13)                # removing a missing key leaves the tree unchanged
for depth, nodes in enumerate(tree.levels()):
    print(depth, [node.keys for node in nodes])
```

`BTree(t)` raises `ValueError` when `t` is less than 2. The tree keeps
duplicate keys, and `remove` deletes one occurrence at a time.

`format()` returns a string with one line for each level. Each line starts
with one tab for each level from that depth down to the bottom, so the
deepest level gets one tab. Each node appears as `[k1,k2,...] `.

`levels()` returns the `BTreeNode` objects grouped by depth, from left to
right. Each node has `keys`, `children`, `leaf` and `t` attributes.

The fixed example trees can also be used directly:

```python
from btreedemo.printtree import build_simple_tree, format_tree, print_tree
from btreedemo.search import build_simple_tree as build_search_tree, search_key

print_tree(build_simple_tree(), 0)          # or format_tree(...) to get the string
node = search_key(build_search_tree(), 5)   # the node holding 5, or None
```

## Limitations

Trees exist only in memory, and the package has no way to save or load
them. Keys are integers. The command-line demos always use the built-in
value lists and do not accept values of their own.