"""Small B-tree examples: printing, searching, insertion and deletion."""

__version__ = "0.1.0"
__all__ = ["btree", "cli", "printtree", "search"]