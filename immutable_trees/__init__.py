"""
Persistent balanced binary search trees.

This package provides two immutable key-ordered maps:
- AVLTree - height-balanced, rotations on the insertion path
- RedBlackTree - color-balanced, four-case red-red repair

Both support:
- add(key, value) - O(log N), returns a new tree sharing unchanged subtrees
- find(key) - O(log N), returns the value or NOT_FOUND
- iterator(start, end) - Range iteration in key order
"""

from immutable_trees.engine import snapshot, validate
from immutable_trees.models.sortedcontainers import AVLTree, Color, RedBlackTree
from immutable_trees.models.tree import (
    EMPTY,
    NOT_FOUND,
    find,
    is_empty,
    key,
    left,
    right,
    value,
)

__all__ = [
    "AVLTree",
    "Color",
    "RedBlackTree",
    "EMPTY",
    "NOT_FOUND",
    "find",
    "is_empty",
    "key",
    "left",
    "right",
    "value",
    "snapshot",
    "validate",
]
