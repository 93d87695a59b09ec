"""
Data models shared by both tree disciplines.
"""

from immutable_trees.models.exceptions import (
    AVLBalanceError,
    BlackHeightError,
    BSTOrderError,
    HeightCacheError,
    InvariantViolationError,
    RedRedError,
    RedRootError,
)
from immutable_trees.models.tree import (
    EMPTY,
    NOT_FOUND,
    Node,
    Tree,
    count,
    depth,
    find,
    is_empty,
    key,
    left,
    right,
    value,
    walk,
)

__all__ = [
    "AVLBalanceError",
    "BlackHeightError",
    "BSTOrderError",
    "HeightCacheError",
    "InvariantViolationError",
    "RedRedError",
    "RedRootError",
    "EMPTY",
    "NOT_FOUND",
    "Node",
    "Tree",
    "count",
    "depth",
    "find",
    "is_empty",
    "key",
    "left",
    "right",
    "value",
    "walk",
]
