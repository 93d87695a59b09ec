"""
Inspection helpers built on top of the tree models.
"""

from immutable_trees.engine.snapshot import ShapeStats, shape_stats, snapshot
from immutable_trees.engine.validator import (
    check_avl_balance,
    check_bst_order,
    check_red_black,
    validate,
)

__all__ = [
    "ShapeStats",
    "shape_stats",
    "snapshot",
    "check_avl_balance",
    "check_bst_order",
    "check_red_black",
    "validate",
]
