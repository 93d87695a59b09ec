"""
Balanced persistent tree implementations.
"""

from immutable_trees.models.sortedcontainers.avl_tree import AVLTree
from immutable_trees.models.sortedcontainers.red_black_tree import Color, RedBlackTree

__all__ = ["AVLTree", "Color", "RedBlackTree"]
