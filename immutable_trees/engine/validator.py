"""
Invariant checkers for both tree disciplines.

Each checker walks the whole tree and raises an InvariantViolationError
subclass at the first broken node. They are meant for tests and
debugging; the tree operations never call them.
"""

import logging
from typing import Any

from immutable_trees.interfaces.persistent_map import PersistentMap
from immutable_trees.models.exceptions import (
    AVLBalanceError,
    BlackHeightError,
    BSTOrderError,
    HeightCacheError,
    RedRedError,
    RedRootError,
)
from immutable_trees.models.sortedcontainers.avl_tree import AVLTree
from immutable_trees.models.sortedcontainers.red_black_tree import Color, RedBlackTree, color
from immutable_trees.models.tree import EMPTY, Tree, walk

logger = logging.getLogger(__name__)


def check_bst_order(tree: Tree) -> None:
    """
    Verify that in-order keys are strictly increasing.

    Raises:
        BSTOrderError: On the first key not greater than its predecessor.
    """
    previous: Any = None
    first = True
    for k, _ in walk(tree):
        if not first and not previous < k:
            raise BSTOrderError(previous, k)
        previous = k
        first = False
    logger.debug("BST order holds")


def check_avl_balance(tree: Tree) -> int:
    """
    Verify the AVL balance condition at every node.

    Heights are recomputed bottom-up and compared against each node's
    cached height.

    Returns:
        Height of the tree.

    Raises:
        AVLBalanceError: If child heights differ by more than one.
        HeightCacheError: If a cached height is stale.
    """
    result = _avl_height(tree)
    logger.debug(f"AVL balance holds, height {result}")
    return result


def _avl_height(tree: Tree) -> int:
    if tree is EMPTY:
        return 0

    left_height = _avl_height(tree.left)
    right_height = _avl_height(tree.right)
    actual = 1 + max(left_height, right_height)

    cached = getattr(tree, "height", actual)
    if cached != actual:
        raise HeightCacheError(tree.key, cached, actual)
    if abs(left_height - right_height) > 1:
        raise AVLBalanceError(tree.key, left_height, right_height)
    return actual


def check_red_black(tree: Tree) -> int:
    """
    Verify the red-black invariants.

    Returns:
        Black-height of the tree (EMPTY contributes 0).

    Raises:
        RedRootError: If the root is red.
        RedRedError: If a red node has a red child.
        BlackHeightError: If two paths below a node have different black counts.
    """
    if color(tree) == Color.RED:
        raise RedRootError(tree.key)

    result = _black_height(tree)
    logger.debug(f"Red-black invariants hold, black-height {result}")
    return result


def _black_height(tree: Tree) -> int:
    if tree is EMPTY:
        return 0

    if tree.color == Color.RED:
        for child in (tree.left, tree.right):
            if color(child) == Color.RED:
                raise RedRedError(tree.key, child.key)

    left_black = _black_height(tree.left)
    right_black = _black_height(tree.right)
    if left_black != right_black:
        raise BlackHeightError(tree.key, left_black, right_black)

    return left_black + (1 if tree.color == Color.BLACK else 0)


def validate(tree: PersistentMap) -> None:
    """
    Run the order check plus the checks for the tree's discipline.

    Args:
        tree: An AVLTree or RedBlackTree handle.

    Raises:
        InvariantViolationError: If any invariant is broken.
        ValueError: If the handle type is not supported.
    """
    check_bst_order(tree.root)
    if isinstance(tree, AVLTree):
        check_avl_balance(tree.root)
    elif isinstance(tree, RedBlackTree):
        check_red_black(tree.root)
    else:
        raise ValueError(f"Unsupported tree type: {type(tree).__name__}")
