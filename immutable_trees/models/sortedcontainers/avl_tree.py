"""
AVL tree with immutable nodes and structural sharing.

Insertion rebuilds only the path from the root to the new key and
rebalances each rebuilt node with single or double rotations.
"""

from collections.abc import AsyncIterator, Iterator
from dataclasses import dataclass
from typing import Any

from immutable_trees.interfaces.persistent_map import PersistentMap
from immutable_trees.models.tree import (
    EMPTY,
    NOT_FOUND,
    AsyncRangeIterator,
    Node,
    RangeIterator,
    Tree,
    find,
)


@dataclass(frozen=True)
class AVLNode(Node):
    """
    Node in the AVL tree.

    height caches 1 + max(child heights) at construction. Build nodes
    with make_node() so the cache is always consistent.
    """

    height: int


def make_node(left: Tree, right: Tree, key: Any, value: Any) -> AVLNode:
    return AVLNode(
        left, right, key, value, 1 + max(_cached_height(left), _cached_height(right))
    )


def _cached_height(tree: Tree) -> int:
    return 0 if tree is EMPTY else tree.height


def height(tree: Tree) -> int:
    """
    Height by full traversal: 0 for EMPTY, 1 for a leaf.

    Balance decisions read the cached heights instead; this walk is the
    reference the validator checks those caches against.
    """
    if tree is EMPTY:
        return 0
    return 1 + max(height(tree.left), height(tree.right))


def tilt(node: AVLNode) -> int:
    """Balance factor: height(left) - height(right)."""
    return _cached_height(node.left) - _cached_height(node.right)


def rotate_left(node: AVLNode) -> AVLNode:
    """
    Re-root the subtree around its right child.

          x              y
         / \\            / \\
        a   y    ->    x   c
           / \\        / \\
          b   c      a   b
    """
    pivot = node.right
    return make_node(
        make_node(node.left, pivot.left, node.key, node.value),
        pivot.right,
        pivot.key,
        pivot.value,
    )


def rotate_right(node: AVLNode) -> AVLNode:
    """Re-root the subtree around its left child (mirror of rotate_left)."""
    pivot = node.left
    return make_node(
        pivot.left,
        make_node(pivot.right, node.right, node.key, node.value),
        pivot.key,
        pivot.value,
    )


def balance(node: AVLNode) -> AVLNode:
    """Restore |tilt| <= 1 at node, assuming both children are balanced."""
    factor = tilt(node)
    if factor > 1:
        if tilt(node.left) < 0:
            # Left-right case
            node = make_node(rotate_left(node.left), node.right, node.key, node.value)
        return rotate_right(node)
    if factor < -1:
        if tilt(node.right) > 0:
            # Right-left case
            node = make_node(node.left, rotate_right(node.right), node.key, node.value)
        return rotate_left(node)
    return node


def add(tree: Tree, key: Any, value: Any) -> AVLNode:
    """
    Return a new tree with key bound to value.

    An existing key keeps its node shape and stored key and only gets
    the new value.
    Every node rebuilt on the way back up is rebalanced.
    """
    if tree is EMPTY:
        return make_node(EMPTY, EMPTY, key, value)

    if key < tree.key:
        return balance(make_node(add(tree.left, key, value), tree.right, tree.key, tree.value))
    if key > tree.key:
        return balance(make_node(tree.left, add(tree.right, key, value), tree.key, tree.value))
    return AVLNode(tree.left, tree.right, tree.key, value, tree.height)


class AVLTree(PersistentMap):
    """
    Persistent AVL map.

    Properties maintained:
    1. In-order keys are strictly increasing
    2. At every node the child heights differ by at most one
    """

    def __init__(self, root: Tree = EMPTY, size: int = 0) -> None:
        """
        Wrap an existing root.

        Args:
            root: Root node, or EMPTY.
            size: Number of keys under root.
        """
        if size < 0:
            raise ValueError(f"size must be >= 0, got {size}")
        if root is EMPTY and size != 0:
            raise ValueError(f"empty tree cannot have size {size}")

        self._root = root
        self._size = size

    @property
    def root(self) -> Tree:
        return self._root

    def add(self, key: Any, value: Any) -> "AVLTree":
        """Return a new AVLTree with key bound to value. O(log N)"""
        grown = find(self._root, key) is NOT_FOUND
        return AVLTree(add(self._root, key, value), self._size + grown)

    def find(self, key: Any) -> Any:
        return find(self._root, key)

    def size(self) -> int:
        return self._size

    def height(self) -> int:
        return _cached_height(self._root)

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return self.iterator()

    def iterator(
        self, start: Any | None = None, end: Any | None = None
    ) -> Iterator[tuple[Any, Any]]:
        return RangeIterator(self._root, start, end)

    def __aiter__(self) -> AsyncIterator[tuple[Any, Any]]:
        return self.async_iterator()

    def async_iterator(
        self, start: Any | None = None, end: Any | None = None
    ) -> AsyncIterator[tuple[Any, Any]]:
        return AsyncRangeIterator(self._root, start, end)
