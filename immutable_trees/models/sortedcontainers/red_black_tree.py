"""
Red-Black Tree with immutable nodes and structural sharing.

New keys enter as red leaves. On the way back up, any black node that
sits on top of a red-red pair is rewritten into a red node with two
black children; the root is then repainted black.
"""

from collections.abc import AsyncIterator, Iterator
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Any

from immutable_trees.interfaces.persistent_map import PersistentMap
from immutable_trees.models.tree import (
    EMPTY,
    NOT_FOUND,
    AsyncRangeIterator,
    Node,
    RangeIterator,
    Tree,
    depth,
    find,
)


class Color(IntEnum):
    """Node color for Red-Black Tree."""

    RED = 0
    BLACK = 1


@dataclass(frozen=True)
class RBNode(Node):
    """Node in the Red-Black Tree."""

    color: Color


def color(tree: Tree) -> Color:
    """Color of a tree; EMPTY counts as black."""
    return Color.BLACK if tree is EMPTY else tree.color


def _is_red(tree: Tree) -> bool:
    return tree is not EMPTY and tree.color == Color.RED


def _rebuild(a: Tree, x: RBNode, b: Tree, y: RBNode, c: Tree, z: RBNode, d: Tree) -> RBNode:
    """Red y over black x and z, holding a < x < b < y < c < z < d."""
    return RBNode(
        RBNode(a, b, x.key, x.value, Color.BLACK),
        RBNode(c, d, z.key, z.value, Color.BLACK),
        y.key,
        y.value,
        Color.RED,
    )


def balance(node: RBNode) -> RBNode:
    """
    Repair a red-red violation directly below a black node.

    Four shapes are recognized, named by the position of the red child
    and red grandchild: left-left, left-right, right-left, right-right.
    Anything else is returned unchanged.
    """
    if node.color != Color.BLACK:
        return node

    lt, rt = node.left, node.right
    if _is_red(lt):
        if _is_red(lt.left):
            return _rebuild(lt.left.left, lt.left, lt.left.right, lt, lt.right, node, rt)
        if _is_red(lt.right):
            return _rebuild(lt.left, lt, lt.right.left, lt.right, lt.right.right, node, rt)
    if _is_red(rt):
        if _is_red(rt.left):
            return _rebuild(lt, node, rt.left.left, rt.left, rt.left.right, rt, rt.right)
        if _is_red(rt.right):
            return _rebuild(lt, node, rt.left, rt, rt.right.left, rt.right, rt.right.right)
    return node


def insert(tree: Tree, key: Any, value: Any) -> RBNode:
    """
    Insert without fixing the root color.

    The result may have a red root; add() repaints it.
    """
    if tree is EMPTY:
        return RBNode(EMPTY, EMPTY, key, value, Color.RED)

    if key < tree.key:
        return balance(
            RBNode(insert(tree.left, key, value), tree.right, tree.key, tree.value, tree.color)
        )
    if key > tree.key:
        return balance(
            RBNode(tree.left, insert(tree.right, key, value), tree.key, tree.value, tree.color)
        )
    return RBNode(tree.left, tree.right, tree.key, value, tree.color)


def add(tree: Tree, key: Any, value: Any) -> RBNode:
    """Return a new tree with key bound to value and a black root."""
    result = insert(tree, key, value)
    if result.color == Color.RED:
        result = replace(result, color=Color.BLACK)
    return result


class RedBlackTree(PersistentMap):
    """
    Persistent Red-Black map.

    Properties maintained:
    1. Every node is either red or black
    2. Root is always black
    3. Red nodes cannot have red children
    4. Every path from root to leaf has same number of black nodes
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

    def add(self, key: Any, value: Any) -> "RedBlackTree":
        """Return a new RedBlackTree with key bound to value. O(log N)"""
        grown = find(self._root, key) is NOT_FOUND
        return RedBlackTree(add(self._root, key, value), self._size + grown)

    def find(self, key: Any) -> Any:
        return find(self._root, key)

    def size(self) -> int:
        return self._size

    def height(self) -> int:
        """Longest root-to-leaf path, in nodes. O(N): walks the whole tree."""
        return depth(self._root)

    def black_height(self) -> int:
        """Black nodes on the leftmost root-to-empty path."""
        count = 0
        node = self._root
        while node is not EMPTY:
            if node.color == Color.BLACK:
                count += 1
            node = node.left
        return count

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

