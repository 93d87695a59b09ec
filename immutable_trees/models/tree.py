"""
Node accessor protocol shared by both tree disciplines.

A tree is either EMPTY or a Node. Every accessor here is nil-safe: on
EMPTY the child accessors return EMPTY and the field accessors return
NOT_FOUND, so callers can recurse without checking for emptiness first.
"""

from collections.abc import AsyncIterator, Iterator
from dataclasses import dataclass
from typing import Any, Union


class _Empty:
    """The empty tree. Use the EMPTY singleton."""

    _instance: "_Empty | None" = None

    def __new__(cls) -> "_Empty":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "Empty"


class _NotFound:
    """Lookup-miss sentinel. Use the NOT_FOUND singleton."""

    _instance: "_NotFound | None" = None

    def __new__(cls) -> "_NotFound":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NotFound"


EMPTY = _Empty()
NOT_FOUND = _NotFound()


@dataclass(frozen=True)
class Node:
    """
    Immutable tree node.

    Children are shared freely between tree versions; a node is never
    modified after it is built.
    """

    left: "Tree"
    right: "Tree"
    key: Any
    value: Any


Tree = Union[_Empty, Node]


def is_empty(tree: Tree) -> bool:
    return tree is EMPTY


def left(tree: Tree) -> Tree:
    return EMPTY if tree is EMPTY else tree.left


def right(tree: Tree) -> Tree:
    return EMPTY if tree is EMPTY else tree.right


def key(tree: Tree) -> Any:
    return NOT_FOUND if tree is EMPTY else tree.key


def value(tree: Tree) -> Any:
    return NOT_FOUND if tree is EMPTY else tree.value


def find(tree: Tree, k: Any) -> Any:
    """
    Look up k by descending from the root.

    Args:
        tree: Tree to search.
        k: Key to look up.

    Returns:
        The value stored under k, or NOT_FOUND.

    Time complexity: O(height)
    """
    current = tree
    while current is not EMPTY:
        if k < current.key:
            current = current.left
        elif k > current.key:
            current = current.right
        else:
            return current.value
    return NOT_FOUND


def count(tree: Tree) -> int:
    """Count the nodes in a tree."""
    if tree is EMPTY:
        return 0
    return 1 + count(tree.left) + count(tree.right)


def depth(tree: Tree) -> int:
    """Number of nodes on the longest root-to-leaf path (0 for EMPTY)."""
    if tree is EMPTY:
        return 0
    return 1 + max(depth(tree.left), depth(tree.right))


def walk(tree: Tree) -> Iterator[tuple[Any, Any]]:
    """Iterate (key, value) pairs in key order."""
    return RangeIterator(tree, None, None)


class RangeIterator(Iterator[tuple[Any, Any]]):
    """In-order iterator over the keys of a tree within [start, end)."""

    def __init__(self, root: Tree, start: Any | None, end: Any | None) -> None:
        self._stack: list[Node] = []
        self._end = end

        # Initialize stack with nodes >= start
        self._push_left_path(root, start)

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return self

    def __next__(self) -> tuple[Any, Any]:
        if not self._stack:
            raise StopIteration

        node = self._stack.pop()

        if self._end is not None and not node.key < self._end:
            self._stack.clear()
            raise StopIteration

        self._push_left_path(node.right, None)

        return (node.key, node.value)

    def _push_left_path(self, node: Tree, start: Any | None) -> None:
        """Push leftmost path to stack, respecting start bound."""
        while node is not EMPTY:
            if start is not None and node.key < start:
                node = node.right
            else:
                self._stack.append(node)
                node = node.left


class AsyncRangeIterator(AsyncIterator[tuple[Any, Any]]):
    """Async in-order iterator within [start, end) (in-memory, no I/O)."""

    def __init__(self, root: Tree, start: Any | None, end: Any | None) -> None:
        self._inner = RangeIterator(root, start, end)

    def __aiter__(self) -> "AsyncRangeIterator":
        return self

    async def __anext__(self) -> tuple[Any, Any]:
        try:
            return next(self._inner)
        except StopIteration:
            raise StopAsyncIteration from None
