"""
Exceptions raised when a tree fails an invariant check.

The tree operations themselves never raise; these come only from the
checkers in immutable_trees.engine.validator.
"""

from typing import Any


class InvariantViolationError(Exception):
    """
    Base class for a broken tree invariant.

    Attributes:
        key: Key of the node where the violation was detected.
    """

    def __init__(self, key: Any, message: str):
        self.key = key
        super().__init__(message)


class BSTOrderError(InvariantViolationError):
    """Raised when in-order keys are not strictly increasing."""

    def __init__(self, previous: Any, key: Any):
        """
        Initialize order error.

        Args:
            previous: Key visited just before the offending one.
            key: Key that is not greater than previous.
        """
        self.previous = previous
        super().__init__(
            key, f"BST order violated: key {key!r} follows {previous!r}"
        )


class AVLBalanceError(InvariantViolationError):
    """Raised when a node's subtree heights differ by more than one."""

    def __init__(self, key: Any, left_height: int, right_height: int):
        """
        Initialize balance error.

        Args:
            key: Key of the unbalanced node.
            left_height: Height of its left subtree.
            right_height: Height of its right subtree.
        """
        self.left_height = left_height
        self.right_height = right_height
        super().__init__(
            key,
            f"AVL balance violated at {key!r}: "
            f"left height {left_height}, right height {right_height}",
        )


class HeightCacheError(InvariantViolationError):
    """Raised when a node's cached height differs from its real height."""

    def __init__(self, key: Any, cached: int, actual: int):
        self.cached = cached
        self.actual = actual
        super().__init__(
            key,
            f"Stale height at {key!r}: cached {cached}, actual {actual}",
        )


class RedRootError(InvariantViolationError):
    """Raised when a completed red-black tree has a red root."""

    def __init__(self, key: Any):
        super().__init__(key, f"Red-black root {key!r} is red")


class RedRedError(InvariantViolationError):
    """Raised when a red node has a red child."""

    def __init__(self, key: Any, child: Any):
        self.child = child
        super().__init__(
            key, f"Red node {key!r} has red child {child!r}"
        )


class BlackHeightError(InvariantViolationError):
    """Raised when two paths below a node cross different black counts."""

    def __init__(self, key: Any, left_black: int, right_black: int):
        self.left_black = left_black
        self.right_black = right_black
        super().__init__(
            key,
            f"Black-height mismatch at {key!r}: "
            f"left {left_black}, right {right_black}",
        )
