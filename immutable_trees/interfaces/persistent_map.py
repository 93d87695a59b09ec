"""
PersistentMap abstract base class for immutable key-ordered maps.
"""

import logging
from abc import abstractmethod
from collections.abc import Iterable
from typing import Any

from immutable_trees.interfaces.range_iterable import RangeIterable
from immutable_trees.models.tree import NOT_FOUND

logger = logging.getLogger(__name__)


class PersistentMap(RangeIterable):
    """
    Abstract base class for persistent (immutable) sorted maps.

    A handle never changes after construction. add() returns a new
    handle that shares every untouched subtree with the old one, so
    both versions stay valid and independently queryable.

    Implementations:
    - AVLTree: height-balanced
    - RedBlackTree: color-balanced
    """

    @property
    @abstractmethod
    def root(self) -> Any:
        """The root node, or EMPTY."""
        pass

    @abstractmethod
    def add(self, key: Any, value: Any) -> "PersistentMap":
        """
        Return a new map with key bound to value.

        Args:
            key: The key to insert/update.
            value: The value to associate with the key.

        Returns:
            A new handle. An existing key has its value replaced.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def find(self, key: Any) -> Any:
        """
        Look up a key.

        Args:
            key: The key to look up.

        Returns:
            The stored value, or NOT_FOUND.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of key-value pairs.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def height(self) -> int:
        """Return the height of the tree (0 when empty)."""
        pass

    def get(self, key: Any, default: Any = None) -> Any:
        """Retrieve the value for key, or default when it is absent."""
        result = self.find(key)
        return default if result is NOT_FOUND else result

    def has(self, key: Any) -> bool:
        return self.find(key) is not NOT_FOUND

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[Any, Any]]) -> "PersistentMap":
        """
        Build a map by adding each pair in order, starting from empty.

        Args:
            pairs: (key, value) tuples. Later duplicates win.

        Returns:
            The resulting handle.
        """
        tree = cls()
        added = 0
        for key, value in pairs:
            tree = tree.add(key, value)
            added += 1
        logger.debug(f"Built {cls.__name__} from {added} pairs, {tree.size()} keys")
        return tree

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: Any) -> bool:
        return self.has(key)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size()}, height={self.height()})"

