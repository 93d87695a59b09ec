"""
RangeIterable protocol for ordered trees that support range iteration.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Iterator
from typing import Any


class RangeIterable(ABC):
    """
    Protocol for ordered structures that can be walked over a key range.

    Implementations must support:
    - Full iteration via __iter__
    - Range-bounded iteration via iterator(start, end)
    - Async iteration via __aiter__
    - Async range-bounded iteration via async_iterator(start, end)

    Every call returns a fresh iterator, so several walks over the same
    tree version may run side by side.
    """

    @abstractmethod
    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        """Return an iterator over all key-value pairs in sorted order."""
        pass

    @abstractmethod
    def iterator(
        self, start: Any | None = None, end: Any | None = None
    ) -> Iterator[tuple[Any, Any]]:
        """
        Return an iterator over key-value pairs in the specified range.

        Args:
            start: Start key (inclusive). If None, starts from the beginning.
            end: End key (exclusive). If None, iterates to the end.

        Returns:
            Iterator yielding (key, value) tuples in sorted order.
        """
        pass

    @abstractmethod
    def __aiter__(self) -> AsyncIterator[tuple[Any, Any]]:
        """Return an async iterator over all key-value pairs in sorted order."""
        pass

    @abstractmethod
    def async_iterator(
        self, start: Any | None = None, end: Any | None = None
    ) -> AsyncIterator[tuple[Any, Any]]:
        """
        Return an async iterator over key-value pairs in the specified range.

        Args:
            start: Start key (inclusive). If None, starts from the beginning.
            end: End key (exclusive). If None, iterates to the end.

        Returns:
            AsyncIterator yielding (key, value) tuples in sorted order.
        """
        pass
