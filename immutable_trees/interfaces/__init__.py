"""
Abstract base classes for the persistent tree handles.
"""

from immutable_trees.interfaces.persistent_map import PersistentMap
from immutable_trees.interfaces.range_iterable import RangeIterable

__all__ = ["PersistentMap", "RangeIterable"]
