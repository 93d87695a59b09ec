"""
Property-based tests that hold for any insertion sequence.
"""

import pytest
from hypothesis import given, strategies as st

from immutable_trees.engine import validate
from immutable_trees.models import NOT_FOUND
from immutable_trees.models.sortedcontainers import AVLTree, RedBlackTree

pairs_strategy = st.lists(st.tuples(st.integers(-1000, 1000), st.integers()))
disciplines = pytest.mark.parametrize("tree_class", [AVLTree, RedBlackTree], ids=["avl", "red_black"])


@disciplines
@given(pairs=pairs_strategy)
def test_invariants_hold(tree_class, pairs):
    """Order and discipline invariants hold after every insertion."""
    tree = tree_class()
    for k, v in pairs:
        tree = tree.add(k, v)
        validate(tree)


@disciplines
@given(pairs=pairs_strategy)
def test_in_order_keys_are_sorted_and_unique(tree_class, pairs):
    tree = tree_class.from_pairs(pairs)
    keys = [k for k, _ in tree]
    assert keys == sorted({k for k, _ in pairs})
    assert tree.size() == len(keys)


@disciplines
@given(pairs=pairs_strategy, probes=st.lists(st.integers(-1100, 1100)))
def test_find_returns_latest_value(tree_class, pairs, probes):
    """Lookups match a dict built from the same pairs (last write wins)."""
    tree = tree_class.from_pairs(pairs)
    expected = dict(pairs)
    for k in list(expected) + probes:
        assert tree.find(k) == expected.get(k, NOT_FOUND)


@disciplines
@given(pairs=pairs_strategy, k=st.integers(-1100, 1100), v=st.integers())
def test_old_version_unchanged(tree_class, pairs, k, v):
    """Deriving a new version leaves the old one observably the same."""
    t1 = tree_class.from_pairs(pairs)
    before = list(t1)
    found_before = t1.find(k)

    t2 = t1.add(k, v)

    assert list(t1) == before
    assert t1.find(k) == found_before
    assert t2.find(k) == v


@disciplines
@given(pairs=pairs_strategy, k=st.integers(-1100, 1100), v=st.integers())
def test_repeated_add_is_idempotent(tree_class, pairs, k, v):
    """Adding the same pair twice gives the same shape, values and colors."""
    once = tree_class.from_pairs(pairs).add(k, v)
    twice = once.add(k, v)
    assert twice.root == once.root
    assert twice.size() == once.size()
