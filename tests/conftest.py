"""
Shared pytest fixtures for the persistent tree tests.
"""

import random

import pytest

from immutable_trees import AVLTree, RedBlackTree


@pytest.fixture
def scenario_pairs():
    """Provide the seven-key insertion scenario: d b f a c e g -> 0..6."""
    return [(k, i) for i, k in enumerate("dbfaceg")]


@pytest.fixture
def avl_tree(scenario_pairs):
    """Provide an AVLTree built from the scenario pairs."""
    return AVLTree.from_pairs(scenario_pairs)


@pytest.fixture
def rb_tree(scenario_pairs):
    """Provide a RedBlackTree built from the scenario pairs."""
    return RedBlackTree.from_pairs(scenario_pairs)


@pytest.fixture(params=[AVLTree, RedBlackTree], ids=["avl", "red_black"])
def tree_cls(request):
    """Run a test once per tree discipline."""
    return request.param


@pytest.fixture
def large_sample_pairs():
    """Provide a larger shuffled sample for stress testing."""
    pairs = [(f"key{i:04d}", f"value{i}") for i in range(1000)]
    random.Random(42).shuffle(pairs)
    return pairs
