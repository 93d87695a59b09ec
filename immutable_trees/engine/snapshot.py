"""
Plain-data views of a tree's shape for renderers and debugging.
"""

from dataclasses import dataclass
from typing import Any

from immutable_trees.models.sortedcontainers.red_black_tree import Color, RBNode
from immutable_trees.models.tree import EMPTY, Tree, depth


@dataclass(frozen=True)
class ShapeStats:
    """
    Summary of a tree's shape.

    Attributes:
        nodes: Number of nodes.
        height: Longest root-to-leaf path, in nodes.
        red: Red nodes (always 0 for AVL trees).
        black: Black nodes (always 0 for AVL trees).
    """

    nodes: int
    height: int
    red: int
    black: int


def snapshot(tree: Tree) -> dict[str, Any] | None:
    """
    Convert a tree into nested dicts.

    Returns:
        {"key", "value", "left", "right"} per node, plus "color" ("RED" or
        "BLACK") for red-black nodes; None for EMPTY.
    """
    if tree is EMPTY:
        return None

    result: dict[str, Any] = {"key": tree.key, "value": tree.value}
    if isinstance(tree, RBNode):
        result["color"] = tree.color.name
    result["left"] = snapshot(tree.left)
    result["right"] = snapshot(tree.right)
    return result


def shape_stats(tree: Tree) -> ShapeStats:
    """Count nodes and colors and measure height in one call."""
    red = black = nodes = 0
    stack = [tree]
    while stack:
        node = stack.pop()
        if node is EMPTY:
            continue
        nodes += 1
        if isinstance(node, RBNode):
            if node.color == Color.RED:
                red += 1
            else:
                black += 1
        stack.append(node.left)
        stack.append(node.right)
    return ShapeStats(nodes=nodes, height=depth(tree), red=red, black=black)
