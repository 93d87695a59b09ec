import logging
import os
import sys

from immutable_trees import AVLTree, RedBlackTree
from immutable_trees.engine import shape_stats, validate
from immutable_trees.interfaces import PersistentMap
from immutable_trees.models import InvariantViolationError

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger()

USAGE = "usage: inspect_trees.py KEY [KEY ...]"


def describe(tree: PersistentMap) -> list[str]:
    """Summarize one tree as printable lines."""
    stats = shape_stats(tree.root)
    lines = [
        f"{type(tree).__name__}:",
        f"  size:   {tree.size()}",
        f"  height: {stats.height}",
    ]
    if isinstance(tree, RedBlackTree):
        lines.append(f"  black-height: {tree.black_height()}")
        lines.append(f"  red/black nodes: {stats.red}/{stats.black}")
    lines.append(f"  keys:   {' '.join(str(k) for k, _ in tree)}")
    return lines


def main(argv: list[str]) -> int:
    if not argv:
        print(USAGE, file=sys.stderr)
        return 2

    pairs = [(k, i) for i, k in enumerate(argv)]
    status = 0
    for tree_cls in (AVLTree, RedBlackTree):
        tree = tree_cls.from_pairs(pairs)
        logger.debug(f"Built {tree!r} from {len(pairs)} keys")
        try:
            validate(tree)
        except InvariantViolationError as e:
            logger.error(f"{tree_cls.__name__} failed validation: {e}")
            status = 1
            continue
        print("\n".join(describe(tree)))
    return status


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
