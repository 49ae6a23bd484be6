"""Bulk construction of AVL trees from a collection of keys."""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Type

from avl_trees.avl_tree_base import AVLTreeBase
from avl_trees.base import AVLNode
from avl_trees.logging_config import get_logger

logger = get_logger(__name__)


def _sorted_unique(values: Iterable[Any]) -> List[Any]:
    keys = []
    for value in sorted(values):
        if keys and not (keys[-1] < value):
            continue
        keys.append(value)
    return keys


def bulk_create_avl_tree(
    values: Iterable[Any],
    TreeClass: Optional[Type[AVLTreeBase]] = None,
) -> AVLTreeBase:
    """
    Build an AVL tree holding ``values`` in O(n log n) time.

    The keys are sorted and de-duplicated, then each subtree is rooted at
    the median of its key range. Sibling subtrees differ in size by at most
    one, so the result is balanced without any rotations.

    Args:
        values: Keys to insert. Duplicates are dropped.
        TreeClass: Tree class to instantiate (default: AVLTreeBase).

    Returns:
        AVLTreeBase: A new tree containing every distinct key.

    Raises:
        TypeError: If any value is None.
    """
    if TreeClass is None:
        TreeClass = AVLTreeBase
    values = list(values)
    if any(v is None for v in values):
        raise TypeError("bulk_create_avl_tree(): values must not contain None")

    keys = _sorted_unique(values)
    NodeClass = TreeClass.NodeClass

    def build(lo: int, hi: int) -> Optional[AVLNode]:
        if lo >= hi:
            return None
        mid = (lo + hi) // 2
        return NodeClass(keys[mid], build(lo, mid), build(mid + 1, hi))

    tree = TreeClass(build(0, len(keys)), len(keys))
    logger.debug("bulk_create_avl_tree: %d keys (%d given), height %d", len(keys), len(values), tree.height())
    return tree
