"""AVL-tree factory module."""

from typing import Any, Iterable, Optional

from avl_trees.avl_tree_base import AVLTreeBase
from avl_trees.bulk_create import bulk_create_avl_tree
from avl_trees.concurrency import SynchronizedAVLTree


def create_avl_tree(values: Optional[Iterable[Any]] = None) -> AVLTreeBase:
    """
    Create a new AVL tree, optionally pre-populated.

    Args:
        values: Keys to load with :func:`bulk_create_avl_tree`. Duplicates
            are dropped.

    Returns:
        A new AVLTreeBase, empty if no values were given.
    """
    if values is None:
        return AVLTreeBase()
    return bulk_create_avl_tree(values)


def create_synchronized_avl_tree(values: Optional[Iterable[Any]] = None) -> SynchronizedAVLTree:
    """Create an AVL tree wrapped for shared use between threads."""
    return SynchronizedAVLTree(create_avl_tree(values))
