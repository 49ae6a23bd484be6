"""
avl_trees: height-balanced binary search trees with order statistics.

Quick-start imports::

    from avl_trees import create_avl_tree, create_synchronized_avl_tree
"""

# Shared primitives
from avl_trees.base import AVLNode, InvalidArgumentError

# AVL tree
from avl_trees.avl_tree_base import AVLTreeBase
from avl_trees.bulk_create import bulk_create_avl_tree
from avl_trees.concurrency import RWLock, SynchronizedAVLTree
from avl_trees.factory import create_avl_tree, create_synchronized_avl_tree

# Stats & invariants
from avl_trees.invariants import (
    InvariantError,
    assert_tree_invariants_raise,
    check_inorder_keys,
)
from avl_trees.tree_stats import Stats, avl_tree_stats_

__all__ = [
    # Primitives
    "AVLNode",
    # AVL tree
    "AVLTreeBase",
    "InvalidArgumentError",
    "InvariantError",
    "RWLock",
    # Stats & invariants
    "Stats",
    "SynchronizedAVLTree",
    "assert_tree_invariants_raise",
    "avl_tree_stats_",
    "bulk_create_avl_tree",
    "check_inorder_keys",
    "create_avl_tree",
    "create_synchronized_avl_tree",
]
