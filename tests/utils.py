"""Utility functions for testing AVL-tree invariants."""

from typing import Optional

from avl_trees.avl_tree_base import AVLTreeBase
from avl_trees.invariants import TREE_FLAGS
from avl_trees.tree_stats import Stats


def assert_tree_invariants_tc(tc, t: AVLTreeBase, stats: Stats, err_msg: Optional[str] = "") -> None:
    """TestCase version: use inside unittest.TestCase methods."""
    for flag in TREE_FLAGS:
        tc.assertTrue(
            getattr(stats, flag),
            f"Invariant failed: {flag} is False \n\n{err_msg}"
        )

    if not t.is_empty():
        tc.assertGreater(
            stats.node_count, 0,
            f"Invariant failed: node_count={stats.node_count} ≤ 0 for non-empty tree\n\n{err_msg}"
        )
        tc.assertGreater(
            stats.height, 0,
            f"Invariant failed: height={stats.height} ≤ 0 for non-empty tree\n\n{err_msg}"
        )
        tc.assertLessEqual(
            stats.max_abs_balance_factor, 1,
            f"Invariant failed: |balance factor|={stats.max_abs_balance_factor} > 1\n\n{err_msg}"
        )
        tc.assertIsNotNone(
            stats.least_value,
            f"Invariant failed: least_value is None for non-empty tree\n\n{err_msg}"
        )
        tc.assertIsNotNone(
            stats.greatest_value,
            f"Invariant failed: greatest_value is None for non-empty tree\n\n{err_msg}"
        )
        tc.assertEqual(
            t.size(), stats.node_count,
            f"Invariant failed: size()={t.size()} ≠ node_count={stats.node_count}\n\n{err_msg}"
        )
