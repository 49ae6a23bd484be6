"""Tests for tree statistics and invariant detection."""

import collections
import unittest

from avl_trees.avl_tree_base import AVLTreeBase
from avl_trees.invariants import InvariantError, assert_tree_invariants_raise, check_inorder_keys
from avl_trees.tree_stats import avl_tree_stats_

from tests.test_base import AVLTreeTestCase, BaseTestCase


class TestStatsValues(AVLTreeTestCase):

    def test_empty_tree(self):
        stats = avl_tree_stats_(self.tree)
        self.assertEqual(stats.height, 0)
        self.assertEqual(stats.node_count, 0)
        self.assertIsNone(stats.least_value)
        self.assertTrue(stats.count_consistent)
        assert_tree_invariants_raise(self.tree, stats)

    def test_none_tree(self):
        stats = avl_tree_stats_(None)
        self.assertEqual(stats.node_count, 0)
        self.tree = None

    def test_sample_tree(self):
        self.insert_keys([5, 3, 8, 1, 4, 7, 9])
        depth_hist = collections.Counter()
        stats = avl_tree_stats_(self.tree, depth_hist)
        self.assertEqual(stats.height, 3)
        self.assertEqual(stats.node_count, 7)
        self.assertEqual(stats.element_count, 7)
        self.assertEqual(stats.leaf_count, 4)
        self.assertEqual(stats.least_value, 1)
        self.assertEqual(stats.greatest_value, 9)
        self.assertEqual(stats.max_abs_balance_factor, 0)
        self.assertEqual(dict(depth_hist), {0: 1, 1: 2, 2: 4})
        assert_tree_invariants_raise(self.tree, stats)

    def test_check_inorder_keys(self):
        self.insert_keys([2, 1, 3])
        keys, presence_ok, order_ok = check_inorder_keys(self.tree, [3, 2, 1])
        self.assertEqual(keys, [1, 2, 3])
        self.assertTrue(presence_ok)
        self.assertTrue(order_ok)
        _, presence_ok, _ = check_inorder_keys(self.tree, [1, 2])
        self.assertFalse(presence_ok)


class TestInvariantViolations(BaseTestCase):
    """Hand-corrupted trees must be reported."""

    def assert_violation(self, tree, flag):
        stats = avl_tree_stats_(tree)
        self.assertFalse(getattr(stats, flag), f"{flag} should be False")
        with self.assertRaises(InvariantError):
            assert_tree_invariants_raise(tree, stats)

    def test_search_order_violation(self):
        root = self.make_node(5, self.make_node(7), self.make_node(9))
        self.assert_violation(AVLTreeBase(root, 3), "is_search_tree")

    def test_deep_search_order_violation(self):
        # 6 sits in the left subtree of 5
        root = self.make_node(5, self.make_node(3, None, self.make_node(6)), self.make_node(8))
        self.assert_violation(AVLTreeBase(root, 4), "is_search_tree")

    def test_unbalanced(self):
        root = self.make_node(1, None, self.make_node(2, None, self.make_node(3)))
        self.assert_violation(AVLTreeBase(root, 3), "is_balanced")

    def test_stale_height_cache(self):
        root = self.make_node(2, self.make_node(1), self.make_node(3))
        root.height = 5
        self.assert_violation(AVLTreeBase(root, 3), "heights_cached")

    def test_stale_size_cache(self):
        root = self.make_node(2, self.make_node(1), self.make_node(3))
        root.left.size = 4
        self.assert_violation(AVLTreeBase(root, 3), "sizes_cached")

    def test_element_count_mismatch(self):
        root = self.make_node(2, self.make_node(1), self.make_node(3))
        self.assert_violation(AVLTreeBase(root, 2), "count_consistent")

    def test_empty_tree_with_count(self):
        self.assert_violation(AVLTreeBase(None, 1), "count_consistent")


if __name__ == "__main__":
    unittest.main()
