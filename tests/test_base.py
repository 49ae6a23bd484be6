"""Unified test base classes for AVL-tree tests."""

from typing import Iterable, List, Optional
import logging
import unittest

from avl_trees.avl_tree_base import AVLTreeBase
from avl_trees.base import AVLNode
from avl_trees.invariants import check_inorder_keys
from avl_trees.tree_stats import avl_tree_stats_
from tests.utils import assert_tree_invariants_tc

from avl_trees.logging_config import get_test_logger

logger = get_test_logger("TestBase")


class BaseTestCase(unittest.TestCase):
    """Base class for all tests with common functionality."""

    def make_node(
        self,
        value,
        left: Optional[AVLNode] = None,
        right: Optional[AVLNode] = None,
    ) -> AVLNode:
        """Helper to build a node whose caches match its children."""
        return AVLNode(value, left, right)

    def validate_tree(
        self,
        tree: AVLTreeBase,
        expected_keys: Optional[List] = None,
        err_msg: Optional[str] = "",
    ) -> None:
        """Validate tree invariants and, optionally, its exact key set."""
        stats = avl_tree_stats_(tree)
        msg = f"{err_msg}\n\nTree structure:\n{tree.print_structure()}"
        assert_tree_invariants_tc(self, tree, stats, msg)

        keys, presence_ok, order_ok = check_inorder_keys(tree, expected_keys)
        self.assertTrue(order_ok, f"Keys must be in strictly ascending order: {keys}{msg}")
        if expected_keys is not None:
            self.assertTrue(
                presence_ok,
                f"Keys {keys} do not match expected {sorted(expected_keys)}{msg}"
            )
            self.assertEqual(tree.size(), len(expected_keys), msg)


class AVLTreeTestCase(BaseTestCase):
    """Test case with a fresh tree; invariants are checked after every test."""

    def setUp(self):
        self.tree = AVLTreeBase()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Created AVL tree test using class {type(self.tree).__name__}")

    def insert_keys(self, keys: Iterable) -> AVLTreeBase:
        for key in keys:
            self.tree, _ = self.tree.insert(key)
        return self.tree

    def delete_keys(self, keys: Iterable) -> AVLTreeBase:
        for key in keys:
            self.tree, _ = self.tree.delete(key)
        return self.tree

    def tearDown(self):
        """Common tearDown logic for tree tests."""
        tree = getattr(self, 'tree', None)
        if tree is None:
            return

        expected_keys = getattr(self, 'expected_keys', None)
        self.validate_tree(tree, expected_keys)

        expected_height = getattr(self, 'expected_height', None)
        if expected_height is not None:
            self.assertEqual(
                tree.height(), expected_height,
                f"Tree height {tree.height()} does not match expected "
                f"{expected_height}\n{tree.print_structure()}"
            )
