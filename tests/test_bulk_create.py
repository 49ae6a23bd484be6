"""Tests for bulk construction and the tree factories."""

import random
import unittest

from avl_trees.avl_tree_base import AVLTreeBase
from avl_trees.bulk_create import bulk_create_avl_tree
from avl_trees.concurrency import SynchronizedAVLTree
from avl_trees.factory import create_avl_tree, create_synchronized_avl_tree
from avl_trees.utils import min_height_for_size

from tests.test_base import AVLTreeTestCase


class TestBulkCreate(AVLTreeTestCase):

    def test_empty_input(self):
        self.tree = bulk_create_avl_tree([])
        self.assertTrue(self.tree.is_empty())
        self.assertEqual(self.tree.size(), 0)
        self.expected_keys = []

    def test_sorted_input_is_perfect(self):
        self.tree = bulk_create_avl_tree(range(1, 16))
        self.assertEqual(self.tree.root.value, 8)
        self.expected_keys = list(range(1, 16))
        self.expected_height = 4

    def test_unsorted_with_duplicates(self):
        values = [9, 3, 3, 7, 1, 9, 5]
        self.tree = bulk_create_avl_tree(values)
        self.assertEqual(self.tree.size(), 5)
        self.expected_keys = [1, 3, 5, 7, 9]

    def test_height_is_minimal(self):
        rng = random.Random(3)
        for n in (1, 2, 3, 10, 100, 1000):
            with self.subTest(n=n):
                keys = rng.sample(range(100_000), n)
                tree = bulk_create_avl_tree(keys)
                self.assertEqual(tree.height(), min_height_for_size(n))
                self.validate_tree(tree, keys, f"n={n}")
        self.tree = None

    def test_rejects_none(self):
        with self.assertRaises(TypeError):
            bulk_create_avl_tree([1, None, 2])

    def test_tree_supports_mutation(self):
        self.tree = bulk_create_avl_tree(range(0, 40, 2))
        self.insert_keys(range(1, 40, 2))
        self.delete_keys(range(0, 40, 4))
        self.expected_keys = [k for k in range(40) if k % 4 != 0]


class TestFactory(AVLTreeTestCase):

    def test_create_empty(self):
        self.tree = create_avl_tree()
        self.assertIsInstance(self.tree, AVLTreeBase)
        self.assertTrue(self.tree.is_empty())

    def test_create_with_values(self):
        self.tree = create_avl_tree([4, 2, 6])
        self.assertEqual(self.tree.inorder(), [2, 4, 6])
        self.expected_keys = [2, 4, 6]

    def test_create_synchronized(self):
        shared = create_synchronized_avl_tree([1, 2, 3])
        self.assertIsInstance(shared, SynchronizedAVLTree)
        self.assertEqual(shared.inorder(), [1, 2, 3])


if __name__ == "__main__":
    unittest.main()
