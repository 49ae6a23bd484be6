"""Tests for in-, pre- and post-order traversals."""

import unittest

from avl_trees.traversal import count_nodes, iter_inorder, iter_postorder, iter_preorder

from tests.test_base import AVLTreeTestCase


class TestTraversals(AVLTreeTestCase):

    def setUp(self):
        super().setUp()
        self.insert_keys([5, 3, 8, 1, 4, 7, 9])
        self.expected_keys = [1, 3, 4, 5, 7, 8, 9]

    def test_inorder(self):
        self.assertEqual(self.tree.inorder(), [1, 3, 4, 5, 7, 8, 9])

    def test_preorder(self):
        self.assertEqual(self.tree.preorder(), [5, 3, 1, 4, 8, 7, 9])

    def test_postorder(self):
        self.assertEqual(self.tree.postorder(), [1, 4, 3, 7, 9, 8, 5])

    def test_iter_protocol(self):
        self.assertEqual(list(self.tree), self.tree.inorder())
        self.assertEqual(len(self.tree), 7)

    def test_repeated_calls_identical(self):
        for traversal in (self.tree.inorder, self.tree.preorder, self.tree.postorder):
            with self.subTest(traversal=traversal.__name__):
                self.assertEqual(traversal(), traversal())

    def test_generators_are_independent(self):
        a = iter_inorder(self.tree.root)
        b = iter_inorder(self.tree.root)
        self.assertEqual(next(a), 1)
        self.assertEqual(list(b), [1, 3, 4, 5, 7, 8, 9])
        self.assertEqual(list(a), [3, 4, 5, 7, 8, 9])

    def test_count_nodes_matches_cache(self):
        self.assertEqual(count_nodes(self.tree.root), self.tree.root.size)
        self.assertEqual(count_nodes(self.tree.root.right), 3)


class TestEmptyTraversals(AVLTreeTestCase):

    def test_empty(self):
        self.assertEqual(self.tree.inorder(), [])
        self.assertEqual(self.tree.preorder(), [])
        self.assertEqual(self.tree.postorder(), [])
        self.assertEqual(list(iter_preorder(None)), [])
        self.assertEqual(list(iter_postorder(None)), [])
        self.assertEqual(count_nodes(None), 0)


class TestPrintStructure(AVLTreeTestCase):

    def test_empty(self):
        self.assertEqual(self.tree.print_structure(), "Empty AVLTreeBase")
        self.assertEqual(str(self.tree), "Empty AVLTree")

    def test_lines(self):
        self.insert_keys([2, 1, 3])
        lines = self.tree.print_structure().splitlines()
        self.assertEqual(len(lines), 3)
        self.assertTrue(lines[0].strip().startswith("R: 3"))
        self.assertTrue(lines[1].startswith("Root: 2"))
        self.assertTrue(lines[2].strip().startswith("L: 1"))
        self.assertIn("size=3", str(self.tree))
        self.expected_keys = [1, 2, 3]

    def test_max_depth(self):
        self.insert_keys(range(1, 16))
        text = self.tree.print_structure(max_depth=1)
        self.assertIn("max depth reached", text)
        self.expected_keys = list(range(1, 16))


if __name__ == "__main__":
    unittest.main()
