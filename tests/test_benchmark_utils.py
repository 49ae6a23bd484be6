"""Tests for the deterministic benchmark data generators."""

import unittest

from benchmarks.benchmark_avl_tree import AVLTreeInsertBenchmarks
from benchmarks.benchmark_utils import KEY_ORDERS, BenchmarkUtils


class TestDeterministicKeys(unittest.TestCase):

    def test_uniform_keys_repeat_for_same_seed(self):
        first = BenchmarkUtils.generate_deterministic_keys(500, seed=7)
        second = BenchmarkUtils.generate_deterministic_keys(500, seed=7)
        self.assertEqual(first, second)
        self.assertEqual(len(set(first)), 500)
        self.assertTrue(all(1 <= k <= 1000000 for k in first))

    def test_ordered_distributions(self):
        self.assertEqual(BenchmarkUtils.generate_deterministic_keys(4, distribution='sequential'), [1, 2, 3, 4])
        self.assertEqual(BenchmarkUtils.generate_deterministic_keys(4, distribution='reversed'), [4, 3, 2, 1])
        with self.assertRaises(ValueError):
            BenchmarkUtils.generate_deterministic_keys(4, distribution='zipf')
        with self.assertRaises(ValueError):
            BenchmarkUtils.generate_deterministic_keys(10, key_range=(1, 5))

    def test_insert_benchmark_keys_do_not_depend_on_string_hashing(self):
        # The seed is derived from the size and the position of the key order
        runs = []
        for _ in range(2):
            bench = AVLTreeInsertBenchmarks()
            bench.setup(1000, 'uniform')
            bench.teardown(1000, 'uniform')
            runs.append(bench.keys)
        self.assertEqual(runs[0], runs[1])
        expected = BenchmarkUtils.generate_deterministic_keys(
            1000, seed=42 + 1000 % 1000 + KEY_ORDERS.index('uniform')
        )
        self.assertEqual(runs[0], expected)


class TestLookupKeys(unittest.TestCase):

    def test_hit_ratio(self):
        inserted = list(range(10, 1010, 10))
        lookups = BenchmarkUtils.create_lookup_keys(inserted, hit_ratio=0.25, seed=3, num_lookups=400)
        present = set(inserted)
        self.assertEqual(len(lookups), 400)
        self.assertEqual(sum(1 for k in lookups if k in present), 100)
        self.assertEqual(lookups, BenchmarkUtils.create_lookup_keys(inserted, 0.25, seed=3, num_lookups=400))


if __name__ == "__main__":
    unittest.main()
