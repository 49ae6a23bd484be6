"""
ASV benchmarks for AVLTreeBase operations.

Covers construction by repeated insertion, membership search, deletion and
the order-statistic queries for several tree sizes and key orders.
"""

import gc

from avl_trees.avl_tree_base import AVLTreeBase
from avl_trees.bulk_create import bulk_create_avl_tree
from benchmarks.benchmark_utils import KEY_ORDERS, BaseBenchmark, BenchmarkUtils


SIZES = [1_000, 10_000, 100_000]


class AVLTreeInsertBenchmarks(BaseBenchmark):
    """Benchmarks for tree construction via sequential inserts."""

    params = [
        SIZES,
        list(KEY_ORDERS),
    ]
    param_names = ['size', 'distribution']

    min_run_count = 5

    def setup(self, size, distribution):
        super().setup(size, distribution)
        self.keys = BenchmarkUtils.generate_deterministic_keys(
            size=size,
            seed=42 + size % 1000 + KEY_ORDERS.index(distribution),
            distribution=distribution,
        )
        gc.collect()
        gc.disable()  # Enabled in teardown

    def time_insert_batch_construction(self, size, distribution):
        """Benchmark full tree construction by inserting all keys."""
        tree = AVLTreeBase()
        for key in self.keys:
            tree.insert(key)

    def time_bulk_create(self, size, distribution):
        bulk_create_avl_tree(self.keys)


class AVLTreeSearchBenchmarks(BaseBenchmark):
    """Benchmarks for AVLTreeBase.search()."""

    params = [
        SIZES,
        [0.0, 0.5, 1.0],  # hit ratios
    ]
    param_names = ['size', 'hit_ratio']

    min_run_count = 5

    # Class-level cache for built trees and their keys
    _tree_cache = {}
    _data_cache = {}

    def setup(self, size, hit_ratio):
        super().setup(size, hit_ratio)

        if size not in self._tree_cache:
            insert_keys = BenchmarkUtils.generate_deterministic_keys(
                size=size,
                seed=42 + size % 1000,
                distribution='uniform',
            )
            tree = AVLTreeBase()
            for key in insert_keys:
                tree.insert(key)
            self._tree_cache[size] = tree
            self._data_cache[size] = insert_keys

        self.tree = self._tree_cache[size]
        self.lookup_keys = BenchmarkUtils.create_lookup_keys(
            insert_keys=self._data_cache[size],
            hit_ratio=hit_ratio,
            seed=1042 + size % 1000,
        )
        gc.collect()
        gc.disable()  # Enabled in teardown

    def time_search(self, size, hit_ratio):
        search = self.tree.search
        for key in self.lookup_keys:
            search(key)

    def time_contains(self, size, hit_ratio):
        tree = self.tree
        for key in self.lookup_keys:
            key in tree


class AVLTreeDeleteBenchmarks(BaseBenchmark):
    """Benchmarks for AVLTreeBase.delete().

    Deletion mutates the tree, so each sample rebuilds it in setup.
    """

    params = [
        SIZES,
        [0.5, 1.0],  # fraction of keys removed
    ]
    param_names = ['size', 'fraction']

    number = 1
    repeat = 5

    def setup(self, size, fraction):
        super().setup(size, fraction)
        keys = BenchmarkUtils.generate_deterministic_keys(
            size=size,
            seed=42 + size % 1000,
            distribution='uniform',
        )
        self.tree = bulk_create_avl_tree(keys)
        self.delete_keys = keys[: int(size * fraction)]
        gc.collect()
        gc.disable()  # Enabled in teardown

    def time_delete(self, size, fraction):
        delete = self.tree.delete
        for key in self.delete_keys:
            delete(key)


class AVLTreeOrderStatsBenchmarks(BaseBenchmark):
    """Benchmarks for k_smallest (Morris walk) and the O(log n) rank counts."""

    params = [SIZES]
    param_names = ['size']

    min_run_count = 5

    _tree_cache = {}

    def setup(self, size):
        super().setup(size)
        if size not in self._tree_cache:
            keys = BenchmarkUtils.generate_deterministic_keys(size=size, distribution='uniform')
            self._tree_cache[size] = bulk_create_avl_tree(keys)
        self.tree = self._tree_cache[size]
        self.ks = [1, size // 4, size // 2, size]
        self.probes = BenchmarkUtils.create_lookup_keys(
            insert_keys=self.tree.inorder(),
            hit_ratio=0.5,
            num_lookups=1000,
        )
        gc.collect()
        gc.disable()  # Enabled in teardown

    def time_k_smallest(self, size):
        for k in self.ks:
            self.tree.k_smallest(k)

    def time_count_less(self, size):
        count_less = self.tree.count_less
        for key in self.probes:
            count_less(key)

    def time_count_greater(self, size):
        count_greater = self.tree.count_greater
        for key in self.probes:
            count_greater(key)
