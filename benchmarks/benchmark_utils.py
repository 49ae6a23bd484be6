"""
Shared setup for the AVL-tree ASV benchmarks.

Key sets are reproducible: every generator is seeded, by default from
``BENCHMARK_SEED`` (42 when unset). Timed sections assume the
``avl_trees`` logger is at INFO or quieter; rotation and deletion
messages at DEBUG would dominate the measurements.
"""

import gc
import logging
import os
import random
from typing import List, Tuple

import numpy as np

DEFAULT_BENCHMARK_SEED = int(os.environ.get('BENCHMARK_SEED', '42'))

KEY_ORDERS = ('uniform', 'sequential', 'reversed')


class BenchmarkUtils:
    """Deterministic benchmark data and environment checks."""

    @staticmethod
    def check_logging_level():
        """Raise ValueError when the library logger would emit DEBUG records."""
        effective_level = logging.getLogger("avl_trees").getEffectiveLevel()
        if effective_level <= logging.DEBUG:
            raise ValueError(
                f"avl_trees logging is at {logging.getLevelName(effective_level)}; "
                "benchmarks need INFO or higher so debug output does not skew timings."
            )

    @staticmethod
    def generate_deterministic_keys(size: int,
                                    seed: int = None,
                                    key_range: Tuple[int, int] = (1, 1000000),
                                    distribution: str = 'uniform') -> List[int]:
        """
        Return ``size`` distinct keys from ``key_range`` in the given insertion order.

        ``uniform`` samples without replacement in random order;
        ``sequential`` and ``reversed`` are the ascending and descending runs
        starting at the lower bound, the rotation-heaviest insert patterns.
        """
        if distribution not in KEY_ORDERS:
            raise ValueError(f"Unknown distribution: {distribution}")
        min_key, max_key = key_range
        if max_key - min_key + 1 < size:
            raise ValueError(f"Key range {key_range} holds fewer than {size} distinct keys")

        if distribution == 'sequential':
            return list(range(min_key, min_key + size))
        if distribution == 'reversed':
            return list(range(min_key + size - 1, min_key - 1, -1))

        rng = np.random.RandomState(DEFAULT_BENCHMARK_SEED if seed is None else seed)
        offsets = rng.choice(max_key - min_key + 1, size=size, replace=False)
        return (offsets + min_key).tolist()

    @staticmethod
    def create_lookup_keys(insert_keys: List[int],
                           hit_ratio: float = 0.8,
                           seed: int = None,
                           num_lookups: int = 1000) -> List[int]:
        """
        Build ``num_lookups`` probe keys of which about ``hit_ratio`` are present.

        Hits are drawn with replacement from ``insert_keys``; misses come from
        ``[min, 2 * max + 1]`` minus the inserted keys. The result is shuffled.
        """
        rnd = random.Random(DEFAULT_BENCHMARK_SEED if seed is None else seed)
        if not insert_keys:
            return [rnd.randint(1, 1000000) for _ in range(num_lookups)]

        num_hits = int(num_lookups * hit_ratio)
        lookups = rnd.choices(insert_keys, k=num_hits) if num_hits else []

        present = set(insert_keys)
        low, high = min(insert_keys), 2 * max(insert_keys) + 1
        while len(lookups) < num_lookups:
            key = rnd.randint(low, high)
            if key not in present:
                lookups.append(key)

        rnd.shuffle(lookups)
        return lookups


class BaseBenchmark:
    """Base class for the ASV benchmark suites.

    Subclasses call ``super().setup(*params)`` first, prepare their data,
    then ``gc.collect()`` and ``gc.disable()``; ``teardown`` turns the
    collector back on.
    """

    params = []
    param_names = []

    warmup_time = 0.1
    sample_time = 0.4

    def setup(self, *params):
        BenchmarkUtils.check_logging_level()

    def teardown(self, *params):
        if not gc.isenabled():
            gc.enable()
