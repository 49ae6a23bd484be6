"""Statistics for AVL trees."""

import argparse
import os
import random
import time
from datetime import datetime
from statistics import mean

import numpy as np
from tqdm import tqdm

from avl_trees.avl_tree_base import AVLTreeBase
from avl_trees.factory import create_avl_tree
from avl_trees.invariants import assert_tree_invariants_raise
from avl_trees.logging_config import get_logger, setup_logging
from avl_trees.tree_stats import avl_tree_stats_
from avl_trees.utils import max_height_for_size, min_height_for_size

logger = get_logger("stats")

DISTRIBUTIONS = ("uniform", "ascending", "descending")


def create_tree(keys) -> AVLTreeBase:
    """Build a tree by inserting each key one at a time."""
    tree = create_avl_tree()
    tree_insert = tree.insert
    for key in keys:
        tree_insert(key)
    return tree


def random_keys(n: int, distribution: str = "uniform") -> np.ndarray:
    """
    Draw ``n`` unique integer keys in the requested insertion order.

    ``uniform`` samples from a key space of 2^24 in random order;
    ``ascending`` and ``descending`` insert the same sample sorted, the
    worst case for an unbalanced search tree.
    """
    space = 1 << 24
    if space <= n:
        raise ValueError(f"Key-space too small! Required: {n}, Available: {space}")

    keys = np.random.choice(space, size=n, replace=False)
    if distribution == "ascending":
        keys.sort()
    elif distribution == "descending":
        keys = np.sort(keys)[::-1]
    elif distribution != "uniform":
        raise ValueError(f"Unknown distribution: {distribution}")
    return keys


def random_avl_tree_of_size(n: int, distribution: str = "uniform") -> AVLTreeBase:
    return create_tree(int(k) for k in random_keys(n, distribution))


def repeated_experiment(
    size: int,
    repetitions: int,
    distribution: str = "uniform",
) -> None:
    """
    Repeatedly builds random AVL trees with ``size`` keys inserted in the
    given order. Aggregates structure statistics and timings over all trees
    and compares the observed height with the AVL bounds.
    """
    t_all_0 = time.perf_counter()

    results = []
    times_build = []
    times_stats = []
    times_query = []

    for _ in tqdm(range(repetitions), desc=f"n={size}", unit="tree", leave=False):
        t0 = time.perf_counter()
        tree = random_avl_tree_of_size(size, distribution)
        times_build.append(time.perf_counter() - t0)

        t0 = time.perf_counter()
        stats = avl_tree_stats_(tree, {})
        times_stats.append(time.perf_counter() - t0)

        # Median selection and rank of the median
        t0 = time.perf_counter()
        if size:
            median = tree.k_smallest((size + 1) // 2)
            if tree.count_less(median) != (size + 1) // 2 - 1:
                raise AssertionError(f"Rank of median {median} inconsistent with k_smallest")
        times_query.append(time.perf_counter() - t0)

        results.append(stats)

        assert_tree_invariants_raise(tree, stats)

    perfect_height = min_height_for_size(size)
    worst_height = max_height_for_size(size)

    avg_height = mean(s.height for s in results)
    avg_leaf_count = mean(s.leaf_count for s in results)
    avg_node_count = mean(s.node_count for s in results)
    avg_height_amp = mean((s.height / perfect_height) for s in results) if perfect_height else 0
    avg_max_bf = mean(s.max_abs_balance_factor for s in results)

    avg_build_time = mean(times_build)
    avg_stats_time = mean(times_stats)
    avg_query_time = mean(times_query)

    var_height = mean((s.height - avg_height) ** 2 for s in results)
    var_leaf_count = mean((s.leaf_count - avg_leaf_count) ** 2 for s in results)
    var_node_count = mean((s.node_count - avg_node_count) ** 2 for s in results)
    var_height_amp = (
        mean(((s.height / perfect_height) - avg_height_amp) ** 2 for s in results) if perfect_height else 0
    )
    var_max_bf = mean((s.max_abs_balance_factor - avg_max_bf) ** 2 for s in results)

    var_build_time = mean((t - avg_build_time) ** 2 for t in times_build)
    var_stats_time = mean((t - avg_stats_time) ** 2 for t in times_stats)
    var_query_time = mean((t - avg_query_time) ** 2 for t in times_query)

    rows = [
        ("Node count", avg_node_count, var_node_count),
        ("Leaf count", avg_leaf_count, var_leaf_count),
        ("Max |balance|", avg_max_bf, var_max_bf),
        ("Actual height", avg_height, var_height),
        ("Perfect height", perfect_height, None),
        ("AVL height bound", worst_height, None),
        ("Height amplification", avg_height_amp, var_height_amp),
    ]

    header = f"{'Metric':<20} {'Avg':>15} {'(Var)':>15}"
    sep_line = "-" * len(header)

    logger.info(header)
    logger.info(sep_line)
    for name, avg, var in rows:
        if var is None:
            logger.info(f"{name:<20} {avg:>15}")
        else:
            var_str = f"({var:.2f})"
            avg_fmt = f"{avg:15.2f}"
            logger.info(f"{name:<20} {avg_fmt} {var_str:>15}")

    max_seen = max(s.height for s in results)
    if max_seen > worst_height:
        logger.error(f"Observed height {max_seen} exceeds the AVL bound {worst_height}")

    sum_build = sum(times_build)
    sum_stats = sum(times_stats)
    sum_query = sum(times_query)
    total_sum = sum_build + sum_stats + sum_query

    pct_build = (sum_build / total_sum * 100) if total_sum else 0
    pct_stats = (sum_stats / total_sum * 100) if total_sum else 0
    pct_query = (sum_query / total_sum * 100) if total_sum else 0

    perf_rows = [
        ("Build time (s)", avg_build_time, var_build_time, sum_build, pct_build),
        ("Stats time (s)", avg_stats_time, var_stats_time, sum_stats, pct_stats),
        ("Query time (s)", avg_query_time, var_query_time, sum_query, pct_query),
    ]

    header = f"{'Metric':<20}{'Avg(s)':>13}{'Var(s)':>13}{'Total(s)':>13}{'%Total':>10}"
    sep = "-" * len(header)

    logger.info("")
    logger.info("Performance summary:")
    logger.info(header)
    logger.info(sep)
    for name, avg, var, total, pct in perf_rows:
        logger.info(f"{name:<20}{avg:13.6f}{var:13.6f}{total:13.6f}{pct:10.2f}%")

    logger.info(sep)
    t_all_1 = time.perf_counter() - t_all_0
    logger.info("Execution time: %.3f seconds", t_all_1)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run statistics experiments for AVL trees.")
    parser.add_argument(
        "--sizes", type=int, nargs="+", default=[10, 100, 1000, 10_000], help="List of tree sizes to test."
    )
    parser.add_argument("--repetitions", type=int, default=10, help="Number of repetitions for each experiment.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility.")
    parser.add_argument(
        "--distribution",
        choices=DISTRIBUTIONS,
        default="uniform",
        help="Insertion order of the generated keys (default: uniform)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="INFO",
        help="Set the logging level (default: INFO)",
    )

    args = parser.parse_args()

    if args.seed is not None:
        random.seed(args.seed)
        np.random.seed(args.seed)

    log_dir = os.path.join(os.getcwd(), "stats/logs/avl_tree_logs")
    os.makedirs(log_dir, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_path = os.path.join(log_dir, f"run_{ts}.log")

    # One file and console log for the script and the library modules
    setup_logging(
        level=args.log_level,
        format_string="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handler_type="both",
        log_file=log_path,
        force=True,
    )

    for n in args.sizes:
        logger.info("")
        logger.info("")
        logger.info(
            f"---------------- NOW RUNNING EXPERIMENT: n = {n}, order = {args.distribution}, "
            f"repetitions = {args.repetitions} ----------------"
        )
        t0 = time.perf_counter()
        repeated_experiment(size=n, repetitions=args.repetitions, distribution=args.distribution)
        elapsed = time.perf_counter() - t0
        logger.info(f"Total experiment time: {elapsed:.3f} seconds")
