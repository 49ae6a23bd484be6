"""Statistics and invariant checking for AVL-tree structures."""

from __future__ import annotations

import collections
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from avl_trees.logging_config import get_logger

if TYPE_CHECKING:
    from avl_trees.avl_tree_base import AVLTreeBase
    from avl_trees.base import AVLNode

logger = get_logger(__name__)


@dataclass
class Stats:
    """Aggregated statistics for an AVL tree or subtree."""

    height: int
    node_count: int
    element_count: int
    leaf_count: int
    least_value: Any | None
    greatest_value: Any | None
    max_abs_balance_factor: int
    is_search_tree: bool
    is_balanced: bool
    heights_cached: bool
    sizes_cached: bool
    count_consistent: bool


def _empty_stats() -> Stats:
    return Stats(
        height=0,
        node_count=0,
        element_count=0,
        leaf_count=0,
        least_value=None,
        greatest_value=None,
        max_abs_balance_factor=0,
        is_search_tree=True,
        is_balanced=True,
        heights_cached=True,
        sizes_cached=True,
        count_consistent=True,
    )


def _node_stats(
    node: AVLNode | None,
    depth_hist: dict[int, int],
    depth: int,
) -> Stats:
    if node is None:
        return _empty_stats()

    depth_hist[depth] = depth_hist.get(depth, 0) + 1

    left_stats = _node_stats(node.left, depth_hist, depth + 1)
    right_stats = _node_stats(node.right, depth_hist, depth + 1)

    height = 1 + max(left_stats.height, right_stats.height)
    node_count = 1 + left_stats.node_count + right_stats.node_count
    bf = left_stats.height - right_stats.height

    # ---------- search tree property ------------------------------
    is_search_tree = left_stats.is_search_tree and right_stats.is_search_tree
    if left_stats.greatest_value is not None and not (left_stats.greatest_value < node.value):
        is_search_tree = False
    if right_stats.least_value is not None and not (node.value < right_stats.least_value):
        is_search_tree = False

    stats = Stats(
        height=height,
        node_count=node_count,
        element_count=node_count,
        leaf_count=1 if node.is_leaf() else left_stats.leaf_count + right_stats.leaf_count,
        least_value=left_stats.least_value if node.left is not None else node.value,
        greatest_value=right_stats.greatest_value if node.right is not None else node.value,
        max_abs_balance_factor=max(abs(bf), left_stats.max_abs_balance_factor, right_stats.max_abs_balance_factor),
        is_search_tree=is_search_tree,
        is_balanced=left_stats.is_balanced and right_stats.is_balanced and abs(bf) <= 1,
        heights_cached=left_stats.heights_cached and right_stats.heights_cached and node.height == height,
        sizes_cached=left_stats.sizes_cached and right_stats.sizes_cached and node.size == node_count,
        count_consistent=True,
    )

    if not stats.heights_cached and node.height != height:
        logger.warning(f"Cached height {node.height} of node {node.value!r} differs from actual height {height}")
    if not stats.sizes_cached and node.size != node_count:
        logger.warning(f"Cached size {node.size} of node {node.value!r} differs from actual size {node_count}")

    return stats


def avl_tree_stats_(
    t: AVLTreeBase,
    depth_hist: dict[int, int] | None = None,
) -> Stats:
    """
    Returns aggregated statistics for an AVL tree in **O(n)** time.

    Heights and node counts are recomputed from scratch and compared
    against the cached per-node values and the tree's element count.

    The caller can supply an existing Counter / dict for ``depth_hist``;
    otherwise a fresh Counter is used. It receives the number of nodes
    found at each depth (root depth 0).
    """
    if depth_hist is None:
        depth_hist = collections.Counter()

    if t is None or t.is_empty():
        stats = _empty_stats()
        if t is not None:
            stats.element_count = t.element_count
            stats.count_consistent = t.element_count == 0
        return stats

    stats = _node_stats(t.root, depth_hist, 0)
    stats.element_count = t.element_count
    stats.count_consistent = t.element_count == stats.node_count
    return stats
