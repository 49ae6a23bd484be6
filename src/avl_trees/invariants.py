"""Shared invariant-checking utilities.

This module provides tree invariant validation that can be used by both
the stats scripts and the test suite.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from avl_trees.avl_tree_base import AVLTreeBase
    from avl_trees.tree_stats import Stats

TREE_FLAGS = (
    "is_search_tree",
    "is_balanced",
    "heights_cached",
    "sizes_cached",
    "count_consistent",
)


class InvariantError(Exception):
    """Raised when an AVL-tree invariant is violated."""


def assert_tree_invariants_raise(
    t: AVLTreeBase,
    stats: Stats,
) -> None:
    """Check all invariants, raising :class:`InvariantError` on the first failure."""
    for flag in TREE_FLAGS:
        if not getattr(stats, flag):
            raise InvariantError(f"Invariant failed: {flag} is False")

    if not t.is_empty():
        if stats.node_count <= 0:
            raise InvariantError(f"Invariant failed: node_count={stats.node_count} ≤ 0 for non-empty tree")
        if stats.height <= 0:
            raise InvariantError(f"Invariant failed: height={stats.height} ≤ 0 for non-empty tree")
        if stats.max_abs_balance_factor > 1:
            raise InvariantError(
                f"Invariant failed: max_abs_balance_factor={stats.max_abs_balance_factor} > 1"
            )
        if stats.least_value is None:
            raise InvariantError("Invariant failed: least_value is None for non-empty tree")
        if stats.greatest_value is None:
            raise InvariantError("Invariant failed: greatest_value is None for non-empty tree")
        if t.size() != stats.node_count:
            raise InvariantError(
                f"Invariant failed: t.size()={t.size()} ≠ stats.node_count={stats.node_count}"
            )


def check_inorder_keys(
    tree: AVLTreeBase,
    expected_keys: list[Any] | None = None,
) -> tuple[list[Any], bool, bool]:
    """Traverse the tree in order and validate the keys.

    Returns
    -------
    (keys, presence_ok, order_ok)
    """
    keys = tree.inorder()

    order_ok = True
    for prev_key, key in zip(keys, keys[1:]):
        if not (prev_key < key):
            order_ok = False
            break

    presence_ok = True
    if expected_keys is not None:
        if len(keys) != len(expected_keys):
            presence_ok = False
        else:
            presence_ok = sorted(keys) == sorted(expected_keys)

    return keys, presence_ok, order_ok
