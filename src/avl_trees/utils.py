"""
Utility functions for AVL-tree analysis, including height bounds.
"""
import math


def min_nodes_for_height(h: int) -> int:
    """
    Minimum number of nodes an AVL tree of height ``h`` can hold.

    Follows the recurrence N(h) = N(h-1) + N(h-2) + 1 with N(0) = 0 and
    N(1) = 1 (the Fibonacci trees).

    Raises:
        ValueError: If h is negative.
    """
    if h < 0:
        raise ValueError("h must be non-negative")
    prev, cur = 0, 1
    if h == 0:
        return prev
    for _ in range(h - 1):
        prev, cur = cur, cur + prev + 1
    return cur


def max_height_for_size(n: int) -> int:
    """
    Greatest height any AVL tree with ``n`` nodes can have.

    This is the largest h with ``min_nodes_for_height(h) <= n``; it grows
    as roughly 1.44 · log2(n + 2).
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    h = 0
    while min_nodes_for_height(h + 1) <= n:
        h += 1
    return h


def min_height_for_size(n: int) -> int:
    """Height of a perfectly balanced binary tree with ``n`` nodes."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return math.ceil(math.log2(n + 1)) if n > 0 else 0
