"""Order-statistic queries for AVL trees.

Provides :class:`AVLOrderStatsMixin`, a mixin class that adds rank
counting and k-th smallest selection to :class:`AVLTreeBase`.

+------------------------+--------------------------------------------+
| Operation              | Time                                       |
+========================+============================================+
| ``size``               | O(1)                                       |
| ``count_less``         | O(h)  (cached subtree sizes)               |
| ``count_greater``      | O(h)                                       |
| ``rank``               | O(h)                                       |
| ``k_smallest``         | O(n) time, O(1) extra space (Morris)       |
+------------------------+--------------------------------------------+

``k_smallest`` threads the tree while it runs. It is logically a read
but must be serialized like a write when the tree is shared.
"""

from __future__ import annotations

from typing import Any, Optional, TYPE_CHECKING

from avl_trees.balance import size as subtree_size
from avl_trees.base import AVLNode, InvalidArgumentError
from avl_trees.navigation import search_node
from avl_trees.traversal import morris_inorder

if TYPE_CHECKING:
    from avl_trees.avl_tree_base import AVLTreeBase


def count_less_node(node: Optional[AVLNode], x: Any) -> int:
    """Number of keys strictly less than ``x`` in *node*'s subtree."""
    if node is None:
        return 0
    if node.value == x:
        return subtree_size(node.left)
    if node.value < x:
        return 1 + subtree_size(node.left) + count_less_node(node.right, x)
    return count_less_node(node.left, x)


def count_greater_node(node: Optional[AVLNode], x: Any) -> int:
    """Number of keys strictly greater than ``x`` in *node*'s subtree."""
    if node is None:
        return 0
    if node.value == x:
        return subtree_size(node.right)
    if x < node.value:
        return 1 + subtree_size(node.right) + count_greater_node(node.left, x)
    return count_greater_node(node.right, x)


def k_smallest_node(root: Optional[AVLNode], k: int) -> Optional[AVLNode]:
    """
    Return the k-th smallest node (1-indexed) of *root*'s subtree using a
    Morris in-order walk, or None if the subtree has fewer than k nodes.

    Closing the traversal generator restores every thread before this
    function returns.
    """
    traversal = morris_inorder(root)
    try:
        for count, node in enumerate(traversal, start=1):
            if count == k:
                return node
    finally:
        traversal.close()
    return None


class AVLOrderStatsMixin:
    """Mixin that contributes order-statistic queries to *AVLTreeBase*."""

    def size(self: "AVLTreeBase") -> int:
        """Number of keys stored in the tree."""
        return self.element_count

    def count_less(self: "AVLTreeBase", value: Any) -> int:
        """
        Number of keys strictly less than ``value``.

        Raises:
            TypeError: If value is None; None has no position among the keys.
        """
        if value is None:
            raise TypeError("count_less(): value must not be None")
        return count_less_node(self.root, value)

    def count_greater(self: "AVLTreeBase", value: Any) -> int:
        """Number of keys strictly greater than ``value``. Raises TypeError for None."""
        if value is None:
            raise TypeError("count_greater(): value must not be None")
        return count_greater_node(self.root, value)

    def rank(self: "AVLTreeBase", value: Any) -> Optional[int]:
        """1-based position of ``value`` in sorted order, or None if absent (always for None)."""
        if search_node(self.root, value) is None:
            return None
        return count_less_node(self.root, value) + 1

    def k_smallest(self: "AVLTreeBase", k: int) -> Any:
        """
        Return the k-th smallest key (1-indexed).

        Args:
            k (int): Position in ascending order, ``1 <= k <= size()``.

        Returns:
            The k-th smallest key.

        Raises:
            InvalidArgumentError: If k is not an int or lies outside
                ``[1, size()]``.
        """
        if isinstance(k, bool) or not isinstance(k, int):
            raise InvalidArgumentError(f"k_smallest(): k must be an int, got {type(k).__name__}")
        if k < 1 or k > self.element_count:
            raise InvalidArgumentError(
                f"k_smallest(): impossible value for k={k} with {self.element_count} elements"
            )
        node = k_smallest_node(self.root, k)
        return node.value
