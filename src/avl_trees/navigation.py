"""Navigation helpers for AVL trees.

Provides :class:`AVLNavigationMixin`, a mixin class that adds ``search``,
``minimum``, ``maximum``, ``successor`` and ``predecessor`` to
:class:`AVLTreeBase`, together with the node-level descents they use.

+------------------------+--------------------------------------------+
| Operation              | Time (h = height ≈ 1.44 log n)             |
+========================+============================================+
| ``search``             | O(h)                                       |
| ``minimum``            | O(h)                                       |
| ``maximum``            | O(h)                                       |
| ``successor``          | O(h)                                       |
| ``predecessor``        | O(h)                                       |
+------------------------+--------------------------------------------+
"""

from __future__ import annotations

from typing import Any, Optional, TYPE_CHECKING

from avl_trees.base import AVLNode

if TYPE_CHECKING:
    from avl_trees.avl_tree_base import AVLTreeBase


def search_node(node: Optional[AVLNode], value: Any) -> Optional[AVLNode]:
    """Recursive BST descent; returns the node holding *value* or None.

    None is never stored, so searching for it finds nothing.
    """
    if node is None or value is None:
        return None
    if node.value == value:
        return node
    if value < node.value:
        return search_node(node.left, value)
    return search_node(node.right, value)


def minimum_node(node: AVLNode) -> AVLNode:
    """Return the leftmost node of a non-empty subtree."""
    current = node
    while current.left is not None:
        current = current.left
    return current


def maximum_node(node: AVLNode) -> AVLNode:
    """Return the rightmost node of a non-empty subtree."""
    current = node
    while current.right is not None:
        current = current.right
    return current


class AVLNavigationMixin:
    """Mixin that contributes navigation / query methods to *AVLTreeBase*."""

    def search(self: "AVLTreeBase", value: Any) -> Optional[AVLNode]:
        """
        Searches for the node holding ``value``.

        Args:
            value: The key to search for.

        Returns:
            Optional[AVLNode]: The matching node, or None if the key is absent.
        """
        return search_node(self.root, value)

    def minimum(self: "AVLTreeBase") -> Optional[AVLNode]:
        """Node with the smallest key, or None for an empty tree."""
        if self.root is None:
            return None
        return minimum_node(self.root)

    def maximum(self: "AVLTreeBase") -> Optional[AVLNode]:
        """Node with the greatest key, or None for an empty tree."""
        if self.root is None:
            return None
        return maximum_node(self.root)

    def min_value(self: "AVLTreeBase") -> Any:
        node = self.minimum()
        return node.value if node is not None else None

    def max_value(self: "AVLTreeBase") -> Any:
        node = self.maximum()
        return node.value if node is not None else None

    def successor(self: "AVLTreeBase", value: Any) -> Any:
        """
        Returns the smallest key strictly greater than ``value``.

        ``value`` itself need not be present in the tree.

        Returns:
            The successor key, or None if no greater key exists.

        Raises:
            TypeError: If value is None.
        """
        if value is None:
            raise TypeError("successor(): value must not be None")
        candidate = None
        cur = self.root
        while cur is not None:
            if value < cur.value:
                candidate = cur
                cur = cur.left
            else:
                cur = cur.right
        return candidate.value if candidate is not None else None

    def predecessor(self: "AVLTreeBase", value: Any) -> Any:
        """
        Returns the greatest key strictly smaller than ``value``, or None.
        Raises TypeError if value is None.
        """
        if value is None:
            raise TypeError("predecessor(): value must not be None")
        candidate = None
        cur = self.root
        while cur is not None:
            if cur.value < value:
                candidate = cur
                cur = cur.right
            else:
                cur = cur.left
        return candidate.value if candidate is not None else None
