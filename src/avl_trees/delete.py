"""Deletion logic for AVL trees.

Provides :class:`AVLDeleteMixin`, a mixin class that adds ``delete`` and
its recursive helper ``_delete`` to :class:`AVLTreeBase`.

+---------------------------+----------------------------------------------+
| Case                      | Action                                       |
+===========================+==============================================+
| no left child             | node replaced by its right child             |
| left child, no right      | node replaced by its left child              |
| two children              | successor value copied in, successor node    |
|                           | removed from the right subtree               |
+---------------------------+----------------------------------------------+

Every node on the path back to the root is re-balanced; unlike
insertion, a deletion may trigger a rotation at each level.
"""

from __future__ import annotations
from typing import Any, Optional, Tuple, TYPE_CHECKING

from avl_trees.balance import balance
from avl_trees.base import debug_log
from avl_trees.navigation import minimum_node

if TYPE_CHECKING:
    from avl_trees.avl_tree_base import AVLTreeBase
    from avl_trees.base import AVLNode


class AVLDeleteMixin:
    """Mixin that contributes deletion methods to *AVLTreeBase*."""

    def delete(self: "AVLTreeBase", value: Any) -> Tuple["AVLTreeBase", bool]:
        """
        Public method (O(log n)): Remove a key from the AVL tree.
        Deleting an absent key leaves the tree unchanged.

        Returns:
            Tuple[AVLTreeBase, bool]: The tree and whether a node was removed.
        """
        if self.root is None or value is None:
            return self, False
        self.root, removed = self._delete(self.root, value)
        if removed:
            self.element_count -= 1
        return self, removed

    def _delete(
        self: "AVLTreeBase", node: Optional["AVLNode"], value: Any
    ) -> Tuple[Optional["AVLNode"], bool]:
        """
        Remove ``value`` from the subtree rooted at ``node``.

        Returns:
            Tuple[Optional[AVLNode], bool]: The new subtree root (to be
            re-attached by the caller) and whether a node was removed.
        """
        if node is None:
            return None, False

        if value < node.value:
            node.left, removed = self._delete(node.left, value)
        elif node.value < value:
            node.right, removed = self._delete(node.right, value)
        else:
            if node.left is None:
                replacement = node.right
                node.right = None
                return replacement, True
            if node.right is None:
                replacement = node.left
                node.left = None
                return replacement, True

            successor = minimum_node(node.right)
            debug_log("delete: replacing %s with successor %s", node.value, successor.value)
            node.value = successor.value
            node.right, removed = self._delete(node.right, successor.value)

        if not removed:
            return node, False
        return balance(node), True
