"""Insertion logic for AVL trees.

Provides :class:`AVLInsertMixin`, a mixin class that adds ``insert`` and
its recursive helper ``_insert`` to :class:`AVLTreeBase`.

The descent is O(h); on the way back every node on the search path is
re-balanced, which costs O(1) per node because heights are cached. At
most one single or double rotation actually fires per insertion.
"""

from __future__ import annotations
from typing import Any, Optional, Tuple, TYPE_CHECKING

from avl_trees.balance import balance

if TYPE_CHECKING:
    from avl_trees.avl_tree_base import AVLTreeBase
    from avl_trees.base import AVLNode


class AVLInsertMixin:
    """Mixin that contributes insertion methods to *AVLTreeBase*."""

    def insert(self: "AVLTreeBase", value: Any) -> Tuple["AVLTreeBase", bool]:
        """
        Public method (O(log n)): Insert a key into the AVL tree.
        Inserting a key that is already present leaves the tree unchanged.

        Args:
            value: The key to insert. Must be comparable with the keys
                already stored.

        Returns:
            Tuple[AVLTreeBase, bool]: The tree and whether a new node was created.

        Raises:
            TypeError: If value is None.
        """
        if value is None:
            raise TypeError("insert(): value must not be None")
        self.root, inserted = self._insert(self.root, value)
        if inserted:
            self.element_count += 1
        return self, inserted

    def _insert(
        self: "AVLTreeBase", node: Optional["AVLNode"], value: Any
    ) -> Tuple["AVLNode", bool]:
        """
        Insert ``value`` below ``node`` and return the new subtree root.

        The caller must re-attach the returned node in place of ``node``.
        """
        if node is None:
            return self.NodeClass(value), True

        if value < node.value:
            node.left, inserted = self._insert(node.left, value)
        elif node.value < value:
            node.right, inserted = self._insert(node.right, value)
        else:
            # Duplicate key
            return node, False

        if not inserted:
            return node, False
        return balance(node), True
