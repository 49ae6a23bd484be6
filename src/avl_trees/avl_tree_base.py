"""AVL-tree base implementation"""

from __future__ import annotations
from typing import Any, Iterator, List, Optional, Type

from avl_trees.base import AbstractSetDataStructure, AVLNode
from avl_trees.balance import height as node_height
from avl_trees.delete import AVLDeleteMixin
from avl_trees.insert import AVLInsertMixin
from avl_trees.navigation import AVLNavigationMixin, search_node
from avl_trees.order_stats import AVLOrderStatsMixin
from avl_trees.traversal import iter_inorder, iter_postorder, iter_preorder


class AVLTreeBase(
    AVLInsertMixin,
    AVLDeleteMixin,
    AVLNavigationMixin,
    AVLOrderStatsMixin,
    AbstractSetDataStructure,
):
    """
    A height-balanced binary search tree over unique keys.

    The tree handle owns the root node and tracks the number of stored keys.
    All structural operations reassign ``root`` to the subtree root returned
    by the node-level recursion, since rotations may replace it.

    Attributes:
        root (Optional[AVLNode]): The root node, or None if the tree is empty.
        element_count (int): Number of keys stored in the tree.
    """

    # Node type used by insert and bulk construction
    NodeClass: Type[AVLNode] = AVLNode

    def __init__(self, root: Optional[AVLNode] = None, element_count: int = 0):
        self.root: Optional[AVLNode] = root
        self.element_count: int = element_count

    def is_empty(self) -> bool:
        return self.root is None

    def height(self) -> int:
        """Height of the whole tree; 0 when empty."""
        return node_height(self.root)

    def clear(self) -> None:
        self.root = None
        self.element_count = 0

    # Traversals
    def inorder(self) -> List[Any]:
        return list(iter_inorder(self.root))

    def preorder(self) -> List[Any]:
        return list(iter_preorder(self.root))

    def postorder(self) -> List[Any]:
        return list(iter_postorder(self.root))

    def __iter__(self) -> Iterator[Any]:
        return iter_inorder(self.root)

    def __len__(self) -> int:
        return self.element_count

    def __contains__(self, value: Any) -> bool:
        return search_node(self.root, value) is not None

    def __str__(self):
        if self.is_empty():
            return "Empty AVLTree"
        return f"AVLTree(root={self.root}, size={self.element_count}, height={self.height()})"

    __repr__ = __str__

    def print_structure(self, indent: int = 0, max_depth: Optional[int] = None) -> str:
        """
        Render the tree shape as an indented string, right subtree first,
        for use in assertion and log messages.
        """
        if self.is_empty():
            return f"{' ' * indent}Empty {self.__class__.__name__}"

        lines = []

        def collect(node: Optional[AVLNode], depth: int, label: str) -> None:
            if node is None:
                return
            prefix = ' ' * (indent + 4 * depth)
            if max_depth is not None and depth > max_depth:
                lines.append(f"{prefix}... (max depth reached)")
                return
            collect(node.right, depth + 1, "R")
            lines.append(f"{prefix}{label}: {node.short_value()} (h={node.height}, n={node.size})")
            collect(node.left, depth + 1, "L")

        collect(self.root, 0, "Root")
        return "\n".join(lines)
