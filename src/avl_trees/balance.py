"""Balancing engine for AVL trees.

Heights and subtree sizes are cached on every node, so the balance
factor of a node is available in constant time and a rotation only
refreshes the two or three nodes whose children changed.

+---------------------------+----------------------------------------------+
| Operation                 | Time                                         |
+===========================+==============================================+
| ``height``                | O(1)  (cached)                               |
| ``compute_height``        | O(n)  (full walk, verification only)         |
| ``balance_factor``        | O(1)                                         |
| ``refresh``               | O(1)                                         |
| ``rotate_right``          | O(1)                                         |
| ``rotate_left``           | O(1)                                         |
| ``rotate_left_right``     | O(1)                                         |
| ``rotate_right_left``     | O(1)                                         |
| ``balance``               | O(1)                                         |
+---------------------------+----------------------------------------------+
"""

from __future__ import annotations
from typing import Optional

from avl_trees.base import AVLNode, debug_log


def height(node: Optional[AVLNode]) -> int:
    """Return the cached height of *node*; an empty subtree has height 0."""
    return node.height if node is not None else 0


def size(node: Optional[AVLNode]) -> int:
    """Return the cached node count of *node*'s subtree."""
    return node.size if node is not None else 0


def compute_height(node: Optional[AVLNode]) -> int:
    """Recompute the height of *node* from scratch, ignoring cached values."""
    if node is None:
        return 0
    return 1 + max(compute_height(node.left), compute_height(node.right))


def balance_factor(node: AVLNode) -> int:
    """Left subtree height minus right subtree height. *node* must not be None."""
    return height(node.left) - height(node.right)


def refresh(node: AVLNode) -> AVLNode:
    """Recompute *node*'s cached height and size from its children."""
    left = node.left
    right = node.right
    lh = left.height if left is not None else 0
    rh = right.height if right is not None else 0
    node.height = 1 + (lh if lh > rh else rh)
    node.size = 1 + (left.size if left is not None else 0) + (right.size if right is not None else 0)
    return node


def rotate_right(node: AVLNode) -> AVLNode:
    """
    Fix a left-heavy subtree.

    The left child is promoted to subtree root, *node* becomes its right
    child and the promoted node's former right subtree becomes *node*'s
    left subtree.

    Returns:
        AVLNode: The new subtree root.
    """
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    refresh(node)
    refresh(pivot)
    debug_log("rotate_right: %s promoted over %s", pivot.value, node.value)
    return pivot


def rotate_left(node: AVLNode) -> AVLNode:
    """Mirror image of :func:`rotate_right`; fixes a right-heavy subtree."""
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    refresh(node)
    refresh(pivot)
    debug_log("rotate_left: %s promoted over %s", pivot.value, node.value)
    return pivot


def rotate_left_right(node: AVLNode) -> AVLNode:
    """Left-rotate the left child, then right-rotate *node*."""
    node.left = rotate_left(node.left)
    return rotate_right(node)


def rotate_right_left(node: AVLNode) -> AVLNode:
    """Right-rotate the right child, then left-rotate *node*."""
    node.right = rotate_right(node.right)
    return rotate_left(node)


def balance(node: AVLNode) -> AVLNode:
    """
    Restore the AVL property at *node*, assuming both children already
    satisfy it and their heights differ by at most two.

    Refreshes the cached height and size of *node* first, so callers can
    invoke it directly after re-attaching a child.

    Returns:
        AVLNode: The (possibly new) root of the subtree.
    """
    refresh(node)
    bf = balance_factor(node)
    if bf > 1:
        # Left-heavy; a balanced left child takes the single rotation
        if balance_factor(node.left) >= 0:
            return rotate_right(node)
        return rotate_left_right(node)
    if bf < -1:
        # Right-heavy
        if balance_factor(node.right) > 0:
            return rotate_right_left(node)
        return rotate_left(node)
    return node
