"""Traversal helpers for AVL trees.

The depth-first generators are pure reads. :func:`morris_inorder` walks
the tree in order with O(1) extra space by temporarily threading the
right link of each in-order predecessor back to its successor; it is a
structural mutation while it runs and must not interleave with any other
access to the same tree.
"""

from __future__ import annotations

from typing import Any, Iterator, Optional, Tuple

from avl_trees.base import AVLNode


def iter_inorder(node: Optional[AVLNode]) -> Iterator[Any]:
    """Yield the keys of *node*'s subtree in ascending order."""
    if node is None:
        return
    yield from iter_inorder(node.left)
    yield node.value
    yield from iter_inorder(node.right)


def iter_preorder(node: Optional[AVLNode]) -> Iterator[Any]:
    """Yield keys node-first, then the left and right subtrees."""
    if node is None:
        return
    yield node.value
    yield from iter_preorder(node.left)
    yield from iter_preorder(node.right)


def iter_postorder(node: Optional[AVLNode]) -> Iterator[Any]:
    """Yield keys of both subtrees before the node itself."""
    if node is None:
        return
    yield from iter_postorder(node.left)
    yield from iter_postorder(node.right)
    yield node.value


def count_nodes(node: Optional[AVLNode]) -> int:
    """Count the nodes of a subtree by walking it, ignoring cached sizes."""
    if node is None:
        return 0
    return 1 + count_nodes(node.left) + count_nodes(node.right)


def _morris_step(curr: AVLNode) -> Tuple[Optional[AVLNode], Optional[AVLNode]]:
    """
    Advance the Morris traversal by one step.

    Returns:
        Tuple[Optional[AVLNode], Optional[AVLNode]]: ``(visited, next_curr)``
        where ``visited`` is the node emitted in order at this step (or
        None if the step only created a thread) and ``next_curr`` is the
        node to continue from.
    """
    if curr.left is None:
        return curr, curr.right

    pre = curr.left
    while pre.right is not None and pre.right is not curr:
        pre = pre.right

    if pre.right is None:
        # Thread the predecessor back to curr and descend
        pre.right = curr
        return None, curr.left

    # Second arrival through the thread: remove it and visit curr
    pre.right = None
    return curr, curr.right


def morris_inorder(root: Optional[AVLNode]) -> Iterator[AVLNode]:
    """
    Yield the nodes of *root*'s subtree in order using Morris traversal.

    Threads are removed on every exit path: when the generator is closed
    or garbage-collected before exhaustion, the remaining steps run
    without yielding until every thread has been consumed, so the tree
    shape is restored when the generator finishes.
    """
    curr = root
    try:
        while curr is not None:
            visited, curr = _morris_step(curr)
            if visited is not None:
                yield visited
    finally:
        while curr is not None:
            _, curr = _morris_step(curr)
