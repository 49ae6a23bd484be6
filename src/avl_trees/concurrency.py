"""Thread-safe access to a shared AVL tree.

:class:`SynchronizedAVLTree` guards one :class:`AVLTreeBase` with a
readers-writer lock. ``insert``, ``delete`` and ``k_smallest`` run under
the write lock; ``k_smallest`` is classified as a writer because the
Morris traversal re-points right links while it runs. All other queries
share the read lock.
"""

from __future__ import annotations

import threading
from typing import Any, List, Optional, Tuple

from avl_trees.avl_tree_base import AVLTreeBase


class RWLock:
    """
    Reader-writer lock with writer preference to avoid writer starvation.
    Usage:
        with rw.read_lock(): ...
        with rw.write_lock(): ...
    """
    def __init__(self) -> None:
        self._mu = threading.Lock()
        self._ok_to_read = threading.Condition(self._mu)
        self._ok_to_write = threading.Condition(self._mu)
        self._active_readers = 0
        self._active_writers = 0
        self._waiting_writers = 0

    class _ReadCtx:
        def __init__(self, rw: "RWLock") -> None:
            self.rw = rw

        def __enter__(self):
            rw = self.rw
            with rw._mu:
                # Writers active or waiting block new readers
                while rw._active_writers or rw._waiting_writers:
                    rw._ok_to_read.wait()
                rw._active_readers += 1
            return self

        def __exit__(self, exc_type, exc, tb):
            rw = self.rw
            with rw._mu:
                rw._active_readers -= 1
                if rw._active_readers == 0:
                    rw._ok_to_write.notify()
            return False

    class _WriteCtx:
        def __init__(self, rw: "RWLock") -> None:
            self.rw = rw

        def __enter__(self):
            rw = self.rw
            with rw._mu:
                rw._waiting_writers += 1
                while rw._active_writers or rw._active_readers:
                    rw._ok_to_write.wait()
                rw._waiting_writers -= 1
                rw._active_writers = 1
            return self

        def __exit__(self, exc_type, exc, tb):
            rw = self.rw
            with rw._mu:
                rw._active_writers = 0
                if rw._waiting_writers:
                    rw._ok_to_write.notify()
                else:
                    rw._ok_to_read.notify_all()
            return False

    def read_lock(self) -> "RWLock._ReadCtx":
        return RWLock._ReadCtx(self)

    def write_lock(self) -> "RWLock._WriteCtx":
        return RWLock._WriteCtx(self)


class SynchronizedAVLTree:
    """
    An AVL tree shared between threads.

    Mutating methods return a bool instead of the ``(tree, flag)`` pair of
    :class:`AVLTreeBase`, since the inner tree must not escape the lock.
    """

    def __init__(self, tree: Optional[AVLTreeBase] = None) -> None:
        self._tree = tree if tree is not None else AVLTreeBase()
        self._rw = RWLock()

    # Writers
    def insert(self, value: Any) -> bool:
        with self._rw.write_lock():
            _, inserted = self._tree.insert(value)
        return inserted

    def delete(self, value: Any) -> bool:
        with self._rw.write_lock():
            _, removed = self._tree.delete(value)
        return removed

    def k_smallest(self, k: int) -> Any:
        with self._rw.write_lock():
            return self._tree.k_smallest(k)

    def clear(self) -> None:
        with self._rw.write_lock():
            self._tree.clear()

    # Readers
    def search(self, value: Any) -> bool:
        with self._rw.read_lock():
            return self._tree.search(value) is not None

    def __contains__(self, value: Any) -> bool:
        return self.search(value)

    def size(self) -> int:
        with self._rw.read_lock():
            return self._tree.size()

    def __len__(self) -> int:
        return self.size()

    def height(self) -> int:
        with self._rw.read_lock():
            return self._tree.height()

    def count_less(self, value: Any) -> int:
        with self._rw.read_lock():
            return self._tree.count_less(value)

    def count_greater(self, value: Any) -> int:
        with self._rw.read_lock():
            return self._tree.count_greater(value)

    def rank(self, value: Any) -> Optional[int]:
        with self._rw.read_lock():
            return self._tree.rank(value)

    def inorder(self) -> List[Any]:
        with self._rw.read_lock():
            return self._tree.inorder()

    def preorder(self) -> List[Any]:
        with self._rw.read_lock():
            return self._tree.preorder()

    def postorder(self) -> List[Any]:
        with self._rw.read_lock():
            return self._tree.postorder()

    def snapshot(self) -> Tuple[List[Any], int]:
        """Keys in order together with the element count, read atomically."""
        with self._rw.read_lock():
            return self._tree.inorder(), self._tree.size()
