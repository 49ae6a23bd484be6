from abc import ABC, abstractmethod

from typing import Any, Optional, TypeVar, Generic, Tuple
import logging

from avl_trees.logging_config import get_logger

# Get logger for this module
logger = get_logger("AVLTree")


class InvalidArgumentError(ValueError):
    """Raised when an order-statistic query receives an out-of-range argument."""


class AVLNode:
    """
    A single AVL-tree node.

    The node exclusively owns its ``left`` and ``right`` subtrees. ``height``
    and ``size`` cache the subtree height and node count; they are kept
    current by :func:`avl_trees.balance.refresh` after every structural
    change below this node.
    """
    __slots__ = ("value", "left", "right", "height", "size")

    def __init__(
        self,
        value: Any,
        left: Optional["AVLNode"] = None,
        right: Optional["AVLNode"] = None,
    ) -> None:
        self.value = value
        self.left = left
        self.right = right
        self.height = 1 + max(
            left.height if left is not None else 0,
            right.height if right is not None else 0,
        )
        self.size = 1 + (left.size if left is not None else 0) + (right.size if right is not None else 0)

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def short_value(self) -> str:
        """Create a short representation of the value for display purposes."""
        if isinstance(self.value, (bytes, bytearray)):
            s = self.value.hex()
        else:
            s = str(self.value)
        return s if len(s) <= 10 else f"{s[:3]}...{s[-3:]}"

    def __repr__(self) -> str:
        cls = self.__class__.__name__
        return f"{cls}(value={self.value!r}, height={self.height}, size={self.size})"

    def __str__(self):
        cls = self.__class__.__name__
        return f"{cls}(value={self.short_value()})"


T = TypeVar("T", bound="AbstractSetDataStructure")

class AbstractSetDataStructure(ABC, Generic[T]):
    """
    Abstract base class for an ordered set of unique keys.
    """

    @abstractmethod
    def insert(self, value: Any) -> Tuple[T, bool]:
        """
        Insert a key into the set. Inserting a key already present is a no-op.

        Parameters:
            value: The key to insert.

        Returns:
            Tuple[AbstractSetDataStructure, bool]: The set instance and whether
            the key was newly inserted.
        """
        pass

    @abstractmethod
    def delete(self, value: Any) -> Tuple[T, bool]:
        """
        Delete a key from the set. Deleting an absent key is a no-op.

        Parameters:
            value: The key to delete.

        Returns:
            Tuple[AbstractSetDataStructure, bool]: The set instance and whether
            a key was removed.
        """
        pass

    @abstractmethod
    def search(self, value: Any) -> Optional[AVLNode]:
        """
        Find the node holding the given key.

        Parameters:
            value: The key to search for.

        Returns:
            Optional[AVLNode]: The matching node, or None if the key is absent.
        """
        pass


def debug_log(message, *args, **kwargs):
    """Log a debug message only if debug logging is enabled"""
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(message, *args, **kwargs)
