"""Abstract search tree contract for BSTreeLib.

SearchTree lists the operations every tree in the library exposes.
BSTree is the concrete, unbalanced implementation.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, TypeVar

E = TypeVar('E')

# Callback applied to each stored value during a traversal; its return
# value is ignored.
Visitor = Callable[[E], Any]


class SearchTree(ABC, Generic[E]):
    """Ordered container of unique keys with structural queries."""

    @abstractmethod
    def is_empty(self) -> bool:
        """Return True if the tree holds no nodes."""
        pass

    @abstractmethod
    def size(self) -> int:
        """Return the number of nodes in the tree."""
        pass

    @abstractmethod
    def insert(self, item: E) -> None:
        """Insert an item, overwriting the stored value of an equal key."""
        pass

    @abstractmethod
    def remove(self, key: E) -> None:
        """Remove the node holding key; absent keys are ignored."""
        pass

    @abstractmethod
    def contains(self, key: E) -> bool:
        """Return True if a stored value compares equal to key."""
        pass

    @abstractmethod
    def retrieve(self, key: E) -> E:
        """Return the stored value equal to key.

        Raises:
            EmptyTreeError: If the tree is empty
            KeyNotFoundError: If no stored value equals key
        """
        pass

    @abstractmethod
    def traverse(self, visitor: Visitor) -> None:
        """Apply visitor to every stored value in ascending order."""
        pass

    @abstractmethod
    def level_traverse(self, visitor: Visitor) -> None:
        """Apply visitor to every stored value, level by level."""
        pass

    @abstractmethod
    def depth(self, key: E) -> int:
        """Return the depth of key, or -1-d if absent."""
        pass

    @abstractmethod
    def height(self) -> int:
        """Return the height of the tree (-1 when empty)."""
        pass

    @abstractmethod
    def diameter(self) -> int:
        """Return the number of edges on the longest path in the tree."""
        pass

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: object) -> bool:
        return self.contains(key)
