"""Node record for BSTreeLib.

A Node is a plain data container: one stored value and links to at most
two children. It keeps no reference to its parent; the tree recomputes
parents by walking down from the root.
"""

from typing import Any, Optional


class Node:
    """A node of a binary search tree.

    Attributes:
        data: The stored value, which is also the node's key
        left: Subtree holding strictly smaller keys
        right: Subtree holding strictly greater keys
    """

    __slots__ = ('data', 'left', 'right')

    def __init__(self, data: Any):
        self.data = data
        self.left: Optional['Node'] = None
        self.right: Optional['Node'] = None

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self.left is None and self.right is None

    def child_count(self) -> int:
        return (self.left is not None) + (self.right is not None)

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}(data={self.data!r})"
