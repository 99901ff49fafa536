"""Test fixtures for BSTreeLib consumers.

These fixtures provide controlled access to a tree's internal structure
for testing purposes without exposing node links as part of the public
API.
"""

from typing import Any, Dict, List, Optional, Tuple

from ..core.node import Node
from ..core.tree import BSTree

# (data, left_shape, right_shape), or None for an absent subtree
Shape = Optional[Tuple[Any, Any, Any]]


class TreeTestHelper:
    """Public test fixture for structural verification.

    Example:
        tree = build_tree([5, 3, 8])
        helper = TreeTestHelper(tree)

        assert helper.check_invariants() == []
        assert helper.shape() == (5, (3, None, None), (8, None, None))
    """

    def __init__(self, tree: BSTree):
        """Initialize with the tree under test.

        Args:
            tree: BSTree to inspect
        """
        self._tree = tree

    def root_value(self) -> Any:
        """Value held by the root node, or None for an empty tree."""
        root = self._tree._root
        return root.data if root is not None else None

    def node_at(self, key: Any) -> Optional[Node]:
        """Node holding key, or None if absent."""
        return self._tree._search(key)

    def shape(self) -> Shape:
        """Nested (data, left, right) tuples describing the tree.

        Built recursively, so meant for the small trees tests spell out
        by hand.
        """
        def _shape(node: Optional[Node]) -> Shape:
            if node is None:
                return None
            return (node.data, _shape(node.left), _shape(node.right))

        return _shape(self._tree._root)

    def count_reachable(self) -> int:
        """Number of nodes reachable from the root."""
        return sum(1 for _ in self._tree.walk('pre_order'))

    def is_ordered(self) -> bool:
        """Check the ordering invariant.

        In-order values of a valid tree are strictly ascending, which
        also rules out duplicate keys.
        """
        values = list(self._tree.values('in_order'))
        return all(a < b for a, b in zip(values, values[1:]))

    def check_invariants(self) -> List[str]:
        """Validate ordering and size bookkeeping.

        Returns:
            List of violations (empty if the tree is consistent)
        """
        errors = []

        if not self.is_ordered():
            errors.append("in-order values are not strictly ascending")

        reachable = self.count_reachable()
        if reachable != self._tree.size():
            errors.append(
                f"size() is {self._tree.size()} but {reachable} nodes are reachable"
            )

        if self._tree.is_empty() != (self._tree._root is None):
            errors.append("is_empty() disagrees with root presence")

        return errors

    def get_summary(self) -> Dict[str, Any]:
        """Returns high-level structural state for testing.

        Returns:
            Dictionary containing:
            - size: Node count reported by the tree
            - reachable: Nodes actually reachable from the root
            - root: Root value (None when empty)
            - height: Tree height
            - cached_metrics: Entries currently held by the metric cache
        """
        return {
            'size': self._tree.size(),
            'reachable': self.count_reachable(),
            'root': self.root_value(),
            'height': self._tree.height(),
            'cached_metrics': self._tree.get_cache_stats()['cache_size'],
        }
