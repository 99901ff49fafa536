"""Tree traversal strategies for BSTreeLib.

Traversers implement different algorithms for walking a binary search
tree. Every traverser is iterative (explicit stack or queue), so a
degenerate chain deeper than the interpreter's recursion limit is
walked like any other tree.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Tuple

from .node import Node


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Traversers yield ``(node, depth)`` pairs where depth is counted in
    edges from the node handed to ``traverse``.
    """

    @abstractmethod
    def traverse(self,
                 root: Optional[Node],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        """Traverse the subtree rooted at root.

        Args:
            root: Starting node (None means an empty tree)
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        if max_depth is None:
            return True
        return depth < max_depth


class InOrderTraverser(TreeTraverser):
    """In-order traversal: left subtree, node, right subtree.

    On a binary search tree this yields nodes in ascending key order.
    """

    def traverse(self,
                 root: Optional[Node],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        stack: List[Tuple[Node, int]] = []
        node, depth = root, 0

        while stack or node is not None:
            # Slide down the left spine, remembering each ancestor
            while node is not None:
                stack.append((node, depth))
                node = node.left if self._should_explore(depth, max_depth) else None
                depth += 1

            node, depth = stack.pop()
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                node, depth = node.right, depth + 1
            else:
                node = None


class PreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal: node, left subtree, right subtree."""

    def traverse(self,
                 root: Optional[Node],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        if root is None:
            return
        stack: List[Tuple[Node, int]] = [(root, 0)]

        while stack:
            node, depth = stack.pop()
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                # Right goes in first so left is popped first
                if node.right is not None:
                    stack.append((node.right, depth + 1))
                if node.left is not None:
                    stack.append((node.left, depth + 1))


class PostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal: left subtree, right subtree, node.

    Children are always yielded before their parent, which makes this the
    order for bottom-up aggregation.
    """

    def traverse(self,
                 root: Optional[Node],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        stack: List[Tuple[Node, int]] = []
        node, depth = root, 0
        last_yielded: Optional[Node] = None

        while stack or node is not None:
            if node is not None:
                stack.append((node, depth))
                node = node.left if self._should_explore(depth, max_depth) else None
                depth += 1
                continue

            top, top_depth = stack[-1]
            right = top.right if self._should_explore(top_depth, max_depth) else None
            if right is not None and right is not last_yielded:
                node, depth = right, top_depth + 1
            else:
                stack.pop()
                last_yielded = top
                if self._should_yield(top_depth, min_depth, max_depth):
                    yield (top, top_depth)


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits all nodes at depth N, left to right, before any node at
    depth N+1.
    """

    def traverse(self,
                 root: Optional[Node],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        if root is None:
            return
        queue: Deque[Tuple[Node, int]] = deque([(root, 0)])

        while queue:
            node, depth = queue.popleft()
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                if node.left is not None:
                    queue.append((node.left, depth + 1))
                if node.right is not None:
                    queue.append((node.right, depth + 1))


class StackOrderTraverser(TreeTraverser):
    """Stack-based walk kept for callers relying on the legacy level order.

    Pops a node, visits it, then pushes its left and right children. The
    right child is therefore visited next, giving a depth-first pre-order
    that explores right subtrees first. This is not level order.
    """

    def traverse(self,
                 root: Optional[Node],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        if root is None:
            return
        stack: List[Tuple[Node, int]] = [(root, 0)]

        while stack:
            node, depth = stack.pop()
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                if node.left is not None:
                    stack.append((node.left, depth + 1))
                if node.right is not None:
                    stack.append((node.right, depth + 1))


# Factory function for creating traversers by name
def create_traverser(strategy: str) -> TreeTraverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: Name of traversal strategy (in_order, pre_order,
            post_order, bfs, stack)

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'in_order': InOrderTraverser,
        'inorder': InOrderTraverser,
        'pre_order': PreOrderTraverser,
        'dfs_pre': PreOrderTraverser,
        'post_order': PostOrderTraverser,
        'dfs_post': PostOrderTraverser,
        'bfs': BreadthFirstTraverser,
        'breadth_first': BreadthFirstTraverser,
        'level': BreadthFirstTraverser,
        'level_order': BreadthFirstTraverser,
        'stack': StackOrderTraverser,
    }

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower]()
