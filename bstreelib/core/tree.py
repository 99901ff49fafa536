"""Unbalanced binary search tree for BSTreeLib.

BSTree stores unique, totally ordered keys. Ordering relies only on the
``<`` operator: ``a < b`` goes left, ``b < a`` goes right, anything else
is treated as equal. Inserting an equal key overwrites the stored value
in place, so the tree never holds duplicates.

The tree never rebalances; its shape is determined entirely by the order
of insertions and removals. Nodes keep no parent link, so removal finds
the parent of a node with a fresh walk down from the root.
"""

import logging
from typing import Any, Iterator, Optional, Tuple, Union

from ..caching import MetricsCache
from ..config import LevelOrder, TreeConfig
from ..errors import ConfigurationError, EmptyTreeError, KeyNotFoundError
from . import metrics
from .base import E, SearchTree, Visitor
from .node import Node
from .traverser import create_traverser

logger = logging.getLogger(__name__)


class BSTree(SearchTree[E]):
    """A binary search tree with structural metrics.

    Example:
        >>> tree = BSTree()
        >>> for key in (5, 3, 8, 1, 4):
        ...     tree.insert(key)
        >>> list(tree)
        [1, 3, 4, 5, 8]
        >>> tree.height(), tree.depth(1), tree.diameter()
        (2, 2, 3)
    """

    def __init__(self, config: Optional[TreeConfig] = None):
        """Construct an empty tree.

        Args:
            config: Tree configuration (defaults to TreeConfig())

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        self._config = config or TreeConfig()

        config_errors = self._config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self._root: Optional[Node] = None
        self._size = 0
        self._metrics = MetricsCache(
            max_size=self._config.metrics.cache_size,
            enabled=self._config.metrics.cache_enabled,
        )

    @classmethod
    def new(cls, config: Optional[TreeConfig] = None) -> 'BSTree':
        """Produce an empty tree."""
        return cls(config)

    @property
    def config(self) -> TreeConfig:
        return self._config

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_empty(self) -> bool:
        return self._size == 0

    def size(self) -> int:
        return self._size

    def contains(self, key: E) -> bool:
        return self._search(key) is not None

    def retrieve(self, key: E) -> E:
        """Return the stored value that compares equal to key.

        Raises:
            EmptyTreeError: If the tree is empty
            KeyNotFoundError: If no stored value equals key
        """
        if self._size == 0:
            raise EmptyTreeError("retrieve")
        node = self._search(key)
        if node is None:
            raise KeyNotFoundError(key)
        return node.data

    def min(self) -> E:
        """Smallest stored value.

        Raises:
            EmptyTreeError: If the tree is empty
        """
        if self._root is None:
            raise EmptyTreeError("min")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.data

    def max(self) -> E:
        """Largest stored value.

        Raises:
            EmptyTreeError: If the tree is empty
        """
        if self._root is None:
            raise EmptyTreeError("max")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.data

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def insert(self, item: E) -> None:
        """Insert item, or overwrite the stored value of an equal key.

        A single descent from the root either finds an equal key (the
        stored value is replaced and size is unchanged) or reaches a
        missing child, where a new node is attached.
        """
        if self._root is None:
            self._root = Node(item)
            self._size += 1
            self._metrics.invalidate()
            logger.debug("Inserted %r as root", item)
            return

        node = self._root
        while True:
            if item < node.data:
                if node.left is None:
                    node.left = Node(item)
                    break
                node = node.left
            elif node.data < item:
                if node.right is None:
                    node.right = Node(item)
                    break
                node = node.right
            else:
                # Key already exists (update)
                node.data = item
                logger.debug("Overwrote stored value for key %r", item)
                return

        self._size += 1
        self._metrics.invalidate()
        logger.debug("Inserted %r below %r", item, node.data)

    def remove(self, key: E) -> None:
        """Remove the node holding key. Absent keys are silently ignored."""
        node = self._search(key)
        if node is None:
            return
        self._unlink(node)
        self._size -= 1
        self._metrics.invalidate()

    def clear(self) -> None:
        """Remove every node from the tree."""
        self._root = None
        self._size = 0
        self._metrics.invalidate()

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def traverse(self, visitor: Visitor) -> None:
        """Apply visitor to each stored value in ascending key order.

        Raises:
            TypeError: If visitor is not callable
        """
        self._check_visitor(visitor)
        for value in self.values('in_order'):
            visitor(value)

    def level_traverse(self, visitor: Visitor,
                       order: Optional[Union[LevelOrder, str]] = None) -> None:
        """Apply visitor to every stored value, level by level.

        Args:
            visitor: Callback applied to each stored value
            order: LevelOrder (or its name) overriding the configured
                ``level_order``. LevelOrder.STACK gives the legacy
                stack-based order, which is depth-first.

        Raises:
            TypeError: If visitor is not callable
            ValueError: If order names an unknown LevelOrder
        """
        self._check_visitor(visitor)
        level_order = LevelOrder.parse(order if order is not None else self._config.level_order)
        for value in self.values(level_order.value):
            visitor(value)

    def values(self, strategy: str = 'in_order') -> Iterator[E]:
        """Iterate over stored values in the named traversal order.

        Args:
            strategy: in_order, pre_order, post_order, bfs or stack
        """
        for node, _ in self.walk(strategy):
            yield node.data

    def walk(self,
             strategy: str = 'in_order',
             max_depth: Optional[int] = None,
             min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        """Yield (node, depth) pairs in the named traversal order.

        Nodes are yielded for inspection. Changing a node's data or links
        bypasses the tree's bookkeeping and is unsupported.

        Args:
            strategy: in_order, pre_order, post_order, bfs or stack
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Raises:
            ValueError: If strategy is not recognized
        """
        traverser = create_traverser(strategy)
        return traverser.traverse(self._root, max_depth=max_depth, min_depth=min_depth)

    # ------------------------------------------------------------------
    # Structural metrics
    # ------------------------------------------------------------------

    def depth(self, key: E) -> int:
        """Depth of key, or -1-d if absent.

        Returns the number of edges from the root to the node holding
        key. For an absent key, returns -1 - d where d is the depth at
        which key would be inserted. An empty tree gives -1.
        """
        return self._metrics.get_or_compute(
            ('depth', key), lambda: metrics.depth(self._root, key)
        )

    def height(self) -> int:
        """Height of the tree; -1 when empty, 0 for a single node."""
        return self._metrics.get_or_compute(
            ('height',), lambda: metrics.height(self._root)
        )

    def diameter(self) -> int:
        """Number of edges on the longest path between any two nodes."""
        return self._metrics.get_or_compute(
            ('diameter',), lambda: metrics.diameter(self._root)
        )

    def get_cache_stats(self) -> dict:
        """Statistics of the metric cache, for monitoring and debugging."""
        return self._metrics.get_cache_stats()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _search(self, key: Any) -> Optional[Node]:
        node = self._root
        while node is not None:
            if key < node.data:
                node = node.left
            elif node.data < key:
                node = node.right
            else:
                return node
        return None

    def _find_parent(self, node: Node) -> Optional[Node]:
        """Walk down from the root to the parent of node.

        Relies on the ordering invariant: node's key decides at every
        step which child leads towards it. Returns None for the root.
        """
        current = self._root
        if current is node:
            return None
        while True:
            assert current is not None, "node is not reachable from root"
            child = current.left if node.data < current.data else current.right
            if child is node:
                return current
            current = child

    def _unlink(self, node: Node) -> None:
        """Structurally remove node from the tree.

        A node with two children takes the value of its in-order
        successor, and the successor (which has no left child) is the
        node actually unlinked. Every unlink therefore splices out a node
        with at most one child.
        """
        if node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            data = successor.data
            self._unlink(successor)
            logger.debug("Replaced %r with in-order successor %r", node.data, data)
            node.data = data
            return

        replacement = node.left if node.left is not None else node.right
        parent = self._find_parent(node)
        if parent is None:
            self._root = replacement
        elif parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement
        logger.debug("Unlinked %r (%d child)", node.data, node.child_count())

    @staticmethod
    def _check_visitor(visitor: Visitor) -> None:
        if not callable(visitor):
            raise TypeError(f"visitor must be callable, got {type(visitor).__name__}")

    def __iter__(self) -> Iterator[E]:
        return self.values('in_order')

    def __repr__(self) -> str:
        return f"BSTree({list(self)})"

    def __str__(self) -> str:
        return f"BSTree(size={self._size})"
