"""High-level API for BSTreeLib.

This module provides simple, functional interfaces for common tree
operations. These functions wrap the BSTree object API for ease of use
in simple cases.
"""

from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional

from .config import TreeConfig
from .core.tree import BSTree


def build_tree(items: Iterable[Any], config: Optional[TreeConfig] = None) -> BSTree:
    """Build a tree by inserting items in iteration order.

    Later items overwrite the stored value of earlier equal keys.

    Args:
        items: Values to insert
        config: Optional tree configuration

    Returns:
        The populated BSTree

    Example:
        >>> tree = build_tree([5, 3, 8, 1, 4])
        >>> tree.size()
        5
    """
    tree = BSTree(config)
    for item in items:
        tree.insert(item)
    return tree


def collect_values(
    tree: BSTree,
    strategy: str = 'in_order',
    max_depth: Optional[int] = None,
    min_depth: int = 0
) -> List[Any]:
    """Collect stored values in the named traversal order.

    Args:
        tree: Tree to traverse
        strategy: in_order, pre_order, post_order, bfs or stack
        max_depth: Maximum depth to traverse
        min_depth: Minimum depth before collecting values

    Returns:
        List of stored values

    Example:
        >>> collect_values(build_tree([5, 3, 8]), 'bfs')
        [5, 3, 8]
    """
    return [node.data for node, _ in tree.walk(strategy, max_depth, min_depth)]


def find_values(
    tree: BSTree,
    predicate: Callable[[Any], bool],
    strategy: str = 'in_order'
) -> Iterator[Any]:
    """Find stored values that match a predicate.

    Args:
        tree: Tree to search
        predicate: Function that returns True for matching values
        strategy: Traversal order in which matches are yielded

    Yields:
        Values that match the predicate
    """
    for node, _ in tree.walk(strategy):
        if predicate(node.data):
            yield node.data


def get_leaf_values(tree: BSTree) -> List[Any]:
    """Get the values held by leaf nodes, in ascending order."""
    return [node.data for node, _ in tree.walk('in_order') if node.is_leaf()]


def get_tree_stats(tree: BSTree) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary with size, height, diameter, leaf and internal node
        counts, and the number of nodes at each depth

    Example:
        >>> stats = get_tree_stats(build_tree([5, 3, 8, 1, 4]))
        >>> stats['height'], stats['leaf_nodes']
        (2, 3)
    """
    stats = {
        'size': tree.size(),
        'is_empty': tree.is_empty(),
        'height': tree.height(),
        'diameter': tree.diameter(),
        'leaf_nodes': 0,
        'depths': {}
    }

    for node, depth in tree.walk('bfs'):
        if node.is_leaf():
            stats['leaf_nodes'] += 1
        stats['depths'][depth] = stats['depths'].get(depth, 0) + 1

    stats['internal_nodes'] = stats['size'] - stats['leaf_nodes']
    return stats
