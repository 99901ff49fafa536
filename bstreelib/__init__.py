"""BSTreeLib - Unbalanced Binary Search Tree Library.

BSTreeLib provides an ordered container of unique keys with in-order and
level-order traversal, plus structural metrics (depth, height, diameter).

    from bstreelib import BSTree

    tree = BSTree()
    for key in (5, 3, 8, 1, 4):
        tree.insert(key)
    tree.height()     # 2
    tree.depth(1)     # 2
    tree.diameter()   # 3

The tree never rebalances and is not thread-safe; callers that share a
tree between threads must serialize access themselves.
"""

__version__ = "0.1.0"

from .errors import (
    BSTreeError,
    EmptyTreeError,
    KeyNotFoundError,
    ConfigurationError,
)
from .config import TreeConfig, MetricsConfig, LevelOrder
from .caching import MetricsCache
from .core import (
    Node,
    SearchTree,
    Visitor,
    TreeTraverser,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    BreadthFirstTraverser,
    StackOrderTraverser,
    create_traverser,
    BSTree,
)
from .api import (
    build_tree,
    collect_values,
    find_values,
    get_leaf_values,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Errors
    "BSTreeError",
    "EmptyTreeError",
    "KeyNotFoundError",
    "ConfigurationError",
    # Config
    "TreeConfig",
    "MetricsConfig",
    "LevelOrder",
    "MetricsCache",
    # Core
    "Node",
    "SearchTree",
    "Visitor",
    "TreeTraverser",
    "InOrderTraverser",
    "PreOrderTraverser",
    "PostOrderTraverser",
    "BreadthFirstTraverser",
    "StackOrderTraverser",
    "create_traverser",
    "BSTree",
    # API
    "build_tree",
    "collect_values",
    "find_values",
    "get_leaf_values",
    "get_tree_stats",
]
