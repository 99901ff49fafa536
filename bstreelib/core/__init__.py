"""Core abstractions for BSTreeLib.

This package contains the node record, the abstract search tree
contract, the traversal strategies, the metric algorithms and the
BSTree implementation built from them.
"""

from .node import Node
from .base import SearchTree, Visitor
from .traverser import (
    TreeTraverser,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    BreadthFirstTraverser,
    StackOrderTraverser,
    create_traverser,
)
from .tree import BSTree

__all__ = [
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
]
