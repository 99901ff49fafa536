"""Structural metrics for BSTreeLib.

Pure functions over a subtree root: height, diameter and key depth.
Height and diameter share a single bottom-up pass driven by the
post-order traverser, so both are linear in the number of nodes and
never recurse.
"""

from typing import Any, Dict, Optional, Tuple

from .node import Node
from .traverser import PostOrderTraverser


def subtree_metrics(root: Optional[Node]) -> Tuple[int, int]:
    """Compute (height, diameter) for the subtree rooted at root.

    For every node, children are finished before the parent, so each
    node combines its children's results:

        height   = 1 + max(height(left), height(right))
        diameter = max((1 + height(left)) + (1 + height(right)),
                       diameter(left), diameter(right))

    An empty subtree has height -1 and diameter 0; both are measured in
    edges.

    Args:
        root: Subtree root, or None for an empty subtree

    Returns:
        Tuple of (height, diameter)
    """
    if root is None:
        return (-1, 0)

    # Finished children are popped as their parent consumes them
    heights: Dict[Node, int] = {}
    diameters: Dict[Node, int] = {}

    for node, _ in PostOrderTraverser().traverse(root):
        left_height = heights.pop(node.left, -1)
        right_height = heights.pop(node.right, -1)
        left_diameter = diameters.pop(node.left, 0)
        right_diameter = diameters.pop(node.right, 0)

        heights[node] = 1 + max(left_height, right_height)
        through_node = (1 + left_height) + (1 + right_height)
        diameters[node] = max(through_node, left_diameter, right_diameter)

    return (heights[root], diameters[root])


def height(root: Optional[Node]) -> int:
    """Height of the subtree rooted at root (-1 when empty)."""
    return subtree_metrics(root)[0]


def diameter(root: Optional[Node]) -> int:
    """Edges on the longest path between two nodes of the subtree."""
    return subtree_metrics(root)[1]


def depth(root: Optional[Node], key: Any) -> int:
    """Depth of key below root, or a negative sentinel when absent.

    A present key yields the number of edges from root to its node. An
    absent key yields ``-1 - d``, where d is the number of steps the
    failed descent took, i.e. the depth at which key would be inserted.

    Args:
        root: Subtree root, or None for an empty subtree
        key: Search key

    Returns:
        Non-negative depth if found, otherwise -1 - d
    """
    if root is None:
        return -1
    if root.data is key:
        return 0

    steps = 0
    node = root
    while node is not None:
        if key < node.data:
            node = node.left
        elif node.data < key:
            node = node.right
        else:
            return steps
        steps += 1

    return -1 - steps
