#!/usr/bin/env python3
"""Demo script for BSTreeLib.

Builds a small tree, prints it in several traversal orders and reports
its structural metrics.
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from bstreelib import (
    BSTree,
    KeyNotFoundError,
    LevelOrder,
    get_tree_stats,
)


def demo_traversals(tree: BSTree):
    """Show the visitor-based traversals."""
    print("\n=== Traversals ===")
    tree.traverse(lambda value: print(f"  in-order: {value}"))

    levels = []
    tree.level_traverse(levels.append)
    print(f"  level order: {levels}")

    legacy = []
    tree.level_traverse(legacy.append, order=LevelOrder.STACK)
    print(f"  stack order: {legacy}")


def demo_metrics(tree: BSTree):
    """Show depth, height and diameter."""
    print("\n=== Metrics ===")
    for key in (5, 1, 6):
        depth = tree.depth(key)
        if depth >= 0:
            print(f"  depth({key}) = {depth}")
        else:
            print(f"  {key} absent, would be inserted at depth {-1 - depth}")

    stats = get_tree_stats(tree)
    print(f"  height = {stats['height']}, diameter = {stats['diameter']}")
    print(f"  leaves = {stats['leaf_nodes']}, nodes per depth = {stats['depths']}")


def demo_removal(tree: BSTree):
    """Remove a node with two children and look up a missing key."""
    print("\n=== Removal ===")
    tree.remove(3)
    print(f"  after remove(3): {list(tree)} (size {tree.size()})")

    try:
        tree.retrieve(3)
    except KeyNotFoundError as e:
        print(f"  {e}")


def main():
    tree = BSTree()
    for key in (5, 3, 8, 1, 4):
        tree.insert(key)
    print(f"Built {tree!r}")

    demo_traversals(tree)
    demo_metrics(tree)
    demo_removal(tree)


if __name__ == "__main__":
    main()
