"""Unit tests for edge cases in BSTreeLib.

Tests degenerate chains deeper than the recursion limit, randomized
operation sequences checked against a reference set, and unusual
element types.
"""

import random
import sys

import pytest

from bstreelib import BSTree, build_tree
from bstreelib.testing import TreeTestHelper


class TestRandomizedOperations:
    """Random insert/remove sequences checked against a plain set."""

    @pytest.mark.parametrize("seed", [0, 1, 7, 42, 1234])
    def test_matches_reference_set(self, seed):
        rng = random.Random(seed)
        tree = BSTree()
        reference = set()

        for _ in range(300):
            key = rng.randint(0, 60)
            if rng.random() < 0.6:
                tree.insert(key)
                reference.add(key)
            else:
                size_before = tree.size()
                tree.remove(key)
                expected = size_before - 1 if key in reference else size_before
                reference.discard(key)
                assert tree.size() == expected
                assert not tree.contains(key)

        helper = TreeTestHelper(tree)
        assert helper.check_invariants() == []
        assert list(tree) == sorted(reference)
        assert all(tree.contains(key) for key in reference)
        assert all(tree.depth(key) >= 0 for key in reference)

    @pytest.mark.parametrize("seed", [3, 99])
    def test_depth_counts_comparisons(self, seed):
        rng = random.Random(seed)
        keys = rng.sample(range(1000), 100)
        tree = build_tree(keys)
        depths = {node.data: depth for node, depth in tree.walk('bfs')}
        for key in keys:
            assert tree.depth(key) == depths[key]
        assert tree.height() == max(depths.values())


class TestDegenerateChains:
    """Sorted insertion yields a chain as deep as the tree is large."""

    @pytest.mark.slow
    def test_chain_deeper_than_recursion_limit(self):
        n = sys.getrecursionlimit() + 500
        tree = build_tree(range(n))

        assert tree.size() == n
        assert tree.height() == n - 1
        assert tree.diameter() == n - 1
        assert tree.depth(n - 1) == n - 1
        assert tree.depth(n) == -1 - n
        assert list(tree) == list(range(n))

        visited = []
        tree.level_traverse(visited.append)
        assert visited == list(range(n))

    @pytest.mark.slow
    def test_remove_along_descending_chain(self):
        n = sys.getrecursionlimit() + 200
        tree = build_tree(range(n, 0, -1))
        tree.remove(1)
        tree.remove(n)
        assert tree.size() == n - 2
        assert tree.min() == 2
        assert tree.max() == n - 1
        assert TreeTestHelper(tree).count_reachable() == n - 2

    def test_zigzag_chain(self):
        tree = build_tree([1, 100, 2, 99, 3, 98])
        assert tree.height() == 5
        assert tree.diameter() == 5
        assert list(tree) == [1, 2, 3, 98, 99, 100]


class TestElementTypes:

    def test_negative_numbers_and_floats(self):
        tree = build_tree([-10, 0.5, 10, -20])
        assert list(tree) == [-20, -10, 0.5, 10]
        assert tree.contains(0.5)

    def test_equal_int_and_float_are_one_key(self):
        tree = build_tree([1, 1.0])
        assert tree.size() == 1
        assert tree.retrieve(1) == 1.0

    def test_tuples(self):
        tree = build_tree([(2, 'b'), (1, 'z'), (2, 'a')])
        assert list(tree) == [(1, 'z'), (2, 'a'), (2, 'b')]
        assert tree.depth((2, 'a')) == 2
