"""Tests for the high-level functional API."""

from bstreelib import (
    BSTree,
    TreeConfig,
    build_tree,
    collect_values,
    find_values,
    get_leaf_values,
    get_tree_stats,
)


def test_build_tree_inserts_in_order():
    tree = build_tree([5, 3, 8, 1, 4])
    assert isinstance(tree, BSTree)
    assert tree.size() == 5
    assert list(tree) == [1, 3, 4, 5, 8]


def test_build_tree_with_config():
    tree = build_tree([1, 2], TreeConfig.uncached())
    assert tree.config.metrics.cache_enabled is False


def test_collect_values_strategies(sample_tree):
    assert collect_values(sample_tree) == [1, 3, 4, 5, 8]
    assert collect_values(sample_tree, 'bfs') == [5, 3, 8, 1, 4]
    assert collect_values(sample_tree, 'pre_order') == [5, 3, 1, 4, 8]
    assert collect_values(sample_tree, 'stack') == [5, 8, 3, 4, 1]


def test_collect_values_by_depth(sample_tree):
    assert collect_values(sample_tree, 'bfs', max_depth=0) == [5]
    assert collect_values(sample_tree, 'bfs', min_depth=1, max_depth=1) == [3, 8]


def test_find_values(sample_tree):
    evens = list(find_values(sample_tree, lambda value: value % 2 == 0))
    assert evens == [4, 8]
    assert list(find_values(sample_tree, lambda value: value > 100)) == []


def test_get_leaf_values(sample_tree):
    assert get_leaf_values(sample_tree) == [1, 4, 8]
    assert get_leaf_values(BSTree()) == []


def test_get_tree_stats(sample_tree):
    stats = get_tree_stats(sample_tree)
    assert stats['size'] == 5
    assert stats['is_empty'] is False
    assert stats['height'] == 2
    assert stats['diameter'] == 3
    assert stats['leaf_nodes'] == 3
    assert stats['internal_nodes'] == 2
    assert stats['depths'] == {0: 1, 1: 2, 2: 2}


def test_get_tree_stats_empty():
    stats = get_tree_stats(BSTree())
    assert stats['size'] == 0
    assert stats['is_empty'] is True
    assert stats['height'] == -1
    assert stats['diameter'] == 0
    assert stats['leaf_nodes'] == 0
    assert stats['depths'] == {}
