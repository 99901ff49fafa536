"""Shared pytest configuration and fixtures for the BSTreeLib test suite."""

import pytest

from bstreelib import BSTree


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: deep degenerate-chain tests (deselect with '-m \"not slow\"')"
    )


@pytest.fixture
def sample_tree():
    """Tree built from 5, 3, 8, 1, 4.

    Structure:
            5
           / \\
          3   8
         / \\
        1   4
    """
    tree = BSTree()
    for key in (5, 3, 8, 1, 4):
        tree.insert(key)
    return tree
