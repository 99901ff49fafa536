"""Configuration system for BSTreeLib.

This module defines how users tune a tree: which order level traversal
uses, and whether structural metrics are cached between mutations.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Union


class LevelOrder(Enum):
    """Visiting order used by ``BSTree.level_traverse``.

    BREADTH_FIRST is true level order. STACK reproduces the LIFO walk of
    older callers, which is depth-first and visits right subtrees first.
    """
    BREADTH_FIRST = "bfs"   # Level by level, left to right
    STACK = "stack"         # Pop, visit, push left then right

    @classmethod
    def parse(cls, value: Union['LevelOrder', str]) -> 'LevelOrder':
        """Accept either a LevelOrder or its name/value as a string.

        Raises:
            ValueError: If the string does not name a known order
        """
        if isinstance(value, cls):
            return value
        aliases = {
            'bfs': cls.BREADTH_FIRST,
            'breadth_first': cls.BREADTH_FIRST,
            'level': cls.BREADTH_FIRST,
            'level_order': cls.BREADTH_FIRST,
            'stack': cls.STACK,
        }
        try:
            return aliases[str(value).lower()]
        except KeyError:
            raise ValueError(
                f"Unknown level order: {value}. "
                f"Choose from: {', '.join(aliases.keys())}"
            ) from None


@dataclass
class MetricsConfig:
    """Configuration for caching of height, diameter and depth results."""

    cache_enabled: bool = True   # Memoize metrics until the next mutation
    cache_size: int = 256        # Maximum cached entries (LRU eviction)


@dataclass
class TreeConfig:
    """Complete configuration for a BSTree.

    Pass an instance to ``BSTree(config=...)``; the tree validates it
    on construction.
    """

    level_order: LevelOrder = LevelOrder.BREADTH_FIRST
    metrics: MetricsConfig = field(default_factory=MetricsConfig)

    @classmethod
    def uncached(cls) -> 'TreeConfig':
        """Config that recomputes every metric on each call."""
        return cls(metrics=MetricsConfig(cache_enabled=False))

    @classmethod
    def legacy_level_order(cls) -> 'TreeConfig':
        """Config whose level_traverse keeps the stack-based order."""
        return cls(level_order=LevelOrder.STACK)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.level_order, LevelOrder):
            errors.append(f"level_order must be a LevelOrder, got {self.level_order!r}")

        if self.metrics.cache_enabled and self.metrics.cache_size <= 0:
            errors.append("cache_size must be positive when caching is enabled")

        return errors
