"""
Metric caching for BSTreeLib.

Height, diameter and depth only change when the tree's shape changes,
so a tree keeps their results in a MetricsCache and drops them all on
the next structural mutation.
"""

import logging
from typing import Any, Callable, Hashable, Tuple

from cachetools import LRUCache

logger = logging.getLogger(__name__)


class MetricsCache:
    """
    LRU store for structural metric results.

    Entries are keyed by ``(metric_name, *args)``. Callers must call
    ``invalidate()`` whenever a node is attached, unlinked or the tree is
    cleared; overwriting a stored value in place leaves the shape intact
    and needs no invalidation.

    Example:
        cache = MetricsCache(max_size=256)
        h = cache.get_or_compute(('height',), lambda: metrics.height(root))
    """

    def __init__(self, max_size: int = 256, enabled: bool = True):
        """
        Initialize the metrics cache.

        Args:
            max_size: Maximum number of entries in cache
            enabled: If False every lookup recomputes
        """
        self.enabled = enabled
        self._cache = LRUCache(maxsize=max_size)

        # Statistics
        self.cache_hits = 0
        self.cache_misses = 0
        self.invalidations = 0

    def get_or_compute(self, cache_key: Tuple[Hashable, ...], compute: Callable[[], Any]) -> Any:
        """
        Return the cached value for cache_key, computing it on a miss.

        Keys that cannot be hashed (for example a mutable search key)
        are computed directly and never stored.
        """
        if not self.enabled:
            return compute()

        try:
            if cache_key in self._cache:
                self.cache_hits += 1
                return self._cache[cache_key]
        except TypeError:
            logger.debug("Unhashable metric key %r, bypassing cache", cache_key)
            return compute()

        self.cache_misses += 1
        value = compute()
        self._cache[cache_key] = value
        return value

    def invalidate(self) -> None:
        """
        Drop every cached result after a structural mutation.
        """
        if self._cache:
            logger.debug("Invalidating %d cached metric(s)", len(self._cache))
            self._cache.clear()
        self.invalidations += 1

    def get_cache_stats(self) -> dict:
        """
        Get cache statistics for monitoring and debugging.
        """
        total_requests = self.cache_hits + self.cache_misses
        hit_rate = self.cache_hits / total_requests if total_requests > 0 else 0

        return {
            'enabled': self.enabled,
            'cache_hits': self.cache_hits,
            'cache_misses': self.cache_misses,
            'hit_rate': hit_rate,
            'invalidations': self.invalidations,
            'cache_size': len(self._cache),
            'max_size': self._cache.maxsize,
        }

    def clear_cache(self) -> None:
        """
        Clear all cached entries and reset statistics.
        """
        self._cache.clear()
        self.cache_hits = 0
        self.cache_misses = 0
        self.invalidations = 0

    def __len__(self) -> int:
        return len(self._cache)

    def __repr__(self) -> str:
        return f"MetricsCache(size={len(self._cache)}, max_size={self._cache.maxsize}, enabled={self.enabled})"
