"""
Bounded memo cache for ranked search results.

Entries are evicted in insertion order: when the cache is full the oldest
stored key goes first, regardless of how recently it was read.
"""

import logging
from collections import OrderedDict
from typing import Any, Callable, Hashable

logger = logging.getLogger(__name__)


class ResultCache:
    """Insertion-ordered cache with a maximum entry count."""

    def __init__(self, max_entries: int = 1000, enabled: bool = True) -> None:
        self.max_entries = max(0, int(max_entries or 0))
        self.enabled = enabled and self.max_entries > 0
        self._store: "OrderedDict[Hashable, Any]" = OrderedDict()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._store

    def get_or_compute(self, key: Hashable, compute_fn: Callable[[], Any]) -> Any:
        """
        Return the cached value for key, computing and storing it on a miss.

        Args:
            key: Hashable cache key.
            compute_fn: Zero-argument callable producing the value.

        Returns:
            The cached or freshly computed value.
        """
        if self.enabled and key in self._store:
            self.hits += 1
            logger.debug("Cache hit for %r", key)
            return self._store[key]

        self.misses += 1
        value = compute_fn()
        if self.enabled:
            self._put(key, value)
        return value

    def _put(self, key: Hashable, value: Any) -> None:
        if key not in self._store and len(self._store) >= self.max_entries:
            evicted, _ = self._store.popitem(last=False)
            logger.debug("Cache full, evicted %r", evicted)
        self._store[key] = value

    def clear(self) -> None:
        self._store.clear()
