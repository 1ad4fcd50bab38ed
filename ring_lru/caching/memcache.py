"""
Key-indexed cache on top of the LRU engine.

Pairs a dict key -> Node index with an LRU. The LRU's on_delete hook drops
keys from the index, so evicted and expired entries disappear from both.
"""

from typing import Any, Dict, Hashable, Optional
from ..interfaces.cache import ICache, CacheStats
from ..models.node import Node
from .lru import LRU


class MemCache(ICache):
    """
    In-memory key/value cache implementing ICache.

    Values must support len(); their lengths count against max_size.
    """

    def __init__(self, max_size: int = 0, ttl: int = 0, lru: Optional[LRU] = None):
        """
        Initialize MemCache.

        Args:
            max_size: Maximum sum of value lengths (<= 0 means unbounded)
            ttl: Time to live in seconds (0 disables expiration)
            lru: Pre-configured engine to use instead of LRU(max_size, ttl);
                an on_delete hook it already has still runs after the key
                is dropped from the index
        """
        self._index: Dict[Hashable, Node] = {}
        self._lru = lru if lru is not None else LRU(max_size, ttl)
        self._chained_on_delete = self._lru.on_delete
        self._lru.on_delete = self._forget

        # Lookups for keys that were never indexed; the engine only sees nodes
        self._index_misses = 0

    @property
    def lru(self) -> LRU:
        return self._lru

    def get(self, key: Hashable) -> Optional[Any]:
        node = self._index.get(key)
        if node is None:
            self._index_misses += 1
            return None

        node = self._lru.access(node)
        if node is None:
            return None
        return node.value

    def put(self, key: Hashable, value: Any) -> None:
        node = self._index.get(key)
        if node is not None:
            self._lru.replace(node, value)
            return
        self._index[key] = self._lru.insert(key, value)

    def evict(self, key: Hashable) -> None:
        node = self._index.get(key)
        if node is not None:
            self._lru.delete(node)

    def clear(self) -> None:
        for node in self._lru.traverse():
            self._lru.delete(node)

    def get_stats(self) -> CacheStats:
        stats = self._lru.get_stats()
        return stats.model_copy(update={"misses": stats.misses + self._index_misses})

    def __contains__(self, key: Hashable) -> bool:
        """Check if key is indexed (does not affect LRU order or expiry)."""
        return key in self._index

    def __len__(self) -> int:
        return len(self._index)

    def _forget(self, key: Hashable) -> None:
        self._index.pop(key, None)
        if self._chained_on_delete is not None:
            self._chained_on_delete(key)
