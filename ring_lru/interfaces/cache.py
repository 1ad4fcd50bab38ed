"""
Cache interface - contract for key-indexed caches built on the LRU engine.
"""

from abc import ABC, abstractmethod
from typing import Optional, Any, Hashable
from pydantic import BaseModel


class CacheStats(BaseModel):
    """Access counters and current contents of a cache"""
    hits: int = 0
    misses: int = 0
    evictions: int = 0
    expirations: int = 0
    size: int = 0  # linked entries
    total_length: int = 0  # sum of value lengths

    @property
    def hit_rate(self) -> float:
        """Share of lookups that returned a live entry"""
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0


class ICache(ABC):
    """
    Key-indexed cache interface.

    The LRU engine itself works on node handles; implementations of this
    interface own the key -> node index on the caller's side and must
    drop keys whose nodes the engine evicts or expires.
    """

    @abstractmethod
    def get(self, key: Hashable) -> Optional[Any]:
        """
        Look up key and mark its entry most recently used.

        Returns:
            The value, or None for unknown, evicted or expired keys
        """
        pass

    @abstractmethod
    def put(self, key: Hashable, value: Any) -> None:
        """
        Insert value under key, or replace the value already held.

        len(value) counts against the size budget and may evict
        least recently used entries.
        """
        pass

    @abstractmethod
    def evict(self, key: Hashable) -> None:
        """Delete key's entry; unknown keys are ignored."""
        pass

    @abstractmethod
    def clear(self) -> None:
        pass

    @abstractmethod
    def get_stats(self) -> CacheStats:
        """Hit/miss, eviction and expiration counters plus current contents."""
        pass
