"""
Example: Key-indexed cache on the LRU engine

This example keeps a key -> node index next to an LRU, lets the LRU evict
by value length, and shows TTL expiry and external value storage.
Configuration is read from RING_LRU_* environment variables or .env.
"""

import logging
import time

from ring_lru import LRU, MemCache, MappingValueStore
from ring_lru.config import settings

logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def main():
    # Size budget of 100 characters, entries expire after 10 seconds
    cache = MemCache(max_size=100, ttl=10)
    cache.put("key1", "value1")
    print(cache.get("key1"))

    # Fill past the budget so the oldest keys are evicted
    for i in range(20):
        cache.put(f"page{i}", "x" * 10)
    print(f"Cached keys: {len(cache)}, stats: {cache.get_stats()}")
    print(f"key1 still cached: {'key1' in cache}")

    # Values kept outside the nodes, removed from the store on eviction
    store = MappingValueStore()
    lru = LRU(max_size=20, ttl=1)
    lru.use_store(store)
    lru.on_delete = store.discard

    node = lru.insert("report", "quarterly numbers")
    print(f"Node value in memory: {node.value!r}, in store: {store.get_value('report')!r}")

    time.sleep(2)
    print(f"After TTL: {lru.access(node)}, store size: {len(store)}")

    # Same engine, configured from the environment
    configured = LRU.from_settings(settings)
    logger.info(f"Configured cache: max_size={configured.max_size}, ttl={configured.ttl}")


if __name__ == "__main__":
    main()
