"""
LRU cache engine built on a circular eviction list.

The engine works on node handles rather than keys: callers keep their own
key -> Node index and pass nodes back to access/replace/delete. The
on_delete hook tells the caller when a node leaves the list (eviction,
expiration or explicit delete) so the index can be kept consistent.

Not thread-safe; callers needing concurrent access must serialize calls.
"""

import logging
import time
from typing import Any, Callable, Hashable, Iterator, Optional

from ..config import Settings
from ..exceptions import InvalidHandleError, NotificationError, StorageError
from ..interfaces.cache import CacheStats
from ..interfaces.storage import IValueStore
from ..models.node import Node
from .accounting import SizeAccountant
from .expiration import ExpirationPolicy
from .linked_list import EvictionList

logger = logging.getLogger(__name__)


class LRU:
    """
    Size and time bounded LRU cache.

    Features:
    - O(1) insert/access/replace/delete on node handles
    - Size-based eviction from the least recently used end
    - Optional lazy TTL expiration checked on access
    - Optional storage hooks so values can live outside the process
    - Add/delete notifications for keeping an outer index in sync
    """

    def __init__(self, max_size: int = 0, ttl: int = 0, clock: Callable[[], float] = time.time):
        """
        Initialize LRU cache.

        Args:
            max_size: Maximum sum of value lengths (<= 0 means unbounded)
            ttl: Time to live in seconds (<= 0 disables expiration)
            clock: Returns the current unix time in seconds
        """
        # Private: Engine components
        self._list = EvictionList()
        self._accountant = SizeAccountant(max_size)
        self._expiration = ExpirationPolicy(ttl, clock)

        # Statistics tracking
        self._stats = CacheStats()

        # Public: Extension points, each optional
        self.on_add: Optional[Callable[[Node], None]] = None
        self.on_delete: Optional[Callable[[Hashable], None]] = None
        self.set_value: Optional[Callable[[Hashable, Any], None]] = None
        self.get_value: Optional[Callable[[Hashable], Any]] = None

    @classmethod
    def with_delete_callback(
        cls,
        ttl: int,
        on_delete: Callable[[Hashable], None],
        clock: Callable[[], float] = time.time
    ) -> "LRU":
        """Create an unbounded cache that reports every removed key to on_delete."""
        lru = cls(0, ttl, clock=clock)
        lru.on_delete = on_delete
        return lru

    @classmethod
    def from_settings(cls, settings: Settings, clock: Callable[[], float] = time.time) -> "LRU":
        """Create a cache from Settings (environment / .env configuration)."""
        lru = cls(settings.max_size, settings.ttl, clock=clock)
        if settings.eliminate_length is not None:
            batch = settings.eliminate_length
            lru.eliminate_length = lambda: batch
        return lru

    def use_store(self, store: IValueStore) -> None:
        """Route values through an external store instead of keeping them in nodes."""
        self.set_value = store.set_value
        self.get_value = store.get_value

    @property
    def eliminate_length(self) -> Optional[Callable[[], int]]:
        return self._accountant.eliminate_length

    @eliminate_length.setter
    def eliminate_length(self, hook: Optional[Callable[[], int]]) -> None:
        self._accountant.eliminate_length = hook

    @property
    def max_size(self) -> int:
        return self._accountant.max_size

    @property
    def ttl(self) -> int:
        return self._expiration.ttl

    def insert(self, key: Hashable, value: Any, extra: Any = None) -> Node:
        """
        Add a new entry at the head of the list.

        Least recently used entries are evicted first if the new value does
        not fit. The set_value hook runs next, so an evicted entry with the
        same key cannot discard the freshly stored value through on_delete.
        Only then is the node built and linked.

        Args:
            key: Entry key (never compared by the engine)
            value: Entry value, must support len()
            extra: Optional opaque metadata stored on the node

        Returns:
            The new node handle

        Raises:
            StorageError: set_value hook failed; no node was linked, but
                evictions already done stay committed
            NotificationError: on_delete failed while evicting
        """
        length = len(value)

        target = self._accountant.eviction_target(length)
        if target > 0:
            self._eliminate(target)

        if self.set_value is not None:
            self._store(key, value)

        node = self._new_node(key, value, length, extra)
        self._list.link_at_head(node)
        self._accountant.add(length)

        if self.on_add is not None:
            self.on_add(node)
        return node

    def access(self, node: Node) -> Optional[Node]:
        """
        Mark node as most recently used and return it.

        Expired nodes are deleted and reported as None. With a get_value
        hook the node's value is refreshed from storage first.

        Raises:
            StorageError: get_value hook failed, node was left as it was
            InvalidHandleError: node is not linked in this cache
        """
        self._check_handle(node)

        if self._expiration.is_expired(node):
            logger.debug(f"Node expired on access: {node.key!r}")
            self._stats.misses += 1
            self._stats.expirations += 1
            self.delete(node)
            return None

        if self.get_value is not None:
            try:
                value = self.get_value(node.key)
            except Exception as e:
                logger.warning(f"get_value hook failed for key {node.key!r}: {e}")
                raise StorageError(node.key, "get_value") from e
            node.value = value

        self._list.promote(node)
        node.access_time = self._expiration.clock() - node.created_at
        node.access_count += 1
        self._stats.hits += 1
        return node

    def replace(self, node: Node, value: Any, extra: Any = None) -> Node:
        """
        Replace the value of a linked node in place.

        The node is promoted before any eviction, so it can never be chosen
        as its own eviction candidate. Access counters and the expiry are
        reset as if the node were new.

        Args:
            node: Linked node handle
            value: New value, must support len()
            extra: New metadata; the old metadata is kept when None

        Returns:
            The same node handle

        Raises:
            StorageError: set_value hook failed; the node keeps its old
                value, but the promotion and any evictions stay committed
        """
        self._check_handle(node)
        length = len(value)

        self._list.promote(node)

        delta = length - node.length
        target = self._accountant.eviction_target(delta)
        if target > 0:
            self._eliminate(target, keep=node)

        if self.set_value is not None:
            self._store(node.key, value)
        self._accountant.add(delta)

        node.value = None if self.set_value is not None else value
        node.length = length
        if extra is not None:
            node.extra = extra
        self._reset(node)

        logger.debug(f"Replaced node {node.key!r} (length delta {delta})")
        return node

    def delete(self, node: Node) -> None:
        """
        Unlink node and notify on_delete.

        The unlink is committed before the notification runs, so the node is
        gone even if on_delete raises.

        Raises:
            NotificationError: on_delete hook failed
            InvalidHandleError: node is not linked in this cache
        """
        self._check_handle(node)
        self._list.unlink(node)
        self._accountant.subtract(node.length)

        if self.on_delete is not None:
            try:
                self.on_delete(node.key)
            except Exception as e:
                logger.warning(f"on_delete hook failed for key {node.key!r}: {e}")
                raise NotificationError(node.key) from e

    def traverse(self) -> Iterator[Node]:
        """Lazily walk nodes from most to least recently used."""
        return iter(self._list)

    def current_size(self) -> int:
        """Sum of the lengths of all linked nodes."""
        return self._accountant.current_size

    def get_stats(self) -> CacheStats:
        """
        Get cache performance statistics.

        Returns:
            CacheStats with hits, misses, evictions, expirations and size
        """
        self._stats.size = len(self._list)
        self._stats.total_length = self._accountant.current_size
        return self._stats

    def __len__(self) -> int:
        return len(self._list)

    def _new_node(self, key: Hashable, value: Any, length: int, extra: Any = None) -> Node:
        """Build an unlinked node; values handed to set_value are not kept."""
        stored = None if self.set_value is not None else value
        node = Node(key, stored, length, extra)
        self._reset(node)
        return node

    def _reset(self, node: Node) -> None:
        node.created_at = self._expiration.clock()
        node.access_time = 0.0
        node.access_count = 0
        self._expiration.stamp(node)

    def _store(self, key: Hashable, value: Any) -> None:
        try:
            self.set_value(key, value)
        except Exception as e:
            logger.warning(f"set_value hook failed for key {key!r}: {e}")
            raise StorageError(key, "set_value") from e

    def _eliminate(self, target: int, keep: Optional[Node] = None) -> None:
        """
        Delete nodes from the tail until target length is freed.

        Stops early when the list runs out or only `keep` is left.
        """
        logger.debug(
            f"Evicting {target} from cache "
            f"(size {self._accountant.current_size}/{self._accountant.max_size})"
        )
        while target > 0:
            tail = self._list.tail
            if tail is None or tail is keep:
                break
            target -= tail.length
            self._stats.evictions += 1
            self.delete(tail)

    def _check_handle(self, node: Node) -> None:
        if node not in self._list:
            raise InvalidHandleError(f"{node!r} is not linked in this cache")
