"""
Cache entry for the circular eviction list.
"""

from typing import Any, Optional


class Node:
    """
    Single cache entry with payload, size, timestamps and list linkage.

    Nodes are built by LRU only; callers keep them as opaque handles in
    their own key index and pass them back to access/replace/delete.
    """

    def __init__(self, key: Any, value: Any, length: int, extra: Any = None):
        # Public: Payload
        self.key = key
        self.value = value
        self.length = length
        self.extra = extra

        # Public: Access metadata
        self.created_at: float = 0.0
        self.access_time: float = 0.0
        self.access_count: int = 0
        # 0 means never expires
        self.expire: int = 0

        # Private: Circular list linkage, managed by EvictionList
        self._previous: Optional["Node"] = None
        self._next: Optional["Node"] = None
        self._owner = None

    @property
    def previous(self) -> Optional["Node"]:
        return self._previous

    @property
    def next(self) -> Optional["Node"]:
        return self._next

    @property
    def linked(self) -> bool:
        return self._owner is not None

    def __repr__(self) -> str:
        return (
            f"Node(key={self.key!r}, length={self.length}, "
            f"access_count={self.access_count}, expire={self.expire})"
        )
