"""
Lazy TTL expiration, checked only when a node is accessed.
"""

import time
from typing import Callable
from ..models.node import Node


class ExpirationPolicy:
    """Stamps nodes with an absolute expiry and checks it on access."""

    def __init__(self, ttl: int = 0, clock: Callable[[], float] = time.time):
        """
        Args:
            ttl: Time to live in whole seconds (<= 0 disables expiration)
            clock: Returns the current unix time in seconds
        """
        self.ttl = ttl if ttl > 0 else 0
        self.clock = clock

    @property
    def enabled(self) -> bool:
        return self.ttl > 0

    def now(self) -> int:
        return int(self.clock())

    def stamp(self, node: Node) -> None:
        """Set node.expire to now + ttl, or 0 when expiration is disabled."""
        node.expire = self.now() + self.ttl if self.enabled else 0

    def is_expired(self, node: Node) -> bool:
        return node.expire > 0 and self.now() > node.expire
