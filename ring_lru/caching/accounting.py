"""
Size accounting and eviction sizing.
"""

from typing import Callable, Optional


class SizeAccountant:
    """
    Tracks the aggregate length of linked nodes against a maximum.

    A max_size of zero or less means the cache is unbounded.
    """

    def __init__(self, max_size: int = 0, eliminate_length: Optional[Callable[[], int]] = None):
        """
        Args:
            max_size: Maximum aggregate length (<= 0 disables eviction)
            eliminate_length: Optional override returning how much to evict
                once the budget is exceeded, e.g. a fixed batch of 10% of
                capacity instead of just the overflow
        """
        self._max_size = max_size
        self._current_size = 0
        self.eliminate_length = eliminate_length

    @property
    def max_size(self) -> int:
        return self._max_size

    @property
    def current_size(self) -> int:
        return self._current_size

    @property
    def bounded(self) -> bool:
        return self._max_size > 0

    def add(self, length: int) -> None:
        self._current_size += length

    def subtract(self, length: int) -> None:
        self._current_size -= length

    def eviction_target(self, incoming: int) -> int:
        """
        Decide how much must be evicted before incoming more length is added.

        Args:
            incoming: Length about to be added

        Returns:
            Amount of length to evict, 0 when everything fits
        """
        if not self.bounded:
            return 0

        overflow = self._current_size + incoming - self._max_size
        if overflow <= 0:
            return 0

        if self.eliminate_length is not None:
            return self.eliminate_length()
        return overflow
