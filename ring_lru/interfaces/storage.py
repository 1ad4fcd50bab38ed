"""
Value store interface - lets node values live outside process memory.
"""

from abc import ABC, abstractmethod
from typing import Any, Hashable


class IValueStore(ABC):
    """
    External storage for cached values.

    Wired into an LRU with LRU.use_store(); the engine then keeps only
    keys, lengths and metadata in its nodes.
    """

    @abstractmethod
    def set_value(self, key: Hashable, value: Any) -> None:
        """
        Persist a value before its node is created.

        Any exception aborts the insertion.
        """
        pass

    @abstractmethod
    def get_value(self, key: Hashable) -> Any:
        """
        Fetch a value when its node is accessed.

        Any exception aborts the access.
        """
        pass
