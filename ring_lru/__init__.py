"""
Size and time bounded LRU cache on an intrusive circular linked list.
"""

from .caching import LRU, MemCache
from .exceptions import LRUError, StorageError, NotificationError, InvalidHandleError
from .interfaces import ICache, CacheStats, IValueStore
from .models import Node
from .services import MappingValueStore

__all__ = [
    "LRU",
    "MemCache",
    "Node",
    "ICache",
    "CacheStats",
    "IValueStore",
    "MappingValueStore",
    "LRUError",
    "StorageError",
    "NotificationError",
    "InvalidHandleError",
]

__version__ = "1.0.0"
