"""
LRU cache engine and the key-indexed cache built on it.
"""

from .linked_list import EvictionList
from .accounting import SizeAccountant
from .expiration import ExpirationPolicy
from .lru import LRU
from .memcache import MemCache

__all__ = [
    "EvictionList",
    "SizeAccountant",
    "ExpirationPolicy",
    "LRU",
    "MemCache",
]
