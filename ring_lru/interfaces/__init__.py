from .cache import ICache, CacheStats
from .storage import IValueStore

__all__ = [
    "ICache",
    "CacheStats",
    "IValueStore",
]
