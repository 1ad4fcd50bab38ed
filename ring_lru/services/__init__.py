from .value_store import MappingValueStore

__all__ = [
    "MappingValueStore",
]
