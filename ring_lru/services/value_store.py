"""Dict-backed value store for the LRU storage hooks"""
from typing import Any, Dict, Hashable
from ..interfaces.storage import IValueStore


class MappingValueStore(IValueStore):
    """
    Keeps values in a separate mapping, outside the cache nodes.

    Useful as a stand-in for disk or remote storage. Pair discard() with
    the LRU's on_delete hook so removed entries are dropped from the store.
    """

    def __init__(self):
        self._values: Dict[Hashable, Any] = {}

    def set_value(self, key: Hashable, value: Any) -> None:
        self._values[key] = value

    def get_value(self, key: Hashable) -> Any:
        # KeyError surfaces to the cache as a StorageError
        return self._values[key]

    def discard(self, key: Hashable) -> None:
        self._values.pop(key, None)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)
