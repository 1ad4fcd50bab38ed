"""
Errors raised by the LRU engine.

Expiration is not an error: an expired access simply returns None.
"""


class LRUError(Exception):
    """Base class for all cache engine errors"""


class StorageError(LRUError):
    """A set_value/get_value storage hook failed"""

    def __init__(self, key, operation: str):
        self.key = key
        self.operation = operation
        super().__init__(f"storage hook {operation} failed for key {key!r}")


class NotificationError(LRUError):
    """
    The on_delete hook failed.

    Raised after the node has already been unlinked, so the node is gone
    from the list even though the caller was not notified cleanly.
    """

    def __init__(self, key):
        self.key = key
        super().__init__(f"on_delete notification failed for key {key!r}")


class InvalidHandleError(LRUError, ValueError):
    """A node handle that is not linked in this cache was passed in"""
