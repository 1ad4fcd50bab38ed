"""
Shared fixtures for the LRU engine tests.
"""

import pytest


class Value:
    """Test value whose length is the length of its data"""

    def __init__(self, data: str):
        self.data = data

    def __len__(self) -> int:
        return len(self.data)

    def __eq__(self, other) -> bool:
        return isinstance(other, Value) and other.data == self.data

    def __repr__(self) -> str:
        return f"Value({self.data!r})"


class FakeClock:
    """Manually advanced clock returning unix seconds"""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


def keys_of(lru) -> list:
    """Keys in traversal order, most recently used first."""
    return [node.key for node in lru.traverse()]


def assert_size_consistent(lru) -> None:
    assert lru.current_size() == sum(node.length for node in lru.traverse())
    assert len(lru) == len(list(lru.traverse()))
