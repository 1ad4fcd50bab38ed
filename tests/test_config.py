"""
Tests for environment-driven cache configuration.
"""

import pytest
from pydantic import ValidationError
from conftest import Value, keys_of
from ring_lru.caching.lru import LRU
from ring_lru.config import Settings


def test_defaults(monkeypatch):
    for name in ["RING_LRU_MAX_SIZE", "RING_LRU_TTL", "RING_LRU_ELIMINATE_LENGTH"]:
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)

    assert settings.max_size == 0
    assert settings.ttl == 0
    assert settings.eliminate_length is None


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("RING_LRU_MAX_SIZE", "100")
    monkeypatch.setenv("RING_LRU_TTL", "30")
    monkeypatch.setenv("RING_LRU_ELIMINATE_LENGTH", "10")
    settings = Settings(_env_file=None)

    assert settings.max_size == 100
    assert settings.ttl == 30
    assert settings.eliminate_length == 10


def test_rejects_negative_ttl():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, ttl=-1)


def test_from_settings(clock):
    settings = Settings(_env_file=None, max_size=100, ttl=5, eliminate_length=30)
    lru = LRU.from_settings(settings, clock=clock)

    assert lru.max_size == 100
    assert lru.ttl == 5
    assert lru.eliminate_length() == 30

    for i in range(10):
        lru.insert(f"key{i}", Value("x" * 10))
    lru.insert("key10", Value("hello"))

    assert keys_of(lru)[-1] == "key3"
    assert lru.current_size() == 75


def test_rejects_zero_eliminate_length():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, max_size=100, eliminate_length=0)
