"""
Unit tests for size accounting and TTL expiration.
"""

from ring_lru.caching.accounting import SizeAccountant
from ring_lru.caching.expiration import ExpirationPolicy
from ring_lru.models.node import Node


class TestSizeAccountant:
    """Test eviction sizing decisions."""

    def test_add_and_subtract(self):
        accountant = SizeAccountant(100)
        accountant.add(30)
        accountant.add(20)
        accountant.subtract(10)
        assert accountant.current_size == 40
        assert accountant.max_size == 100

    def test_no_eviction_when_fits(self):
        accountant = SizeAccountant(100)
        accountant.add(90)
        assert accountant.eviction_target(10) == 0

    def test_overflow_is_target(self):
        accountant = SizeAccountant(100)
        accountant.add(95)
        assert accountant.eviction_target(10) == 5

    def test_override_replaces_overflow(self):
        accountant = SizeAccountant(100, eliminate_length=lambda: 25)
        accountant.add(95)
        assert accountant.eviction_target(10) == 25

    def test_override_not_used_when_fits(self):
        accountant = SizeAccountant(100, eliminate_length=lambda: 25)
        assert accountant.eviction_target(10) == 0

    def test_unbounded(self):
        accountant = SizeAccountant(0)
        accountant.add(10 ** 9)
        assert not accountant.bounded
        assert accountant.eviction_target(10 ** 9) == 0


class TestExpirationPolicy:
    """Test TTL stamping and lazy expiry checks."""

    def test_disabled_never_stamps(self, clock):
        policy = ExpirationPolicy(0, clock)
        node = Node("a", "v", 1)
        policy.stamp(node)

        assert not policy.enabled
        assert node.expire == 0
        clock.advance(10 ** 6)
        assert not policy.is_expired(node)

    def test_negative_ttl_disables(self, clock):
        policy = ExpirationPolicy(-5, clock)
        assert policy.ttl == 0
        assert not policy.enabled

    def test_stamp_uses_whole_seconds(self, clock):
        clock.now = 1000.7
        policy = ExpirationPolicy(5, clock)
        node = Node("a", "v", 1)
        policy.stamp(node)
        assert node.expire == 1005

    def test_expires_only_after_deadline(self, clock):
        policy = ExpirationPolicy(1, clock)
        node = Node("a", "v", 1)
        policy.stamp(node)

        clock.advance(1)
        assert not policy.is_expired(node)
        clock.advance(1)
        assert policy.is_expired(node)
