"""Tests for the prediction cache."""

import pytest

from forge.models.cache import PredictionCache


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.mark.unit
@pytest.mark.cache
class TestPredictionCache:
    """A test suite for expiry and eviction in the prediction cache."""

    def test_miss_returns_none(self, clock):
        cache = PredictionCache(max_entries=2, ttl_seconds=10, clock=clock)

        assert cache.get("missing") is None

    def test_hit_within_ttl(self, clock):
        cache = PredictionCache(max_entries=2, ttl_seconds=10, clock=clock)
        cache.insert(("m", "text"), "value")

        clock.now = 9.9
        assert cache.get(("m", "text")) == "value"

    def test_expired_entry_is_removed_on_access(self, clock):
        cache = PredictionCache(max_entries=2, ttl_seconds=10, clock=clock)
        cache.insert("key", "value")

        clock.now = 10.0
        assert cache.get("key") is None
        assert len(cache) == 0

    def test_oldest_entry_is_evicted_when_full(self, clock):
        cache = PredictionCache(max_entries=2, ttl_seconds=100, clock=clock)
        cache.insert("first", 1)
        clock.now = 1
        cache.insert("second", 2)
        clock.now = 2
        cache.insert("third", 3)

        assert len(cache) == 2
        assert cache.get("first") is None
        assert cache.get("second") == 2
        assert cache.get("third") == 3

    def test_reinserting_existing_key_does_not_evict(self, clock):
        cache = PredictionCache(max_entries=2, ttl_seconds=100, clock=clock)
        cache.insert("a", 1)
        cache.insert("b", 2)
        cache.insert("a", 10)

        assert cache.get("a") == 10
        assert cache.get("b") == 2

    def test_clear(self, clock):
        cache = PredictionCache(max_entries=2, ttl_seconds=100, clock=clock)
        cache.insert("a", 1)
        cache.clear()

        assert len(cache) == 0
