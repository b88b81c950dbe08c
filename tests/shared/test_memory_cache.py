"""Tests for the bounded in-memory TTL cache."""

import pytest

from ecopilot.shared.infrastructure.cache import MemoryCache


class Ticker:
    def __init__(self):
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def ticker():
    return Ticker()


@pytest.fixture
def cache(ticker):
    return MemoryCache(ttl=600, maxsize=100, timer=ticker)


class TestMemoryCache:
    def test_get_and_set(self, cache):
        cache.set(("weather", 45.42, -75.69, "fr"), {"temperature": 21})
        assert cache.get(("weather", 45.42, -75.69, "fr")) == {"temperature": 21}
        assert cache.get(("weather", 45.42, -75.69, "en")) is None

    def test_entries_expire(self, cache, ticker):
        cache.set("key", "value")
        ticker.now = 599
        assert cache.get("key") == "value"
        ticker.now = 600
        assert cache.get("key") is None
        assert len(cache) == 0

    def test_delete_and_clear(self, cache):
        cache.set("a", 1)
        assert cache.delete("a") is True
        assert cache.delete("a") is False
        cache.set("b", 2)
        cache.clear()
        assert len(cache) == 0

    def test_stats(self, cache):
        cache.set("a", 1)
        cache.get("a")
        cache.get("missing")
        stats = cache.get_stats()
        assert stats["hits"] == 1
        assert stats["misses"] == 1
        assert stats["hit_rate"] == 50.0
        assert stats["maxsize"] == 100


class TestBoundedSize:
    def test_never_grows_past_maxsize(self, cache):
        for i in range(5000):
            cache.set(("search", f"rue {i}", "fr"), i)

        assert len(cache) == 100
        assert cache.get(("search", "rue 4999", "fr")) == 4999
        assert cache.get(("search", "rue 0", "fr")) is None

    def test_expired_entries_are_evicted_on_write(self, cache, ticker):
        for i in range(5000):
            cache.set(("reverse", i), i)

        ticker.now = 10_000
        for i in range(10):
            cache.set(("reverse", "fresh", i), i)

        assert len(cache) == 10
