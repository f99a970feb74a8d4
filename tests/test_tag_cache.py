"""Tests for the LRU + TTL client tag cache."""

from services.tag_cache import ClientTagCache


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_get_returns_stored_value_until_ttl_expires():
    """Test that entries expire after the TTL."""
    clock = FakeClock()
    cache = ClientTagCache(max_size=5, ttl_seconds=300, clock=clock)
    cache.set("a", "tags-a")

    clock.now = 299
    assert cache.get("a") == "tags-a"

    clock.now = 300
    assert cache.get("a") is None
    assert len(cache) == 0


def test_least_recently_used_entry_is_evicted():
    """Test that the least recently used entry is evicted."""
    cache = ClientTagCache(max_size=2, ttl_seconds=300, clock=FakeClock())
    cache.set("a", 1)
    cache.set("b", 2)
    cache.get("a")
    cache.set("c", 3)

    assert "a" in cache
    assert "b" not in cache
    assert "c" in cache
    assert len(cache) == 2


def test_set_replaces_and_refreshes_entry():
    """Test that set replaces a value and refreshes its TTL."""
    clock = FakeClock()
    cache = ClientTagCache(max_size=2, ttl_seconds=10, clock=clock)
    cache.set("a", 1)
    clock.now = 8
    cache.set("a", 2)
    clock.now = 15
    assert cache.get("a") == 2


def test_invalidate_is_idempotent_and_clear_drops_everything():
    """Test invalidate on missing keys and clear."""
    cache = ClientTagCache(max_size=5, ttl_seconds=300, clock=FakeClock())
    cache.set("a", 1)
    cache.set("b", 2)

    assert cache.invalidate("a") is True
    assert cache.invalidate("a") is False
    assert cache.invalidate("missing") is False
    assert cache.get("a") is None

    cache.clear()
    assert len(cache) == 0
