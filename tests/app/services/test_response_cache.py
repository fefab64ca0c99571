"""Testes do cache de respostas."""

from __future__ import annotations

from wapi_gateway.app.services.response_cache import MISS, ResponseCache, make_cache_key
from tests.fakes.fake_clock import FakeClock


class TestResponseCache:
    """Testes de lookup/store/invalidate_all."""

    def test_store_then_lookup_returns_value(self, clock: FakeClock) -> None:
        cache = ResponseCache(clock=clock)
        cache.store("k", {"status": "connected"}, ttl_seconds=30)
        assert cache.lookup("k") == {"status": "connected"}

    def test_lookup_missing_key_returns_miss(self) -> None:
        cache = ResponseCache()
        assert cache.lookup("nope") is MISS

    def test_expired_entry_is_miss_and_removed(self, clock: FakeClock) -> None:
        """Após o TTL o lookup é MISS e a entrada some do mapa."""
        cache = ResponseCache(clock=clock)
        cache.store("k", "v", ttl_seconds=30)

        clock.advance(30.001)

        assert cache.lookup("k") is MISS
        assert "k" not in cache
        assert len(cache) == 0

    def test_entry_still_fresh_at_ttl_boundary(self, clock: FakeClock) -> None:
        cache = ResponseCache(clock=clock)
        cache.store("k", "v", ttl_seconds=30)
        clock.advance(30)
        assert cache.lookup("k") == "v"

    def test_none_is_cacheable(self, clock: FakeClock) -> None:
        """None armazenado não é confundido com ausência."""
        cache = ResponseCache(clock=clock)
        cache.store("k", None, ttl_seconds=10)
        assert cache.lookup("k") is None

    def test_invalidate_all(self) -> None:
        cache = ResponseCache()
        cache.store("a", 1, ttl_seconds=10)
        cache.store("b", 2, ttl_seconds=10)

        cache.invalidate_all()

        assert len(cache) == 0
        assert cache.lookup("a") is MISS

    def test_unbounded_by_default(self) -> None:
        cache = ResponseCache()
        for i in range(1_000):
            cache.store(f"k{i}", i, ttl_seconds=60)
        assert len(cache) == 1_000

    def test_max_entries_evicts_least_recently_used(self, clock: FakeClock) -> None:
        cache = ResponseCache(max_entries=2, clock=clock)
        cache.store("a", 1, ttl_seconds=60)
        cache.store("b", 2, ttl_seconds=60)
        cache.lookup("a")
        cache.store("c", 3, ttl_seconds=60)

        assert cache.lookup("b") is MISS
        assert cache.lookup("a") == 1
        assert cache.lookup("c") == 3


class TestMakeCacheKey:
    """Testes da derivação de chave."""

    def test_param_order_does_not_matter(self) -> None:
        key1 = make_cache_key("/contacts/get", {"phone": "1", "extra": 2})
        key2 = make_cache_key("/contacts/get", {"extra": 2, "phone": "1"})
        assert key1 == key2

    def test_endpoint_and_params_distinguish_keys(self) -> None:
        assert make_cache_key("/chats/get", {"phone": "1"}) != make_cache_key(
            "/contacts/get", {"phone": "1"}
        )
        assert make_cache_key("/chats/get", {"phone": "1"}) != make_cache_key(
            "/chats/get", {"phone": "2"}
        )

    def test_none_params_equal_empty(self) -> None:
        assert make_cache_key("/chats/get-all") == make_cache_key("/chats/get-all", {})
