"""Tests for the cache facade."""

from unittest.mock import MagicMock, patch

import pytest
import redis

from catalog.errors import CacheError
from catalog.utils.cache import NullCache, RedisCache, connect_cache


class TestNullCache:
    """NullCache turns every operation into a silent no-op."""

    def test_get_returns_none(self):
        assert NullCache().get("product:report") is None

    def test_writes_succeed_silently(self):
        cache = NullCache()
        cache.set("product:report", b"{}", 300)
        cache.delete("product:report")
        assert cache.delete_by_prefix("product:") == 0
        assert cache.is_available is False


class TestRedisCache:
    """RedisCache over an in-process fake client."""

    def test_get_missing_key_returns_none(self, redis_cache):
        assert redis_cache.get("missing") is None

    def test_set_then_get(self, redis_cache, fake_redis):
        redis_cache.set("product:report", b'{"total_products": 1}', 300)

        assert redis_cache.get("product:report") == b'{"total_products": 1}'
        assert fake_redis.ttls["product:report"] == 300

    def test_delete(self, redis_cache):
        redis_cache.set("product:report", b"x", 300)
        redis_cache.delete("product:report")
        assert redis_cache.get("product:report") is None

    def test_delete_by_prefix_only_removes_matching_keys(self, redis_cache):
        redis_cache.set("product:report", b"1", 300)
        redis_cache.set("product:page:1", b"2", 300)
        redis_cache.set("category:1", b"3", 300)

        assert redis_cache.delete_by_prefix("product:") == 2
        assert redis_cache.get("category:1") == b"3"
        assert redis_cache.get("product:report") is None

    @pytest.mark.parametrize("operation, args", [
        ("get", ("k",)),
        ("set", ("k", b"v", 10)),
        ("delete", ("k",)),
        ("delete_by_prefix", ("k",)),
    ])
    def test_backend_errors_raise_cache_error(self, operation, args):
        client = MagicMock()
        client.get.side_effect = redis.ConnectionError("down")
        client.set.side_effect = redis.ConnectionError("down")
        client.delete.side_effect = redis.ConnectionError("down")
        client.scan_iter.side_effect = redis.ConnectionError("down")

        with pytest.raises(CacheError):
            getattr(RedisCache(client), operation)(*args)


class TestConnectCache:
    """Startup connection falls back to NullCache instead of failing."""

    def test_empty_url_disables_cache(self):
        with patch("catalog.utils.cache.redis.Redis.from_url") as from_url:
            cache = connect_cache("")

        assert isinstance(cache, NullCache)
        from_url.assert_not_called()

    def test_unreachable_redis_returns_null_cache(self):
        client = MagicMock()
        client.ping.side_effect = redis.ConnectionError("refused")

        with patch("catalog.utils.cache.redis.Redis.from_url", return_value=client) as from_url:
            cache = connect_cache("redis://localhost:6379", connect_timeout=3.0, socket_timeout=2.0)

        assert isinstance(cache, NullCache)
        from_url.assert_called_once_with(
            "redis://localhost:6379",
            socket_connect_timeout=3.0,
            socket_timeout=2.0,
        )
        client.close.assert_called_once()

    def test_reachable_redis_returns_redis_cache(self):
        client = MagicMock()
        client.ping.return_value = True

        with patch("catalog.utils.cache.redis.Redis.from_url", return_value=client):
            cache = connect_cache("redis://localhost:6379")

        assert isinstance(cache, RedisCache)
        assert cache.is_available is True
        assert cache.client is client
