"""Key-value cache facade with a Redis backend and a no-op fallback."""
from abc import ABC, abstractmethod
from typing import Optional

import redis

from catalog.errors import CacheError
from catalog.utils.logging import get_logger

logger = get_logger(__name__)


class Cache(ABC):
    """Advisory byte cache. Callers must never depend on it for correctness."""

    @property
    @abstractmethod
    def is_available(self) -> bool:
        """Whether a backend is attached."""

    @abstractmethod
    def get(self, key: str) -> Optional[bytes]:
        """Return the stored value, or None when the key is absent."""

    @abstractmethod
    def set(self, key: str, value: bytes, ttl: int) -> None:
        """Store value under key for ttl seconds."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove key if present."""

    @abstractmethod
    def delete_by_prefix(self, prefix: str) -> int:
        """Remove every key starting with prefix; return how many were removed."""


class NullCache(Cache):
    """Stand-in used when no cache backend is reachable."""

    @property
    def is_available(self) -> bool:
        return False

    def get(self, key: str) -> Optional[bytes]:
        return None

    def set(self, key: str, value: bytes, ttl: int) -> None:
        return None

    def delete(self, key: str) -> None:
        return None

    def delete_by_prefix(self, prefix: str) -> int:
        return 0


class RedisCache(Cache):
    """Cache backed by a redis-py client. Backend failures raise CacheError."""

    def __init__(self, client: redis.Redis):
        self.client = client

    @property
    def is_available(self) -> bool:
        return True

    def get(self, key: str) -> Optional[bytes]:
        try:
            return self.client.get(key)
        except redis.RedisError as e:
            raise CacheError(f"get failed: {e}", {"key": key}) from e

    def set(self, key: str, value: bytes, ttl: int) -> None:
        try:
            self.client.set(key, value, ex=ttl)
        except redis.RedisError as e:
            raise CacheError(f"set failed: {e}", {"key": key}) from e

    def delete(self, key: str) -> None:
        try:
            self.client.delete(key)
        except redis.RedisError as e:
            raise CacheError(f"delete failed: {e}", {"key": key}) from e

    def delete_by_prefix(self, prefix: str) -> int:
        deleted = 0
        try:
            for key in self.client.scan_iter(match=f"{prefix}*"):
                deleted += self.client.delete(key)
        except redis.RedisError as e:
            raise CacheError(f"prefix delete failed: {e}", {"prefix": prefix}) from e

        logger.debug("Deleted cache keys by prefix", prefix=prefix, count=deleted)
        return deleted

    def close(self) -> None:
        self.client.close()


def connect_cache(
    redis_url: str,
    connect_timeout: float = 3.0,
    socket_timeout: float = 3.0,
) -> Cache:
    """
    Connect to Redis, falling back to NullCache when it cannot be reached.

    Args:
        redis_url: Redis URL; empty disables caching without a network call
        connect_timeout: Seconds allowed to establish the connection
        socket_timeout: Seconds allowed for each command

    Returns:
        RedisCache when the ping succeeds, otherwise NullCache
    """
    if not redis_url:
        logger.info("Redis URL not configured, caching disabled")
        return NullCache()

    client = redis.Redis.from_url(
        redis_url,
        socket_connect_timeout=connect_timeout,
        socket_timeout=socket_timeout,
    )
    try:
        client.ping()
    except redis.RedisError as e:
        logger.warning("Redis not reachable, caching disabled", redis_url=redis_url, error=str(e))
        client.close()
        return NullCache()

    logger.info("Connected to Redis", redis_url=redis_url)
    return RedisCache(client)
