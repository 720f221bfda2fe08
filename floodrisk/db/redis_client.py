"""Thin Redis wrapper used by the forecast DAO."""
import logging
from typing import Optional

import redis

logger = logging.getLogger(__name__)


class RedisClient:
    """Redis client with the key-value and sorted-set operations we need."""

    def __init__(self, client: redis.Redis):
        """Wrap an existing redis.Redis connection.

        Args:
            client: redis.Redis created with decode_responses=True
        """
        self.client = client

        try:
            self.ping()
            logger.info("Connected to Redis")
        except redis.ConnectionError as e:
            logger.error(f"Could not connect to Redis: {e}")
            raise

    @classmethod
    def from_settings(
        cls, host: str = "redis", port: int = 6379, password: str = "", db: int = 0
    ) -> "RedisClient":
        """Open a new connection and wrap it."""
        return cls(redis.Redis(
            host=host,
            port=port,
            password=password if password else None,
            db=db,
            decode_responses=True,
        ))

    def set(self, key: str, value: str) -> None:
        self.client.set(key, value)

    def get(self, key: str) -> Optional[str]:
        return self.client.get(key)

    def mget(self, keys: list[str]) -> list[Optional[str]]:
        if not keys:
            return []
        return self.client.mget(keys)

    def del_(self, key: str) -> int:
        """Delete a key. Returns the number of keys removed."""
        return self.client.delete(key)

    def zadd(self, name: str, member: str, score: float) -> None:
        self.client.zadd(name, {member: score})

    def zrem(self, name: str, *values: str) -> int:
        return self.client.zrem(name, *values)

    def zrevrange(self, name: str, start: int = 0, end: int = -1) -> list[str]:
        """Sorted-set members, highest score first."""
        return self.client.zrevrange(name, start, end)

    def ping(self) -> bool:
        """Check connectivity to Redis.

        Raises:
            redis.ConnectionError if connection fails
        """
        return self.client.ping()
