"""Database clients."""
from floodrisk.db.redis_client import RedisClient

__all__ = ["RedisClient"]
