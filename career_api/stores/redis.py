"""Redis store for cached player profiles.

Handles:
- Pooled connections (bounded by settings.redis_max_connections)
- Raw get / set-with-TTL on opaque byte payloads

TTL policies:
- Player profiles: 600 seconds, set on write, never explicitly invalidated

Backend errors surface as redis.RedisError; deciding whether they matter is
left to the caller.
"""

import logging

import redis.asyncio as redis

from career_api.schemas.player import Battletag

# TTL constants (in seconds)
TTL_PLAYER_PROFILE = 600  # 10 minutes

# Key prefixes
PREFIX_PLAYER = "player:"

logger = logging.getLogger("uvicorn.error")


def player_cache_key(battletag: Battletag) -> str:
    """Build cache key for a player profile (e.g. "player:Name#1234")."""
    return f"{PREFIX_PLAYER}{battletag}"


class ProfileCache:
    """Byte-oriented Redis cache backed by a bounded connection pool."""

    def __init__(self, client: redis.Redis):
        self._redis = client

    @classmethod
    def from_url(cls, url: str, max_connections: int = 20) -> "ProfileCache":
        """Create a cache on a fresh connection pool.

        No connection is opened until the first command.
        """
        pool = redis.ConnectionPool.from_url(
            url,
            max_connections=max_connections,
            decode_responses=False,
            socket_connect_timeout=5,
            socket_timeout=5,
        )
        return cls(redis.Redis(connection_pool=pool))

    async def ping(self) -> None:
        """Validate connectivity."""
        await self._redis.ping()
        logger.info("Redis connected")

    async def close(self) -> None:
        """Close the client and disconnect the pool."""
        await self._redis.aclose(close_connection_pool=True)

    async def get(self, key: str) -> bytes | None:
        """Get value from cache.

        Args:
            key: Cache key.

        Returns:
            Cached bytes or None if not found.
        """
        return await self._redis.get(key)

    async def set(self, key: str, value: bytes, ttl: int) -> None:
        """Set value in cache with TTL.

        Args:
            key: Cache key.
            value: Serialized payload.
            ttl: Time-to-live in seconds.
        """
        await self._redis.setex(key, ttl, value)
