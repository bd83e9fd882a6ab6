"""
JSON cache on top of Redis.

A disabled cache (no client) behaves as a permanent miss. Redis errors are
logged and treated as misses so a cache outage never fails a request.

Dependencies: redis
System role: Read-through cache for expensive queries
"""

import json
import logging
from typing import Any

from redis.asyncio import Redis
from redis.exceptions import RedisError

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 60 * 60 * 24 * 7

CATALOG_FILTERS_KEY = "catalog:filters"


class RedisCache:
    """Get/set/delete/has over JSON-encoded values."""

    def __init__(self, client: Redis | None, default_ttl: int = DEFAULT_TTL_SECONDS) -> None:
        """
        Args:
            client: asyncio Redis client, None to disable caching
            default_ttl: TTL in seconds applied when ``set`` gets none
        """
        self._client = client
        self._default_ttl = default_ttl

    async def get(self, key: str) -> Any | None:
        """
        Read a cached value.

        Returns:
            Decoded JSON value, or None on miss, error or disabled cache
        """
        if self._client is None:
            return None
        try:
            raw = await self._client.get(key)
        except RedisError as e:
            logger.error("Cache read failed", extra={"cache_key": key, "error": str(e)})
            return None
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            logger.warning("Discarding undecodable cache entry", extra={"cache_key": key})
            return None

    async def set(self, key: str, value: Any, ttl: int | None = None) -> bool:
        """
        Store a JSON-serializable value.

        Args:
            key: Cache key
            value: Value to encode
            ttl: Expiry in seconds (default: 7 days)

        Returns:
            bool: True if stored
        """
        if self._client is None:
            return False
        try:
            await self._client.set(key, json.dumps(value, default=str), ex=ttl or self._default_ttl)
            return True
        except RedisError as e:
            logger.error("Cache write failed", extra={"cache_key": key, "error": str(e)})
            return False

    async def delete(self, key: str) -> None:
        if self._client is None:
            return
        try:
            await self._client.delete(key)
        except RedisError as e:
            logger.error("Cache delete failed", extra={"cache_key": key, "error": str(e)})

    async def has(self, key: str) -> bool:
        if self._client is None:
            return False
        try:
            return bool(await self._client.exists(key))
        except RedisError as e:
            logger.error("Cache lookup failed", extra={"cache_key": key, "error": str(e)})
            return False
