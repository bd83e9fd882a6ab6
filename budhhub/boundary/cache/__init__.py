"""Redis-backed cache and token storage."""

from budhhub.boundary.cache.redis_cache import RedisCache
from budhhub.boundary.cache.redis_client import get_redis_client
from budhhub.boundary.cache.token_store import TokenStore

__all__ = ["RedisCache", "TokenStore", "get_redis_client"]
