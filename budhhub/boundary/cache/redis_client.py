"""
Redis client factory.

Dependencies: redis
System role: Shared asyncio Redis connection for cache and token storage
"""

import logging
from functools import lru_cache

from redis.asyncio import Redis

from budhhub.configs import get_settings

logger = logging.getLogger(__name__)


@lru_cache
def get_redis_client() -> Redis | None:
    """
    Build the process-wide Redis client from REDIS_URL.

    Returns:
        Redis | None: Client, or None when Redis is not configured
    """
    settings = get_settings().redis
    if not settings.is_configured:
        logger.warning("REDIS_URL not set; cache and reset tokens are disabled")
        return None
    return Redis.from_url(settings.url, decode_responses=True)
