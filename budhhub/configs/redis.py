"""
Redis configuration settings.

Dependencies: pydantic_settings
System role: Cache and token store configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from budhhub.configs.base import BaseSettings


class RedisSettings(BaseSettings):
    """Redis connection and TTL settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="REDIS_",
        case_sensitive=False,
        extra="ignore",
    )

    url: str = Field(
        default="",
        description="Redis URL (redis:// or rediss://). Empty disables cache and token storage",
    )
    cache_ttl: int = Field(
        default=60 * 60 * 24 * 7,
        description="Default cache entry TTL in seconds (7 days)",
    )
    catalog_filters_ttl: int = Field(
        default=300,
        description="TTL for cached catalog category/difficulty facets",
    )

    @property
    def is_configured(self) -> bool:
        return bool(self.url)
