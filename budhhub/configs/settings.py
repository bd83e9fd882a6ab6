"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from budhhub.configs.auth import AuthSettings
from budhhub.configs.base import BaseSettings
from budhhub.configs.database import DatabaseSettings
from budhhub.configs.redis import RedisSettings
from budhhub.configs.seed import SeedSettings
from budhhub.configs.smtp import SMTPSettings
from budhhub.configs.storage import StorageSettings
from budhhub.configs.upload import UploadSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    redis: RedisSettings = Field(default_factory=RedisSettings)
    smtp: SMTPSettings = Field(default_factory=SMTPSettings)
    auth: AuthSettings = Field(default_factory=AuthSettings)
    upload: UploadSettings = Field(default_factory=UploadSettings)
    seed: SeedSettings = Field(default_factory=SeedSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from budhhub.configs import get_settings
        settings = get_settings()
    """
    return Settings()
