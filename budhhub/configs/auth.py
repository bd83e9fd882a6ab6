"""
Authentication configuration settings.

The identity provider signs bearer tokens with a shared secret; the API
only verifies them.

Dependencies: pydantic_settings
System role: Token verification and password reset configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from budhhub.configs.base import BaseSettings


class AuthSettings(BaseSettings):
    """Bearer token and password reset settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="AUTH_",
        case_sensitive=False,
        extra="ignore",
    )

    secret: str = Field(default="", description="Shared secret used to sign bearer tokens")
    algorithm: str = Field(default="HS256", description="JWT signing algorithm")
    password_reset_ttl: int = Field(
        default=3600,
        description="Password reset token lifetime in seconds",
    )
