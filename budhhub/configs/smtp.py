"""
SMTP configuration settings.

Dependencies: pydantic_settings
System role: Outgoing email configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from budhhub.configs.base import BaseSettings


class SMTPSettings(BaseSettings):
    """SMTP transport settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SMTP_",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="", description="SMTP server host")
    port: int = Field(default=587, description="SMTP server port")
    user: str = Field(default="", description="SMTP username")
    password: str = Field(default="", description="SMTP password")
    from_address: str = Field(
        default="",
        description="Sender address (defaults to SMTP user)",
    )
    timeout: int = Field(default=10, description="Connection timeout in seconds")

    @property
    def is_configured(self) -> bool:
        return bool(self.host and self.user and self.password)

    @property
    def use_ssl(self) -> bool:
        """Implicit TLS on port 465, STARTTLS otherwise."""
        return self.port == 465

    @property
    def sender(self) -> str:
        return self.from_address or self.user
