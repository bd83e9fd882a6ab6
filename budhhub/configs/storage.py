"""
Object storage configuration.

Settings for the S3-compatible bucket (Cloudflare R2) holding thumbnails,
lesson videos and study materials.

Dependencies: pydantic_settings
System role: Object storage configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from budhhub.configs.base import BaseSettings


class StorageSettings(BaseSettings):
    """Settings for R2 bucket operations."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="R2_",
        case_sensitive=False,
        extra="ignore",
    )

    account_id: str = Field(default="", description="Cloudflare account ID")
    bucket_name: str = Field(default="", description="Bucket for uploaded files")
    access_key_id: str = Field(default="", description="R2 access key ID")
    secret_access_key: str = Field(default="", description="R2 secret access key")
    public_url: str = Field(
        default="",
        description="Public base URL for the bucket (optional, enables unsigned links)",
    )
    region: str = Field(default="auto", description="Region name passed to the S3 client")
    presigned_url_expiry: int = Field(
        default=3600,
        description="Download URL expiry in seconds (default 1 hour)",
    )
    upload_url_expiry: int = Field(
        default=600,
        description="Upload URL expiry in seconds (default 10 minutes)",
    )

    @property
    def endpoint_url(self) -> str | None:
        """S3 API endpoint derived from the account ID."""
        if not self.account_id:
            return None
        return f"https://{self.account_id}.r2.cloudflarestorage.com"

    @property
    def is_configured(self) -> bool:
        """True when credentials and bucket are all present."""
        return bool(
            self.account_id
            and self.bucket_name
            and self.access_key_id
            and self.secret_access_key
        )
