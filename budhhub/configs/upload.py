"""
File upload limits.

Dependencies: pydantic_settings
System role: Upload validation configuration
"""

from pydantic import Field

from budhhub.configs.base import BaseSettings


class UploadSettings(BaseSettings):
    """Upload size limits, read from MAX_VIDEO_SIZE_MB / MAX_MATERIAL_SIZE_MB."""

    max_video_size_mb: int = Field(default=10, description="Maximum lesson video size in MB")
    max_material_size_mb: int = Field(default=50, description="Maximum material size in MB")

    @property
    def max_video_size_bytes(self) -> int:
        return self.max_video_size_mb * 1024 * 1024

    @property
    def max_material_size_bytes(self) -> int:
        return self.max_material_size_mb * 1024 * 1024
