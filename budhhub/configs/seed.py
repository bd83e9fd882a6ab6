"""
Development seed accounts.

Dependencies: pydantic_settings
System role: Configuration for the seed script
"""

from pydantic import Field

from budhhub.configs.base import BaseSettings


class SeedSettings(BaseSettings):
    """Accounts created by ``python -m budhhub.scripts.seed``."""

    admin_email: str = Field(default="admin@budhhub.com")
    admin_password: str = Field(default="Admin@1234")
    admin_name: str = Field(default="Admin")
    instructor_email: str = Field(default="instructor@budhhub.com")
    instructor_password: str = Field(default="Instructor@1234")
    instructor_name: str = Field(default="Instructor")
