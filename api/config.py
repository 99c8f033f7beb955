"""
Configuration settings for the deployments API.
"""

from typing import List
from pydantic_settings import BaseSettings

from lz_deployments.client import DEFAULT_DEPLOYMENTS_URL


class Settings(BaseSettings):
    """Simple settings - just what we actually need."""

    ENVIRONMENT: str = "development"

    # Upstream metadata service
    UPSTREAM_URL: str = DEFAULT_DEPLOYMENTS_URL
    REQUEST_TIMEOUT: float = 10.0
    CACHE_TTL_SECONDS: int = 300

    ALLOWED_ORIGINS: str = "*"  # Will be converted to list

    class Config:
        env_file = ".env"

    @property
    def allowed_origins_list(self) -> List[str]:
        """Convert comma-separated ALLOWED_ORIGINS to list."""
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]


settings = Settings()

# Validate required settings
if settings.ENVIRONMENT == "production":
    if not settings.UPSTREAM_URL:
        raise ValueError("UPSTREAM_URL is required in production")
    elif settings.CACHE_TTL_SECONDS <= 0:
        raise ValueError("CACHE_TTL_SECONDS must be positive in production")
