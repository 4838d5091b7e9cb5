"""Prediction cache configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings


class CacheConfig(BaseSettings):
    """Prediction cache configuration.

    Attributes:
        cache_enabled: Serve repeated inputs from the prediction cache.
        cache_ttl_seconds: Lifetime of a cached prediction.
        cache_max_entries: Maximum number of cached predictions.
    """

    cache_enabled: bool = Field(default=True, description="Enable the prediction cache")
    cache_ttl_seconds: int = Field(
        default=3600,
        description="Seconds a cached prediction stays valid",
        ge=1,
        le=604800,
    )
    cache_max_entries: int = Field(
        default=1000,
        description="Maximum number of cached predictions",
        ge=1,
        le=1000000,
    )

    class Config:
        """Pydantic configuration."""

        env_prefix = "FORGE_"
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"
