"""
softcache - Configuration Schemas

Typed configuration models using Pydantic for validation and type safety.
All configuration comes from environment variables and is validated at startup.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Environment(str, Enum):
    """Runtime environment."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TEST = "test"


class LogLevel(str, Enum):
    """Log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class CacheConfig(BaseModel):
    """Cache configuration."""

    enabled: bool = Field(default=False, description="Use the Redis cache at all")
    redis_url: str = Field(default="", description="Redis connection URL (may embed credentials)")
    ttl_seconds: int = Field(default=300, ge=0, description="Entry lifetime in seconds (0 = no expiry)")

    @field_validator("redis_url")
    @classmethod
    def strip_redis_url(cls, v: str) -> str:
        """Treat whitespace-only URLs as unset."""
        return v.strip()


class SoftcacheConfig(BaseModel):
    """Root configuration for softcache."""

    environment: Environment = Field(default=Environment.DEVELOPMENT, description="Runtime environment")
    log_level: LogLevel = Field(default=LogLevel.INFO, description="Logging level")

    cache: CacheConfig = Field(default_factory=CacheConfig)

    model_config = ConfigDict(use_enum_values=True, validate_assignment=True)
