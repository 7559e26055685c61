"""
softcache - Configuration Loader

Loads and validates configuration from environment variables and .env files.
Provides a singleton configuration instance for the process.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from ..errors import ConfigurationError
from .schemas import SoftcacheConfig

logger = logging.getLogger(__name__)

_config_instance: SoftcacheConfig | None = None

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in _TRUTHY


def _apply_env_file(env_path: Path) -> None:
    """Merge KEY=value pairs from ``env_path`` into os.environ, file values winning."""
    if not env_path.is_file():
        logger.debug("No env file at %s, reading process environment only", env_path)
        return

    try:
        load_dotenv(env_path, override=True)
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(
            f"Cannot read env file {env_path}: {e}",
            details={"path": str(env_path), "error": str(e)},
        ) from e
    logger.debug("Applied env file %s", env_path)


def load_config(
    env_file: str | None = None,
    reload: bool = False,
) -> SoftcacheConfig:
    """
    Load configuration from environment variables and .env file.

    Args:
        env_file: Path to .env file (default: .env in the working directory)
        reload: Force reload even if config already loaded

    Returns:
        Validated SoftcacheConfig instance

    Raises:
        ConfigurationError: If configuration is invalid
    """
    global _config_instance

    if _config_instance is not None and not reload:
        return _config_instance

    _apply_env_file(Path(env_file) if env_file else Path.cwd() / ".env")

    config_dict = {
        "environment": os.getenv("ENVIRONMENT", "development"),
        "log_level": os.getenv("LOG_LEVEL", "INFO").upper(),
        "cache": {
            "enabled": _env_flag("REDIS_ENABLED"),
            "redis_url": os.getenv("REDIS_URL", ""),
            "ttl_seconds": os.getenv("CACHE_TTL_SECONDS", "300"),
        },
    }

    try:
        _config_instance = SoftcacheConfig(**config_dict)  # type: ignore[arg-type]
    except ValidationError as e:
        logger.error(
            "Configuration validation failed: %s",
            e,
            extra={"validation_errors": e.errors()},
        )
        raise ConfigurationError(
            "Configuration validation failed. Check your environment variables.",
            details={"validation_errors": e.errors()},
        ) from e

    logger.info(
        "Configuration loaded (environment: %s, cache enabled: %s)",
        _config_instance.environment,
        _config_instance.cache.enabled,
    )
    return _config_instance


def get_config() -> SoftcacheConfig:
    """
    Get the current configuration instance, loading it on first access.
    """
    if _config_instance is None:
        return load_config()

    return _config_instance


def reload_config(env_file: str | None = None) -> SoftcacheConfig:
    """Force reload configuration."""
    return load_config(env_file=env_file, reload=True)
