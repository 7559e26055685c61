"""
softcache - Cache Factory

Canonical way to obtain process-wide cache facades.

Key points:
- One facade per name, created once at startup and shared by all callers
- Configuration comes from softcache.config unless passed explicitly
- Creation never fails on store trouble; the facade degrades to disabled

Examples:
    from softcache.cache import create_cache, close_all_caches

    cache = await create_cache()          # uses REDIS_URL / REDIS_ENABLED / CACHE_TTL_SECONDS
    ...
    await close_all_caches()              # at shutdown
"""

from __future__ import annotations

import logging

from ..config import CacheConfig, get_config
from .facade import CacheFacade

logger = logging.getLogger(__name__)

# Global cache instances registry
_cache_instances: dict[str, CacheFacade] = {}


async def create_cache(
    config: CacheConfig | None = None,
    name: str = "default",
) -> CacheFacade:
    """
    Create (or return the already registered) cache facade for ``name``.

    Args:
        config: Cache configuration (uses global config if not provided)
        name: Cache instance name

    Returns:
        Cache facade, possibly disabled
    """
    if name in _cache_instances:
        logger.debug("Returning existing cache instance: %s", name)
        return _cache_instances[name]

    if config is None:
        config = get_config().cache

    logger.info(
        "Creating cache instance '%s'",
        name,
        extra={"cache_name": name, "cache_enabled": config.enabled},
    )

    cache = await CacheFacade.create(
        redis_url=config.redis_url,
        enabled=config.enabled,
        ttl_seconds=config.ttl_seconds,
    )
    _cache_instances[name] = cache

    logger.info(
        "Cache instance '%s' ready (available: %s)",
        name,
        cache.is_available(),
        extra={"cache_name": name, "available": cache.is_available()},
    )
    return cache


async def get_cache(name: str = "default") -> CacheFacade:
    """
    Get an existing cache instance by name, creating it from the global
    configuration if needed.
    """
    if name not in _cache_instances:
        logger.debug("Cache instance '%s' not found, creating new instance", name)
        return await create_cache(name=name)

    return _cache_instances[name]


async def close_all_caches() -> list[str]:
    """
    Shut down every registered facade and empty the registry.

    Instances are closed one by one; a facade whose client fails to close is
    logged and skipped so the rest still release their connections.

    Returns:
        Names of the instances whose close raised
    """
    failed: list[str] = []
    while _cache_instances:
        name, cache = _cache_instances.popitem()
        try:
            await cache.close()
        except Exception as e:
            failed.append(name)
            logger.error(
                "Error closing cache instance '%s': %r",
                name,
                e,
                extra={"cache_name": name, "error": str(e)},
                exc_info=True,
            )
        else:
            logger.debug("Cache instance '%s' closed", name)

    if failed:
        logger.warning("Cache shutdown finished with %d close failure(s)", len(failed))
    return failed


def reset_cache_factory() -> None:
    """Drop registered facades without closing them (tests only)."""
    _cache_instances.clear()


def list_cache_instances() -> list[str]:
    """Registered cache names, sorted."""
    return sorted(_cache_instances)
