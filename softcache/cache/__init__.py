"""
softcache - Cache Module

Redis cache facade that degrades to a no-op, plus key derivation.

Usage:
    from softcache.cache import create_cache, derive_key

    cache = await create_cache()
    key = derive_key("search", {"q": "redis", "page": 2})
    found, results = await cache.get(key, list[dict])
    if not found:
        results = await run_search()
        await cache.set(key, results)
"""

from .codec import decode, encode
from .facade import PING_TIMEOUT_SECONDS, CacheFacade, CacheResult
from .factory import (
    close_all_caches,
    create_cache,
    get_cache,
    list_cache_instances,
    reset_cache_factory,
)
from .keys import derive_key

__all__ = [
    # Facade
    "CacheFacade",
    "CacheResult",
    "PING_TIMEOUT_SECONDS",
    # Factory functions
    "create_cache",
    "get_cache",
    "close_all_caches",
    "list_cache_instances",
    "reset_cache_factory",
    # Keys and codec
    "derive_key",
    "encode",
    "decode",
]
