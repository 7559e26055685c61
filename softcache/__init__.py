"""
softcache - Degrading Redis Cache

A cache facade over Redis that switches itself off on the first sign of
store trouble, plus deterministic cache key derivation.
"""

__version__ = "1.0.0"

from .cache import CacheFacade, CacheResult, close_all_caches, create_cache, derive_key, get_cache
from .errors import CacheError, ConfigurationError, DeserializationError, SerializationError, SoftcacheError

__all__ = [
    "CacheFacade",
    "CacheResult",
    "create_cache",
    "get_cache",
    "close_all_caches",
    "derive_key",
    "SoftcacheError",
    "ConfigurationError",
    "CacheError",
    "SerializationError",
    "DeserializationError",
]
