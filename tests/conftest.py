"""
softcache - Test Configuration and Shared Fixtures

Provides pytest configuration and shared fixtures for unit and integration tests.
The Redis client is replaced by FakeRedis, an in-memory stub that counts calls
and can be told to fail, so the facade's degrade logic is observable without
a server.
"""

import os
import socket
from collections import Counter
from collections.abc import AsyncGenerator, Generator
from typing import Any
from urllib.parse import urlparse

import pytest
import pytest_asyncio
from redis.asyncio import Redis

from softcache.cache import CacheFacade

# Set test environment
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "DEBUG"


DEFAULT_TEST_REDIS_URL = "redis://localhost:6379/15"


def is_redis_available(url: str | None = None) -> bool:
    """Check if the Redis server named by TEST_REDIS_URL accepts connections."""
    parsed = urlparse(url or os.environ.get("TEST_REDIS_URL", DEFAULT_TEST_REDIS_URL))
    if parsed.scheme == "unix":
        return os.path.exists(parsed.path)
    try:
        with socket.create_connection((parsed.hostname or "localhost", parsed.port or 6379), timeout=1):
            return True
    except (OSError, ValueError):
        return False


# Skip marker for Redis tests
redis_available = pytest.mark.skipif(not is_redis_available(), reason="Redis server not available")


class FakeRedis:
    """In-memory stand-in for redis.asyncio.Redis with call counting and failure injection."""

    def __init__(self) -> None:
        self.data: dict[str, bytes] = {}
        self.expiries: dict[str, int | None] = {}
        self.calls: Counter[str] = Counter()
        self.fail_with: BaseException | None = None
        self.close_error: BaseException | None = None
        self.closed = False

    def _record(self, name: str) -> None:
        self.calls[name] += 1
        if self.fail_with is not None:
            raise self.fail_with

    async def ping(self) -> bool:
        self._record("ping")
        return True

    async def get(self, key: str) -> bytes | None:
        self._record("get")
        return self.data.get(key)

    async def set(self, key: str, value: bytes, ex: int | None = None) -> bool:
        self._record("set")
        self.data[key] = value
        self.expiries[key] = ex
        return True

    async def delete(self, *keys: str) -> int:
        self._record("delete")
        removed = 0
        for key in keys:
            if self.data.pop(key, None) is not None:
                removed += 1
            self.expiries.pop(key, None)
        return removed

    async def aclose(self) -> None:
        self.calls["aclose"] += 1
        if self.close_error is not None:
            raise self.close_error
        self.closed = True


@pytest.fixture
def fake_redis() -> FakeRedis:
    """Fresh in-memory Redis stub."""
    return FakeRedis()


@pytest.fixture
def cache(fake_redis: FakeRedis) -> CacheFacade:
    """Enabled facade backed by the stub, 300 second entry lifetime."""
    return CacheFacade(fake_redis, available=True, ttl_seconds=300)  # type: ignore[arg-type]


@pytest.fixture
def test_redis_url() -> str:
    """Get Redis URL for testing (database 15 for isolation)."""
    return os.environ.get("TEST_REDIS_URL", DEFAULT_TEST_REDIS_URL)


@pytest_asyncio.fixture
async def redis_client(test_redis_url: str) -> AsyncGenerator[Redis, None]:
    """
    Create a real Redis client for integration tests.

    Skips when Redis is not reachable. Flushes the test database around each test.
    """
    client: Redis = Redis.from_url(test_redis_url)

    try:
        await client.ping()
    except Exception as e:
        await client.aclose()
        pytest.skip(f"Redis not available for testing: {e}")

    await client.flushdb()

    yield client

    try:
        await client.flushdb()
    finally:
        await client.aclose()


@pytest.fixture
def sample_cache_data() -> dict[str, Any]:
    """Sample JSON-representable values for round-trip tests."""
    return {
        "simple_string": "hello",
        "unicode_string": "héllo wörld ✓ 你好",
        "simple_int": 42,
        "simple_float": 3.14,
        "simple_bool": True,
        "simple_none": None,
        "empty_dict": {},
        "empty_list": [],
        "complex_dict": {
            "nested": {
                "key": "value",
                "number": 123,
                "list": [1, 2, 3],
            }
        },
        "complex_list": [
            {"id": 1, "name": "Alice"},
            {"id": 2, "name": "Bob"},
        ],
    }


@pytest.fixture(autouse=True)
def reset_global_state() -> Generator[None, None, None]:
    """Reset the cache registry and config singleton after each test."""
    yield
    from softcache.cache.factory import reset_cache_factory
    from softcache.config import loader

    reset_cache_factory()
    loader._config_instance = None
