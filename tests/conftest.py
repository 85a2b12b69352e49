"""Shared test fixtures."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

import pytest

from memory_cache.config import Settings
from memory_cache.containers import CacheContainer, build_container
from memory_cache.services.pool import CachePool
from memory_cache.services.simple import SimpleCache
from memory_cache.services.store import MemoryStore

INVALID_KEYS = ["", "a/b", "a{b", "a}b", "a(b", "a)b", "a@b", "a:b", "a\\b"]


@dataclass
class FakeClock:
    """Controllable clock returning a fixed UTC time."""

    current: datetime = field(
        default_factory=lambda: datetime(2024, 1, 1, 12, 0, tzinfo=UTC)
    )

    def __call__(self) -> datetime:
        return self.current

    def advance(self, seconds: float) -> None:
        self.current += timedelta(seconds=seconds)


@dataclass
class Profile:
    """Mutable payload used to check value copies."""

    name: str
    tags: list[str] = field(default_factory=list)


@dataclass
class ForeignItem:
    """Item from another library: has a key and a value, but no expiration."""

    key: str
    value: object

    def get(self) -> object:
        return self.value


@dataclass
class ExpiringForeignItem(ForeignItem):
    """Foreign item that also reports its own expiration."""

    expiration: object = None


@pytest.fixture(autouse=True)
def cache_logger() -> Iterator[logging.Logger]:
    """Restore the cache logger after tests that configure it."""
    logger = logging.getLogger("memory_cache")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield logger
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]


@pytest.fixture
def settings() -> Settings:
    return Settings(debug=False, environment="test")


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def container(settings: Settings, clock: FakeClock) -> CacheContainer:
    return build_container(settings, clock=clock)


@pytest.fixture
def store(container: CacheContainer) -> MemoryStore:
    return container.store


@pytest.fixture
def pool(container: CacheContainer) -> CachePool:
    return container.pool


@pytest.fixture
def simple_cache(container: CacheContainer) -> SimpleCache:
    return container.simple_cache
