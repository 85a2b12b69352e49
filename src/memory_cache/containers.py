"""Dependency container wiring for the cache."""

from dataclasses import dataclass
from threading import Lock

from memory_cache.app_logging import configure_logging
from memory_cache.config import Settings
from memory_cache.domain.entries import Clock
from memory_cache.domain.expiration import utc_now
from memory_cache.services.pool import CachePool
from memory_cache.services.simple import SimpleCache
from memory_cache.services.store import MemoryStore


@dataclass
class CacheContainer:
    """Holds one store and both access contracts built over it."""

    settings: Settings
    store: MemoryStore
    pool: CachePool
    simple_cache: SimpleCache


def build_container(
    settings: Settings | None = None, clock: Clock | None = None
) -> CacheContainer:
    """Create an independent cache container."""
    resolved_settings = settings or Settings()
    configure_logging(resolved_settings)
    store = MemoryStore(clock=clock or utc_now)
    return CacheContainer(
        settings=resolved_settings,
        store=store,
        pool=CachePool(store, debug=resolved_settings.debug),
        simple_cache=SimpleCache(store, debug=resolved_settings.debug),
    )


_default_container: CacheContainer | None = None
_default_lock = Lock()


def default_container(settings: Settings | None = None) -> CacheContainer:
    """Return the process-wide container, building it on the first call.

    ``settings`` only applies to the call that builds the container.
    """
    global _default_container  # noqa: PLW0603
    with _default_lock:
        if _default_container is None:
            _default_container = build_container(settings)
        return _default_container


def reset_default_container() -> None:
    """Drop the process-wide container so the next call builds a fresh one."""
    global _default_container  # noqa: PLW0603
    with _default_lock:
        _default_container = None
