"""Item-oriented cache contract: fetch an item, mutate it, save it back."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from memory_cache.domain.expiration import validate_expiration
from memory_cache.domain.items import CacheItem, CacheItemLike, SupportsExpiration
from memory_cache.services.bulk import ensure_iterable
from memory_cache.services.keys import validate_key
from memory_cache.services.store import MemoryStore

_logger = logging.getLogger(__name__)


@dataclass
class CachePool:
    """Item pool over a shared memory store.

    Saves are applied immediately, so deferred saves and commits are trivial.
    """

    store: MemoryStore
    debug: bool = False

    def get_item(self, key: str) -> CacheItem:
        """Return an item for the key; misses are reported by ``is_hit()``."""
        validate_key(key)
        entry = self.store.read(key)
        if entry is None:
            return CacheItem(key, _clock=self.store.clock)
        return CacheItem(
            key,
            _value=entry.value,
            _hit=True,
            _expiration=entry.expires_at,
            _clock=self.store.clock,
        )

    def get_items(self, keys: Iterable[str] = ()) -> dict[str, CacheItem]:
        """Return an item for every requested key, hit or miss."""
        return {key: self.get_item(key) for key in ensure_iterable(keys, name="keys")}

    def has_item(self, key: str) -> bool:
        """Return True when a live item exists for the key.

        The answer may be stale by the time a later ``get_item`` runs; use the
        hit flag of a fetched item when that matters.
        """
        return self.get_item(key).is_hit()

    def clear(self) -> bool:
        """Remove every item from the pool."""
        self.store.clear()
        if self.debug:
            _logger.info("Cache pool cleared")
        return True

    def delete_item(self, key: str) -> bool:
        """Remove the item for a key; absent keys are not an error."""
        validate_key(key)
        self.store.remove(key)
        if self.debug:
            _logger.info("Cache pool delete: key=%s", key)
        return True

    def delete_items(self, keys: Iterable[str]) -> bool:
        """Remove items for every key, stopping at the first invalid key."""
        result = True
        for key in ensure_iterable(keys, name="keys"):
            result = self.delete_item(key) and result
        return result

    def save(self, item: CacheItemLike) -> bool:
        """Persist an item immediately.

        Items that do not carry an expiration are stored without one.
        """
        key = validate_key(item.key)
        expires_at = None
        if isinstance(item, SupportsExpiration):
            expires_at = validate_expiration(item.expiration)
        self.store.write(key, item.get(), expires_at)
        if self.debug:
            _logger.info("Cache pool save: key=%s expires_at=%s", key, expires_at)
        return True

    def save_deferred(self, item: CacheItemLike) -> bool:
        """Persist an item; nothing is buffered."""
        return self.save(item)

    def commit(self) -> bool:
        return True
