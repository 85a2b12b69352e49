"""Direct get/set/delete cache contract operating on raw values."""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime, timedelta

from memory_cache.domain.errors import InvalidKeyError
from memory_cache.domain.expiration import resolve_expiration
from memory_cache.services.bulk import collect_pairs, ensure_iterable
from memory_cache.services.keys import validate_key
from memory_cache.services.store import MemoryStore

_logger = logging.getLogger(__name__)


@dataclass
class SimpleCache:
    """Simple cache over a shared memory store."""

    store: MemoryStore
    debug: bool = False

    def get(self, key: str, default: object = None) -> object:
        """Return the cached value, or ``default`` on a miss."""
        validate_key(key)
        entry = self.store.read(key)
        if entry is None:
            return default
        return entry.value

    def set(
        self, key: str, value: object, ttl: int | timedelta | None = None
    ) -> bool:
        """Store a value with an optional TTL in seconds or as a timedelta."""
        validate_key(key)
        return self._write(key, value, resolve_expiration(ttl, self.store.now()))

    def delete(self, key: str) -> bool:
        """Remove a key; absent keys are not an error."""
        validate_key(key)
        self.store.remove(key)
        if self.debug:
            _logger.info("Cache delete: key=%s", key)
        return True

    def clear(self) -> bool:
        """Remove every cached value."""
        self.store.clear()
        if self.debug:
            _logger.info("Cache cleared")
        return True

    def get_multiple(
        self, keys: Iterable[str], default: object = None
    ) -> dict[str, object]:
        """Return a key to value mapping, using ``default`` for misses."""
        return {
            key: self.get(key, default) for key in ensure_iterable(keys, name="keys")
        }

    def set_multiple(
        self,
        values: Mapping[str, object] | Iterable[tuple[str, object]],
        ttl: int | timedelta | None = None,
    ) -> bool:
        """Store every value with the same TTL.

        Every valid key is written even when others are invalid; the first
        invalid key is then raised as InvalidKeyError.
        """
        expires_at = resolve_expiration(ttl, self.store.now())
        pairs = collect_pairs(values)
        result = True
        invalid: list[InvalidKeyError] = []
        for key, value in pairs:
            try:
                result = self._write(key, value, expires_at) and result
            except InvalidKeyError as exc:
                invalid.append(exc)
        if invalid:
            _logger.warning(
                "Cache set_multiple skipped %s invalid key(s)", len(invalid)
            )
            raise invalid[0]
        return result

    def delete_multiple(self, keys: Iterable[str]) -> bool:
        """Remove every key; invalid keys are reported after the rest are removed."""
        result = True
        invalid: list[InvalidKeyError] = []
        for key in ensure_iterable(keys, name="keys"):
            try:
                result = self.delete(key) and result
            except InvalidKeyError as exc:
                invalid.append(exc)
        if invalid:
            _logger.warning(
                "Cache delete_multiple skipped %s invalid key(s)", len(invalid)
            )
            raise invalid[0]
        return result

    def has(self, key: str) -> bool:
        """Return True when a live value exists for the key."""
        validate_key(key)
        return self.store.read(key) is not None

    def _write(self, key: object, value: object, expires_at: datetime | None) -> bool:
        self.store.write(validate_key(key), value, expires_at)
        if self.debug:
            _logger.info("Cache set: key=%s expires_at=%s", key, expires_at)
        return True
