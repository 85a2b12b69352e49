"""Shared in-memory storage with lazy expiration."""

import copy
import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from threading import Lock
from uuid import UUID

from memory_cache.domain.entries import CacheEntry, Clock
from memory_cache.domain.expiration import is_live, utc_now

_IMMUTABLE_TYPES = (
    type(None),
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    Decimal,
    Fraction,
    UUID,
    Enum,
    date,
    datetime,
    time,
    timedelta,
    range,
)

_logger = logging.getLogger(__name__)


def clone_value(value: object) -> object:
    """Return an independent copy of a value; immutable scalars are returned as is."""
    if isinstance(value, _IMMUTABLE_TYPES):
        return value
    return copy.deepcopy(value)


@dataclass
class MemoryStore:
    """Key to entry mapping shared by the pool and simple cache contracts.

    Values are cloned on the way in and on the way out, so callers never share
    mutable state with the cache. Expired entries are removed on access.
    """

    clock: Clock = utc_now
    _entries: dict[str, CacheEntry] = field(default_factory=dict, repr=False)
    _lock: Lock = field(default_factory=Lock, repr=False)

    def now(self) -> datetime:
        """Return the current time according to the store clock."""
        return self.clock()

    def read(self, key: str) -> CacheEntry | None:
        """Return a copy of the live entry for a key, evicting it if expired."""
        now = self.clock()
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if not is_live(entry, now):
                del self._entries[key]
                _logger.debug("Evicted expired cache entry: key=%s", key)
                return None
        return CacheEntry(value=clone_value(entry.value), expires_at=entry.expires_at)

    def write(self, key: str, value: object, expires_at: datetime | None) -> None:
        """Store a copy of the value, replacing any existing entry."""
        entry = CacheEntry(value=clone_value(value), expires_at=expires_at)
        with self._lock:
            self._entries[key] = entry

    def remove(self, key: str) -> None:
        """Remove a key if present."""
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        """Remove every entry."""
        with self._lock:
            self._entries.clear()

    def keys(self) -> list[str]:
        """Return the stored keys, including expired entries not yet evicted."""
        with self._lock:
            return list(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())
