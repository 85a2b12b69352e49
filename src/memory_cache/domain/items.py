"""Item handles for the pool-style cache contract."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Protocol, Self, runtime_checkable

from memory_cache.domain.entries import Clock
from memory_cache.domain.expiration import (
    resolve_expiration,
    utc_now,
    validate_expiration,
)


class CacheItemLike(Protocol):
    """Anything that can be saved into a cache pool."""

    @property
    def key(self) -> str:
        """Return the item key."""

    def get(self) -> object:
        """Return the item value."""


@runtime_checkable
class SupportsExpiration(Protocol):
    """Items that carry their own absolute expiration."""

    @property
    def expiration(self) -> datetime | None:
        """Return the absolute expiration, or None for never."""


@dataclass
class CacheItem:
    """Transient view of one cache access: key, value, hit flag and expiration."""

    _key: str
    _value: object = None
    _hit: bool = False
    _expiration: datetime | None = None
    _clock: Clock = field(default=utc_now, repr=False)

    @property
    def key(self) -> str:
        """Return the key this item was fetched or created for."""
        return self._key

    @property
    def expiration(self) -> datetime | None:
        return self._expiration

    def get(self) -> object:
        """Return the cached value, or None on a miss."""
        return self._value

    def is_hit(self) -> bool:
        """Return True when the item was found live in the cache."""
        return self._hit

    def set(self, value: object) -> Self:
        """Set the value to be saved; the hit flag is left unchanged."""
        self._value = value
        return self

    def expires_at(self, when: datetime | None) -> Self:
        """Set an absolute expiration; None means the item never expires."""
        self._expiration = validate_expiration(when)
        return self

    def expires_after(self, ttl: int | timedelta | None) -> Self:
        """Set an expiration relative to the item clock's current time."""
        self._expiration = resolve_expiration(ttl, self._clock())
        return self
