"""Domain models for stored cache entries."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

Clock = Callable[[], datetime]


@dataclass(frozen=True)
class CacheEntry:
    """A stored value and its absolute expiration, or None for never."""

    value: object
    expires_at: datetime | None = None
