"""TTL resolution and liveness checks shared by both cache contracts."""

from datetime import UTC, datetime, timedelta

from memory_cache.domain.entries import CacheEntry
from memory_cache.domain.errors import InvalidArgumentError

Ttl = int | timedelta | None


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(tz=UTC)


def validate_ttl(ttl: object) -> Ttl:
    """Return the TTL if it is None, an int number of seconds or a timedelta."""
    if ttl is None or isinstance(ttl, timedelta):
        return ttl
    # bool is an int subclass but never a meaningful TTL
    if isinstance(ttl, int) and not isinstance(ttl, bool):
        return ttl
    raise InvalidArgumentError(
        f"TTL must be None, an int number of seconds or a timedelta: {ttl!r}"
    )


def resolve_expiration(ttl: object, now: datetime) -> datetime | None:
    """Convert a TTL into an absolute expiration; None means never expires.

    Zero and negative TTLs resolve to a moment that is already expired.
    """
    resolved = validate_ttl(ttl)
    if resolved is None:
        return None
    if isinstance(resolved, timedelta):
        return now + resolved
    return now + timedelta(seconds=resolved)


def validate_expiration(when: object) -> datetime | None:
    """Return the expiration if it is None or a timezone-aware datetime."""
    if when is None:
        return None
    if isinstance(when, datetime) and when.tzinfo is not None:
        return when
    raise InvalidArgumentError(
        f"Expiration must be a timezone-aware datetime or None: {when!r}"
    )


def is_live(entry: CacheEntry, now: datetime) -> bool:
    """Return True when the entry never expires or expires strictly after now."""
    return entry.expires_at is None or entry.expires_at > now
