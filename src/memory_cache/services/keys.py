"""Cache key validation."""

from memory_cache.domain.errors import InvalidKeyError

FORBIDDEN_CHARACTERS = frozenset("{}()/\\@:")


def validate_key(key: object) -> str:
    """Return the key if it is a usable cache key, else raise InvalidKeyError.

    A valid key is a non-empty string containing none of ``{}()/\\@:``.
    """
    if not isinstance(key, str) or not key:
        raise InvalidKeyError(key)
    if not FORBIDDEN_CHARACTERS.isdisjoint(key):
        raise InvalidKeyError(key)
    return key
