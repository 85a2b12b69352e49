"""Exceptions raised by the cache."""


class CacheError(Exception):
    """Base class for cache errors."""


class InvalidArgumentError(CacheError, ValueError):
    """Raised when an argument is not one of the accepted forms."""


class InvalidKeyError(InvalidArgumentError):
    """Raised when a cache key fails validation."""

    def __init__(self, key: object) -> None:
        super().__init__(f"Invalid cache key: {key!r}")
        self.key = key
