"""Helpers for validating and walking bulk-operation arguments."""

from collections.abc import Iterable, Mapping

from memory_cache.domain.errors import InvalidArgumentError


def ensure_iterable(values: object, *, name: str) -> Iterable[object]:
    """Return the argument if it is a non-string iterable collection."""
    if isinstance(values, str | bytes) or not isinstance(values, Iterable):
        raise InvalidArgumentError(f"{name} must be an iterable collection")
    return values


def collect_pairs(values: object) -> list[tuple[object, object]]:
    """Return (key, value) pairs from a mapping or an iterable of pairs.

    The whole input is checked before anything is returned. Each pair must be a
    two-item tuple or list; integer keys are coerced to their string form.
    """
    if isinstance(values, Mapping):
        pairs: Iterable[object] = values.items()
    else:
        pairs = ensure_iterable(values, name="values")
    collected: list[tuple[object, object]] = []
    for pair in pairs:
        if not isinstance(pair, tuple | list) or len(pair) != 2:  # noqa: PLR2004
            raise InvalidArgumentError(
                f"values must contain (key, value) pairs: {pair!r}"
            )
        key, value = pair
        if isinstance(key, int) and not isinstance(key, bool):
            key = str(key)
        collected.append((key, value))
    return collected
