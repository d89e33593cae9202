from typing import Optional, TypeVar

T = TypeVar('T')


def value_or_default(value: Optional[T], default: T) -> T:
    """Return ``default`` when ``value`` is None, otherwise ``value`` (falsy values are kept)."""
    return default if value is None else value
