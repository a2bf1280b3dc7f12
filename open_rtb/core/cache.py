"""Compute-or-fetch caches for class descriptions and constant tables.

Caching is purely an optimization: a NullCache recomputes on every call
and yields identical results. Keys are immutable (class objects, enum
classes) and values are computed deterministically, so racing writers
store equal values and no lock is needed.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from typing import Any, Protocol, TypeVar

V = TypeVar("V")


class Cache(Protocol):
    """Cache protocol used by ObjectDescriber and ConstantRegistry."""

    def get_or_compute(self, key: Hashable, factory: Callable[[], V]) -> V:
        """Return the cached value for key, computing and storing it on a miss."""
        ...

    def has(self, key: Hashable) -> bool:
        """Check whether key is cached."""
        ...

    def clear(self) -> None:
        """Drop every cached entry."""
        ...


class MemoryCache:
    """Process-local dict-backed cache."""

    def __init__(self) -> None:
        self._items: dict[Hashable, Any] = {}

    def get_or_compute(self, key: Hashable, factory: Callable[[], V]) -> V:
        try:
            return self._items[key]  # type: ignore[no-any-return]
        except KeyError:
            value = factory()
            self._items[key] = value
            return value

    def has(self, key: Hashable) -> bool:
        return key in self._items

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)


class NullCache:
    """Cache that never stores anything."""

    def get_or_compute(self, key: Hashable, factory: Callable[[], V]) -> V:
        return factory()

    def has(self, key: Hashable) -> bool:
        return False

    def clear(self) -> None:
        return None
