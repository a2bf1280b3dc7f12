"""Ordered, append-only collection of entities."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from open_rtb.core.validation import validate_instance

T = TypeVar("T")


class ArrayCollection(Generic[T]):
    """Insertion-ordered container for one-to-many relations (imp, bid, deals, ...).

    The element type is fixed per instance: either passed explicitly or taken
    from the first appended element. Append is the only mutation.

    Args:
        element_type: Class every element must be an instance of.
        items: Elements to append in order.
    """

    def __init__(self, element_type: type[T] | None = None, items: Iterable[T] = ()) -> None:
        self._element_type = element_type
        self._items: list[T] = []
        self._position = 0
        for item in items:
            self.add(item)

    @property
    def element_type(self) -> type[T] | None:
        return self._element_type

    def add(self, element: T) -> ArrayCollection[T]:
        """Append an element and return self for chaining.

        Raises:
            InvalidValue: If the element is not of the collection's type.
        """
        if self._element_type is None:
            self._element_type = type(element)
        validate_instance(element, self._element_type)
        self._items.append(element)
        return self

    def count(self) -> int:
        return len(self._items)

    def current(self) -> T | None:
        """Element at the cursor, or None past the end (cursor starts at the first element)."""
        if self._position < len(self._items):
            return self._items[self._position]
        return None

    def next(self) -> T | None:
        """Advance the cursor and return the new current element."""
        self._position += 1
        return self.current()

    def rewind(self) -> T | None:
        """Move the cursor back to the first element."""
        self._position = 0
        return self.current()

    def first(self) -> T | None:
        return self._items[0] if self._items else None

    def to_list(self) -> list[T]:
        """Copy of the elements in insertion order."""
        return list(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __repr__(self) -> str:
        name = self._element_type.__name__ if self._element_type else "?"
        return f"ArrayCollection[{name}]({len(self._items)} items)"
