"""Mapping plan data classes.

Frozen dataclasses representing compiled mapping declarations. Used by
Mapper at execution time.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from open_rtb.mapping.path import PathSegment


@dataclass(frozen=True)
class MappingEntry:
    """One compiled declaration: target path, annotations and value side."""

    path: str
    segments: tuple[PathSegment, ...]
    value: Any
    required: bool = False
    uuid: bool = False

    def is_required(self) -> bool:
        return self.required

    def is_uuid(self) -> bool:
        return self.uuid

    def get_value(self) -> Any:
        return self.value

    @property
    def has_array_level(self) -> bool:
        return any(segment.is_array for segment in self.segments)


class MappingPlan:
    """Ordered collection of entries, unique by target path.

    Iteration yields entries in declaration order.
    """

    def __init__(self, entries: dict[str, MappingEntry]) -> None:
        self._entries = MappingProxyType(dict(entries))

    @property
    def object_paths(self) -> list[str]:
        return list(self._entries)

    def get_object_paths(self) -> list[str]:
        return self.object_paths

    def get(self, path: str) -> MappingEntry:
        """Look up the entry for a target path (annotations excluded).

        Raises:
            KeyError: If no declaration targets path.
        """
        return self._entries[path]

    def has(self, path: str) -> bool:
        return path in self._entries

    def count(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[MappingEntry]:
        return iter(self._entries.values())

    def __repr__(self) -> str:
        return f"MappingPlan({self.object_paths!r})"
