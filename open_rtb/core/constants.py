"""Constant registry - legal-value tables for constrained fields.

Domain tags are Enum classes from ``open_rtb.specification``:

    AdPosition       -> {"UNKNOWN": 0, "ABOVE_THE_FOLD": 1, ...}
    "BannerMimeType" -> {"MIME_FLASH": "application/x-shockwave-flash", ...}
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any

from open_rtb.core.cache import Cache, MemoryCache


class ConstantRegistry:
    """Resolves a domain tag to the full set of its legal values.

    Tags are Enum classes, or the name of an Enum class registered with
    :meth:`register`. Tables are computed from the enum declaration and
    cached in the injected cache; the declaration never changes at runtime.

    Args:
        cache: Cache for computed tables. Defaults to a MemoryCache.
    """

    def __init__(self, cache: Cache | None = None) -> None:
        self._cache: Cache = cache if cache is not None else MemoryCache()
        self._domains: dict[str, type[Enum]] = {}

    def register(self, *domains: type[Enum]) -> None:
        """Make enum classes resolvable by name."""
        for domain in domains:
            self._domains[domain.__name__] = domain

    def resolve(self, tag: type[Enum] | str) -> type[Enum]:
        """Return the Enum class behind a tag.

        Raises:
            KeyError: If a string tag names no registered domain.
        """
        if isinstance(tag, str):
            try:
                return self._domains[tag]
            except KeyError:
                raise KeyError(f"Unknown constant domain: '{tag}'") from None
        return tag

    def all_values(self, tag: type[Enum] | str) -> Mapping[str, Any]:
        """Return ``{symbolic_name: value}`` for every constant in the domain."""
        domain = self.resolve(tag)
        return self._cache.get_or_compute(
            ("constants", domain), lambda: _collect_constants(domain)
        )

    def has(self, name: str) -> bool:
        """Check if a domain name is registered."""
        return name in self._domains

    @property
    def domain_names(self) -> list[str]:
        """Registered domain names, sorted alphabetically."""
        return sorted(self._domains)

    def __len__(self) -> int:
        return len(self._domains)


def _collect_constants(domain: type[Enum]) -> Mapping[str, Any]:
    return MappingProxyType({name: member.value for name, member in domain.__members__.items()})


default_registry = ConstantRegistry()


def all_values(tag: type[Enum] | str) -> Mapping[str, Any]:
    """Shortcut for ``default_registry.all_values(tag)``."""
    return default_registry.all_values(tag)
