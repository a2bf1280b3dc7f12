"""Object describer - schema metadata for entity classes.

Reads the Field declarations and public methods of an entity class and
produces an immutable ObjectDescription. Descriptions depend only on the
class, never on an instance, so they are cached per class.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any

from open_rtb.core.cache import Cache, MemoryCache
from open_rtb.schema.fields import Field, FieldKind, Requirement

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldDescriptor:
    """Metadata for one declared field."""

    name: str
    wire_name: str
    kind: FieldKind
    type_tag: str
    requirement: Requirement
    default: Any = None
    target: type | None = None
    check: str | None = None
    choices: type[Enum] | None = None
    fallback: bool = False
    init: bool = False
    doc: str | None = None

    def is_required(self) -> bool:
        return self.requirement is Requirement.REQUIRED

    def is_object(self) -> bool:
        """True when the field holds a nested entity or a collection of them."""
        return self.kind in (FieldKind.ENTITY, FieldKind.COLLECTION)

    def is_array(self) -> bool:
        return self.kind in (FieldKind.SCALAR_ARRAY, FieldKind.COLLECTION)

    def is_collection(self) -> bool:
        return self.kind is FieldKind.COLLECTION


@dataclass(frozen=True)
class MethodDescriptor:
    """A public method and the class that defines it.

    ``declared`` is False for methods inherited from the shared Entity base
    (``to_dict``, ``serialize``), True for the entity's own accessors.
    """

    name: str
    declared: bool
    owner: str


@dataclass(frozen=True)
class ObjectDescription:
    """Structured description of an entity class."""

    class_name: str
    namespace: str
    properties: MappingProxyType[str, FieldDescriptor]
    methods: MappingProxyType[str, MethodDescriptor]

    def field(self, name: str) -> FieldDescriptor:
        """Look up a property by field name.

        Raises:
            KeyError: If the class declares no such field.
        """
        return self.properties[name]

    def find(self, segment: str) -> FieldDescriptor | None:
        """Find a property by field name, wire name or CamelCase segment.

        Matching ignores case and underscores, so ``Imp``, ``imp``,
        ``AdmNative`` and ``adm_native`` all resolve.
        """
        if segment in self.properties:
            return self.properties[segment]
        wanted = _normalize(segment)
        for descriptor in self.properties.values():
            if descriptor.fallback:
                continue
            if _normalize(descriptor.name) == wanted or _normalize(descriptor.wire_name) == wanted:
                return descriptor
        for descriptor in self.properties.values():
            if _normalize(descriptor.name) == wanted:
                return descriptor
        return None

    def by_wire_name(self, key: str) -> FieldDescriptor | None:
        """Find the primary (non-fallback) property emitted under a wire key."""
        fallback = None
        for descriptor in self.properties.values():
            if descriptor.wire_name != key:
                continue
            if not descriptor.fallback:
                return descriptor
            fallback = fallback or descriptor
        return self.properties.get(key, fallback)

    def fallback_for(self, key: str) -> FieldDescriptor | None:
        """The fallback property that shares a wire key with a primary one, if any."""
        for descriptor in self.properties.values():
            if descriptor.fallback and descriptor.wire_name == key:
                return descriptor
        return None


def _normalize(name: str) -> str:
    return name.replace("_", "").lower()


def _field_descriptor(declaration: Field) -> FieldDescriptor:
    return FieldDescriptor(
        name=declaration.name,
        wire_name=declaration.wire_name or declaration.name,
        kind=declaration.kind,
        type_tag=declaration.type_tag,
        requirement=declaration.requirement,
        default=declaration.default,
        target=declaration.target,
        check=declaration.check_name,
        choices=declaration.choices,
        fallback=declaration.fallback,
        init=declaration.init,
        doc=declaration.doc,
    )


def _collect_fields(cls: type) -> dict[str, FieldDescriptor]:
    """Field declarations across the MRO, base classes first."""
    properties: dict[str, FieldDescriptor] = {}
    for klass in reversed(cls.__mro__):
        for name, attribute in vars(klass).items():
            if isinstance(attribute, Field):
                properties[name] = _field_descriptor(attribute)
    return properties


def _collect_methods(cls: type) -> dict[str, MethodDescriptor]:
    from open_rtb.schema.entity import Entity

    infrastructure = {Entity, object}
    methods: dict[str, MethodDescriptor] = {}
    for klass in cls.__mro__:
        for name, attribute in vars(klass).items():
            if name.startswith("_") or name in methods:
                continue
            if not isinstance(attribute, (staticmethod, classmethod)) and not callable(attribute):
                continue
            if isinstance(attribute, (Field, type)):
                continue
            methods[name] = MethodDescriptor(
                name=name,
                declared=klass not in infrastructure,
                owner=f"{klass.__module__}.{klass.__qualname__}",
            )
    return methods


class ObjectDescriber:
    """Computes and caches class descriptions.

    Args:
        cache: Cache for descriptions. Defaults to a MemoryCache; pass a
            NullCache to recompute on every call.
    """

    def __init__(self, cache: Cache | None = None) -> None:
        self._cache: Cache = cache if cache is not None else MemoryCache()

    def describe(self, cls: type) -> ObjectDescription:
        """Return the description of cls."""
        return self._cache.get_or_compute(("describe", cls), lambda: self._build(cls))

    def _build(self, cls: type) -> ObjectDescription:
        properties = _collect_fields(cls)
        methods = _collect_methods(cls)
        logger.debug(
            "Described %s: %d properties, %d methods",
            cls.__qualname__,
            len(properties),
            len(methods),
        )
        return ObjectDescription(
            class_name=f"{cls.__module__}.{cls.__qualname__}",
            namespace=cls.__module__.rpartition(".")[0] or cls.__module__,
            properties=MappingProxyType(properties),
            methods=MappingProxyType(methods),
        )


default_describer = ObjectDescriber()


def describe(cls: type) -> ObjectDescription:
    """Shortcut for ``default_describer.describe(cls)``."""
    return default_describer.describe(cls)
