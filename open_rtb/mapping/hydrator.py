"""Hydrator - populate an entity graph from a nested map.

Every value goes through the entity's own setters and adders, so hydrated
graphs are validated exactly like hand-built ones.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel

from open_rtb.core.exceptions import InvalidValue, UnresolvedPath
from open_rtb.schema.describer import FieldDescriptor, ObjectDescriber, default_describer
from open_rtb.schema.entity import Entity
from open_rtb.schema.fields import FieldKind

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Entity)


def _as_mapping(data: Any) -> Mapping[str, Any]:
    """Accept a mapping or a pydantic model."""
    if isinstance(data, BaseModel):
        return data.model_dump(exclude_none=True)
    if isinstance(data, Mapping):
        return data
    raise TypeError(f"Cannot hydrate from {type(data).__name__}; expected a mapping")


class Hydrator:
    """Populate entities from nested maps keyed by wire or field name.

    Args:
        strict: Raise UnresolvedPath for keys the entity does not declare.
            Otherwise such keys are skipped.
        describer: Class descriptions used to resolve keys.
    """

    def __init__(self, strict: bool = False, describer: ObjectDescriber | None = None) -> None:
        self._strict = strict
        self._describer = describer or default_describer

    def hydrate(self, data: Mapping[str, Any] | BaseModel, entity: E) -> E:
        """Populate entity from data and return it.

        Raises:
            InvalidValue: If a setter rejects a value.
            UnresolvedPath: In strict mode, for an undeclared key.
        """
        description = self._describer.describe(type(entity))
        for key, value in _as_mapping(data).items():
            descriptor = description.by_wire_name(key) or description.find(key)
            if descriptor is None:
                if self._strict:
                    raise UnresolvedPath(type(entity).__name__, key, key)
                logger.debug("Skipping unknown key '%s' for %s", key, type(entity).__name__)
                continue
            if value is None:
                continue
            fallback = description.fallback_for(key)
            if fallback is None or fallback is descriptor:
                self._assign(entity, descriptor, value)
                continue
            try:
                self._assign(entity, descriptor, value)
            except InvalidValue as exc:
                # a legacy value emitted under the same wire key
                try:
                    self._assign(entity, fallback, value)
                except InvalidValue:
                    raise exc from None
        return entity

    def _assign(self, entity: Entity, descriptor: FieldDescriptor, value: Any) -> None:
        name = descriptor.name
        if descriptor.kind is FieldKind.ENTITY and isinstance(value, (Mapping, BaseModel)):
            child = getattr(entity, name)
            if child is None:
                child = descriptor.target()  # type: ignore[misc]
            getattr(entity, f"set_{name}")(self.hydrate(value, child))
        elif descriptor.kind is FieldKind.COLLECTION and isinstance(value, list):
            adder = getattr(entity, f"add_{name}")
            for item in value:
                if isinstance(item, (Mapping, BaseModel)):
                    item = self.hydrate(item, descriptor.target())  # type: ignore[misc]
                adder(item)
        else:
            getattr(entity, f"set_{name}")(value)


def hydrate(data: Mapping[str, Any] | BaseModel, entity: E, strict: bool = False) -> E:
    """Shortcut for ``Hydrator(strict).hydrate(data, entity)``."""
    return Hydrator(strict).hydrate(data, entity)
