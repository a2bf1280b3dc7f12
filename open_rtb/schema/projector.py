"""Structural projector - entity graph to pruned nested dict.

Walks an entity using its class description and emits only populated
fields. Empty optional fields are dropped; an empty required field aborts
the whole projection with MissingRequiredField.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel

from open_rtb.core.exceptions import MissingRequiredField
from open_rtb.schema.describer import FieldDescriptor, ObjectDescriber, default_describer
from open_rtb.schema.fields import FieldKind


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) == 0
    return False


class Projector:
    """Turns entities into Structural Results.

    Args:
        describer: Source of class descriptions. Defaults to the shared
            cached describer.
    """

    def __init__(self, describer: ObjectDescriber | None = None) -> None:
        self._describer = describer or default_describer

    def project(self, entity: Any) -> dict[str, Any]:
        """Project one entity (and everything it owns) to a nested dict.

        Raises:
            MissingRequiredField: If a required field, nested entity or
                collection is empty.
        """
        description = self._describer.describe(type(entity))
        owner = type(entity).__name__
        result: dict[str, Any] = {}
        for descriptor in description.properties.values():
            if descriptor.fallback and descriptor.wire_name in result:
                continue
            value = self.project_value(descriptor, getattr(entity, descriptor.name))
            if value is None:
                if descriptor.is_required():
                    raise MissingRequiredField(owner, descriptor.name)
                continue
            result[descriptor.wire_name] = value
        return result

    def project_value(self, descriptor: FieldDescriptor, value: Any) -> Any:
        """Project a single field value; None means "omit"."""
        kind = descriptor.kind
        if kind is FieldKind.SCALAR:
            return None if _is_empty(value) else _plain(value)
        if kind is FieldKind.SCALAR_ARRAY:
            return [_plain(item) for item in value] if value else None
        if kind is FieldKind.ENTITY:
            if value is None:
                return None
            if not descriptor.is_required() and self.is_blank(value):
                return None
            return self.project(value) or None
        if kind is FieldKind.COLLECTION:
            if not value:
                return None
            return [self.project(item) for item in value]
        return self._project_extension(value)

    def is_blank(self, entity: Any) -> bool:
        """True when no field of entity (recursively) holds a value.

        Blank optional entities are skipped without projecting them, so the
        empty sub-objects pre-populated by constructors never trip their own
        required fields.
        """
        description = self._describer.describe(type(entity))
        for descriptor in description.properties.values():
            value = getattr(entity, descriptor.name)
            if descriptor.kind is FieldKind.ENTITY:
                if value is not None and not self.is_blank(value):
                    return False
            elif descriptor.kind is FieldKind.COLLECTION:
                if value:
                    return False
            elif descriptor.kind is FieldKind.EXTENSION:
                if self._project_extension(value) is not None:
                    return False
            elif not _is_empty(value):
                return False
        return True

    @staticmethod
    def _project_extension(value: Any) -> Any:
        if value is None:
            return None
        if isinstance(value, BaseModel):
            value = value.model_dump(exclude_none=True)
        else:
            value = dict(value)
        return value or None


default_projector = Projector()


def project(entity: Any) -> dict[str, Any]:
    """Shortcut for ``default_projector.project(entity)``."""
    return default_projector.project(entity)
