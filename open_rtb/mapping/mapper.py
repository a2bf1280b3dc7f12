"""Mapper - executes a MappingPlan into a nested map.

Three execution modes share one plan:

- ``map_from_values``: write each entry's literal value.
- ``map_from_array``: the value side names a key of a flat source.
- ``map_from_object``: the value side is a read path into an entity graph.

The result is a plain nested dict keyed by snake_case segment names,
suitable for ``Hydrator.hydrate``. A leading segment naming a root entity
(``BidRequest.Imp[].Id``) is dropped on both the target and the read side.
"""

from __future__ import annotations

import logging
import uuid as uuid_module
from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel

from open_rtb.core.exceptions import MissingRequiredField, PathConflictError, UnresolvedPath
from open_rtb.mapping.path import PathSegment, parse_path
from open_rtb.mapping.plan import MappingEntry, MappingPlan
from open_rtb.schema.describer import FieldDescriptor, ObjectDescriber, default_describer
from open_rtb.schema.entity import Entity, root_entities
from open_rtb.schema.fields import FieldKind
from open_rtb.schema.projector import Projector

logger = logging.getLogger(__name__)

_ABSENT: Any = object()


def _is_empty(value: Any) -> bool:
    if value is None or value is _ABSENT:
        return True
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) == 0
    return False


class _Slot(dict):
    """Array element created to reach an index; dropped if nothing fills it."""


def _compact(node: Any) -> Any:
    if isinstance(node, dict):
        return {key: _compact(value) for key, value in node.items()}
    if isinstance(node, list):
        return [_compact(item) for item in node if not (isinstance(item, _Slot) and not item)]
    return node


def _strip_root(segments: tuple[PathSegment, ...]) -> tuple[PathSegment, ...]:
    if len(segments) > 1 and not segments[0].is_array and segments[0].name in root_entities():
        return segments[1:]
    return segments


class Mapper:
    """Executes mapping plans.

    Args:
        describer: Class descriptions used to resolve read paths.
        projector: Turns entity leaves into Structural Results.
    """

    def __init__(
        self,
        describer: ObjectDescriber | None = None,
        projector: Projector | None = None,
    ) -> None:
        self._describer = describer or default_describer
        self._projector = projector or Projector(self._describer)

    # ------------------------------------------------------------------
    # Execution modes
    # ------------------------------------------------------------------

    def map_from_values(self, plan: MappingPlan, root: Entity | None = None) -> dict[str, Any]:
        """Write every entry's literal value at its target path.

        ``root`` is accepted for symmetry with ``map_from_object``; the
        literal values never read from it.

        Raises:
            MissingRequiredField: If a ``@required`` entry has an empty value.
            PathConflictError: If two entries disagree on the shape at a key.
        """
        logger.debug("Mapping %d entries from literal values", len(plan))
        result: dict[str, Any] = {}
        for entry in plan:
            value = self._finalize(entry, entry.value)
            if value is not _ABSENT:
                self._write(result, entry, value)
        return _compact(result)

    def map_from_array(
        self, plan: MappingPlan, source: Mapping[str, Any] | BaseModel
    ) -> dict[str, Any]:
        """Write ``source[entry.value]`` at each target path.

        ``source`` may be a mapping or a pydantic model.

        Raises:
            MissingRequiredField: If a ``@required`` entry's source key is
                absent or empty.
            PathConflictError: If two entries disagree on the shape at a key.
        """
        if isinstance(source, BaseModel):
            source = source.model_dump()
        logger.debug("Mapping %d entries from a source of %d keys", len(plan), len(source))
        result: dict[str, Any] = {}
        for entry in plan:
            value = source.get(entry.value, _ABSENT)
            value = self._finalize(entry, value)
            if value is not _ABSENT:
                self._write(result, entry, value)
        return _compact(result)

    def map_from_object(self, plan: MappingPlan, root: Entity) -> dict[str, Any]:
        """Read each entry's value side from ``root`` and write it at the target path.

        A read path crossing a collection yields one value per element;
        they are written one element each at the target's first ``[]``
        level, or only the first is written when the target has none.
        Elements whose items were all empty are left out of the result, so
        a sparse source never produces blank array elements.

        Raises:
            UnresolvedPath: If a read path names a field the traversed
                class does not declare.
            MissingRequiredField: If a ``@required`` entry reads empty.
            PathConflictError: If two entries disagree on the shape at a key.
        """
        logger.debug("Mapping %d entries from %s instance", len(plan), type(root).__name__)
        result: dict[str, Any] = {}
        for entry in plan:
            values, fanned = self._read(root, entry.value)
            if fanned and entry.has_array_level:
                for index, value in enumerate(values or [_ABSENT]):
                    value = self._finalize(entry, value)
                    if value is not _ABSENT:
                        self._write(result, entry, value, index)
                continue
            value = values[0] if values else _ABSENT
            value = self._finalize(entry, value)
            if value is not _ABSENT:
                self._write(result, entry, value)
        return _compact(result)

    # ------------------------------------------------------------------
    # Value side
    # ------------------------------------------------------------------

    @staticmethod
    def _finalize(entry: MappingEntry, value: Any) -> Any:
        """Apply ``@uuid`` and ``@required`` to a resolved value."""
        if _is_empty(value):
            if entry.is_uuid():
                return str(uuid_module.uuid4())
            if entry.is_required():
                raise MissingRequiredField("mapping", entry.path)
            return _ABSENT
        return value

    def _read(self, root: Entity, read_path: Any) -> tuple[list[Any], bool]:
        """Resolve a read path against root.

        Returns the values found and whether a collection was crossed.
        """
        parsed = parse_path(read_path)
        segments = _strip_root(parsed.segments)
        descriptors = self._resolve(type(root), segments, parsed.path)

        current: list[Any] = [root]
        fanned = False
        for depth, descriptor in enumerate(descriptors):
            last = depth == len(descriptors) - 1
            found: list[Any] = []
            for node in current:
                if node is None:
                    found.append(None)
                    continue
                value = getattr(node, descriptor.name)
                if last:
                    found.append(self._leaf(descriptor, value))
                elif descriptor.kind is FieldKind.COLLECTION:
                    fanned = True
                    found.extend(value or ())
                else:
                    found.append(value)
            current = found
        return current, fanned

    def _resolve(
        self, cls: type, segments: tuple[PathSegment, ...], path: str
    ) -> list[FieldDescriptor]:
        """Resolve every segment against the declared classes, without instances."""
        descriptors: list[FieldDescriptor] = []
        owner: type | None = cls
        for segment in segments:
            if owner is None:
                previous = descriptors[-1]
                raise UnresolvedPath(previous.type_tag, segment.name, path)
            descriptor = self._describer.describe(owner).find(segment.name)
            if descriptor is None:
                raise UnresolvedPath(owner.__name__, segment.name, path)
            descriptors.append(descriptor)
            owner = descriptor.target if descriptor.is_object() else None
        return descriptors

    def _leaf(self, descriptor: FieldDescriptor, value: Any) -> Any:
        if value is None:
            return None
        if descriptor.kind is FieldKind.ENTITY:
            return self._projector.project_value(descriptor, value)
        if descriptor.kind is FieldKind.COLLECTION:
            return self._projector.project_value(descriptor, value)
        if descriptor.kind is FieldKind.SCALAR_ARRAY:
            return [item.value if isinstance(item, Enum) else item for item in value]
        if descriptor.kind is FieldKind.EXTENSION:
            return self._projector.project_value(descriptor, value)
        return value.value if isinstance(value, Enum) else value

    # ------------------------------------------------------------------
    # Target side
    # ------------------------------------------------------------------

    @staticmethod
    def _write(result: dict[str, Any], entry: MappingEntry, value: Any, index: int = 0) -> None:
        """Place value at the entry's target path.

        ``index`` selects the element at the first ``[]`` level; deeper
        ``[]`` levels always use element 0. A trailing ``[]`` appends.
        """
        segments = _strip_root(entry.segments)
        node: dict[str, Any] = result
        first_array = True
        for position, segment in enumerate(segments):
            key = segment.key
            last = position == len(segments) - 1
            if segment.is_array:
                items = node.setdefault(key, [])
                if not isinstance(items, list):
                    raise PathConflictError(entry.path, f"'{key}' is already a value, not an array")
                if last:
                    items.append(value)
                    return
                element = index if first_array else 0
                first_array = False
                while len(items) <= element:
                    items.append(_Slot())
                child = items[element]
            elif last:
                if isinstance(node.get(key), (dict, list)):
                    raise PathConflictError(entry.path, f"'{key}' already holds nested values")
                node[key] = value
                return
            else:
                child = node.setdefault(key, {})
            if not isinstance(child, dict):
                raise PathConflictError(entry.path, f"'{key}' is already a value, not an object")
            node = child
