"""Field declarations for entity classes.

A field is declared as a class attribute; the declaration is pure data
(kind, type tag, requirement level, validation check, nested type) that
the describer reads and the entity base class turns into accessors:

    class Deal(Entity):
        id = string(required=True)
        bidfloor = positive_float(default=0.0)
        wseat = strings()
        ext = extension()

Field is also a data descriptor, so ``deal.id = "1"`` runs the same
validation as ``deal.set_id("1")``.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from open_rtb.core.collection import ArrayCollection
from open_rtb.core.constants import all_values
from open_rtb.core.exceptions import InvalidValue
from open_rtb.core.validation import (
    validate_in,
    validate_in_with_custom_500_values,
    validate_int,
    validate_instance,
    validate_ip,
    validate_md5,
    validate_numeric_to_float,
    validate_positive_float,
    validate_positive_int,
    validate_sha1,
    validate_string,
    validate_version,
)

if TYPE_CHECKING:
    from open_rtb.schema.entity import Entity


class FieldKind(Enum):
    """Shape of the value a field holds."""

    SCALAR = "scalar"
    SCALAR_ARRAY = "scalar_array"
    ENTITY = "entity"
    COLLECTION = "collection"
    EXTENSION = "extension"


class Requirement(Enum):
    """Requirement level from the OpenRTB field tables."""

    REQUIRED = "required"
    RECOMMENDED = "recommended"
    DEFAULT = "default"
    OPTIONAL = "optional"


_NO_DEFAULT: Any = object()


class Field:
    """Declaration of one entity field.

    Args:
        kind: Shape of the stored value.
        type_tag: Declared semantic type (``string``, ``int``, ``enum``, ...).
        check: Validation check for scalars and scalar-array elements.
        choices: Constant domain for membership checks.
        target: Entity class for nested and collection fields.
        required: Projection fails when the field is empty.
        recommended: Informational; treated as optional.
        default: Value implied by the protocol when the field is omitted.
        wire_name: External key; defaults to the field name.
        fallback: Emit only when no other field produced ``wire_name``.
        init: Pre-populate a nested entity in the constructor.
        doc: Short description.
    """

    def __init__(
        self,
        kind: FieldKind,
        type_tag: str,
        *,
        check: Callable[..., Any] | None = None,
        choices: type[Enum] | None = None,
        target: type[Entity] | None = None,
        required: bool = False,
        recommended: bool = False,
        default: Any = _NO_DEFAULT,
        wire_name: str | None = None,
        fallback: bool = False,
        init: bool = False,
        doc: str | None = None,
    ) -> None:
        self.kind = kind
        self.type_tag = type_tag
        self.check = check
        self.choices = choices
        self.target = target
        self.default = None if default is _NO_DEFAULT else default
        self.wire_name = wire_name
        self.fallback = fallback
        self.init = init
        self.doc = doc
        self.name = ""
        self.owner: type | None = None
        if required:
            self.requirement = Requirement.REQUIRED
        elif recommended:
            self.requirement = Requirement.RECOMMENDED
        elif default is not _NO_DEFAULT:
            self.requirement = Requirement.DEFAULT
        else:
            self.requirement = Requirement.OPTIONAL

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        self.owner = owner
        if self.wire_name is None:
            self.wire_name = name

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return self.read(instance)

    def read(self, instance: Any) -> Any:
        """Stored value; scalar arrays are returned as a copy."""
        value = instance.__dict__.get(self.name)
        if self.kind is FieldKind.SCALAR_ARRAY and value is not None:
            return list(value)
        return value

    def __set__(self, instance: Entity, value: Any) -> None:
        instance._store(self, value, f"set_{self.name}", _caller_line())

    @property
    def required(self) -> bool:
        return self.requirement is Requirement.REQUIRED

    @property
    def is_array(self) -> bool:
        return self.kind in (FieldKind.SCALAR_ARRAY, FieldKind.COLLECTION)

    @property
    def check_name(self) -> str | None:
        return self.check.__name__ if self.check is not None else None

    def clean(self, value: Any) -> Any:
        """Validate a whole value for this field and return what gets stored."""
        if self.kind is FieldKind.SCALAR:
            return self.clean_element(value)
        if self.kind is FieldKind.SCALAR_ARRAY:
            if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Iterable):
                raise InvalidValue(
                    "validate_array", value, f"expected a list, got {type(value).__name__}"
                )
            return [self.clean_element(item) for item in value]
        if self.kind is FieldKind.ENTITY:
            return validate_instance(value, self.target)  # type: ignore[arg-type]
        if self.kind is FieldKind.COLLECTION:
            return self._clean_collection(value)
        return _clean_extension(value)

    def clean_element(self, value: Any) -> Any:
        """Validate one scalar (or one element of a scalar array)."""
        if self.kind is FieldKind.COLLECTION:
            return validate_instance(value, self.target)  # type: ignore[arg-type]
        if self.check is None:
            return value
        if self.choices is not None:
            return self.check(value, all_values(self.choices).values())
        return self.check(value)

    def _clean_collection(self, value: Any) -> ArrayCollection[Any]:
        if isinstance(value, ArrayCollection) and value.element_type is self.target:
            return value
        if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Iterable):
            raise InvalidValue(
                "validate_array", value, f"expected a collection, got {type(value).__name__}"
            )
        return ArrayCollection(self.target, (self.clean_element(item) for item in value))

    def __repr__(self) -> str:
        return f"<Field {self.name} {self.kind.value}:{self.type_tag}>"


def _clean_extension(value: Any) -> Any:
    if isinstance(value, (Mapping, BaseModel)):
        return value
    raise InvalidValue(
        "validate_extension",
        value,
        f"expected a mapping or pydantic model, got {type(value).__name__}",
    )


def _caller_line(depth: int = 2) -> int | None:
    # frame 0: this helper, 1: the accessor, 2: its caller
    try:
        return sys._getframe(depth).f_lineno
    except ValueError:
        return None


# ---------------------------------------------------------------------------
# Declaration helpers
# ---------------------------------------------------------------------------


def string(**options: Any) -> Field:
    return Field(FieldKind.SCALAR, "string", check=validate_string, **options)


def integer(**options: Any) -> Field:
    return Field(FieldKind.SCALAR, "int", check=validate_int, **options)


def positive_int(**options: Any) -> Field:
    return Field(FieldKind.SCALAR, "int", check=validate_positive_int, **options)


def decimal(**options: Any) -> Field:
    return Field(FieldKind.SCALAR, "float", check=validate_numeric_to_float, **options)


def positive_float(**options: Any) -> Field:
    return Field(FieldKind.SCALAR, "float", check=validate_positive_float, **options)


def ip_address(**options: Any) -> Field:
    return Field(FieldKind.SCALAR, "string", check=validate_ip, **options)


def md5(**options: Any) -> Field:
    return Field(FieldKind.SCALAR, "string", check=validate_md5, **options)


def sha1(**options: Any) -> Field:
    return Field(FieldKind.SCALAR, "string", check=validate_sha1, **options)


def version(**options: Any) -> Field:
    return Field(FieldKind.SCALAR, "string", check=validate_version, **options)


def choice(domain: type[Enum], *, extension_band: bool = False, **options: Any) -> Field:
    """Scalar restricted to the values of a constant domain."""
    check = validate_in_with_custom_500_values if extension_band else validate_in
    return Field(FieldKind.SCALAR, "enum", check=check, choices=domain, **options)


def strings(**options: Any) -> Field:
    return Field(FieldKind.SCALAR_ARRAY, "array<string>", check=validate_string, **options)


def choices(domain: type[Enum], *, extension_band: bool = False, **options: Any) -> Field:
    """Array whose elements are restricted to a constant domain."""
    check = validate_in_with_custom_500_values if extension_band else validate_in
    return Field(FieldKind.SCALAR_ARRAY, "array<enum>", check=check, choices=domain, **options)


def nested(target: type[Entity], *, init: bool = False, **options: Any) -> Field:
    return Field(FieldKind.ENTITY, target.__name__, target=target, init=init, **options)


def collection(target: type[Entity], **options: Any) -> Field:
    return Field(
        FieldKind.COLLECTION, f"ArrayCollection<{target.__name__}>", target=target, **options
    )


def extension(**options: Any) -> Field:
    return Field(FieldKind.EXTENSION, "ext", **options)
