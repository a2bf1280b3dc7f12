"""Projection and membership laws checked over every entity class."""

from __future__ import annotations

from typing import Any

import pytest

from open_rtb import bid_request, bid_response, native_request, native_response
from open_rtb.core.constants import all_values
from open_rtb.core.exceptions import InvalidValue, MissingRequiredField
from open_rtb.schema.describer import FieldDescriptor, describe
from open_rtb.schema.entity import Entity
from open_rtb.schema.fields import FieldKind

ENTITY_CLASSES = [
    getattr(package, name)
    for package in (bid_request, bid_response, native_request, native_response)
    for name in package.__all__
    if isinstance(getattr(package, name), type) and issubclass(getattr(package, name), Entity)
]

SAMPLES = {
    "validate_string": "x",
    "validate_int": 1,
    "validate_positive_int": 1,
    "validate_numeric_to_float": 1.5,
    "validate_positive_float": 1.5,
    "validate_ip": "127.0.0.1",
    "validate_md5": "a" * 32,
    "validate_sha1": "a" * 40,
    "validate_version": "1.2",
}


def _label(cls: type) -> str:
    return f"{cls.__module__.split('.')[1]}.{cls.__name__}"


def _fields(cls: type) -> list[FieldDescriptor]:
    return list(describe(cls).properties.values())


def _has_required(cls: type) -> bool:
    return any(descriptor.is_required() for descriptor in _fields(cls))


def _sample(descriptor: FieldDescriptor) -> Any:
    if descriptor.choices is not None:
        return list(all_values(descriptor.choices).values())[-1]
    return SAMPLES[descriptor.check]


def _outside(domain_values: list[Any]) -> Any:
    if all(isinstance(value, str) for value in domain_values):
        return "not-a-listed-value"
    return 99999


MEMBERSHIP_CASES = [
    pytest.param(cls, descriptor, value, id=f"{_label(cls)}.{descriptor.name}={value!r}")
    for cls in ENTITY_CLASSES
    for descriptor in _fields(cls)
    if descriptor.choices is not None
    for value in all_values(descriptor.choices).values()
]

MEMBERSHIP_FIELDS = [
    pytest.param(cls, descriptor, id=f"{_label(cls)}.{descriptor.name}")
    for cls in ENTITY_CLASSES
    for descriptor in _fields(cls)
    if descriptor.choices is not None
]

OPTIONAL_ONLY = [cls for cls in ENTITY_CLASSES if not _has_required(cls)]

SINGLE_SCALAR_CASES = [
    pytest.param(cls, descriptor, id=f"{_label(cls)}.{descriptor.name}")
    for cls in OPTIONAL_ONLY
    for descriptor in _fields(cls)
    if descriptor.kind is FieldKind.SCALAR
]


class TestEntityCoverage:
    def test_every_graph_class_is_collected(self) -> None:
        assert len(ENTITY_CLASSES) == 41
        assert len(MEMBERSHIP_FIELDS) > 50


class TestMembershipLaw:
    @pytest.mark.parametrize(("cls", "descriptor", "value"), MEMBERSHIP_CASES)
    def test_legal_value_round_trips(self, cls: type, descriptor: FieldDescriptor, value) -> None:
        entity = cls()
        if descriptor.kind is FieldKind.SCALAR_ARRAY:
            getattr(entity, f"set_{descriptor.name}")([value])
            assert getattr(entity, f"get_{descriptor.name}")() == [value]
        else:
            getattr(entity, f"set_{descriptor.name}")(value)
            assert getattr(entity, f"get_{descriptor.name}")() == value

    @pytest.mark.parametrize(("cls", "descriptor"), MEMBERSHIP_FIELDS)
    def test_value_outside_domain_is_rejected(self, cls: type, descriptor: FieldDescriptor) -> None:
        bad = _outside(list(all_values(descriptor.choices).values()))
        entity = cls()
        with pytest.raises(InvalidValue) as exc_info:
            if descriptor.kind is FieldKind.SCALAR_ARRAY:
                getattr(entity, f"set_{descriptor.name}")([bad])
            else:
                getattr(entity, f"set_{descriptor.name}")(bad)
        assert exc_info.value.check == descriptor.check
        assert getattr(entity, f"get_{descriptor.name}")() is None


class TestPruningLaw:
    @pytest.mark.parametrize("cls", OPTIONAL_ONLY, ids=_label)
    def test_fresh_entity_projects_to_empty_dict(self, cls: type) -> None:
        assert cls().to_dict() == {}

    @pytest.mark.parametrize(("cls", "descriptor"), SINGLE_SCALAR_CASES)
    def test_one_optional_scalar_yields_exactly_its_key(
        self, cls: type, descriptor: FieldDescriptor
    ) -> None:
        entity = cls()
        getattr(entity, f"set_{descriptor.name}")(_sample(descriptor))
        assert list(entity.to_dict()) == [descriptor.wire_name]


class TestRequiredFieldLaw:
    @pytest.mark.parametrize(
        "cls", [cls for cls in ENTITY_CLASSES if _has_required(cls)], ids=_label
    )
    def test_fresh_entity_with_required_fields_fails(self, cls: type) -> None:
        with pytest.raises(MissingRequiredField):
            cls().to_dict()
