"""Setter validation checks.

Every check returns the accepted (possibly coerced) value or raises
InvalidValue carrying the check's name. Entities call these through their
field declarations; they never store a value a check has not accepted.
"""

from __future__ import annotations

import ipaddress
import math
import re
from collections.abc import Collection
from typing import Any

from open_rtb.core.exceptions import InvalidValue

_MD5_PATTERN = re.compile(r"[0-9a-fA-F]{32}")
_SHA1_PATTERN = re.compile(r"[0-9a-fA-F]{40}")
_NUMBER_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")
# 1, 1.2, 2.5.1, 1.0-beta, 3.0.0+build.7
_VERSION_PATTERN = re.compile(r"\d+(\.\d+){0,3}([-+][0-9A-Za-z.-]+)?")

EXTENSION_BAND = range(500, 600)


def _type_name(value: Any) -> str:
    return type(value).__name__


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_string(value: Any) -> str:
    if not isinstance(value, str):
        raise InvalidValue("validate_string", value, f"expected a string, got {_type_name(value)}")
    return value


def validate_int(value: Any) -> int:
    """Strict integer check: numeric strings, floats and bools are rejected."""
    if not _is_int(value):
        raise InvalidValue("validate_int", value, f"expected an integer, got {_type_name(value)}")
    return value


def validate_positive_int(value: Any) -> int:
    if not _is_int(value):
        raise InvalidValue(
            "validate_positive_int", value, f"expected an integer, got {_type_name(value)}"
        )
    if value < 0:
        raise InvalidValue("validate_positive_int", value, f"expected a value >= 0, got {value}")
    return value


def _to_float(value: Any, check: str) -> float:
    """Coerce to a finite float; strings must be plain decimal or exponent literals."""
    result = None
    if _is_number(value):
        try:
            result = float(value)
        except OverflowError:
            pass
    elif isinstance(value, str) and _NUMBER_PATTERN.fullmatch(value.strip()):
        result = float(value.strip())
    if result is None or not math.isfinite(result):
        raise InvalidValue(check, value, f"expected a finite numeric value, got {value!r}")
    return result


def validate_numeric_to_float(value: Any) -> float:
    """Accept int, float or a numeric string and return a float."""
    return _to_float(value, "validate_numeric_to_float")


def validate_positive_float(value: Any) -> float:
    result = _to_float(value, "validate_positive_float")
    if not result >= 0:
        raise InvalidValue("validate_positive_float", value, f"expected a value >= 0, got {value}")
    return result


def validate_in(value: Any, allowed: Collection[Any]) -> Any:
    """Membership check against a set of legal values."""
    if isinstance(value, str):
        found = any(isinstance(item, str) and item == value for item in allowed)
    else:
        found = any(not isinstance(item, str) and item == value for item in allowed)
    if not found:
        raise InvalidValue(
            "validate_in", value, f"{value!r} is not one of {sorted(map(repr, allowed))}"
        )
    return value


def validate_in_with_custom_500_values(value: Any, allowed: Collection[Any]) -> Any:
    """Membership check that also lets exchange-specific values 500-599 through."""
    if _is_int(value) and value in EXTENSION_BAND:
        return value
    try:
        return validate_in(value, allowed)
    except InvalidValue as exc:
        raise InvalidValue(
            "validate_in_with_custom_500_values",
            value,
            f"{exc.detail} and is outside the "
            f"{EXTENSION_BAND.start}-{EXTENSION_BAND.stop - 1} band",
        ) from exc


def validate_md5(value: Any) -> str:
    if not isinstance(value, str) or not _MD5_PATTERN.fullmatch(value):
        raise InvalidValue("validate_md5", value, f"expected 32 hex characters, got {value!r}")
    return value


def validate_sha1(value: Any) -> str:
    if not isinstance(value, str) or not _SHA1_PATTERN.fullmatch(value):
        raise InvalidValue("validate_sha1", value, f"expected 40 hex characters, got {value!r}")
    return value


def validate_ip(value: Any) -> str:
    """Accept IPv4 and IPv6 literals."""
    if isinstance(value, str):
        try:
            ipaddress.ip_address(value)
            return value
        except ValueError:
            pass
    raise InvalidValue("validate_ip", value, f"expected an IPv4 or IPv6 address, got {value!r}")


def validate_version(value: Any) -> str:
    """Accept version tokens such as ``1``, ``1.2`` or ``2.5.1``.

    Numbers are accepted and returned as their string form.
    """
    if _is_number(value):
        value = str(value)
    if not isinstance(value, str) or not _VERSION_PATTERN.fullmatch(value):
        raise InvalidValue("validate_version", value, f"expected a version string, got {value!r}")
    return value


def validate_instance(value: Any, expected: type) -> Any:
    if not isinstance(value, expected):
        raise InvalidValue(
            "validate_instance",
            value,
            f"expected {expected.__name__}, got {_type_name(value)}",
        )
    return value
