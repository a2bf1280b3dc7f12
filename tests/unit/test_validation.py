"""Unit tests for setter validation checks."""

from __future__ import annotations

import pytest

from open_rtb.core.exceptions import InvalidValue
from open_rtb.core.validation import (
    validate_in,
    validate_in_with_custom_500_values,
    validate_int,
    validate_ip,
    validate_md5,
    validate_numeric_to_float,
    validate_positive_float,
    validate_positive_int,
    validate_sha1,
    validate_string,
    validate_version,
)


class TestScalars:
    def test_string_accepts_str(self) -> None:
        assert validate_string("USD") == "USD"

    @pytest.mark.parametrize("value", [1, 1.5, None, ["USD"]])
    def test_string_rejects_non_str(self, value) -> None:
        with pytest.raises(InvalidValue) as exc_info:
            validate_string(value)
        assert exc_info.value.check == "validate_string"

    def test_int_accepts_int(self) -> None:
        assert validate_int(-3) == -3

    @pytest.mark.parametrize("value", ["test", 1.234, object(), True])
    def test_int_rejects(self, value) -> None:
        with pytest.raises(InvalidValue):
            validate_int(value)

    @pytest.mark.parametrize("value", ["test", 1.234, object(), -1])
    def test_positive_int_rejects(self, value) -> None:
        with pytest.raises(InvalidValue) as exc_info:
            validate_positive_int(value)
        assert exc_info.value.check == "validate_positive_int"

    def test_positive_int_accepts_zero(self) -> None:
        assert validate_positive_int(0) == 0

    @pytest.mark.parametrize("value", [0, 0.0, 1, 1.2])
    def test_positive_float_accepts(self, value) -> None:
        assert validate_positive_float(value) == float(value)

    @pytest.mark.parametrize("value", ["test", -1, -1.2])
    def test_positive_float_rejects(self, value) -> None:
        with pytest.raises(InvalidValue):
            validate_positive_float(value)

    def test_numeric_string_becomes_float(self) -> None:
        assert validate_numeric_to_float("2.50") == 2.5

    def test_numeric_rejects_bool(self) -> None:
        with pytest.raises(InvalidValue):
            validate_numeric_to_float(True)

    @pytest.mark.parametrize(("value", "expected"), [("1e3", 1000.0), (" .5 ", 0.5), ("-2.", -2.0)])
    def test_numeric_accepts_plain_literals(self, value: str, expected: float) -> None:
        assert validate_numeric_to_float(value) == expected

    @pytest.mark.parametrize(
        "value",
        [
            "nan",
            "NaN",
            "inf",
            "-Infinity",
            "1_000",
            "0x10",
            "1e999",
            "",
            float("nan"),
            float("inf"),
            10**400,
        ],
    )
    def test_numeric_rejects_non_finite(self, value) -> None:
        with pytest.raises(InvalidValue) as exc_info:
            validate_numeric_to_float(value)
        assert exc_info.value.check == "validate_numeric_to_float"

    @pytest.mark.parametrize("value", ["nan", "inf", float("nan"), float("-inf"), "1_000"])
    def test_positive_float_rejects_non_finite(self, value) -> None:
        with pytest.raises(InvalidValue) as exc_info:
            validate_positive_float(value)
        assert exc_info.value.check == "validate_positive_float"


class TestMembership:
    @pytest.mark.parametrize(
        ("value", "allowed"),
        [(1, [1, 2, 3]), ("alpha", ["alpha", "bravo"])],
    )
    def test_in_accepts_member(self, value, allowed) -> None:
        assert validate_in(value, allowed) == value

    @pytest.mark.parametrize(
        ("value", "allowed"),
        [("test", ["alpha", "bravo"]), (1, [2, 3])],
    )
    def test_in_rejects_non_member(self, value, allowed) -> None:
        with pytest.raises(InvalidValue) as exc_info:
            validate_in(value, allowed)
        assert exc_info.value.check == "validate_in"

    def test_in_does_not_mix_strings_and_numbers(self) -> None:
        with pytest.raises(InvalidValue):
            validate_in("1", [1, 2])

    @pytest.mark.parametrize("value", [501, 599, 1])
    def test_extension_band_accepts(self, value) -> None:
        assert validate_in_with_custom_500_values(value, [1, 2, 3]) == value

    @pytest.mark.parametrize("value", [99, 499, 600])
    def test_extension_band_rejects(self, value) -> None:
        with pytest.raises(InvalidValue) as exc_info:
            validate_in_with_custom_500_values(value, [1, 2, 3])
        assert exc_info.value.check == "validate_in_with_custom_500_values"


class TestFormats:
    def test_md5_accepts_hex(self) -> None:
        assert validate_md5("c4ca4238a0b923820dcc509a6f75849b")

    @pytest.mark.parametrize(
        "value",
        [
            "g4ca4238a0b923820dcc509a6f75849b",
            "c4ca4238a0b923820dcc509a6f75849bb",
            "c4ca4238a0b923820dcc509a6f75849",
        ],
    )
    def test_md5_rejects(self, value: str) -> None:
        with pytest.raises(InvalidValue):
            validate_md5(value)

    def test_sha1_accepts_hex(self) -> None:
        assert validate_sha1("356a192b7913b04c54574d18c28d46e6395428ab")

    @pytest.mark.parametrize(
        "value",
        [
            "g56a192b7913b04c54574d18c28d46e6395428ab",
            "356a192b7913b04c54574d18c28d46e6395428abb",
            "356a192b7913b04c54574d18c28d46e6395428a",
        ],
    )
    def test_sha1_rejects(self, value: str) -> None:
        with pytest.raises(InvalidValue):
            validate_sha1(value)

    @pytest.mark.parametrize(
        "value",
        [
            "2001:cdba:0000:0000:0000:0000:3257:9652",
            "2001:cdba::3257:9652",
            "192.168.0.1",
            "0.0.0.0",
        ],
    )
    def test_ip_accepts(self, value: str) -> None:
        assert validate_ip(value) == value

    @pytest.mark.parametrize(
        "value",
        [
            "zzzz:cdba:0000:0000:0000:0000:3257:9652",
            "2001:cdba3257:9652",
            "192.168.0.256",
            "188.200.88",
            "0.0.0.1000",
        ],
    )
    def test_ip_rejects(self, value: str) -> None:
        with pytest.raises(InvalidValue):
            validate_ip(value)

    @pytest.mark.parametrize(("value", "expected"), [("1.2", "1.2"), (1, "1"), ("2.5.1", "2.5.1")])
    def test_version_accepts(self, value, expected: str) -> None:
        assert validate_version(value) == expected

    def test_version_rejects_text(self) -> None:
        with pytest.raises(InvalidValue):
            validate_version("latest")
