"""Unit tests for the mapping path parser."""

from __future__ import annotations

import pytest

from open_rtb.core.exceptions import PlanCompilationError
from open_rtb.mapping.path import PathSegment, parse_path, snake_case


class TestParsePath:
    def test_segments_and_annotations(self) -> None:
        parsed = parse_path("BidRequest.Imp[].Native.Request:@required")
        assert parsed.path == "BidRequest.Imp[].Native.Request"
        assert parsed.segments == (
            PathSegment("BidRequest"),
            PathSegment("Imp", is_array=True),
            PathSegment("Native"),
            PathSegment("Request"),
        )
        assert parsed.annotations == frozenset({"required"})

    def test_multiple_annotations(self) -> None:
        parsed = parse_path("Imp[].Id:@required:@uuid")
        assert parsed.annotations == frozenset({"required", "uuid"})

    def test_no_annotations(self) -> None:
        parsed = parse_path("Id")
        assert parsed.path == "Id"
        assert parsed.annotations == frozenset()

    def test_surrounding_whitespace_is_ignored(self) -> None:
        assert parse_path("  Site.Id ").path == "Site.Id"

    @pytest.mark.parametrize(
        "expression",
        [
            "",
            "   ",
            "Imp..Id",
            "Imp.",
            ".Imp",
            "Imp[.Id",
            "Imp[]]",
            "Imp Id",
            "Imp.1d",
            "Imp:required",
            "Imp:@",
        ],
    )
    def test_malformed(self, expression: str) -> None:
        with pytest.raises(PlanCompilationError):
            parse_path(expression)

    def test_unknown_annotation(self) -> None:
        with pytest.raises(PlanCompilationError, match="@optional"):
            parse_path("Imp.Id:@optional")

    def test_non_string(self) -> None:
        with pytest.raises(PlanCompilationError):
            parse_path(None)  # type: ignore[arg-type]


class TestSegmentKeys:
    @pytest.mark.parametrize(
        ("name", "key"),
        [("Imp", "imp"), ("AdmNative", "adm_native"), ("adm_native", "adm_native"), ("id", "id")],
    )
    def test_snake_case(self, name: str, key: str) -> None:
        assert snake_case(name) == key
        assert PathSegment(name).key == key

    def test_str(self) -> None:
        assert str(PathSegment("Imp", is_array=True)) == "Imp[]"
