"""Parser for mapping path expressions.

Grammar::

    expression  := path annotation*
    path        := segment ("." segment)*
    segment     := NAME ["[]"]
    annotation  := ":@" NAME            (required | uuid)

``Imp[]`` marks a repeated level. Names are identifiers; they are matched
against entity fields case-insensitively and written as snake_case keys.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from open_rtb.core.exceptions import PlanCompilationError

ANNOTATIONS = frozenset({"required", "uuid"})

_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")


def snake_case(name: str) -> str:
    """``AdmNative`` -> ``adm_native``; already-snake names are unchanged."""
    return _CAMEL_BOUNDARY.sub(r"_\1", name).lower()


@dataclass(frozen=True)
class PathSegment:
    """One level of a path; ``is_array`` is set by a trailing ``[]``."""

    name: str
    is_array: bool = False

    @property
    def key(self) -> str:
        """Key written into the nested output map."""
        return snake_case(self.name)

    def __str__(self) -> str:
        return f"{self.name}[]" if self.is_array else self.name


@dataclass(frozen=True)
class ParsedPath:
    """Result of parsing one expression."""

    path: str
    segments: tuple[PathSegment, ...]
    annotations: frozenset[str]


def parse_path(expression: str) -> ParsedPath:
    """Parse ``"Seg[].Seg:@required"`` into segments and annotations.

    Raises:
        PlanCompilationError: On an empty path, a malformed segment, a
            misplaced ``[]`` or an unknown annotation.
    """
    if not isinstance(expression, str) or not expression.strip():
        raise PlanCompilationError(f"Mapping path must be a non-empty string, got {expression!r}")

    text = expression.strip()
    segments: list[PathSegment] = []
    position = 0
    while True:
        match = _NAME.match(text, position)
        if match is None:
            raise PlanCompilationError(
                f"Expected a field name at offset {position} in mapping path {expression!r}"
            )
        position = match.end()
        is_array = text.startswith("[]", position)
        if is_array:
            position += 2
        segments.append(PathSegment(match.group(), is_array))
        if position == len(text) or text[position] == ":":
            break
        if text[position] != ".":
            raise PlanCompilationError(
                f"Unexpected {text[position]!r} at offset {position} in mapping path {expression!r}"
            )
        position += 1

    path = text[:position]
    annotations: set[str] = set()
    while position < len(text):
        if not text.startswith(":@", position):
            raise PlanCompilationError(
                f"Expected ':@annotation' at offset {position} in mapping path {expression!r}"
            )
        match = _NAME.match(text, position + 2)
        if match is None:
            raise PlanCompilationError(f"Empty annotation in mapping path {expression!r}")
        name = match.group()
        if name not in ANNOTATIONS:
            raise PlanCompilationError(
                f"Unknown annotation '@{name}' in mapping path {expression!r}; "
                f"expected one of {sorted(ANNOTATIONS)}"
            )
        annotations.add(name)
        position = match.end()

    return ParsedPath(path=path, segments=tuple(segments), annotations=frozenset(annotations))
