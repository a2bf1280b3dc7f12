"""OpenRtb exception hierarchy.

All errors are raised at the point of detection and propagate to the
caller. Nothing in the library catches them to log and continue.
"""

from __future__ import annotations

from typing import Any


class OpenRtbError(Exception):
    """Base exception for all OpenRtb errors."""


# --- Validation ---


class InvalidValue(OpenRtbError):
    """Raised when a setter or adder rejects a value.

    ``check`` is the name of the failing validation check. Accessors attach a
    ``trace`` of the form ``module.Class::method::line[check]`` before the
    error leaves the entity.
    """

    def __init__(self, check: str, value: Any, detail: str) -> None:
        self.check = check
        self.value = value
        self.detail = detail
        self.trace: str | None = None
        super().__init__(detail)

    def with_trace(self, owner: type, method: str, line: int | None = None) -> InvalidValue:
        """Record where the failing call came from and return self."""
        location = f"{owner.__module__}.{owner.__qualname__}::{method}"
        if line is not None:
            location += f"::{line}"
        self.trace = f"{location}[{self.check}]"
        return self

    def __str__(self) -> str:
        if self.trace is None:
            return self.detail
        return f"{self.trace} {self.detail}"


# --- Projection ---


class MissingRequiredField(OpenRtbError):
    """Raised when a required field or mapping path resolves to empty."""

    def __init__(self, owner: str, field_name: str) -> None:
        self.owner = owner
        self.field_name = field_name
        super().__init__(f"Missing required field '{field_name}' in {owner}")


# --- Mapping ---


class MappingError(OpenRtbError):
    """Base for mapping errors."""


class PlanCompilationError(MappingError):
    """Raised when a mapping declaration cannot be compiled."""


class PathConflictError(MappingError):
    """Raised when two mapping paths disagree on the shape at a key."""

    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        super().__init__(f"Conflicting mapping at '{path}': {detail}")


class UnresolvedPath(MappingError):
    """Raised when a read path names a field the traversed class does not declare."""

    def __init__(self, owner: str, segment: str, path: str) -> None:
        self.owner = owner
        self.segment = segment
        self.path = path
        super().__init__(f"Cannot resolve '{segment}' on {owner} (path '{path}')")
