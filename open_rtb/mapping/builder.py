"""Mapping DSL builder.

Compiles ``{"path:@annotation": value}`` declarations into a MappingPlan,
either in one call or through a fluent builder:

    plan = compile_plan({"BidRequest.Imp[].Id:@uuid": "id"})

    plan = (
        mapping()
        .path("BidRequest.Imp[].Id", "id", uuid=True)
        .declare("BidRequest.Imp[].Native.Request:@required", "request")
        .build()
    )
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from open_rtb.core.exceptions import PlanCompilationError
from open_rtb.mapping.path import parse_path
from open_rtb.mapping.plan import MappingEntry, MappingPlan

logger = logging.getLogger(__name__)


def compile_plan(declarations: Mapping[str, Any]) -> MappingPlan:
    """Compile an ordered declaration map into a MappingPlan.

    Raises:
        PlanCompilationError: If declarations is not a mapping or a path
            expression is malformed.
    """
    if not isinstance(declarations, Mapping):
        raise PlanCompilationError(
            f"Mapping declarations must be a mapping, got {type(declarations).__name__}"
        )
    builder = MappingPlanBuilder()
    for expression, value in declarations.items():
        builder.declare(expression, value)
    return builder.build()


def mapping() -> MappingPlanBuilder:
    """Entry point for the fluent mapping DSL."""
    return MappingPlanBuilder()


class MappingPlanBuilder:
    """Fluent builder for mapping plans.

    A later declaration for the same target path replaces the earlier one
    and keeps its original position.
    """

    def __init__(self) -> None:
        self._entries: dict[str, MappingEntry] = {}

    def declare(self, expression: str, value: Any) -> MappingPlanBuilder:
        """Add a declaration written in the path DSL."""
        parsed = parse_path(expression)
        self._entries[parsed.path] = MappingEntry(
            path=parsed.path,
            segments=parsed.segments,
            value=value,
            required="required" in parsed.annotations,
            uuid="uuid" in parsed.annotations,
        )
        return self

    def path(
        self,
        target: str,
        value: Any,
        *,
        required: bool = False,
        uuid: bool = False,
    ) -> MappingPlanBuilder:
        """Add a declaration with annotations given as flags."""
        parsed = parse_path(target)
        if parsed.annotations:
            raise PlanCompilationError(
                f"Pass annotations as flags, not in the path: {target!r}"
            )
        self._entries[parsed.path] = MappingEntry(
            path=parsed.path,
            segments=parsed.segments,
            value=value,
            required=required,
            uuid=uuid,
        )
        return self

    def build(self) -> MappingPlan:
        """Freeze the declarations into a MappingPlan."""
        plan = MappingPlan(self._entries)
        logger.debug("Compiled mapping plan with %d entries", len(plan))
        return plan
