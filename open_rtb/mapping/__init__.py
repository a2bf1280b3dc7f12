"""Mapping layer - path-declared transforms between maps and entity graphs."""

from __future__ import annotations

from open_rtb.mapping.builder import MappingPlanBuilder, compile_plan, mapping
from open_rtb.mapping.hydrator import Hydrator, hydrate
from open_rtb.mapping.mapper import Mapper
from open_rtb.mapping.path import ParsedPath, PathSegment, parse_path
from open_rtb.mapping.plan import MappingEntry, MappingPlan

__all__ = [
    "Mapper",
    "Hydrator",
    "hydrate",
    "MappingPlanBuilder",
    "compile_plan",
    "mapping",
    "MappingPlan",
    "MappingEntry",
    "ParsedPath",
    "PathSegment",
    "parse_path",
]
