"""OpenRtb - typed object model for OpenRTB 2.5 and Native 1.2."""

from __future__ import annotations

from open_rtb.bid_request import BidRequest
from open_rtb.bid_response import BidResponse
from open_rtb.core.cache import Cache, MemoryCache, NullCache
from open_rtb.core.collection import ArrayCollection
from open_rtb.core.config import SerializationConfig
from open_rtb.core.constants import ConstantRegistry, all_values
from open_rtb.core.exceptions import (
    InvalidValue,
    MappingError,
    MissingRequiredField,
    OpenRtbError,
    PathConflictError,
    PlanCompilationError,
    UnresolvedPath,
)
from open_rtb.mapping import Hydrator, Mapper, MappingPlan, compile_plan, mapping
from open_rtb.native_request import NativeAdRequest
from open_rtb.native_response import NativeAdResponse
from open_rtb.schema.describer import ObjectDescriber, describe
from open_rtb.schema.entity import Entity
from open_rtb.schema.projector import Projector

__all__ = [
    # Roots
    "BidRequest",
    "BidResponse",
    "NativeAdRequest",
    "NativeAdResponse",
    # Schema
    "Entity",
    "ObjectDescriber",
    "describe",
    "Projector",
    "ArrayCollection",
    # Constants
    "ConstantRegistry",
    "all_values",
    # Caching
    "Cache",
    "MemoryCache",
    "NullCache",
    # Config
    "SerializationConfig",
    # Mapping
    "Mapper",
    "Hydrator",
    "MappingPlan",
    "compile_plan",
    "mapping",
    # Exceptions
    "OpenRtbError",
    "InvalidValue",
    "MissingRequiredField",
    "MappingError",
    "PlanCompilationError",
    "PathConflictError",
    "UnresolvedPath",
]
