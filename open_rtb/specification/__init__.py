"""Constant tables for constrained OpenRTB fields.

Every enum here is registered with the default constant registry, so
``all_values("AdPosition")`` and ``all_values(AdPosition)`` are equivalent.
"""

from __future__ import annotations

from open_rtb.core.constants import default_registry
from open_rtb.specification.bid_request import (
    AdPosition,
    ApiFrameworks,
    AuctionType,
    BannerAdTypes,
    BannerMimeType,
    BitType,
    ConnectionType,
    ContentContext,
    ContentDeliveryMethods,
    CreativeAttributes,
    DeviceType,
    ExpandableDirection,
    FeedType,
    Gender,
    LocationService,
    LocationType,
    PlaybackCessationMode,
    ProductionQuality,
    QagMediaRatings,
    StartDelay,
    VastCompanionTypes,
    VideoBidResponseProtocols,
    VideoLinearity,
    VideoMimeType,
    VideoPlacementType,
    VideoPlaybackMethods,
    VolumeNormalizationMode,
)
from open_rtb.specification.bid_response import NoBidReason
from open_rtb.specification.native import (
    DataAssetType,
    EventTrackingMethod,
    EventType,
    ImageAssetType,
    ImageMimeType,
    NativeAdUnit,
    NativeContextType,
    NativeLayout,
    NativePlacementType,
)

__all__ = [
    # Bid request
    "AdPosition",
    "ApiFrameworks",
    "AuctionType",
    "BannerAdTypes",
    "BannerMimeType",
    "BitType",
    "ConnectionType",
    "ContentContext",
    "ContentDeliveryMethods",
    "CreativeAttributes",
    "DeviceType",
    "ExpandableDirection",
    "FeedType",
    "Gender",
    "LocationService",
    "LocationType",
    "PlaybackCessationMode",
    "ProductionQuality",
    "QagMediaRatings",
    "StartDelay",
    "VastCompanionTypes",
    "VideoBidResponseProtocols",
    "VideoLinearity",
    "VideoMimeType",
    "VideoPlacementType",
    "VideoPlaybackMethods",
    "VolumeNormalizationMode",
    # Bid response
    "NoBidReason",
    # Native
    "DataAssetType",
    "EventTrackingMethod",
    "EventType",
    "ImageAssetType",
    "ImageMimeType",
    "NativeAdUnit",
    "NativeContextType",
    "NativeLayout",
    "NativePlacementType",
]

default_registry.register(
    *(globals()[name] for name in __all__),
)
