"""Native 1.2 ad request entities."""

from open_rtb.native_request.assets import Asset, Data, EventTracker, Image, Title, Video
from open_rtb.native_request.native_ad_request import NativeAdRequest

__all__ = [
    "Asset",
    "Data",
    "EventTracker",
    "Image",
    "NativeAdRequest",
    "Title",
    "Video",
]
