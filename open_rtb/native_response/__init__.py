"""Native 1.2 ad response entities."""

from open_rtb.native_response.assets import Asset, Data, Image, Link, Title, Video
from open_rtb.native_response.native import EventTracker, Native, NativeAdResponse

__all__ = [
    "Asset",
    "Data",
    "EventTracker",
    "Image",
    "Link",
    "Native",
    "NativeAdResponse",
    "Title",
    "Video",
]
