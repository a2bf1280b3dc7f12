"""Enumerated lists for Native 1.2 requests and responses.

Values 500 and up in the layout, ad unit, asset type and context tables
are exchange-specific; fields using them accept the whole 500-599 band.
"""

from __future__ import annotations

from enum import Enum, IntEnum


class DataAssetType(IntEnum):
    SPONSORED = 1
    DESC = 2
    RATING = 3
    LIKES = 4
    DOWNLOADS = 5
    PRICE = 6
    SALE_PRICE = 7
    PHONE = 8
    ADDRESS = 9
    DESC2 = 10
    DISPLAY_URL = 11
    CTATEXT = 12


class ImageAssetType(IntEnum):
    ICON = 1
    LOGO = 2
    MAIN = 3


class ImageMimeType(str, Enum):
    BMP = "image/bmp"
    X_WINDOWS_BMP = "image/x-windows-bmp"
    GIF = "image/gif"
    X_ICON = "image/x-icon"
    JPEG = "image/jpeg"
    X_PORTABLE_BITMAP = "image/x-portable-bitmap"
    PNG = "image/png"
    X_QUICKTIME = "image/x-quicktime"
    TIFF = "image/tiff"
    X_TIFF = "image/x-tiff"


class NativeAdUnit(IntEnum):
    PAID_SEARCH_UNITS = 1
    RECOMMENDATION_WIDGETS = 2
    PROMOTED_LISTINGS = 3
    IN_AD_WITH_NATIVE_ELEMENT_UNITS = 4
    CUSTOM_CANT_BE_CONTAINED = 5
    UNSPECIFIED = 500
    IN_FEED = 501
    END_OF_POST = 502
    IN_ARTICLE = 503
    IN_IMAGE = 504
    IN_VIDEO = 505
    IN_TEXT = 506


class NativeLayout(IntEnum):
    CONTENT_WALL = 1
    APP_WALL = 2
    NEWS_FEED = 3
    CHAT_LIST = 4
    CAROUSEL = 5
    CONTENT_STREAM = 6
    GRID_ADJOINING_THE_CONTENT = 7
    UNSPECIFIED = 500


class NativeContextType(IntEnum):
    CONTENT_CENTRIC = 1
    SOCIAL_CENTRIC = 2
    PRODUCT = 3


class NativePlacementType(IntEnum):
    IN_FEED = 1
    ATOMIC_UNIT = 2
    OUTSIDE_CORE_CONTENT = 3
    RECOMMENDATION_WIDGET = 4


class EventType(IntEnum):
    IMPRESSION = 1
    VIEWABLE_MRC50 = 2
    VIEWABLE_MRC100 = 3
    VIEWABLE_VIDEO50 = 4


class EventTrackingMethod(IntEnum):
    IMG = 1
    JS = 2
