"""Enumerated lists for bid request fields (OpenRTB 2.5 section 5)."""

from __future__ import annotations

from enum import Enum, IntEnum


class BitType(IntEnum):
    """0/1 flags (test, allimps, secure, coppa, ...)."""

    NO = 0
    YES = 1


class AdPosition(IntEnum):
    UNKNOWN = 0
    ABOVE_THE_FOLD = 1
    DEPRECATED_LIKELY_BELOW_THE_FOLD = 2  # visibility depends on screen size
    BELOW_THE_FOLD = 3
    HEADER = 4
    FOOTER = 5
    SIDEBAR = 6
    AD_POSITION_FULLSCREEN = 7


class ApiFrameworks(IntEnum):
    VPAID_1 = 1
    VPAID_2 = 2
    MRAID_1 = 3
    ORMMA = 4
    MRAID_2 = 5
    MRAID_3 = 6
    OMID_1 = 7


class AuctionType(IntEnum):
    FIRST_PRICE = 1
    SECOND_PRICE = 2
    FIXED_PRICE = 3


class BannerAdTypes(IntEnum):
    XHTML_TEXT_AD = 1
    XHTML_BANNER_AD = 2
    JAVASCRIPT_AD = 3
    IFRAME = 4


class BannerMimeType(str, Enum):
    MIME_FLASH = "application/x-shockwave-flash"
    MIME_JPEG = "image/jpg"
    MIME_GIF = "image/gif"


class ConnectionType(IntEnum):
    UNKNOWN = 0
    ETHERNET = 1
    WIFI = 2
    CELLULAR_NETWORK_UNKNOWN = 3
    CELLULAR_NETWORK_2G = 4
    CELLULAR_NETWORK_3G = 5
    CELLULAR_NETWORK_4G = 6


class ContentContext(IntEnum):
    VIDEO = 1
    GAME = 2
    MUSIC = 3
    APPLICATION = 4
    TEXT = 5
    OTHER = 6
    UNKNOWN = 7


class ContentDeliveryMethods(IntEnum):
    STREAMING = 1
    PROGRESSIVE = 2
    DOWNLOAD = 3


class CreativeAttributes(IntEnum):
    AUDIO_AUTO_PLAY = 1
    AUDIO_USER_INITIATED = 2
    EXPANDABLE_AUTOMATIC = 3
    EXPANDABLE_CLICK_INITIATED = 4
    EXPANDABLE_ROLLOVER_INITIATED = 5
    VIDEO_IN_BANNER_AUTO_PLAY = 6
    VIDEO_IN_BANNER_USER_INITIATED = 7
    POP = 8  # over, under, or upon exit
    PROVOCATIVE_OR_SUGGESTIVE = 9
    ANNOYING = 10
    SURVEYS = 11
    TEXT_ONLY = 12
    USER_INTERACTIVE = 13  # e.g. embedded games
    WINDOWS_DIALOG_OR_ALERT_STYLE = 14
    HAS_AUDIO_ON_OFF_BUTTON = 15
    AD_CAN_BE_SKIPPED = 16
    FLASH = 17


class DeviceType(IntEnum):
    MOBILE_TABLET = 1
    PERSONAL_COMPUTER = 2
    CONNECTED_TV = 3
    PHONE = 4
    TABLET = 5
    CONNECTED_DEVICE = 6
    SET_TOP_BOX = 7


class ExpandableDirection(IntEnum):
    LEFT = 1
    RIGHT = 2
    UP = 3
    DOWN = 4
    EXPANDABLE_FULLSCREEN = 5


class FeedType(IntEnum):
    MUSIC_SERVICE = 1
    BROADCAST = 2
    PODCAST = 3


class Gender(Enum):
    MALE = "M"
    FEMALE = "F"
    KNOWN_TO_BE_OTHER = "O"


class LocationService(IntEnum):
    IP2LOCATION = 1
    NEUSTAR = 2
    MAXMIND = 3
    NETAQUITY = 4


class LocationType(IntEnum):
    GPS = 1
    IP_ADDRESS = 2
    USER_PROVIDED = 3


class PlaybackCessationMode(IntEnum):
    COMPLETION_OR_USER = 1
    LEAVING_OR_USER = 2
    LEAVING_CONTINUES_OR_USER = 3


class ProductionQuality(IntEnum):
    QUALITY_UNKNOWN = 0
    PROFESSIONAL = 1
    PROSUMER = 2
    USER_GENERATED = 3


class QagMediaRatings(IntEnum):
    ALL_AUDIENCES = 1
    EVERYONE_OVER_12 = 2
    MATURE_AUDIENCES = 3


class StartDelay(IntEnum):
    PRE_ROLL = 0
    GENERIC_MID_ROLL = -1
    GENERIC_POST_ROLL = -2


class VastCompanionTypes(IntEnum):
    STATIC_RESOURCE = 1
    HTML_RESOURCE = 2
    IFRAME_RESOURCE = 3


class VideoBidResponseProtocols(IntEnum):
    VAST_1_0 = 1
    VAST_2_0 = 2
    VAST_3_0 = 3
    VAST_1_0_WRAPPER = 4
    VAST_2_0_WRAPPER = 5
    VAST_3_0_WRAPPER = 6
    VAST_4_0 = 7
    VAST_4_0_WRAPPER = 8
    DAAST_1_0 = 9
    DAAST_1_0_WRAPPER = 10


class VideoLinearity(IntEnum):
    LINEAR_IN_STREAM = 1
    NON_LINEAR_OVERLAY = 2


class VideoMimeType(str, Enum):
    MIME_MS_WMV = "video/x-ms-wmv"
    MIME_FLV = "video/x-flv"
    MIME_MP4 = "video/mp4"
    MIME_WEBM = "video/webm"
    MIME_AUDIO_MP4 = "audio/mp4"
    MIME_AUDIO_MPEG = "audio/mpeg"


class VideoPlacementType(IntEnum):
    UNDEFINED_VIDEO_PLACEMENT = 0
    IN_STREAM_PLACEMENT = 1
    IN_BANNER_PLACEMENT = 2
    IN_ARTICLE_PLACEMENT = 3
    IN_FEED_PLACEMENT = 4
    FLOATING_PLACEMENT = 5


class VideoPlaybackMethods(IntEnum):
    AUTO_PLAY_SOUND_ON = 1
    AUTO_PLAY_SOUND_OFF = 2
    CLICK_TO_PLAY = 3
    MOUSE_OVER = 4
    ENTER_SOUND_ON = 5
    ENTER_SOUND_OFF = 6


class VolumeNormalizationMode(IntEnum):
    NONE = 0
    AVERAGE_VOLUME = 1
    PEAK_VOLUME = 2
    LOUDNESS = 3
    CUSTOM_VOLUME = 4
