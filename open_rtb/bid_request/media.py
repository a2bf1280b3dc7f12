"""Impression media objects: Banner, Format, Video, Audio and Native."""

from __future__ import annotations

from open_rtb.schema.entity import Entity
from open_rtb.schema.fields import (
    choice,
    choices,
    collection,
    extension,
    integer,
    positive_int,
    string,
)
from open_rtb.specification import (
    AdPosition,
    ApiFrameworks,
    BannerAdTypes,
    BannerMimeType,
    BitType,
    ContentDeliveryMethods,
    CreativeAttributes,
    ExpandableDirection,
    FeedType,
    PlaybackCessationMode,
    VastCompanionTypes,
    VideoBidResponseProtocols,
    VideoLinearity,
    VideoMimeType,
    VideoPlacementType,
    VideoPlaybackMethods,
    VolumeNormalizationMode,
)


class Format(Entity):
    """An allowed size (height and width) or a flexible ad size ratio."""

    w = integer()
    h = integer()
    wratio = integer()
    hratio = integer()
    wmin = integer()


class Banner(Entity):
    """Display impression: static image, HTML or JavaScript ad.

    Also used as a companion ad of a Video or Audio impression.
    """

    format = collection(Format)
    w = positive_int(recommended=True)
    h = positive_int(recommended=True)
    wmax = positive_int()
    hmax = positive_int()
    wmin = positive_int()
    hmin = positive_int()
    btype = choices(BannerAdTypes, doc="Blocked banner ad types")
    battr = choices(CreativeAttributes, doc="Blocked creative attributes")
    pos = choice(AdPosition)
    mimes = choices(BannerMimeType)
    topframe = integer()
    expdir = choices(ExpandableDirection)
    api = choices(ApiFrameworks)
    id = string(doc="Unique identifier, typically for companion ads")
    vcm = choice(BitType, doc="Companion rendering mode: 0 = concurrent, 1 = end-card")
    ext = extension()


class Video(Entity):
    """In-stream video impression."""

    mimes = choices(VideoMimeType, required=True)
    minduration = integer(recommended=True)
    maxduration = integer(recommended=True)
    protocols = choices(VideoBidResponseProtocols, recommended=True)
    protocol = integer(doc="Deprecated in favor of protocols")
    w = integer(recommended=True)
    h = integer(recommended=True)
    startdelay = integer(recommended=True)
    placement = choice(VideoPlacementType)
    linearity = choice(VideoLinearity)
    skip = choice(BitType)
    skipmin = integer()
    skipafter = integer()
    sequence = integer(default=1)
    battr = choices(CreativeAttributes)
    maxextended = integer()
    minbitrate = integer()
    maxbitrate = integer()
    boxingallowed = choice(BitType, default=1)
    playbackmethod = choices(VideoPlaybackMethods)
    playbackend = choice(PlaybackCessationMode)
    delivery = choices(ContentDeliveryMethods)
    pos = choice(AdPosition)
    companionad = collection(Banner)
    api = choices(ApiFrameworks)
    companiontype = choices(VastCompanionTypes)
    ext = extension()


class Audio(Entity):
    """Audio impression."""

    mimes = choices(VideoMimeType, required=True)
    minduration = integer(recommended=True)
    maxduration = integer(recommended=True)
    protocols = choices(VideoBidResponseProtocols, recommended=True)
    protocol = integer()
    startdelay = integer(recommended=True)
    sequence = integer(default=1)
    battr = choices(CreativeAttributes)
    maxextended = integer()
    minbitrate = integer()
    maxbitrate = integer()
    delivery = choices(ContentDeliveryMethods)
    companionad = collection(Banner)
    api = choices(ApiFrameworks)
    companiontype = choices(VastCompanionTypes)
    maxseq = integer()
    feed = choice(FeedType)
    stitched = choice(BitType)
    nvol = choice(VolumeNormalizationMode)
    ext = extension()


class Native(Entity):
    """Native impression.

    ``request`` carries the Native ad request as a JSON-encoded string
    (see ``NativeAdRequest.get_request``).
    """

    request = string(required=True)
    ver = string(recommended=True, doc="Version of the Native Ad Specification")
    api = choices(ApiFrameworks)
    battr = choices(CreativeAttributes)
    ext = extension()
