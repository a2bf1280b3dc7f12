"""Native 1.2 request assets."""

from __future__ import annotations

from open_rtb.schema.entity import Entity
from open_rtb.schema.fields import (
    choice,
    choices,
    extension,
    integer,
    nested,
    positive_int,
)
from open_rtb.specification import (
    BitType,
    DataAssetType,
    EventTrackingMethod,
    EventType,
    ImageAssetType,
    ImageMimeType,
    VideoBidResponseProtocols,
    VideoMimeType,
)


class Title(Entity):
    len = positive_int(required=True, doc="Maximum length of the title text")
    ext = extension()


class Image(Entity):
    """Image asset request: icon or main image."""

    type = choice(ImageAssetType, extension_band=True)
    w = positive_int()
    wmin = positive_int(recommended=True)
    h = positive_int()
    hmin = positive_int(recommended=True)
    mimes = choices(ImageMimeType)
    ext = extension()


class Video(Entity):
    """Video asset request, answered with a VAST tag."""

    mimes = choices(VideoMimeType, required=True)
    minduration = integer(required=True)
    maxduration = integer(required=True)
    protocols = choices(VideoBidResponseProtocols, required=True)
    ext = extension()


class Data(Entity):
    type = choice(DataAssetType, extension_band=True, required=True)
    len = positive_int()
    ext = extension()


class Asset(Entity):
    """One requested asset. Exactly one of title, img, video or data is set."""

    id = integer(required=True)
    required = choice(BitType, default=0)
    title = nested(Title)
    img = nested(Image)
    video = nested(Video)
    data = nested(Data)
    ext = extension()


class EventTracker(Entity):
    """Event type and tracking methods the exchange supports."""

    event = choice(EventType, extension_band=True, required=True)
    methods = choices(EventTrackingMethod, extension_band=True, required=True)
    ext = extension()
