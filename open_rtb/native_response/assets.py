"""Native 1.2 response assets."""

from __future__ import annotations

from open_rtb.schema.entity import Entity
from open_rtb.schema.fields import (
    choice,
    extension,
    integer,
    nested,
    positive_int,
    string,
    strings,
)
from open_rtb.specification import BitType, DataAssetType, ImageAssetType


class Link(Entity):
    """Destination link; shared by the whole ad or attached to one asset."""

    url = string(required=True, doc="Landing URL of the clickable link")
    clicktrackers = strings(doc="Third-party tracker URLs fired on click")
    fallback = string(doc="Fallback URL for deeplink")
    ext = extension()


class Title(Entity):
    text = string(required=True)
    len = positive_int()
    ext = extension()


class Image(Entity):
    """Image asset, icon or main image."""

    type = choice(ImageAssetType, extension_band=True)
    url = string(required=True)
    w = positive_int(recommended=True)
    h = positive_int(recommended=True)
    ext = extension()


class Video(Entity):
    vasttag = string(required=True, doc="VAST XML")


class Data(Entity):
    """Data asset (sponsored by, rating, price, ...)."""

    type = choice(DataAssetType, extension_band=True)
    len = positive_int()
    label = string()
    value = string(required=True, doc="Formatted string of data to display")
    ext = extension()


class Asset(Entity):
    """One rendered asset. Exactly one of title, img, video or data is set."""

    id = integer(required=True)
    required = choice(BitType, default=0)
    title = nested(Title)
    img = nested(Image)
    video = nested(Video)
    data = nested(Data)
    link = nested(Link)
    ext = extension()
