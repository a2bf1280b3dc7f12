"""Imp and Metric objects."""

from __future__ import annotations

from open_rtb.bid_request.media import Audio, Banner, Native, Video
from open_rtb.bid_request.pmp import Pmp
from open_rtb.schema.entity import Entity
from open_rtb.schema.fields import (
    choice,
    collection,
    decimal,
    extension,
    integer,
    nested,
    string,
    strings,
)
from open_rtb.specification import BitType


class Metric(Entity):
    """A metric the exchange reports for this impression (viewability, click-through, ...)."""

    type = string(required=True)
    value = decimal(required=True, doc="Probability-like value in the range 0.0 - 1.0")
    vendor = string(recommended=True)
    ext = extension()


class Imp(Entity):
    """An ad placement or impression being auctioned.

    One Imp may offer several media types (banner, video, audio, native);
    the bidder chooses one.
    """

    id = string(required=True)
    metric = collection(Metric)
    banner = nested(Banner)
    video = nested(Video)
    audio = nested(Audio)
    native = nested(Native)
    pmp = nested(Pmp, init=True)
    displaymanager = string()
    displaymanagerver = string()
    instl = choice(BitType, default=0, doc="1 = interstitial or full screen")
    tagid = string()
    bidfloor = decimal(default=0.0)
    bidfloorcur = string(default="USD")
    clickbrowser = choice(BitType)
    secure = choice(BitType)
    iframebuster = strings()
    exp = integer(doc="Seconds that may elapse between auction and impression")
    ext = extension()
