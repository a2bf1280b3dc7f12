"""Native 1.2 response envelope."""

from __future__ import annotations

from open_rtb.native_response.assets import Asset, Link
from open_rtb.schema.entity import Entity
from open_rtb.schema.fields import (
    choice,
    collection,
    extension,
    nested,
    string,
    strings,
    version,
)
from open_rtb.specification import BitType, EventTrackingMethod, EventType


class EventTracker(Entity):
    """A tracker the buyer wants fired for an event."""

    event = choice(EventType, extension_band=True, required=True)
    method = choice(EventTrackingMethod, extension_band=True, required=True)
    url = string()
    customdata = extension(doc="Custom key-value data for the tracker")
    ext = extension()


class Native(Entity):
    """Native ad markup returned by the buyer."""

    ver = version(default="1.2")
    assets = collection(Asset, recommended=True)
    assetsurl = string()
    dcourl = string()
    link = nested(Link, required=True)
    imptrackers = strings()
    jstracker = string()
    eventtrackers = collection(EventTracker)
    privacy = string()
    ext = extension()


class NativeAdResponse(Entity, root=True):
    """Native ad markup, serialized as ``{"native": {...}}``.

    Typically sent as the ``adm`` of a Bid, or attached to
    ``Bid.adm_native``.
    """

    native = nested(Native, required=True)
