"""BidRequest - top-level object of an OpenRTB 2.5 bid request."""

from __future__ import annotations

from open_rtb.bid_request.context import App, Site
from open_rtb.bid_request.device import Device
from open_rtb.bid_request.imp import Imp
from open_rtb.bid_request.source import Regs, Source
from open_rtb.bid_request.user import User
from open_rtb.core.config import SerializationConfig
from open_rtb.schema.entity import Entity
from open_rtb.schema.fields import (
    choice,
    collection,
    extension,
    nested,
    positive_int,
    string,
    strings,
)
from open_rtb.specification import AuctionType, BitType


class BidRequest(Entity, root=True):
    """A single auction offering one or more impressions.

    The constructor pre-populates site, app, device, user, source and regs
    with empty objects; blank ones are left out of the output.

    Example:
        request = BidRequest(id="req-1")
        request.add_imp(Imp(id="1", banner=Banner(w=300, h=250)))
        body = request.get_bid_request()
    """

    id = string(required=True)
    imp = collection(Imp, required=True)
    site = nested(Site, init=True, recommended=True)
    app = nested(App, init=True, recommended=True)
    device = nested(Device, init=True, recommended=True)
    user = nested(User, init=True, recommended=True)
    test = choice(BitType, default=0, doc="1 = test mode, auctions are not billable")
    at = choice(AuctionType, extension_band=True, default=2)
    tmax = positive_int(doc="Maximum time in milliseconds to submit a bid")
    wseat = strings()
    bseat = strings()
    allimps = choice(BitType, default=0)
    cur = strings()
    wlang = strings()
    bcat = strings()
    badv = strings()
    bapp = strings()
    source = nested(Source, init=True)
    regs = nested(Regs, init=True)
    ext = extension()

    def get_bid_request(self, config: SerializationConfig | None = None) -> str:
        """JSON body of the bid request."""
        return self.serialize(config)

    def get_request(self, config: SerializationConfig | None = None) -> str:
        return self.serialize(config)
