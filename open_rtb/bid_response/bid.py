"""Bid and Seatbid objects."""

from __future__ import annotations

from open_rtb.native_response import NativeAdResponse
from open_rtb.schema.entity import Entity
from open_rtb.schema.fields import (
    choice,
    choices,
    collection,
    decimal,
    extension,
    integer,
    nested,
    string,
    strings,
)
from open_rtb.specification import (
    ApiFrameworks,
    BitType,
    CreativeAttributes,
    QagMediaRatings,
    VideoBidResponseProtocols,
)


class Bid(Entity):
    """An offer to buy one impression at a given price."""

    id = string(required=True, doc="Bidder generated bid ID")
    impid = string(required=True, doc="ID of the Imp this bid applies to")
    price = decimal(required=True, doc="Bid price in CPM")
    nurl = string(doc="Win notice URL")
    burl = string(doc="Billing notice URL")
    lurl = string(doc="Loss notice URL")
    adm = string(doc="Ad markup")
    adm_native = nested(NativeAdResponse, doc="Native markup as an object")
    adid = string()
    adomain = strings()
    bundle = string()
    iurl = string()
    cid = string()
    crid = string()
    tactic = string()
    cat = strings()
    attr = choices(CreativeAttributes)
    api = choice(ApiFrameworks)
    protocol = choice(VideoBidResponseProtocols)
    qagmediarating = choice(QagMediaRatings)
    language = string()
    dealid = string()
    w = integer()
    h = integer()
    wratio = integer()
    hratio = integer()
    exp = integer()
    ext = extension()


class Seatbid(Entity):
    """Bids from one buyer seat."""

    bid = collection(Bid, required=True)
    seat = string()
    group = choice(BitType, default=0, doc="1 = impressions must be won or lost as a group")
    ext = extension()
