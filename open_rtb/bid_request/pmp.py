"""Private marketplace objects."""

from __future__ import annotations

from open_rtb.schema.entity import Entity
from open_rtb.schema.fields import (
    choice,
    collection,
    extension,
    positive_float,
    string,
    strings,
)
from open_rtb.specification import AuctionType, BitType


class Deal(Entity):
    """A specific deal struck a priori between a buyer and a seller."""

    id = string(required=True)
    bidfloor = positive_float(default=0.0, doc="Minimum bid in CPM")
    bidfloorcur = string(default="USD", doc="ISO-4217 currency of bidfloor")
    # Overrides BidRequest.at for this deal; 500+ are exchange-specific.
    at = choice(AuctionType, extension_band=True)
    wseat = strings(doc="Buyer seats allowed to bid on this deal")
    wadomain = strings(doc="Advertiser domains allowed to bid on this deal")
    ext = extension()


class Pmp(Entity):
    """Private marketplace container for direct deals."""

    private_auction = choice(BitType, default=0)
    deals = collection(Deal)
    ext = extension()
