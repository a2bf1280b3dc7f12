"""BidResponse - top-level object of an OpenRTB 2.5 bid response."""

from __future__ import annotations

from open_rtb.bid_response.bid import Seatbid
from open_rtb.core.config import SerializationConfig
from open_rtb.schema.entity import Entity
from open_rtb.schema.fields import choice, collection, extension, string
from open_rtb.specification import NoBidReason


class BidResponse(Entity, root=True):
    """Response to a BidRequest.

    A response without seatbid is a no-bid; ``nbr`` may carry the reason.
    """

    id = string(required=True, doc="ID of the bid request this responds to")
    seatbid = collection(Seatbid)
    bidid = string()
    cur = string(default="USD")
    customdata = string()
    nbr = choice(NoBidReason)
    ext = extension()

    def get_bid_response(self, config: SerializationConfig | None = None) -> str:
        """JSON body of the bid response."""
        return self.serialize(config)
