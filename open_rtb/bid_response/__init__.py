"""OpenRTB 2.5 bid response entities."""

from open_rtb.bid_response.bid import Bid, Seatbid
from open_rtb.bid_response.bid_response import BidResponse

__all__ = ["Bid", "BidResponse", "Seatbid"]
