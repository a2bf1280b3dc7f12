"""
Example 02: Parsing a Bid Request and Answering It

This example hydrates an incoming JSON bid request, inspects it, and
builds a bid response (or a no-bid) for it.
"""

import json

from open_rtb import BidRequest, BidResponse, Hydrator, MissingRequiredField, UnresolvedPath
from open_rtb.bid_response import Bid, Seatbid
from open_rtb.specification import NoBidReason

INCOMING = """
{
  "id": "auction-42",
  "imp": [
    {"id": "1", "banner": {"w": 300, "h": 250}, "bidfloor": 0.25},
    {"id": "2", "banner": {"w": 728, "h": 90}, "bidfloor": 3.0}
  ],
  "site": {"domain": "news.example.com"},
  "cur": ["USD"],
  "unknown_vendor_field": true
}
"""


def main():
    request = Hydrator().hydrate(json.loads(INCOMING), BidRequest())
    print(f"Request {request.id} with {request.imp.count()} impressions")

    response = BidResponse(id=request.id, cur="USD")
    seatbid = Seatbid(seat="buyer-1")
    for imp in request.imp:
        if imp.bidfloor > 1.0:
            print(f"  skip imp {imp.id}: floor {imp.bidfloor}")
            continue
        seatbid.add_bid(
            Bid(
                id=f"bid-{imp.id}",
                impid=imp.id,
                price=imp.bidfloor + 0.1,
                adm="<a href='https://adv.example'>ad</a>",
                adomain=["adv.example"],
                w=imp.banner.w,
                h=imp.banner.h,
            )
        )
    response.add_seatbid(seatbid)

    print("\n=== Bid response ===")
    print(response.get_bid_response())

    print("\n=== No-bid ===")
    print(BidResponse(id=request.id, nbr=NoBidReason.UNMATCHED_USER).get_bid_response())

    print("\n=== Strict parsing ===")
    try:
        Hydrator(strict=True).hydrate(json.loads(INCOMING), BidRequest())
    except UnresolvedPath as exc:
        print(f"UnresolvedPath: {exc}")

    print("\n=== Missing required field ===")
    try:
        BidResponse().get_bid_response()
    except MissingRequiredField as exc:
        print(f"MissingRequiredField: {exc}")


if __name__ == "__main__":
    main()
