"""Shared test fixtures."""

from __future__ import annotations

import pytest

from open_rtb.bid_request import Banner, BidRequest, Imp, Native
from open_rtb.bid_response import Bid, BidResponse, Seatbid
from open_rtb.mapping import Hydrator, Mapper


@pytest.fixture
def mapper() -> Mapper:
    return Mapper()


@pytest.fixture
def hydrator() -> Hydrator:
    return Hydrator()


@pytest.fixture
def banner_request() -> BidRequest:
    """Bid request with one 300x250 banner impression."""
    request = BidRequest(id="req-1")
    request.add_imp(Imp(id="1", banner=Banner(w=300, h=250)))
    return request


@pytest.fixture
def native_request() -> BidRequest:
    """Bid request with id 'bidRequestId' and one native impression 'impId'."""
    request = BidRequest()
    request.set_id("bidRequestId").add_imp(Imp(id="impId", native=Native(request="{}")))
    return request


@pytest.fixture
def bid_response() -> BidResponse:
    """Response with one seat bidding 1.5 CPM on impression '1'."""
    seatbid = Seatbid(seat="seat-1")
    seatbid.add_bid(Bid(id="bid-1", impid="1", price=1.5, adm="<div/>"))
    response = BidResponse(id="req-1")
    response.add_seatbid(seatbid)
    return response
