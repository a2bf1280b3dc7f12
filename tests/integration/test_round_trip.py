"""End-to-end tests: JSON -> entity graph -> JSON, and mapping pipelines."""

from __future__ import annotations

import json

import pytest

from open_rtb import (
    BidRequest,
    BidResponse,
    Hydrator,
    Mapper,
    MissingRequiredField,
    NativeAdRequest,
    NativeAdResponse,
    compile_plan,
)
from open_rtb.bid_request import Native

BID_REQUEST = {
    "id": "80ce30c53c16e6ede735f123ef6e32361bfc7b22",
    "at": 1,
    "cur": ["USD"],
    "tmax": 120,
    "imp": [
        {
            "id": "1",
            "bidfloor": 0.03,
            "banner": {
                "h": 250,
                "w": 300,
                "pos": 1,
                "btype": [4],
                "battr": [14],
                "format": [{"w": 300, "h": 250}, {"w": 320, "h": 50}],
            },
            "pmp": {"private_auction": 1, "deals": [{"id": "deal-1", "bidfloor": 2.5, "at": 501}]},
            "metric": [{"type": "viewability", "value": 0.85, "vendor": "EXCHANGE"}],
        },
        {
            "id": "2",
            "video": {
                "mimes": ["video/mp4"],
                "minduration": 5,
                "maxduration": 30,
                "protocols": [2, 3],
                "w": 640,
                "h": 480,
                "companionad": [{"w": 300, "h": 250, "id": "c1"}],
            },
        },
    ],
    "site": {
        "id": "102855",
        "cat": ["IAB3-1"],
        "domain": "www.foobar.com",
        "page": "http://www.foobar.com/1234.html",
        "publisher": {"id": "8953", "name": "foobar.com", "cat": ["IAB3-1"]},
        "content": {"id": "c-1", "context": 1, "livestream": 0, "len": 120},
    },
    "device": {
        "ua": "Mozilla/5.0",
        "ip": "123.145.167.10",
        "geo": {"lat": 35.01, "lon": -90.5, "country": "USA", "type": 2},
        "devicetype": 2,
        "dnt": 0,
        "didmd5": "c4ca4238a0b923820dcc509a6f75849b",
    },
    "user": {
        "id": "55816b39711f9b5acf3b90e313ed29e51665623f",
        "gender": "F",
        "yob": 1984,
        "data": [{"id": "6", "name": "Data Provider", "segment": [{"id": "12341318394918"}]}],
    },
    "source": {"fd": 1, "tid": "tx-1"},
    "regs": {"coppa": 0, "ext": {"gdpr": 1}},
    "ext": {"exchange": "demo"},
}


class TestBidRequestRoundTrip:
    def test_json_round_trip(self) -> None:
        request = Hydrator(strict=True).hydrate(BID_REQUEST, BidRequest())
        assert json.loads(request.get_bid_request()) == BID_REQUEST

    def test_round_trip_is_stable(self) -> None:
        request = Hydrator().hydrate(BID_REQUEST, BidRequest())
        again = Hydrator().hydrate(json.loads(request.serialize()), BidRequest())
        assert again.to_dict() == request.to_dict()

    def test_legacy_content_context_round_trip(self) -> None:
        payload = json.loads(json.dumps(BID_REQUEST))
        payload["site"]["content"]["context"] = "news"
        request = Hydrator(strict=True).hydrate(payload, BidRequest())
        assert request.site.content.get_context_22() == "news"
        assert json.loads(request.serialize()) == payload

    def test_missing_required_imp_id_fails(self) -> None:
        payload = json.loads(json.dumps(BID_REQUEST))
        del payload["imp"][1]["id"]
        request = Hydrator().hydrate(payload, BidRequest())
        with pytest.raises(MissingRequiredField):
            request.serialize()


class TestNativePipeline:
    def test_native_request_inside_impression(self) -> None:
        native = Hydrator().hydrate(
            {
                "ver": "1.2",
                "context": 1,
                "plcmttype": 1,
                "assets": [
                    {"id": 1, "required": 1, "title": {"len": 90}},
                    {"id": 2, "img": {"type": 3, "wmin": 300, "hmin": 250}},
                    {"id": 3, "data": {"type": 2, "len": 140}},
                ],
                "eventtrackers": [{"event": 1, "methods": [1, 2]}],
            },
            NativeAdRequest(),
        )
        request = BidRequest(id="r")
        request.add_imp().get_imp().first().set_id("1").set_native(
            Native(request=native.get_request(), ver="1.2")
        )
        body = json.loads(request.serialize())
        envelope = json.loads(body["imp"][0]["native"]["request"])
        assert envelope["native"]["assets"][1] == {
            "id": 2,
            "img": {"type": 3, "wmin": 300, "hmin": 250},
        }
        assert envelope["native"]["eventtrackers"] == [{"event": 1, "methods": [1, 2]}]

    def test_bid_response_with_native_markup(self) -> None:
        markup = Hydrator().hydrate(
            {
                "native": {
                    "assets": [{"id": 1, "title": {"text": "Buy now"}}],
                    "link": {"url": "https://adv.example/click"},
                    "imptrackers": ["https://adv.example/imp"],
                }
            },
            NativeAdResponse(),
        )
        response = Hydrator().hydrate(
            {
                "id": "r",
                "seatbid": [{"seat": "s", "bid": [{"id": "b", "impid": "1", "price": 0.5}]}],
            },
            BidResponse(),
        )
        bid = response.seatbid.first().bid.first()
        bid.set_adm(markup.serialize())
        body = json.loads(response.get_bid_response())
        assert json.loads(body["seatbid"][0]["bid"][0]["adm"]) == {
            "native": {
                "assets": [{"id": 1, "title": {"text": "Buy now"}}],
                "link": {"url": "https://adv.example/click"},
                "imptrackers": ["https://adv.example/imp"],
            }
        }


class TestMappingPipeline:
    def test_flat_rows_to_bid_request(self) -> None:
        plan = compile_plan(
            {
                "BidRequest.Id:@uuid": "request_id",
                "BidRequest.Imp[].Id:@required": "slot",
                "BidRequest.Imp[].Banner.W": "width",
                "BidRequest.Imp[].Banner.H": "height",
                "BidRequest.Site.Domain": "domain",
            }
        )
        mapped = Mapper().map_from_array(plan, {"slot": "top", "width": 728, "height": 90})
        request = Hydrator().hydrate(mapped, BidRequest())
        result = request.to_dict()
        assert result["imp"] == [{"id": "top", "banner": {"w": 728, "h": 90}}]
        assert "site" not in result
        assert len(result["id"]) == 36

    def test_object_to_report(self) -> None:
        request = Hydrator().hydrate(BID_REQUEST, BidRequest())
        plan = compile_plan(
            {
                "RequestId": "Id",
                "Publisher": "Site.Publisher.Name",
                "Slots[].Id": "Imp.Id",
                "Slots[].Floor": "Imp.Bidfloor",
            }
        )
        report = Mapper().map_from_object(plan, request)
        assert report == {
            "request_id": BID_REQUEST["id"],
            "publisher": "foobar.com",
            "slots": [{"id": "1", "floor": 0.03}, {"id": "2"}],
        }
