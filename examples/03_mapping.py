"""
Example 03: Path Mapping

This example uses the mapping DSL three ways: seeding a request from
literal values, building one from a flat source row, and flattening an
existing request into a report row.
"""

from pydantic import BaseModel

from open_rtb import BidRequest, Hydrator, Mapper, compile_plan, mapping
from open_rtb.bid_request import Banner, Imp


class SlotRow(BaseModel):
    slot: str
    width: int
    height: int
    domain: str | None = None


def main():
    mapper = Mapper()
    hydrator = Hydrator()

    print("=== From literal values ===")
    template = compile_plan(
        {
            "BidRequest.Imp[].Native.Request:@required": '{"native":{"ver":"1.2"}}',
            "BidRequest.Imp[].Id": "1",
            "BidRequest.Id:@uuid": None,
        }
    )
    print(template.get_object_paths())
    seeded = hydrator.hydrate(mapper.map_from_values(template), BidRequest())
    print(seeded.serialize())

    print("\n=== From a flat source ===")
    plan = (
        mapping()
        .path("BidRequest.Id", "request_id", uuid=True)
        .path("BidRequest.Imp[].Id", "slot", required=True)
        .path("BidRequest.Imp[].Banner.W", "width")
        .path("BidRequest.Imp[].Banner.H", "height")
        .path("BidRequest.Site.Domain", "domain")
        .build()
    )
    row = SlotRow(slot="top", width=728, height=90, domain="news.example.com")
    request = hydrator.hydrate(mapper.map_from_array(plan, row), BidRequest())
    print(request.serialize())

    print("\n=== From an object ===")
    request.add_imp(Imp(id="side", banner=Banner(w=300, h=600)))
    report_plan = compile_plan(
        {
            "Request": "Id",
            "Domain": "Site.Domain",
            "Slots[].Id": "Imp.Id",
            "Slots[].Size": "Imp.Banner",
        }
    )
    print(mapper.map_from_object(report_plan, request))


if __name__ == "__main__":
    main()
