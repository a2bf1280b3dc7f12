"""
Example 01: Building a Bid Request

This example builds a bid request with a banner and a native impression,
serializes it, and shows what happens when a setter rejects a value.
"""

from open_rtb import BidRequest, InvalidValue, NativeAdRequest, SerializationConfig
from open_rtb.bid_request import Banner, Deal, Format, Imp, Native
from open_rtb.native_request import Asset, Image, Title
from open_rtb.specification import AdPosition, ImageAssetType


def main():
    request = BidRequest(id="auction-42", tmax=120)
    request.add_cur("USD")
    request.site.set_domain("news.example.com").set_page("https://news.example.com/today")
    request.site.publisher.set_id("pub-7")
    request.device.set_ua("Mozilla/5.0").set_ip("203.0.113.9")

    # Banner impression with two accepted sizes and a private deal
    banner = Banner(w=300, h=250, pos=AdPosition.ABOVE_THE_FOLD)
    banner.add_format(Format(w=300, h=250)).add_format(Format(w=320, h=50))
    imp = Imp(id="1", banner=banner, bidfloor=0.25)
    imp.pmp.add_deals(Deal(id="deal-1", bidfloor=1.5, at=501))
    request.add_imp(imp)

    # Native impression: the native request travels as a JSON string
    native_request = NativeAdRequest(ver="1.2", plcmtcnt=1)
    native_request.add_assets(Asset(id=1, required=1, title=Title(len=90)))
    native_request.add_assets(Asset(id=2, img=Image(type=ImageAssetType.MAIN, wmin=300)))
    request.add_imp(Imp(id="2", native=Native(request=native_request.get_request(), ver="1.2")))

    print("=== Compact ===")
    print(request.get_bid_request())

    print("\n=== Pretty ===")
    print(request.serialize(SerializationConfig(indent=2)))

    print("\n=== Rejected value ===")
    try:
        request.add_cur(978)
    except InvalidValue as exc:
        print(f"InvalidValue: {exc}")
        print(f"  check: {exc.check}")
        print(f"  trace: {exc.trace}")


if __name__ == "__main__":
    main()
